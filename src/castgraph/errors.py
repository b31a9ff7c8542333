from __future__ import annotations

from typing import Any, Hashable, Tuple


class CastGraphError(Exception):
    """
    Base class for every error raised by castgraph.
    """


class VertexNotFoundError(CastGraphError, KeyError):
    """
    A query that promises a result was asked about an absent vertex.

    No-op mutations never raise this.
    """

    def __init__(self, *vertices: Hashable) -> None:
        self.vertices: Tuple[Hashable, ...] = vertices
        names = ", ".join(repr(v) for v in vertices)
        super().__init__(f"vertex not found: {names}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return self.args[0]


class NotConnectedError(CastGraphError):
    """
    Two present vertices lie in disconnected components.
    """

    def __init__(self, source: Hashable, target: Hashable) -> None:
        self.source = source
        self.target = target
        super().__init__(f"no path between {source!r} and {target!r}")


class InvariantViolation(CastGraphError, AssertionError):
    """
    Internal state is inconsistent. Signals a bug or malformed input data
    and is never caught inside the library.
    """


class GraphIOError(CastGraphError, OSError):
    """
    A cast file or graph export could not be read or written.
    """

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"
