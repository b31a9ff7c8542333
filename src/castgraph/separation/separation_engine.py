from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Hashable, List, Tuple

from castgraph.errors import (
    InvariantViolation,
    NotConnectedError,
    VertexNotFoundError,
)
from castgraph.graph.graph_store import GraphStore

logger = logging.getLogger("castgraph.separation")


@dataclass(frozen=True)
class SeparationResult:
    """
    Separation count between two participants together with the path
    that produced it.
    """

    source: Hashable
    target: Hashable
    separation: int
    path: List[Hashable]


class SeparationEngine:
    """
    Breadth-first degree-of-separation search.

    The frontier holds whole candidate paths rather than single vertices,
    since the answer is derived from the length of the path that first
    reaches the target. On a participant/collection graph a path
    alternates the two kinds, so two participants sharing a collection
    give a three-vertex path (separation 0) and each additional
    collection hop adds two vertices.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def separation(self, source: Hashable, target: Hashable) -> int:
        return self.explain(source, target).separation

    def shortest_path(self, source: Hashable, target: Hashable) -> List[Hashable]:
        return self.explain(source, target).path

    def explain(self, source: Hashable, target: Hashable) -> SeparationResult:
        missing = [v for v in (source, target) if not self.store.has_vertex(v)]
        if missing:
            raise VertexNotFoundError(*missing)

        if source == target:
            raise ValueError(f"source and target are the same vertex: {source!r}")

        vertices = self.store.vertices()
        path = self._search(vertices, source, target)

        size = len(path)
        if size % 2 == 0:
            raise InvariantViolation(
                f"path between {source!r} and {target!r} has {size} vertices; "
                "participant and collection vertices do not alternate"
            )

        separation = (size - 3) // 2
        logger.debug(
            "separation %r -> %r = %d (path of %d vertices)",
            source,
            target,
            separation,
            size,
        )
        return SeparationResult(
            source=source,
            target=target,
            separation=separation,
            path=[vertices[i] for i in path],
        )

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _search(
        self,
        vertices: List[Hashable],
        source: Hashable,
        target: Hashable,
    ) -> Tuple[int, ...]:
        positions = self.store.positions()
        start = positions[source]
        goal = positions[target]

        visited = [False] * len(vertices)
        visited[start] = True

        queue: Deque[Tuple[int, ...]] = deque()
        queue.append((start,))

        while queue:
            current = queue.popleft()
            last = vertices[current[-1]]

            for neighbor in self.store.adjacency(last):
                index = positions[neighbor]
                if visited[index]:
                    continue

                extended = current + (index,)
                visited[index] = True
                if index == goal:
                    return extended
                queue.append(extended)

        raise NotConnectedError(source, target)
