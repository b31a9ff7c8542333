from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import List, TextIO, Tuple, Union

from castgraph.errors import GraphIOError
from castgraph.graph.graph_store import GraphStore

logger = logging.getLogger("castgraph.tgf")

PathLike = Union[str, Path]

SECTION_SEPARATOR = "#"


def check_vertex_values(store: GraphStore) -> None:
    """
    Raise ValueError if a vertex value would not fit on one TGF line.
    """
    for vertex in store.vertices():
        text = str(vertex)
        if "\n" in text or "\r" in text:
            raise ValueError(
                f"vertex {text!r} contains a line break and cannot be written as TGF"
            )


def write_tgf(store: GraphStore, stream: TextIO) -> None:
    """
    Write ``store`` in Trivial Graph Format.

    Vertices are listed as ``<index> <value>`` with 1-based indices in
    store order, then a ``#`` line, then one ``<source> <target>`` line
    per arc. An edge therefore appears as two arc lines.
    """
    check_vertex_values(store)
    positions = store.positions()

    for vertex, i in positions.items():
        stream.write(f"{i + 1} {vertex}\n")
    stream.write(f"{SECTION_SEPARATOR}\n")

    for source, target in store.arcs():
        stream.write(f"{positions[source] + 1} {positions[target] + 1}\n")


def save_tgf(store: GraphStore, path: PathLike) -> Path:
    """
    Save ``store`` to ``path``.

    The write is not atomic: a failure part way through can leave a
    truncated file behind. The store itself is never modified.
    """
    path = Path(path)
    check_vertex_values(store)
    try:
        with path.open("w", encoding="utf-8", newline="\n") as stream:
            write_tgf(store, stream)
    except OSError as exc:
        raise GraphIOError(path, f"could not be written ({exc.strerror or exc})") from exc

    logger.info(
        "saved %s vertices and %s arcs to %s",
        store.vertex_count(),
        store.arc_count(),
        path,
    )
    return path


def parse_tgf(lines: List[str]) -> Tuple[List[str], List[Tuple[int, int]]]:
    """
    Split TGF lines into the vertex value list and the list of
    1-based ``(source, target)`` index pairs.
    """
    vertices: List[str] = []
    arcs: List[Tuple[int, int]] = []
    in_arcs = False

    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")

        if not in_arcs:
            if line.strip() == SECTION_SEPARATOR:
                in_arcs = True
                continue
            if not line.strip():
                continue
            index, _, value = line.partition(" ")
            if not index.isdigit() or int(index) != len(vertices) + 1:
                raise ValueError(f"line {lineno}: unexpected vertex index {index!r}")
            vertices.append(value)
            continue

        if not line.strip():
            continue
        parts = line.split()
        if len(parts) < 2 or not parts[0].isdigit() or not parts[1].isdigit():
            raise ValueError(f"line {lineno}: malformed arc {line!r}")
        source, target = int(parts[0]), int(parts[1])
        if not (1 <= source <= len(vertices) and 1 <= target <= len(vertices)):
            raise ValueError(f"line {lineno}: arc references unknown vertex")
        arcs.append((source, target))

    return vertices, arcs


def _read_lines(path: Path) -> List[str]:
    try:
        with path.open("r", encoding="utf-8") as stream:
            return stream.readlines()
    except OSError as exc:
        raise GraphIOError(path, f"could not be read ({exc.strerror or exc})") from exc


def read_tgf_vertices(path: PathLike) -> List[str]:
    vertices, _ = parse_tgf(_read_lines(Path(path)))
    return vertices


def load_tgf(path: PathLike) -> GraphStore:
    """
    Rebuild a GraphStore from a TGF file. Vertex values come back as
    strings.
    """
    path = Path(path)
    vertices, arcs = parse_tgf(_read_lines(path))

    store = GraphStore()
    for vertex in vertices:
        store.add_vertex(vertex)
    for source, target in arcs:
        store.add_arc(vertices[source - 1], vertices[target - 1])

    store.metadata["source"] = str(path)
    return store


def dumps_tgf(store: GraphStore) -> str:
    buffer = StringIO()
    write_tgf(store, buffer)
    return buffer.getvalue()

