from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List, Tuple

import networkx as nx

from castgraph.errors import InvariantViolation, VertexNotFoundError


class GraphStore:
    """
    Authoritative in-memory adjacency-list graph.

    Vertices are kept in insertion order, and each vertex owns an
    insertion-ordered list of arc destinations. An edge is a pair of
    reciprocal arcs. Every operation addresses vertices by value; vertex
    values must be hashable.

    Lookup goes through the DiGraph node dict (hashed), while iteration
    follows that dict's insertion order. Removing an arc and adding it
    again moves it to the end of its source's adjacency list.

    The store is not thread-safe. Callers must not mutate it from
    several threads at once.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        self.metadata: Dict[str, Any] = {}

    # -------------------- Vertices --------------------

    def add_vertex(self, vertex: Hashable) -> None:
        if vertex not in self._graph:
            self._graph.add_node(vertex)

    def remove_vertex(self, vertex: Hashable) -> None:
        """
        Remove a vertex with every arc entering or leaving it.
        No-op when the vertex is absent.
        """
        if vertex in self._graph:
            self._graph.remove_node(vertex)

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._graph

    def vertices(self) -> List[Hashable]:
        return list(self._graph.nodes)

    def positions(self) -> Dict[Hashable, int]:
        """
        Zero-based position of each vertex in store order.

        Returns a fresh mapping; positions shift when vertices are removed.
        """
        return {vertex: i for i, vertex in enumerate(self._graph.nodes)}

    # -------------------- Arcs --------------------

    def add_arc(self, source: Hashable, target: Hashable) -> None:
        if source not in self._graph or target not in self._graph:
            return
        if self._graph.has_edge(source, target):
            return
        self._graph.add_edge(source, target)

    def remove_arc(self, source: Hashable, target: Hashable) -> None:
        if self._graph.has_edge(source, target):
            self._graph.remove_edge(source, target)

    def is_arc(self, source: Hashable, target: Hashable) -> bool:
        return self._graph.has_edge(source, target)

    def arcs(self) -> Iterator[Tuple[Hashable, Hashable]]:
        """
        Yield every arc, sources in store order and destinations in
        adjacency order.
        """
        for source, targets in self._graph.adjacency():
            for target in targets:
                yield source, target

    # -------------------- Edges --------------------

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        self.add_arc(u, v)
        self.add_arc(v, u)

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        self.remove_arc(u, v)
        self.remove_arc(v, u)

    def is_edge(self, u: Hashable, v: Hashable) -> bool:
        return self.is_arc(u, v) and self.is_arc(v, u)

    # -------------------- Adjacency --------------------

    def adjacency(self, vertex: Hashable) -> Tuple[Hashable, ...]:
        if vertex not in self._graph:
            raise VertexNotFoundError(vertex)
        return tuple(self._graph.successors(vertex))

    # -------------------- Analytics --------------------

    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    def arc_count(self) -> int:
        return self._graph.number_of_edges()

    def edge_count(self) -> int:
        """
        Number of reciprocal arc pairs. A self-loop counts as one edge.
        """
        pairs = 0
        loops = 0
        for source, target in self._graph.edges():
            if source == target:
                loops += 1
            elif self._graph.has_edge(target, source):
                pairs += 1
        return pairs // 2 + loops

    def is_empty(self) -> bool:
        return self._graph.number_of_nodes() == 0

    # -------------------- Consistency --------------------

    def check_invariants(self) -> None:
        succ = self._graph.succ
        if len(succ) != self._graph.number_of_nodes():
            raise InvariantViolation(
                f"{len(succ)} adjacency lists for "
                f"{self._graph.number_of_nodes()} vertices"
            )
        for source, targets in succ.items():
            for target in targets:
                if target not in self._graph:
                    raise InvariantViolation(
                        f"arc {source!r} -> {target!r} points at an absent vertex"
                    )

    # -------------------- Display --------------------

    def describe(self) -> str:
        if self.is_empty():
            return "Graph is empty"
        lines = ["Vertices:", str(self.vertices()), "", "Arcs:"]
        for vertex, targets in self._graph.adjacency():
            lines.append(f"from {vertex}: {list(targets)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._graph
