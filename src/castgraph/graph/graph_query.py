from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Tuple

from castgraph.graph.graph_store import GraphStore


@dataclass(frozen=True)
class ConnectionResult:
    """
    Arc and edge existence between two vertices.
    """

    forward: bool
    backward: bool

    @property
    def is_edge(self) -> bool:
        return self.forward and self.backward


class GraphQueryEngine:
    """
    Read-only connectivity queries over a GraphStore.

    Collections and participants share one vertex type, and edges are
    always inserted symmetrically, so "members of a collection" and
    "collections of a participant" are both a plain neighbor lookup.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def contains(self, vertex: Hashable) -> bool:
        return self.store.has_vertex(vertex)

    def neighbors(self, vertex: Hashable) -> Tuple[Hashable, ...]:
        """
        Adjacency list of ``vertex`` in insertion order.

        Raises VertexNotFoundError when the vertex is absent.
        """
        return self.store.adjacency(vertex)

    def members_of(self, collection: Hashable) -> Tuple[Hashable, ...]:
        return self.neighbors(collection)

    def collections_of(self, participant: Hashable) -> Tuple[Hashable, ...]:
        return self.neighbors(participant)

    def is_arc(self, source: Hashable, target: Hashable) -> bool:
        return self.store.is_arc(source, target)

    def is_edge(self, u: Hashable, v: Hashable) -> bool:
        return self.store.is_edge(u, v)

    def connection(self, u: Hashable, v: Hashable) -> ConnectionResult:
        return ConnectionResult(
            forward=self.store.is_arc(u, v),
            backward=self.store.is_arc(v, u),
        )
