"""
Graph subsystem for castgraph.

Defines the bipartite participant/collection graph used for:
- vertex, arc and edge bookkeeping
- connectivity queries
- record-by-record construction from cast data
"""

from castgraph.graph.graph_store import GraphStore
from castgraph.graph.graph_builder import GraphBuilder, CastRecord
from castgraph.graph.graph_query import GraphQueryEngine, ConnectionResult

__all__ = [
    "GraphStore",
    "GraphBuilder",
    "CastRecord",
    "GraphQueryEngine",
    "ConnectionResult",
]
