"""
castgraph
=========

A participant/collection (actor/movie) graph library with two analyses
built on top of it:

- degree of separation between two participants, found by BFS
- a diversity ratio test over per-collection subgroup counts

Public API:
- GraphStore
- GraphBuilder
- GraphQueryEngine
- SeparationEngine
- MembershipAggregator
"""

from castgraph.graph.graph_store import GraphStore
from castgraph.graph.graph_builder import GraphBuilder, CastRecord
from castgraph.graph.graph_query import GraphQueryEngine
from castgraph.separation.separation_engine import SeparationEngine
from castgraph.membership.aggregator import MembershipAggregator, DiversityResult
from castgraph.errors import (
    CastGraphError,
    VertexNotFoundError,
    NotConnectedError,
    InvariantViolation,
    GraphIOError,
)

__all__ = [
    "GraphStore",
    "GraphBuilder",
    "CastRecord",
    "GraphQueryEngine",
    "SeparationEngine",
    "MembershipAggregator",
    "DiversityResult",
    "CastGraphError",
    "VertexNotFoundError",
    "NotConnectedError",
    "InvariantViolation",
    "GraphIOError",
]

__version__ = "0.1.0"
