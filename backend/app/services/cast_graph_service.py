from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional

from castgraph.config.settings import CastGraphConfig
from castgraph.errors import GraphIOError
from castgraph.graph.graph_query import ConnectionResult, GraphQueryEngine
from castgraph.graph.graph_store import GraphStore
from castgraph.membership.aggregator import DiversityResult, MembershipAggregator
from castgraph.separation.separation_engine import SeparationEngine, SeparationResult
from castgraph.serialization.tgf import dumps_tgf, save_tgf


class CastGraphService:
    """
    Query surface over one loaded cast graph.

    This is the only place where:
    - config defaults are applied to queries
    - the store, the counters and the engines are wired together
    """

    def __init__(
        self,
        *,
        graph: GraphStore,
        aggregator: MembershipAggregator,
        config: CastGraphConfig,
    ) -> None:
        self.graph = graph
        self.aggregator = aggregator
        self.config = config

        self.query_engine = GraphQueryEngine(graph)
        self.separation_engine = SeparationEngine(graph)

    # ------------------------------------------------------------------
    # Graph
    # ------------------------------------------------------------------

    def stats(self) -> Dict[str, Any]:
        return {
            "vertices": self.graph.vertex_count(),
            "arcs": self.graph.arc_count(),
            "edges": self.graph.edge_count(),
            "collections": len(self.aggregator.collections()),
            "empty": self.graph.is_empty(),
            "metadata": dict(self.graph.metadata),
        }

    def contains(self, vertex: Hashable) -> bool:
        return self.query_engine.contains(vertex)

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        return list(self.query_engine.neighbors(vertex))

    def connection(self, source: Hashable, target: Hashable) -> ConnectionResult:
        return self.query_engine.connection(source, target)

    # ------------------------------------------------------------------
    # Analyses
    # ------------------------------------------------------------------

    def separation(self, source: Hashable, target: Hashable) -> SeparationResult:
        """
        Separation between two participants.

        Collections seen during ingestion are rejected with ValueError
        before the search runs.
        """
        collections = [v for v in (source, target) if self.aggregator.has_collection(v)]
        if collections:
            names = ", ".join(repr(c) for c in collections)
            raise ValueError(f"separation is defined between participants, not collections: {names}")
        return self.separation_engine.explain(source, target)

    def diversity(self, threshold: Optional[float] = None) -> DiversityResult:
        if threshold is None:
            threshold = self.config.diversity.threshold
        return self.aggregator.diversity_test(threshold)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_tgf(self) -> str:
        return dumps_tgf(self.graph)

    def save_export(self, path: Optional[Path] = None) -> Path:
        target = Path(path or self.config.export.tgf_path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise GraphIOError(target, f"could not create directory ({exc})") from exc
        return save_tgf(self.graph, target)
