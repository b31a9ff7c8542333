from functools import lru_cache
import logging
from pathlib import Path
import time

from castgraph.errors import GraphIOError
from castgraph.graph.graph_store import GraphStore
from castgraph.membership.aggregator import MembershipAggregator

from backend.app.config import AppConfig
from backend.app.services.cast_graph_service import CastGraphService
from backend.app.loaders.cast_loader import load_graph_from_cast_file


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_aggregator() -> MembershipAggregator:
    return MembershipAggregator()


@lru_cache
def get_base_graph() -> GraphStore:
    logger = logging.getLogger("castgraph.startup")
    t0 = time.perf_counter()
    graph = GraphStore()
    graph.metadata["source"] = "backend"
    graph.metadata["loaded_from_cast_file"] = False

    config = get_config()
    cast_file = Path(config.cast_file)
    if cast_file.exists():
        try:
            summary = load_graph_from_cast_file(
                graph=graph,
                aggregator=get_aggregator(),
                path=cast_file,
                config=config.castgraph.ingest,
            )
        except GraphIOError as exc:
            logger.error("[startup] cast file load failed: %s", exc)
            graph.metadata["load_error"] = str(exc)
        else:
            graph.metadata["loaded_from_cast_file"] = True
            graph.metadata["records"] = summary.records
            graph.metadata["skipped_records"] = summary.skipped
    else:
        logger.warning("[startup] cast file %s not found; serving an empty graph", cast_file)
    logger.info("[startup] get_base_graph total %.3fs", time.perf_counter() - t0)
    return graph


@lru_cache
def get_graph_service() -> CastGraphService:
    config = get_config()

    return CastGraphService(
        graph=get_base_graph(),
        aggregator=get_aggregator(),
        config=config.castgraph,
    )
