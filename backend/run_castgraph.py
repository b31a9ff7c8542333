import logging
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig  # noqa: E402
from backend.app.loaders.cast_loader import load_graph_from_cast_file  # noqa: E402
from backend.app.services.cast_graph_service import CastGraphService  # noqa: E402

from castgraph.errors import CastGraphError, InvariantViolation  # noqa: E402
from castgraph.graph.graph_store import GraphStore  # noqa: E402
from castgraph.membership.aggregator import MembershipAggregator  # noqa: E402


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("castgraph.run")
    start = time.perf_counter()
    config = AppConfig()

    graph = GraphStore()
    aggregator = MembershipAggregator()
    try:
        load_graph_from_cast_file(
            graph=graph,
            aggregator=aggregator,
            path=Path(config.cast_file),
            config=config.castgraph.ingest,
        )
    except CastGraphError as exc:
        logger.error("could not load cast file: %s", exc)
        return 1

    service = CastGraphService(
        graph=graph,
        aggregator=aggregator,
        config=config.castgraph,
    )

    stats = service.stats()
    logger.info(
        "vertices=%s arcs=%s edges=%s collections=%s",
        stats["vertices"],
        stats["arcs"],
        stats["edges"],
        stats["collections"],
    )

    if config.castgraph.export.enabled:
        try:
            service.save_export()
        except CastGraphError as exc:
            logger.error("export failed: %s", exc)

    for source, target in config.separation_pairs:
        try:
            result = service.separation(source, target)
        except InvariantViolation:
            raise
        except (CastGraphError, ValueError) as exc:
            logger.warning("[%s | %s] %s", source, target, exc)
            continue
        logger.info(
            "[%s | %s] separation=%s path=%s",
            source,
            target,
            result.separation,
            " -> ".join(str(v) for v in result.path),
        )

    diversity = service.diversity()
    logger.info(
        "diversity threshold=%.2f passing=%s failing=%s",
        diversity.threshold,
        len(diversity.passing),
        len(diversity.failing),
    )
    for collection in diversity.passing:
        logger.info("passed: %s", collection)

    logger.info("done in %.2fs", time.perf_counter() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
