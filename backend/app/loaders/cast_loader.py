from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple
import time
import logging

import pandas as pd

from castgraph.config.settings import IngestConfig
from castgraph.errors import GraphIOError
from castgraph.graph.graph_builder import CastRecord, GraphBuilder
from castgraph.graph.graph_store import GraphStore
from castgraph.membership.aggregator import MembershipAggregator


@dataclass(frozen=True)
class LoadSummary:
    path: str
    records: int
    skipped: int
    vertices: int
    arcs: int
    elapsed_s: float


def read_cast_records(
    path: Path,
    config: IngestConfig,
) -> Tuple[List[CastRecord], int]:
    """
    Read a delimited cast file into records without touching any graph.

    The first line is a header. Quoted fields are unquoted by the CSV
    reader. Rows without a collection or a participant are skipped and
    counted in the second element of the result.
    """
    logger = logging.getLogger("castgraph.load")

    try:
        df = pd.read_csv(
            path,
            sep=config.delimiter,
            header=0,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except OSError as exc:
        raise GraphIOError(path, f"could not be read ({exc.strerror or exc})") from exc
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise GraphIOError(path, f"could not be parsed ({exc})") from exc

    needed = max(
        config.collection_column,
        config.participant_column,
        config.subgroup_column,
    )
    if df.shape[1] <= needed:
        raise GraphIOError(
            path,
            f"expected at least {needed + 1} columns, found {df.shape[1]}",
        )

    records: List[CastRecord] = []
    skipped = 0
    rows = df.iloc[
        :,
        [config.collection_column, config.participant_column, config.subgroup_column],
    ]
    for lineno, (collection, participant, subgroup) in enumerate(
        rows.itertuples(index=False, name=None),
        start=2,
    ):
        collection = str(collection).strip()
        participant = str(participant).strip()
        if not collection or not participant:
            logger.warning("skipping incomplete record at line %s in %s", lineno, path)
            skipped += 1
            continue
        records.append(
            CastRecord(
                collection=collection,
                participant=participant,
                is_subgroup=str(subgroup).strip() == config.subgroup_label,
            )
        )

    return records, skipped


def load_graph_from_cast_file(
    *,
    graph: GraphStore,
    aggregator: MembershipAggregator,
    path: Path,
    config: IngestConfig | None = None,
) -> LoadSummary:
    """
    Load a cast file into the GraphStore and MembershipAggregator.

    The whole file is parsed before the first mutation, so a read
    failure leaves both untouched.
    """
    config = config or IngestConfig()
    path = Path(path)
    logger = logging.getLogger("castgraph.load")

    t0 = time.perf_counter()
    records, skipped = read_cast_records(path, config)
    t_read = time.perf_counter()

    builder = GraphBuilder(graph, aggregator)
    builder.add_records(records)
    t_built = time.perf_counter()

    logger.info(
        "read records=%s (skipped=%s) in %.3fs; built graph in %.3fs",
        len(records),
        skipped,
        t_read - t0,
        t_built - t_read,
    )
    logger.info(
        "graph now has vertices=%s arcs=%s",
        graph.vertex_count(),
        graph.arc_count(),
    )

    return LoadSummary(
        path=str(path),
        records=len(records),
        skipped=skipped,
        vertices=graph.vertex_count(),
        arcs=graph.arc_count(),
        elapsed_s=t_built - t0,
    )
