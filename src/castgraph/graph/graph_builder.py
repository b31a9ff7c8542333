from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable

from castgraph.graph.graph_store import GraphStore
from castgraph.membership.aggregator import MembershipAggregator


@dataclass(frozen=True)
class CastRecord:
    """
    One participant-in-collection observation from a cast file.
    """

    collection: Hashable
    participant: Hashable
    is_subgroup: bool = False


class GraphBuilder:
    """
    Applies cast records to a GraphStore and a MembershipAggregator.

    Each record updates the counters and the graph in lockstep so the
    two never disagree about which memberships were observed.
    """

    def __init__(self, store: GraphStore, aggregator: MembershipAggregator) -> None:
        self.store = store
        self.aggregator = aggregator

    def add_record(self, record: CastRecord) -> None:
        self.aggregator.record_membership(record.collection, record.is_subgroup)
        self.store.add_vertex(record.collection)
        self.store.add_vertex(record.participant)
        self.store.add_edge(record.collection, record.participant)

    def add_records(self, records: Iterable[CastRecord]) -> int:
        count = 0
        for record in records:
            self.add_record(record)
            count += 1
        return count
