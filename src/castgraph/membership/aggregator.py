from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Hashable, List

from castgraph.errors import VertexNotFoundError


@dataclass(frozen=True)
class DiversityResult:
    """
    Outcome of a diversity test.

    Only collections with at least one subgroup member are classified;
    collections without any are in neither list.
    """

    threshold: float
    passing: List[Hashable]
    failing: List[Hashable]

    def passed(self, collection: Hashable) -> bool:
        return collection in self.passing


def threshold_from_percent(percent: float) -> float:
    """
    Convert a percentage such as 48 into the ratio 0.48.
    """
    return float(percent) / 100.0


class MembershipAggregator:
    """
    Per-collection membership counters used by the diversity test.

    Counts only ever increase; they are fed by ingestion in lockstep
    with edge insertion.
    """

    def __init__(self) -> None:
        self._subgroup_counts: Dict[Hashable, int] = {}
        self._total_counts: Dict[Hashable, int] = {}

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record_membership(self, collection: Hashable, is_subgroup: bool) -> None:
        self._total_counts[collection] = self._total_counts.get(collection, 0) + 1
        if is_subgroup:
            self._subgroup_counts[collection] = (
                self._subgroup_counts.get(collection, 0) + 1
            )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def collections(self) -> List[Hashable]:
        return list(self._total_counts)

    def has_collection(self, collection: Hashable) -> bool:
        return collection in self._total_counts

    def total_count(self, collection: Hashable) -> int:
        if collection not in self._total_counts:
            raise VertexNotFoundError(collection)
        return self._total_counts[collection]

    def subgroup_count(self, collection: Hashable) -> int:
        if collection not in self._total_counts:
            raise VertexNotFoundError(collection)
        return self._subgroup_counts.get(collection, 0)

    def ratio(self, collection: Hashable) -> float:
        return self.subgroup_count(collection) / self.total_count(collection)

    # ------------------------------------------------------------------
    # Diversity test
    # ------------------------------------------------------------------

    def diversity_test(self, threshold: float) -> DiversityResult:
        """
        Classify every collection that has at least one subgroup member.

        A collection passes when its subgroup ratio is at least
        ``threshold``. Collections with no subgroup member are left out
        entirely rather than counted as failures.
        """
        threshold = float(threshold)
        if math.isnan(threshold) or not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")

        passing: List[Hashable] = []
        failing: List[Hashable] = []

        for collection, subgroup in self._subgroup_counts.items():
            ratio = subgroup / self._total_counts[collection]
            if ratio >= threshold:
                passing.append(collection)
            else:
                failing.append(collection)

        return DiversityResult(
            threshold=threshold,
            passing=passing,
            failing=failing,
        )
