"""
Membership counting for castgraph.

Tracks how many participants, and how many subgroup members, each
collection has, and runs the diversity ratio test over those counts.
"""

from castgraph.membership.aggregator import (
    MembershipAggregator,
    DiversityResult,
    threshold_from_percent,
)

__all__ = [
    "MembershipAggregator",
    "DiversityResult",
    "threshold_from_percent",
]
