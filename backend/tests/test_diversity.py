import pytest

from castgraph.errors import VertexNotFoundError
from castgraph.graph.graph_builder import CastRecord, GraphBuilder
from castgraph.graph.graph_store import GraphStore
from castgraph.membership.aggregator import MembershipAggregator, threshold_from_percent


def _aggregator(counts):
    aggregator = MembershipAggregator()
    for collection, subgroup, total in counts:
        for i in range(total):
            aggregator.record_membership(collection, i < subgroup)
    return aggregator


def test_record_membership_counts_total_and_subgroup():
    aggregator = MembershipAggregator()
    aggregator.record_membership("M1", True)
    aggregator.record_membership("M1", False)
    aggregator.record_membership("M1", True)

    assert aggregator.total_count("M1") == 3
    assert aggregator.subgroup_count("M1") == 2
    assert aggregator.ratio("M1") == pytest.approx(2 / 3)


def test_passing_and_failing_collections():
    aggregator = _aggregator([("M1", 2, 3), ("M2", 1, 4)])

    result = aggregator.diversity_test(0.5)

    assert result.passing == ["M1"]
    assert result.failing == ["M2"]
    assert result.passed("M1")
    assert not result.passed("M2")
    assert result.threshold == 0.5


def test_ratio_equal_to_threshold_passes():
    aggregator = _aggregator([("M1", 1, 2)])

    assert aggregator.diversity_test(0.5).passing == ["M1"]


def test_collections_without_subgroup_members_are_excluded():
    aggregator = _aggregator([("M1", 0, 3), ("M2", 1, 1)])

    at_zero = aggregator.diversity_test(0.0)
    assert at_zero.passing == ["M2"]
    assert at_zero.failing == []

    at_one = aggregator.diversity_test(1.0)
    assert "M1" not in at_one.passing
    assert "M1" not in at_one.failing

    assert aggregator.collections() == ["M1", "M2"]
    assert aggregator.subgroup_count("M1") == 0


def test_subgroup_never_exceeds_total():
    aggregator = _aggregator([("M1", 3, 5), ("M2", 4, 4), ("M3", 0, 2)])

    for collection in aggregator.collections():
        assert aggregator.subgroup_count(collection) <= aggregator.total_count(collection)


def test_unobserved_collection_raises():
    aggregator = MembershipAggregator()

    with pytest.raises(VertexNotFoundError):
        aggregator.ratio("never seen")
    with pytest.raises(VertexNotFoundError):
        aggregator.total_count("never seen")


@pytest.mark.parametrize("threshold", [-0.1, 1.5, float("nan")])
def test_out_of_range_threshold_is_rejected(threshold):
    aggregator = _aggregator([("M1", 1, 2)])

    with pytest.raises(ValueError):
        aggregator.diversity_test(threshold)


def test_threshold_from_percent():
    assert threshold_from_percent(48) == pytest.approx(0.48)
    assert threshold_from_percent(0) == 0.0


def test_builder_keeps_counts_and_edges_in_lockstep():
    graph = GraphStore()
    aggregator = MembershipAggregator()
    builder = GraphBuilder(graph, aggregator)

    added = builder.add_records(
        [
            CastRecord("M1", "A1", is_subgroup=True),
            CastRecord("M1", "A2"),
            CastRecord("M2", "A2"),
        ]
    )

    assert added == 3
    assert graph.vertices() == ["M1", "A1", "A2", "M2"]
    assert graph.is_edge("M1", "A1")
    assert graph.is_edge("M2", "A2")
    assert aggregator.total_count("M1") == 2
    assert aggregator.subgroup_count("M1") == 1
    assert aggregator.total_count("M2") == 1
