import pytest

from castgraph.errors import GraphIOError
from castgraph.graph.graph_store import GraphStore
from castgraph.serialization.tgf import (
    dumps_tgf,
    load_tgf,
    parse_tgf,
    read_tgf_vertices,
    save_tgf,
)


def test_tgf_layout(small_graph):
    text = dumps_tgf(small_graph)

    assert text.splitlines() == [
        "1 M1",
        "2 A1",
        "3 A2",
        "4 M2",
        "5 A3",
        "#",
        "1 2",
        "1 3",
        "2 1",
        "3 1",
        "3 4",
        "4 3",
        "4 5",
        "5 4",
    ]


def test_empty_graph_exports_only_separator():
    assert dumps_tgf(GraphStore()) == "#\n"


def test_vertex_list_round_trip(tmp_path, make_graph):
    graph = make_graph(
        [("Boo! A Madea Halloween", "Tyler Perry"), ("The Jungle Book", "Neel Sethi")]
    )
    path = save_tgf(graph, tmp_path / "cast.tgf")

    assert read_tgf_vertices(path) == graph.vertices()


def test_load_tgf_restores_arcs(tmp_path, small_graph):
    small_graph.add_vertex("solo")
    small_graph.add_arc("solo", "M1")
    path = save_tgf(small_graph, tmp_path / "small.tgf")

    restored = load_tgf(path)

    assert restored.vertices() == small_graph.vertices()
    assert list(restored.arcs()) == list(small_graph.arcs())
    assert restored.is_arc("solo", "M1")
    assert not restored.is_arc("M1", "solo")


def test_save_to_missing_directory_raises_and_keeps_graph(tmp_path, small_graph):
    before = list(small_graph.arcs())

    with pytest.raises(GraphIOError) as excinfo:
        save_tgf(small_graph, tmp_path / "missing" / "out.tgf")

    assert isinstance(excinfo.value, OSError)
    assert list(small_graph.arcs()) == before


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(GraphIOError):
        read_tgf_vertices(tmp_path / "absent.tgf")


def test_parse_rejects_malformed_arc():
    with pytest.raises(ValueError):
        parse_tgf(["1 a\n", "2 b\n", "#\n", "1 three\n"])

    with pytest.raises(ValueError):
        parse_tgf(["1 a\n", "#\n", "1 2\n"])


def test_line_break_in_vertex_is_rejected_before_writing(tmp_path):
    graph = GraphStore()
    graph.add_vertex("Line\nBreak")
    graph.add_vertex("B")
    path = tmp_path / "broken.tgf"

    with pytest.raises(ValueError, match="line break"):
        save_tgf(graph, path)

    assert not path.exists()
    with pytest.raises(ValueError):
        dumps_tgf(graph)


def test_carriage_return_in_vertex_is_rejected():
    graph = GraphStore()
    graph.add_vertex("Carriage\rReturn")

    with pytest.raises(ValueError):
        dumps_tgf(graph)
