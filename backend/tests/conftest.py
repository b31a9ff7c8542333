from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_graph_service
from backend.app.services.cast_graph_service import CastGraphService

from castgraph.config.settings import CastGraphConfig, DiversityConfig
from castgraph.graph.graph_builder import CastRecord, GraphBuilder
from castgraph.graph.graph_store import GraphStore
from castgraph.membership.aggregator import MembershipAggregator


CAST_HEADER = '"MOVIE","ACTOR","CHARACTER_NAME","TYPE","BILLING","GENDER"\n'

CAST_ROWS = [
    ("Boo! A Madea Halloween", "Tyler Perry", "Madea", "Leading", "1", "Male"),
    ("Boo! A Madea Halloween", "Cassi Davis", "Aunt Bam", "Supporting", "2", "Female"),
    ("Boo! A Madea Halloween", "Patrice Lovely", "Hattie", "Supporting", "3", "Female"),
    ("Alpha", "Stella", "Lead", "Leading", "1", "Female"),
    ("Alpha", "Cassi Davis", "Neighbor", "Supporting", "2", "Female"),
    ("Beta", "Stella", "Captain", "Leading", "1", "Female"),
    ("Beta", "Takis", "Pilot", "Supporting", "2", "Male"),
    ("Beta", "Nick Arapoglou", "Guard", "Supporting", "3", "Male"),
    ("Beta", "Owen Walters", "Clerk", "Supporting", "4", "Male"),
    ("Gamma", "Aaron Ly", "Student", "Leading", "1", "Male"),
    ("Gamma", "Lori Cline", "Teacher", "Supporting", "2", "Female"),
]


def write_cast_file(path, rows=CAST_ROWS, header=CAST_HEADER):
    lines = [header]
    for row in rows:
        lines.append(",".join(f'"{field}"' for field in row) + "\n")
    path.write_text("".join(lines), encoding="utf-8")
    return path


def build_graph(edges):
    graph = GraphStore()
    for collection, participant in edges:
        graph.add_vertex(collection)
        graph.add_vertex(participant)
        graph.add_edge(collection, participant)
    return graph


@pytest.fixture()
def small_graph() -> GraphStore:
    return build_graph(
        [("M1", "A1"), ("M1", "A2"), ("M2", "A2"), ("M2", "A3")]
    )


@pytest.fixture()
def cast_file(tmp_path):
    return write_cast_file(tmp_path / "small_castGender.txt")


@pytest.fixture()
def make_cast_file(tmp_path):
    def _make(name="cast.txt", rows=CAST_ROWS, header=CAST_HEADER):
        return write_cast_file(tmp_path / name, rows=rows, header=header)

    return _make


@pytest.fixture()
def make_graph():
    return build_graph


@pytest.fixture()
def service() -> CastGraphService:
    graph = GraphStore()
    aggregator = MembershipAggregator()
    builder = GraphBuilder(graph, aggregator)
    builder.add_records(
        [
            CastRecord("M1", "A1", is_subgroup=True),
            CastRecord("M1", "A2", is_subgroup=True),
            CastRecord("M1", "A4", is_subgroup=False),
            CastRecord("M2", "A2", is_subgroup=True),
            CastRecord("M2", "A3", is_subgroup=False),
            CastRecord("M2", "A5", is_subgroup=False),
            CastRecord("M2", "A6", is_subgroup=False),
            CastRecord("M3", "A7", is_subgroup=False),
            CastRecord("M4", "A8", is_subgroup=True),
            CastRecord("M4", "A9", is_subgroup=False),
        ]
    )
    return CastGraphService(
        graph=graph,
        aggregator=aggregator,
        config=CastGraphConfig(diversity=DiversityConfig(threshold=0.5)),
    )


@pytest.fixture()
def client(service: CastGraphService):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_graph_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
