from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from backend.app.api.schemas import (
    GraphStatsResponse,
    VertexResponse,
    NeighborsResponse,
    ConnectionResponse,
)
from backend.app.dependencies import get_graph_service
from backend.app.services.cast_graph_service import CastGraphService
from castgraph.errors import VertexNotFoundError

router = APIRouter()


@router.get("/stats", response_model=GraphStatsResponse)
def graph_stats(service: CastGraphService = Depends(get_graph_service)):
    return GraphStatsResponse(**service.stats())


@router.get("/vertices/{vertex:path}", response_model=VertexResponse)
def graph_vertex(vertex: str, service: CastGraphService = Depends(get_graph_service)):
    return VertexResponse(vertex=vertex, present=service.contains(vertex))


@router.get("/neighbors/{vertex:path}", response_model=NeighborsResponse)
def graph_neighbors(vertex: str, service: CastGraphService = Depends(get_graph_service)):
    try:
        neighbors = service.neighbors(vertex)
    except VertexNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return NeighborsResponse(vertex=vertex, neighbors=[str(n) for n in neighbors])


@router.get("/edge", response_model=ConnectionResponse)
def graph_edge(
    source: str,
    target: str,
    service: CastGraphService = Depends(get_graph_service),
):
    connection = service.connection(source, target)
    return ConnectionResponse(
        source=source,
        target=target,
        forward_arc=connection.forward,
        backward_arc=connection.backward,
        edge=connection.is_edge,
    )


@router.get("/export", response_class=PlainTextResponse)
def graph_export(service: CastGraphService = Depends(get_graph_service)):
    try:
        text = service.export_tgf()
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return PlainTextResponse(text)
