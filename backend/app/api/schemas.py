from typing import List, Dict, Any
from pydantic import BaseModel


class GraphStatsResponse(BaseModel):
    vertices: int
    arcs: int
    edges: int
    collections: int
    empty: bool
    metadata: Dict[str, Any]


class VertexResponse(BaseModel):
    vertex: str
    present: bool


class NeighborsResponse(BaseModel):
    vertex: str
    neighbors: List[str]


class ConnectionResponse(BaseModel):
    source: str
    target: str
    forward_arc: bool
    backward_arc: bool
    edge: bool


class SeparationResponse(BaseModel):
    source: str
    target: str
    separation: int
    path: List[str]


class DiversityResponse(BaseModel):
    threshold: float
    passing: List[str]
    failing: List[str]
