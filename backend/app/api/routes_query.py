from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from backend.app.api.schemas import SeparationResponse, DiversityResponse
from backend.app.dependencies import get_graph_service
from backend.app.services.cast_graph_service import CastGraphService
from castgraph.errors import NotConnectedError, VertexNotFoundError
from castgraph.membership import threshold_from_percent

router = APIRouter()


@router.get("/separation", response_model=SeparationResponse)
def query_separation(
    source: str,
    target: str,
    service: CastGraphService = Depends(get_graph_service),
):
    """
    404 for an unknown vertex, 409 when no path exists, 422 when both
    ends are the same vertex or either end is a collection. A path that
    breaks the participant/collection alternation is a data fault and
    surfaces as a 500.
    """
    try:
        result = service.separation(source, target)
    except VertexNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except NotConnectedError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return SeparationResponse(
        source=source,
        target=target,
        separation=result.separation,
        path=[str(v) for v in result.path],
    )


@router.get("/diversity", response_model=DiversityResponse)
def query_diversity(
    threshold: Optional[float] = Query(default=None, ge=0.0, le=1.0),
    percent: Optional[float] = Query(default=None, ge=0.0, le=100.0),
    service: CastGraphService = Depends(get_graph_service),
):
    """
    Threshold as a ratio (`threshold=0.48`) or a percentage (`percent=48`),
    not both. Without either, the configured threshold applies.
    """
    if percent is not None:
        if threshold is not None:
            raise HTTPException(
                status_code=422, detail="pass either threshold or percent, not both"
            )
        threshold = threshold_from_percent(percent)

    result = service.diversity(threshold)
    return DiversityResponse(
        threshold=result.threshold,
        passing=[str(c) for c in result.passing],
        failing=[str(c) for c in result.failing],
    )
