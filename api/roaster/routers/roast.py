"""Roast endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from roaster.models.error import ErrorDetail
from roaster.models.roast import RoastErrorKind, RoastFailure, RoastRequest, RoastResponse
from roaster.services.roast_service import RoastService

router = APIRouter()

STATUS_BY_KIND: dict[RoastErrorKind, int] = {
    RoastErrorKind.INVALID_IDENTIFIER: 400,
    RoastErrorKind.PROFILE_NOT_FOUND: 404,
    RoastErrorKind.UPSTREAM_UNAVAILABLE: 502,
    RoastErrorKind.MALFORMED_UPSTREAM_RESPONSE: 502,
}


def get_roast_service(request: Request) -> RoastService:
    return request.app.state.roast_service


@router.post(
    "/roast",
    response_model=RoastResponse,
    responses={
        400: {"model": ErrorDetail},
        404: {"model": ErrorDetail},
        502: {"model": ErrorDetail},
    },
)
def create_roast(body: RoastRequest, service: RoastService = Depends(get_roast_service)) -> RoastResponse:
    """Roast a GitHub profile given its URL or username.

    Sync handler: the upstream clients block, so FastAPI runs this in its threadpool.
    """
    outcome = service.roast(body.input)
    if isinstance(outcome, RoastFailure):
        raise HTTPException(status_code=STATUS_BY_KIND[outcome.kind], detail=outcome.message)
    return RoastResponse(username=outcome.username, roast=outcome.roast)
