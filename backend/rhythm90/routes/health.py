"""
Rhythm90 Backend — Health Check Route
======================================

What:  Liveness endpoint for load balancers and container orchestrators.
How:   Returns a fixed payload without touching the database. The path alone
       selects this handler: checks may use any method and all get the same
       answer. Store reachability is surfaced by the routes that use it.
"""

from fastapi import APIRouter

from rhythm90.schemas.board import HealthResponse

router = APIRouter(tags=["Health"])

# /health does not restrict by method
ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route(
    "/health",
    methods=ANY_METHOD,
    response_model=HealthResponse,
    summary="Service liveness check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok")
