"""Health check route for container orchestration."""

from fastapi import APIRouter, Depends, Request, Response

from src.api.dependencies import AppState, get_app_state
from src.api.schemas import HealthResponse
from src.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    response: Response,
    app_state: AppState = Depends(get_app_state),
) -> HealthResponse:
    """Report whether the catalog is loaded.

    Returns 200 once the catalog has been loaded, 503 otherwise.
    """
    healthy = app_state.is_initialized
    response.status_code = 200 if healthy else 503

    logger.debug("health_check", healthy=healthy, blocks=app_state.block_count)

    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        version=request.app.version,
        blocks=app_state.block_count,
    )
