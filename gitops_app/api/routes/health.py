import time
from fastapi import APIRouter, Request

import structlog
from ...schemas.health import HealthResponse

router = APIRouter()
logger = structlog.get_logger()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health status",
    responses={
        200: {
            "description": "Service is healthy",
            "content": {
                "application/json": {
                    "example": {"status": "healthy", "environment": "development", "uptime": 12.34}
                }
            },
        }
    },
)
def health(request: Request) -> HealthResponse:
    settings = request.app.state.settings
    uptime = max(0.0, time.monotonic() - float(getattr(request.app.state, "start_time", time.monotonic())))
    logger.debug("health_check", env=settings.environment, uptime=uptime)
    return HealthResponse(status="healthy", environment=settings.environment, uptime=uptime)
