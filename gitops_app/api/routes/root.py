from datetime import datetime, timezone

from fastapi import APIRouter, Request

from ...schemas.info import RootResponse

GREETING = "Hello from CI/CD Pipeline! , Gitops"

router = APIRouter()


def isoformat_utc(moment: datetime) -> str:
    """Millisecond-precision UTC timestamp with a ``Z`` suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/", response_model=RootResponse, summary="Greeting")
def root(request: Request) -> RootResponse:
    settings = request.app.state.settings
    return RootResponse(
        message=GREETING,
        environment=settings.environment,
        version=settings.app_version,
        timestamp=isoformat_utc(datetime.now(timezone.utc)),
    )
