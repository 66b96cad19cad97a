from fastapi import APIRouter, Request

from ...schemas.info import VersionResponse

router = APIRouter()


@router.get("/version", response_model=VersionResponse, summary="Deployed version")
def version(request: Request) -> VersionResponse:
    settings = request.app.state.settings
    return VersionResponse(version=settings.app_version, environment=settings.environment)
