from typing import Optional

import time
from fastapi import FastAPI

from ..config import AppSettings
from ..logging import init_logging
from .middleware import RequestIDMiddleware
from .routes import health, root, version


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    settings = settings or AppSettings()
    init_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        openapi_tags=[
            {"name": "info", "description": "Greeting and deployed version"},
            {"name": "health", "description": "Service health and uptime"},
        ],
    )
    app.add_middleware(RequestIDMiddleware)

    app.include_router(root.router, tags=["info"])  # GET /
    app.include_router(health.router, tags=["health"])  # GET /health
    app.include_router(version.router, tags=["info"])  # GET /version

    app.state.settings = settings
    app.state.start_time = time.monotonic()

    return app


if __name__ == "__main__":
    from ..server import main

    main()
