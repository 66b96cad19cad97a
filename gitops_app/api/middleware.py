from __future__ import annotations

import time
import uuid

import structlog

log = structlog.get_logger(__name__)


class RequestIDMiddleware:
    """Tag each HTTP request with an id: ``x-request-id`` header plus log context."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        request_id = uuid.uuid4().hex

        start = time.perf_counter()
        status_code = 500

        async def send_wrapper(message):
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = message.get("status", status_code)
                headers = message.setdefault("headers", [])
                headers.append((b"x-request-id", request_id.encode()))
            await send(message)

        # Every event logged while handling the request carries request_id
        with structlog.contextvars.bound_contextvars(request_id=request_id):
            try:
                await self.app(scope, receive, send_wrapper)
            finally:
                dur_ms = int((time.perf_counter() - start) * 1000)
                log.info(
                    "request_completed",
                    method=scope.get("method", ""),
                    path=scope.get("path", ""),
                    status_code=status_code,
                    duration_ms=dur_ms,
                )
