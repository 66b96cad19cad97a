"""Server bootstrap.

``start_server`` binds the listening socket itself and hands it to uvicorn on a
background thread, returning a :class:`ServerHandle` whose ``close()`` releases
the port exactly once. ``main`` is the foreground entry point used by the
``gitops-app`` console script.
"""
from __future__ import annotations

import socket
import sys
import threading
import time
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from .api.main import create_app
from .config import AppSettings
from .errors import GitopsAppError, ServerStartupError
from .logging import init_logging

log = structlog.get_logger(__name__)

STARTUP_TIMEOUT_S = 10.0
SHUTDOWN_TIMEOUT_S = 10.0


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind a TCP socket on ``host:port``; port 0 picks an ephemeral port."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        log.error("server_bind_failed", host=host, port=port, error=str(e))
        raise ServerStartupError(host, port, e) from e
    return sock


def _uvicorn_config(app: FastAPI, settings: AppSettings) -> uvicorn.Config:
    # log_config=None keeps uvicorn on the handlers set up by init_logging
    return uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=False,
        lifespan="on",
    )


class ServerHandle:
    """A running server. ``close()`` stops it and is safe to call repeatedly."""

    def __init__(self, app: FastAPI, server: uvicorn.Server, sock: socket.socket, thread: threading.Thread):
        self.app = app
        self.host, self.port = sock.getsockname()[:2]
        self._server = server
        self._sock = sock
        self._thread = thread
        self._lock = threading.Lock()
        self._closed = False

    @property
    def url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"http://{host}:{self.port}"

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        # Held for the whole shutdown so concurrent callers return only once it is done
        with self._lock:
            if self._closed:
                return
            self._server.should_exit = True
            self._thread.join(SHUTDOWN_TIMEOUT_S)
            self._sock.close()
            self._closed = True
        log.info("server_stopped", port=self.port)

    def __enter__(self) -> "ServerHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def start_server(app: Optional[FastAPI] = None, settings: Optional[AppSettings] = None) -> ServerHandle:
    if settings is None:
        settings = app.state.settings if app is not None else AppSettings()
    if app is None:
        app = create_app(settings)

    sock = bind_socket(settings.host, settings.port)
    host, port = sock.getsockname()[:2]
    server = uvicorn.Server(_uvicorn_config(app, settings))
    thread = threading.Thread(
        target=server.run,
        kwargs={"sockets": [sock]},
        name=f"gitops-app-{port}",
        daemon=True,
    )
    thread.start()

    deadline = time.monotonic() + STARTUP_TIMEOUT_S
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            server.should_exit = True
            thread.join(SHUTDOWN_TIMEOUT_S)
            sock.close()
            raise ServerStartupError(host, port)
        time.sleep(0.01)

    log.info("server_running", port=port, environment=settings.environment)
    return ServerHandle(app, server, sock, thread)


def main() -> None:
    try:
        settings = AppSettings()
    except ValidationError as e:
        init_logging()
        log.error("invalid_settings", error=str(e))
        sys.exit(1)

    app = create_app(settings)
    try:
        sock = bind_socket(settings.host, settings.port)
    except GitopsAppError:
        sys.exit(1)

    port = sock.getsockname()[1]
    log.info("server_running", port=port, environment=settings.environment)
    try:
        uvicorn.Server(_uvicorn_config(app, settings)).run(sockets=[sock])
    finally:
        sock.close()
        log.info("server_stopped", port=port)


if __name__ == "__main__":
    main()
