from typing import Optional


class GitopsAppError(Exception):
    """Base class for service errors."""


class ServerStartupError(GitopsAppError):
    """The listening socket could not be bound."""

    def __init__(self, host: str, port: int, cause: Optional[OSError] = None):
        self.host = host
        self.port = port
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"could not bind {host}:{port}{detail}")
