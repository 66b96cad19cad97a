from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__


class AppSettings(BaseSettings):
    app_name: str = "gitops-app"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Reported by the endpoints
    node_env: str = "development"
    app_version: str = __version__

    # Unprefixed: PORT, NODE_ENV, APP_VERSION are read as-is
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @property
    def environment(self) -> str:
        return self.node_env
