import pytest

from gitops_app.config import AppSettings

ENV_VARS = ("PORT", "NODE_ENV", "APP_VERSION", "HOST", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Tests start from an empty process environment for the variables we read
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    def _make(**overrides) -> AppSettings:
        return AppSettings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def local_settings(make_settings):
    return make_settings(host="127.0.0.1", port=0)


@pytest.fixture
def log_events(caplog):
    """Structlog event dicts captured so far, optionally filtered by event name."""

    def _events(name=None):
        found = [r.msg for r in caplog.records if isinstance(r.msg, dict)]
        return [e for e in found if name is None or e.get("event") == name]

    return _events
