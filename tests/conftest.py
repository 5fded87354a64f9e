"""
Pytest fixtures: isolated settings and env, fake backend URL for respx.
Tests never touch a real backend; all auth endpoints are mocked with respx.
"""
import pytest

from pipeup_setup.config import Settings, get_settings

API_URL = "http://backend.test"

SETTINGS_ENV = (
    "TEST_EMAIL",
    "TEST_USERNAME",
    "TEST_PASSWORD",
    "API_TOKEN_NAME",
    "TOKEN_ENV_VAR",
    "REQUEST_TIMEOUT",
    "LOG_LEVEL",
    "APP_ENV",
    "SENTRY_DSN",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test from an empty dir (no stray .env) with a known backend URL."""
    monkeypatch.chdir(tmp_path)
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("API_URL", API_URL)
    # Recorded so monkeypatch removes whatever the code under test exports.
    monkeypatch.setenv("PIPEUP_TOKEN", "stale-token")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, api_url=API_URL)


@pytest.fixture
def api_token_ok() -> dict:
    return {"id": "0b7d", "name": "CLI Test Token", "raw_token": "pk_live_123", "created_at": "2024-01-01T00:00:00Z"}
