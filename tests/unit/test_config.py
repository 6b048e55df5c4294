"""Tests for environment-driven settings."""

from pydantic import ValidationError
import pytest

from handover.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "REDIS_URL",
        "SERVICE_NAME",
        "LOG_FORMAT",
        "LOG_LEVEL",
        "STORE_TIMEOUT_SECONDS",
        "STORE_KEY_PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)


def test_redis_url_required():
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

    settings = Settings(_env_file=None)

    assert settings.redis_url == "redis://localhost:6379/0"
    assert settings.service_name == "handover"
    assert settings.log_format == "console"
    assert settings.log_level == "INFO"
    assert settings.store_timeout_seconds == 5.0  # noqa: PLR2004
    assert settings.store_key_prefix == "handover"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "redis://redis:6379/1")
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("STORE_TIMEOUT_SECONDS", "1.5")

    settings = Settings(_env_file=None)

    assert settings.log_format == "json"
    assert settings.log_level == "DEBUG"
    assert settings.store_timeout_seconds == 1.5  # noqa: PLR2004


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("LOG_LEVEL", "verbose"),
        ("LOG_FORMAT", "xml"),
        ("STORE_TIMEOUT_SECONDS", "0"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
