from __future__ import annotations

from src.main.config import AppSettings, get_settings
from src.shared.consts import EnumEnvironment, EnumEventBackend


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DB_MONGO_URI", raising=False)
    monkeypatch.delenv("EVENTS_BACKEND", raising=False)
    settings = get_settings()
    assert settings.database.mongo_uri.startswith("mongodb://")
    assert settings.database.seed_reference_data is True
    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.events.backend is EnumEventBackend.RABBITMQ
    assert settings.events.exchange == "forecast.events"


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("DB_MONGO_URI", "mongodb://test")
    monkeypatch.setenv("API_TITLE", "Testing")
    monkeypatch.setenv("GIT_COMMIT", "deadbeef")
    monkeypatch.setenv("EVENTS_BACKEND", "in_memory")
    monkeypatch.setenv("EVENTS_ROUTING_KEY", "positions.v2")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.database.mongo_uri == "mongodb://test"
    assert settings.api.title == "Testing"
    assert settings.api.git_commit == "deadbeef"
    assert settings.events.backend is EnumEventBackend.IN_MEMORY
    assert settings.events.routing_key == "positions.v2"
    assert settings.logging.level.value == "DEBUG"
