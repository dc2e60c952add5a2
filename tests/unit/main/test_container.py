from __future__ import annotations

import asyncio

import pytest
from dependency_injector import providers

from src.infrastructure.database.mongo_database import COMPANIES
from src.infrastructure.events import InMemoryEventPublisher, RabbitMQEventPublisher
from src.main.config import AppSettings, DatabaseSettings, EventSettings
from src.main.container import app_lifespan, get_container, init_container
from src.shared.consts import EnumEventBackend
from tests.conftest import FakeMongoDatabase


def test_init_and_get_container() -> None:
    container = init_container(AppSettings())

    assert hasattr(container, "mongo_database")
    assert get_container() is container


@pytest.mark.parametrize(
    ("backend", "expected"),
    [
        (EnumEventBackend.RABBITMQ, RabbitMQEventPublisher),
        (EnumEventBackend.IN_MEMORY, InMemoryEventPublisher),
    ],
)
def test_event_publisher_follows_configured_backend(backend, expected) -> None:
    container = init_container(AppSettings(events=EventSettings(backend=backend)))

    publisher = container.event_publisher()

    assert isinstance(publisher, expected)
    assert container.event_publisher() is publisher


def test_system_info_reflects_settings() -> None:
    container = init_container(
        AppSettings(events=EventSettings(backend=EnumEventBackend.IN_MEMORY, exchange="x"))
    )

    info = container.system_info()

    assert info.event_backend == "in_memory"
    assert info.exchange == "x"
    assert info.environment == "development"


@pytest.mark.asyncio
async def test_app_lifespan_manages_resources() -> None:
    container = init_container(AppSettings())
    database = FakeMongoDatabase()
    container.mongo_database.override(providers.Object(database))

    async with app_lifespan():
        await asyncio.sleep(0)

    assert len(database.get_collection(COMPANIES).documents) == 1
    assert database.closed is True


@pytest.mark.asyncio
async def test_app_lifespan_can_skip_seeding() -> None:
    container = init_container(
        AppSettings(database=DatabaseSettings(seed_reference_data=False))
    )
    database = FakeMongoDatabase()
    container.mongo_database.override(providers.Object(database))

    async with app_lifespan():
        pass

    assert database.get_collection(COMPANIES).documents == {}


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
