"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.use_cases.company_position_use_cases import (
    GetCompanyPositionUseCase,
)
from src.application.use_cases.forecast_use_cases import (
    CreateOrUpdateForecastUseCase,
    GetForecastByIdUseCase,
    GetForecastsByPowerPlantUseCase,
)
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.infrastructure.database import MongoDatabase
from src.infrastructure.database.seed_data import seed_reference_data
from src.infrastructure.events import InMemoryEventPublisher, RabbitMQEventPublisher
from src.infrastructure.repositories import (
    CompanyRepository,
    ForecastRepository,
    PowerPlantRepository,
)
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _enum_value(value):
    return value.value if hasattr(value, "value") else str(value)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
        server_selection_timeout_ms=config.database.server_selection_timeout_ms,
    )

    company_repository = providers.Singleton(
        CompanyRepository,
        mongo_database=mongo_database,
    )

    power_plant_repository = providers.Singleton(
        PowerPlantRepository,
        mongo_database=mongo_database,
    )

    forecast_repository = providers.Singleton(
        ForecastRepository,
        mongo_database=mongo_database,
    )

    event_backend = providers.Callable(_enum_value, config.events.backend)

    event_publisher = providers.Selector(
        event_backend,
        rabbitmq=providers.Singleton(
            RabbitMQEventPublisher,
            broker_url=config.events.broker_url,
            exchange=config.events.exchange,
            routing_key=config.events.routing_key,
        ),
        in_memory=providers.Singleton(InMemoryEventPublisher),
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        mongo_database=mongo_database,
        event_backend=event_backend,
        broker_url=config.events.broker_url,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.api.title,
        description=config.api.description,
        version=config.api.version,
        environment=providers.Callable(_enum_value, config.environment),
        git_commit=config.api.git_commit,
        build_time=config.api.build_time,
        database_name=config.database.database_name,
        event_backend=event_backend,
        broker_url=config.events.broker_url,
        exchange=config.events.exchange,
    )

    # Application (use cases)
    create_or_update_forecast_use_case = providers.Factory(
        CreateOrUpdateForecastUseCase,
        forecast_repository=forecast_repository,
        power_plant_repository=power_plant_repository,
        event_publisher=event_publisher,
    )

    get_forecast_by_id_use_case = providers.Factory(
        GetForecastByIdUseCase,
        forecast_repository=forecast_repository,
        power_plant_repository=power_plant_repository,
    )

    get_forecasts_by_power_plant_use_case = providers.Factory(
        GetForecastsByPowerPlantUseCase,
        forecast_repository=forecast_repository,
        power_plant_repository=power_plant_repository,
    )

    get_company_position_use_case = providers.Factory(
        GetCompanyPositionUseCase,
        company_repository=company_repository,
        power_plant_repository=power_plant_repository,
        forecast_repository=forecast_repository,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Creates the MongoDB indexes, seeds the reference data when enabled and
    releases the database and broker connections on shutdown.
    """
    container = get_container()

    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_indexes")
        await mongo_database.create_indexes()

        if container.config.database.seed_reference_data():
            await seed_reference_data(mongo_database)

        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.mongo.close")
        mongo_database.close()

        event_publisher = container.event_publisher()
        if isinstance(event_publisher, RabbitMQEventPublisher):
            event_publisher.close()

        logger.info("container.resources.shutdown")
