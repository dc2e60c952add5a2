"""System endpoints exposing health and build information."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=SystemHealthDTO)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Probe MongoDB and the message broker."""
    health_status = await get_health_status_use_case.execute()
    logger.debug(
        "health.checked",
        status=health_status.status.value,
        dependencies={dep.name: dep.status.value for dep in health_status.dependencies},
    )
    return health_status


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    """Return build metadata, uptime and dependency status."""
    started_at = getattr(request.app.state, "started_at", None)
    return await get_application_info_use_case.execute(started_at)
