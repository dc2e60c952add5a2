"""
Forecasts Router - Presentation Layer

This module defines the FastAPI router for forecast endpoints.
"""

from datetime import datetime
from typing import List
from uuid import UUID

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.dtos.api_result import ApiResultDTO
from src.application.dtos.forecast_dto import (
    CreateOrUpdateForecastRequestDTO,
    ForecastResponseDTO,
)
from src.application.use_cases.forecast_use_cases import (
    CreateOrUpdateForecastUseCase,
    GetForecastByIdUseCase,
    GetForecastsByPowerPlantUseCase,
)

from ..error_mapping import error_response, success_response

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/forecasts", tags=["Forecasts"])


@router.post(
    "",
    response_model=ApiResultDTO[ForecastResponseDTO],
    status_code=status.HTTP_201_CREATED,
    responses={200: {"description": "An existing forecast was updated"}},
)
@inject
async def create_or_update_forecast(
    request: Request,
    forecast_dto: CreateOrUpdateForecastRequestDTO,
    create_or_update_use_case: CreateOrUpdateForecastUseCase = Depends(
        Provide["create_or_update_forecast_use_case"]
    ),
) -> JSONResponse:
    """
    Create or update the forecast of a power plant for an instant.

    Answers 201 with a Location header when a forecast is created and 200
    when the active forecast for the same plant and instant is updated.
    """
    result = await create_or_update_use_case.execute(forecast_dto)
    if result.is_failure:
        logger.info(
            "forecasts.upsert.rejected",
            power_plant_id=str(forecast_dto.power_plant_id),
            error_code=result.error.code,
        )
        return error_response(result.error, request)

    forecast = result.value
    if forecast.is_new:
        location = str(request.url_for("get_forecast_by_id", forecast_id=forecast.id))
        return success_response(
            forecast,
            status_code=status.HTTP_201_CREATED,
            headers={"Location": location},
        )
    return success_response(forecast)


@router.get(
    "/power-plant/{power_plant_id}",
    response_model=ApiResultDTO[List[ForecastResponseDTO]],
)
@inject
async def get_forecasts_by_power_plant(
    request: Request,
    power_plant_id: UUID,
    start_date: datetime = Query(..., description="First instant (inclusive)"),
    end_date: datetime = Query(..., description="Last instant (inclusive)"),
    get_forecasts_use_case: GetForecastsByPowerPlantUseCase = Depends(
        Provide["get_forecasts_by_power_plant_use_case"]
    ),
) -> JSONResponse:
    """List the active forecasts of a power plant in a time range."""
    result = await get_forecasts_use_case.execute(
        power_plant_id, start_date, end_date
    )
    if result.is_failure:
        return error_response(result.error, request)
    return success_response(result.value)


@router.get(
    "/{forecast_id}",
    response_model=ApiResultDTO[ForecastResponseDTO],
    name="get_forecast_by_id",
)
@inject
async def get_forecast_by_id(
    request: Request,
    forecast_id: UUID,
    get_forecast_use_case: GetForecastByIdUseCase = Depends(
        Provide["get_forecast_by_id_use_case"]
    ),
) -> JSONResponse:
    """Get a forecast by its ID."""
    result = await get_forecast_use_case.execute(forecast_id)
    if result.is_failure:
        return error_response(result.error, request)
    return success_response(result.value)
