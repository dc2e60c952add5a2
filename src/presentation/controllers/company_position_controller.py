"""
Company Position Router - Presentation Layer

This module defines the FastAPI router for company position reports.
"""

from datetime import date
from uuid import UUID

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.dtos.api_result import ApiResultDTO
from src.application.dtos.position_dto import CompanyPositionResponseDTO
from src.application.use_cases.company_position_use_cases import (
    GetCompanyPositionUseCase,
)

from ..error_mapping import error_response, success_response

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/company-position", tags=["Company Position"])


@router.get(
    "/{company_id}",
    response_model=ApiResultDTO[CompanyPositionResponseDTO],
)
@inject
async def get_company_position(
    request: Request,
    company_id: UUID,
    start_date: date = Query(..., description="First day of the range (inclusive)"),
    end_date: date = Query(..., description="Last day of the range (inclusive)"),
    get_company_position_use_case: GetCompanyPositionUseCase = Depends(
        Provide["get_company_position_use_case"]
    ),
) -> JSONResponse:
    """
    Get the total expected production of a company.

    Every power plant of the company is listed, including plants without
    forecasts in the range.
    """
    result = await get_company_position_use_case.execute(
        company_id, start_date, end_date
    )
    if result.is_failure:
        logger.info(
            "company_position.rejected",
            company_id=str(company_id),
            error_code=result.error.code,
        )
        return error_response(result.error, request)
    return success_response(result.value)
