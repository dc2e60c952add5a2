"""
Error to HTTP mapping - Presentation Layer

Translates typed errors into status codes and the response envelope.
"""

from typing import Any, Dict, Optional, Tuple

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.dtos.api_result import ApiResultDTO, ProblemDetailsDTO
from src.domain.entities.errors import Error, ErrorKind

GENERIC_ERROR_MESSAGE = (
    "An error occurred while processing your request. Please try again later."
)

_STATUS_BY_KIND: Dict[ErrorKind, Tuple[int, str]] = {
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Not Found"),
    ErrorKind.CONCURRENCY_CONFLICT: (status.HTTP_409_CONFLICT, "Conflict"),
    ErrorKind.UNIQUE_CONSTRAINT_VIOLATION: (status.HTTP_409_CONFLICT, "Conflict"),
    ErrorKind.FOREIGN_KEY_VIOLATION: (status.HTTP_409_CONFLICT, "Conflict"),
    ErrorKind.CONSTRAINT_VIOLATION: (status.HTTP_409_CONFLICT, "Conflict"),
    ErrorKind.CONNECTION_ERROR: (
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Service Unavailable",
    ),
    ErrorKind.TIMEOUT_ERROR: (status.HTTP_504_GATEWAY_TIMEOUT, "Gateway Timeout"),
    ErrorKind.DATABASE_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
    ),
}
_DEFAULT_STATUS = (status.HTTP_400_BAD_REQUEST, "Validation Error")


def status_for(error: Error) -> Tuple[int, str]:
    """HTTP status code and problem title for an error."""
    return _STATUS_BY_KIND.get(error.kind, _DEFAULT_STATUS)


def problem_details(
    title: str, detail: str, status_code: int, request: Request
) -> ProblemDetailsDTO:
    return ProblemDetailsDTO(
        title=title,
        detail=detail,
        status=status_code,
        instance=request.url.path,
    )


def error_response(error: Error, request: Request) -> JSONResponse:
    """Envelope for a failed result."""
    status_code, title = status_for(error)
    return problem_response(title, error.message, status_code, request)


def problem_response(
    title: str, detail: str, status_code: int, request: Request
) -> JSONResponse:
    envelope: ApiResultDTO[Any] = ApiResultDTO.fail(
        problem_details(title, detail, status_code, request)
    )
    return JSONResponse(
        status_code=status_code, content=envelope.model_dump(mode="json")
    )


def success_response(
    data: Any,
    status_code: int = status.HTTP_200_OK,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Envelope for a successful result."""
    envelope: ApiResultDTO[Any] = ApiResultDTO.ok(data)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json"),
        headers=headers,
    )
