"""
Exception handlers - Presentation Layer

Requests that fail validation or raise unexpectedly still answer with the
response envelope. Unexpected failures never expose internal details.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.shared import get_logger

from .error_mapping import GENERIC_ERROR_MESSAGE, problem_response

logger = get_logger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error["msg"])
    return "; ".join(messages)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info(
        "request.validation_failed",
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return problem_response(
        "Validation Error",
        _format_validation_errors(exc),
        status.HTTP_400_BAD_REQUEST,
        request,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request.unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=exc,
    )
    return problem_response(
        "Internal Server Error",
        GENERIC_ERROR_MESSAGE,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        request,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
