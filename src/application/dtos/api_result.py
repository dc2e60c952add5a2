"""
API envelope DTOs.

Every endpoint answers with ``{"success", "data", "error"}`` where ``error``
is a problem-details object.
"""

from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ProblemDetailsDTO(BaseModel):
    """Problem description returned with failed requests."""

    title: str
    detail: str
    status: int
    instance: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ApiResultDTO(BaseModel, Generic[T]):
    """Uniform response envelope."""

    success: bool
    data: Optional[T] = None
    error: Optional[ProblemDetailsDTO] = None

    @classmethod
    def ok(cls, data: T) -> "ApiResultDTO[T]":
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(cls, problem: ProblemDetailsDTO) -> "ApiResultDTO[T]":
        return cls(success=False, data=None, error=problem)
