"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers map typed results of the
application use cases onto the response envelope.
"""

from .company_position_controller import router as company_position_router
from .forecasts_controller import router as forecasts_router
from .system_controller import router as system_router

__all__ = ["forecasts_router", "company_position_router", "system_router"]
