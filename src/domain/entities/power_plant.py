"""
Domain Entities - Power Plant

A power plant belongs to exactly one company and submits forecasts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from .timestamps import utc_now


@dataclass
class PowerPlant:
    """Generation asset registered under a company."""

    id: UUID = field(default_factory=uuid4)
    name: str = ""
    country: str = ""
    company_id: Optional[UUID] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
