"""
Domain Entities - Company

A company owns a roster of power plants. Companies are seeded reference
data and are read-only for the forecast workflows.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from .timestamps import utc_now


@dataclass
class Company:
    """Legal entity whose plants' forecasts make up a position."""

    id: UUID = field(default_factory=uuid4)
    name: str = ""
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
