"""
Power Plant Repository Interface

This module defines the read contract for power plant reference data.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities.power_plant import PowerPlant


class IPowerPlantRepository(ABC):
    """Interface for PowerPlant repository implementations."""

    @abstractmethod
    async def find_by_id(self, power_plant_id: UUID) -> Optional[PowerPlant]:
        """
        Find a power plant by its ID.

        Args:
            power_plant_id: The unique identifier of the power plant

        Returns:
            The power plant if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_company_id(self, company_id: UUID) -> List[PowerPlant]:
        """
        Find the plants owned by a company.

        Args:
            company_id: The owning company

        Returns:
            Plants ordered by name
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[PowerPlant]:
        """Return every power plant ordered by name."""
        pass
