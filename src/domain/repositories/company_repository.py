"""
Company Repository Interface

This module defines the read contract for company reference data.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities.company import Company


class ICompanyRepository(ABC):
    """Interface for Company repository implementations."""

    @abstractmethod
    async def find_by_id(self, company_id: UUID) -> Optional[Company]:
        """
        Find a company by its ID.

        Args:
            company_id: The unique identifier of the company

        Returns:
            The company if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Company]:
        """Return every company ordered by name."""
        pass
