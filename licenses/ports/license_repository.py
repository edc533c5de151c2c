"""
License repository port (interface).

This defines the contract for license persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from licenses.domain.license import License


class LicenseRepository(ABC):
    """
    Abstract repository for License entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def add(self, license: License) -> License:
        """
        Insert a new license.

        The storage layer enforces uniqueness of ``key``; a duplicate
        insert fails rather than overwriting.

        Args:
            license: License entity to insert

        Returns:
            Stored license entity
        """
        pass

    @abstractmethod
    async def find_by_key(self, key: str) -> Optional[License]:
        """
        Find a license by key string.

        Args:
            key: License key string

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    async def update_expiry(
        self, key: str, owner: str, expire_time: datetime
    ) -> int:
        """
        Set expire_time on the license matching both key and owner.

        This is a single conditional write.

        Args:
            key: License key string
            owner: Identity the license must belong to
            expire_time: New expiry

        Returns:
            Number of rows updated (0 or 1)
        """
        pass
