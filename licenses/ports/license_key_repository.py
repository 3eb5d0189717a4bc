"""
LicenseKey repository port (interface).

This defines the contract for license key persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import uuid

from licenses.domain.license_key import LicenseKey


class LicenseKeyRepository(ABC):
    """
    Abstract repository for LicenseKey entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, license_key: LicenseKey) -> LicenseKey:
        """
        Save a license key entity.

        Args:
            license_key: LicenseKey entity to save

        Returns:
            Saved license key entity
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, license_key_id: uuid.UUID
    ) -> Optional[LicenseKey]:
        """
        Find a license key by ID.

        Args:
            license_key_id: License key UUID

        Returns:
            LicenseKey entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_key_value(self, key_value: str) -> Optional[LicenseKey]:
        """
        Find a license key by its exact value.

        Args:
            key_value: The key string

        Returns:
            LicenseKey entity or None if not found
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[LicenseKey]:
        """
        List every license key, newest first.

        Returns:
            List of LicenseKey entities
        """
        pass

    @abstractmethod
    async def delete(self, license_key_id: uuid.UUID) -> None:
        """
        Delete a license key.

        Args:
            license_key_id: License key UUID
        """
        pass

    @abstractmethod
    async def key_value_taken(
        self, key_value: str, exclude_id: Optional[uuid.UUID] = None
    ) -> bool:
        """
        Check whether another key already uses ``key_value``.

        Args:
            key_value: The key string
            exclude_id: Key to ignore (the one being edited)

        Returns:
            True if the value is in use
        """
        pass

    @abstractmethod
    async def exists_for_application(self, application_id: uuid.UUID) -> bool:
        """
        Check whether any key references an application.

        Args:
            application_id: Application UUID

        Returns:
            True if at least one key is issued for the application
        """
        pass
