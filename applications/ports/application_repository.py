"""
Application repository port (interface).

This defines the contract for application persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from applications.domain.application import Application


class ApplicationRepository(ABC):
    """
    Abstract repository for Application entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, application: Application) -> Application:
        """
        Save an application entity.

        Args:
            application: Application entity to save

        Returns:
            Saved application entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, application_id: uuid.UUID) -> Optional[Application]:
        """
        Find an application by ID.

        Args:
            application_id: Application UUID

        Returns:
            Application entity or None if not found
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Application]:
        """
        List all applications ordered by name.

        Returns:
            List of Application entities
        """
        pass

    @abstractmethod
    async def delete(self, application_id: uuid.UUID) -> None:
        """
        Delete an application.

        Args:
            application_id: Application UUID
        """
        pass
