"""
Application domain entity.

An application is a piece of software license keys are issued for.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Application:
    """
    Application domain entity.

    This is an immutable value object with business logic.
    """

    id: uuid.UUID
    name: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate application entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Application name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Application name too long")

    @classmethod
    def create(cls, name: str, application_id: Optional[uuid.UUID] = None) -> "Application":
        """
        Create a new Application entity.

        Args:
            name: Application display name
            application_id: Optional UUID (generated if not provided)

        Returns:
            Application entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=application_id or uuid.uuid4(),
            name=(name or "").strip(),
            created_at=now,
            updated_at=now,
        )

    def rename(self, new_name: str) -> "Application":
        """
        Create a new Application instance with updated name.

        Args:
            new_name: New application name

        Returns:
            New Application instance with updated name
        """
        return replace(
            self,
            name=(new_name or "").strip(),
            updated_at=datetime.now(timezone.utc),
        )
