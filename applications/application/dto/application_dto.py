"""
Data Transfer Objects for applications.
"""
import uuid
from dataclasses import dataclass

from applications.domain.application import Application


@dataclass
class ApplicationDTO:
    """DTO for an application."""

    id: uuid.UUID
    name: str

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationDTO":
        """Build the DTO from a domain entity."""
        return cls(id=application.id, name=application.name)
