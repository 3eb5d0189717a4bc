"""
UpdateApplicationCommand.

Command to rename an application.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.user import AdminUser


@dataclass
class UpdateApplicationCommand:
    """Command to rename an application."""

    actor: Optional[AdminUser]
    application_id: uuid.UUID
    name: str
