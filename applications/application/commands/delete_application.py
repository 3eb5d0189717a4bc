"""
DeleteApplicationCommand.

Command to delete an application no key refers to.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.user import AdminUser


@dataclass
class DeleteApplicationCommand:
    """Command to delete an application."""

    actor: Optional[AdminUser]
    application_id: uuid.UUID
