"""
DeleteUserCommand.

Command to delete an admin user.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.user import AdminUser


@dataclass
class DeleteUserCommand:
    """Command to delete an admin user."""

    actor: Optional[AdminUser]
    user_id: uuid.UUID
