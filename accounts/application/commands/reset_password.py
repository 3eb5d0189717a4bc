"""
ResetPasswordCommand.

Command to reset an admin user's password to the configured default.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.user import AdminUser


@dataclass
class ResetPasswordCommand:
    """Command to reset an admin user's password."""

    actor: Optional[AdminUser]
    user_id: uuid.UUID
