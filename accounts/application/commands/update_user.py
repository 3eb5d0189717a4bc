"""
UpdateUserCommand.

Command to change an admin user's name and permissions.
"""
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional

from accounts.domain.user import AdminUser


@dataclass
class UpdateUserCommand:
    """Command to update an admin user."""

    actor: Optional[AdminUser]
    user_id: uuid.UUID
    name: str
    permissions: Dict[str, bool] = field(default_factory=dict)
