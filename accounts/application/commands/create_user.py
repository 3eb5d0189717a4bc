"""
CreateUserCommand.

Command to create an admin user.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from accounts.domain.user import AdminUser


@dataclass
class CreateUserCommand:
    """Command to create an admin user."""

    actor: Optional[AdminUser]
    name: str
    email: str
    password: str
    permissions: Dict[str, bool] = field(default_factory=dict)
