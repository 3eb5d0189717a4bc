"""
Data Transfer Objects for admin users.

DTOs are used to transfer data between layers.
"""
import uuid
from dataclasses import dataclass
from typing import Dict, Optional

from accounts.domain.user import AdminUser


@dataclass
class UserDTO:
    """Public view of an admin user; never carries a password."""

    id: uuid.UUID
    email: str
    name: str
    role: str
    permissions: Optional[Dict[str, bool]]

    @classmethod
    def from_entity(cls, user: AdminUser) -> "UserDTO":
        """Build the DTO from a domain entity."""
        permissions = None
        if user.permissions is not None:
            permissions = {
                permission.value: granted for permission, granted in user.permissions.items()
            }
        return cls(
            id=user.id,
            email=user.email.value,
            name=user.name,
            role=user.role.value,
            permissions=permissions,
        )
