"""
AdminUser domain entity.

An admin user signs in to the panel. Everything an admin may change is
gated by a permission map, except for the superadmin who passes every
check and whose account cannot be edited.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional

from core.domain.exceptions import SuperAdminProtectedError
from core.domain.value_objects import Email, Permission, Role


def parse_permissions(raw: Optional[Mapping[str, bool]]) -> Dict[Permission, bool]:
    """
    Convert a wire permission map into a complete ``Permission -> bool`` map.

    Args:
        raw: Mapping of permission names to flags (missing names are False)

    Returns:
        Map covering every permission

    Raises:
        ValueError: If a name is not a known permission
    """
    permissions = {permission: False for permission in Permission}
    for name, granted in (raw or {}).items():
        try:
            permission = Permission(name)
        except ValueError:
            raise ValueError(f"Unknown permission: {name}") from None
        permissions[permission] = bool(granted)
    return permissions


@dataclass(frozen=True)
class AdminUser:
    """
    AdminUser domain entity.

    ``permissions`` is None for the superadmin.
    """

    id: uuid.UUID
    email: Email
    name: str
    role: Role
    permissions: Optional[Dict[Permission, bool]]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate user entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("User name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("User name too long")
        if self.role == Role.SUPERADMIN and self.permissions is not None:
            raise ValueError("Superadmin does not carry a permission map")

    @classmethod
    def create(
        cls,
        email: str,
        name: str,
        super_admin_email: str,
        permissions: Optional[Mapping[str, bool]] = None,
        user_id: Optional[uuid.UUID] = None,
    ) -> "AdminUser":
        """
        Create a new AdminUser entity.

        The role is derived from the email: the configured superadmin email
        yields the superadmin, anything else an admin.

        Args:
            email: Sign-in email (case-insensitive)
            name: Display name
            super_admin_email: Configured superadmin email
            permissions: Wire permission map (ignored for the superadmin)
            user_id: Optional UUID (generated if not provided)

        Returns:
            AdminUser entity instance
        """
        normalized = Email(email)
        is_super = normalized.value == super_admin_email.strip().lower()
        now = datetime.now(timezone.utc)
        return cls(
            id=user_id or uuid.uuid4(),
            email=normalized,
            name=name.strip(),
            role=Role.SUPERADMIN if is_super else Role.ADMIN,
            permissions=None if is_super else parse_permissions(permissions),
            created_at=now,
            updated_at=now,
        )

    @property
    def is_superadmin(self) -> bool:
        return self.role == Role.SUPERADMIN

    def can(self, permission: Permission) -> bool:
        """Check whether this user holds a permission."""
        if self.is_superadmin:
            return True
        return bool((self.permissions or {}).get(permission))

    def granted_permissions(self) -> List[Permission]:
        """Permissions this user holds, in declaration order."""
        return [permission for permission in Permission if self.can(permission)]

    def update_profile(self, name: str, permissions: Optional[Mapping[str, bool]]) -> "AdminUser":
        """
        Create a new AdminUser instance with a new name and permission map.

        Raises:
            SuperAdminProtectedError: If this is the superadmin
        """
        self.ensure_not_superadmin()
        return replace(
            self,
            name=name.strip(),
            permissions=parse_permissions(permissions),
            updated_at=datetime.now(timezone.utc),
        )

    def ensure_not_superadmin(self) -> None:
        """Reject operations that target the superadmin account."""
        if self.is_superadmin:
            raise SuperAdminProtectedError()
