"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation, stored lower-cased."""

    value: str

    def __post_init__(self):
        """Validate and normalize email."""
        normalized = (self.value or "").strip().lower()
        if not normalized or "@" not in normalized:
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        """Return email as string."""
        return self.value


class KeyStatus(Enum):
    """Derived status of a license key."""

    ACTIVE = "Active"
    EXPIRED = "Expired"
    PENDING = "Pending"
    DEACTIVATED = "Deactivated"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


class Permission(Enum):
    """Grantable admin permissions."""

    CREATE_KEYS = "CREATE_KEYS"
    EDIT_KEYS = "EDIT_KEYS"
    DELETE_KEYS = "DELETE_KEYS"
    TOGGLE_KEY_STATUS = "TOGGLE_KEY_STATUS"
    MANAGE_APPLICATIONS = "MANAGE_APPLICATIONS"

    @property
    def label(self) -> str:
        """Human-readable permission name."""
        return PERMISSION_LABELS[self]

    def __str__(self) -> str:
        """Return permission as string."""
        return self.value


PERMISSION_LABELS = {
    Permission.CREATE_KEYS: "Create Keys",
    Permission.EDIT_KEYS: "Edit Keys",
    Permission.DELETE_KEYS: "Delete Keys",
    Permission.TOGGLE_KEY_STATUS: "Toggle Key Status",
    Permission.MANAGE_APPLICATIONS: "Manage Applications",
}


class Role(Enum):
    """Admin role."""

    ADMIN = "admin"
    SUPERADMIN = "superadmin"

    def __str__(self) -> str:
        """Return role as string."""
        return self.value
