"""
LicenseKey domain entity.

This is the core domain entity representing a license key.
It contains business logic and is independent of infrastructure.
"""

import secrets
import string
import uuid
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from typing import Optional

from core.domain.exceptions import InvalidKeyPeriodError
from core.domain.value_objects import KeyStatus


def generate_license_key(prefix: str) -> str:
    """
    Generate a license key in format: PREFIX-XXXX-XXXX-XXXX-XXXX.

    Args:
        prefix: Key prefix (e.g., 'KG')

    Returns:
        Generated license key string
    """
    chars = string.ascii_uppercase + string.digits
    parts = ["".join(secrets.choice(chars) for _ in range(4)) for _ in range(4)]
    return f"{prefix}-{'-'.join(parts)}"


@dataclass(frozen=True)
class LicenseKey:
    """
    LicenseKey domain entity.

    Grants ``user_name`` access to one application between ``start_date``
    and ``end_date``, both inclusive, while ``is_active`` holds.
    This is an immutable value object with business logic.
    """

    id: uuid.UUID
    key_value: str
    application_id: uuid.UUID
    user_name: str
    user_contact: str
    start_date: date
    end_date: date
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate license key entity."""
        if not self.key_value or len(self.key_value.strip()) == 0:
            raise ValueError("License key cannot be empty")
        if len(self.key_value) > 100:
            raise ValueError("License key too long")
        if not self.application_id:
            raise ValueError("Application ID is required")
        if not self.user_name or len(self.user_name.strip()) == 0:
            raise ValueError("User name cannot be empty")
        if not self.user_contact or len(self.user_contact.strip()) == 0:
            raise ValueError("User contact cannot be empty")
        if self.end_date < self.start_date:
            raise InvalidKeyPeriodError()

    @classmethod
    def create(
        cls,
        application_id: uuid.UUID,
        user_name: str,
        user_contact: str,
        start_date: date,
        end_date: date,
        key_value: Optional[str] = None,
        prefix: str = "KG",
        is_active: bool = True,
        license_key_id: Optional[uuid.UUID] = None,
    ) -> "LicenseKey":
        """
        Create a new LicenseKey entity.

        Args:
            application_id: Application UUID
            user_name: Name of the key holder
            user_contact: Email or phone of the key holder
            start_date: First valid day
            end_date: Last valid day
            key_value: Key string (generated from ``prefix`` if not provided)
            prefix: Prefix for generated keys
            is_active: Whether the key starts enabled
            license_key_id: Optional UUID (generated if not provided)

        Returns:
            LicenseKey entity instance

        Raises:
            InvalidKeyPeriodError: If end_date is before start_date
        """
        now = datetime.now(timezone.utc)
        key_value = (key_value or "").strip() or generate_license_key(prefix)

        return cls(
            id=license_key_id or uuid.uuid4(),
            key_value=key_value,
            application_id=application_id,
            user_name=(user_name or "").strip(),
            user_contact=(user_contact or "").strip(),
            start_date=start_date,
            end_date=end_date,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )

    def status(self, today: date) -> KeyStatus:
        """
        Derive the key status on a given day.

        Args:
            today: Day to evaluate against

        Returns:
            Exactly one of Deactivated, Pending, Expired or Active
        """
        if not self.is_active:
            return KeyStatus.DEACTIVATED
        if today < self.start_date:
            return KeyStatus.PENDING
        if today > self.end_date:
            return KeyStatus.EXPIRED
        return KeyStatus.ACTIVE

    def is_valid(self, today: date) -> bool:
        """Check whether the key grants access on ``today``."""
        return self.status(today) == KeyStatus.ACTIVE

    def update(
        self,
        key_value: str,
        application_id: uuid.UUID,
        user_name: str,
        user_contact: str,
        start_date: date,
        end_date: date,
        is_active: bool,
    ) -> "LicenseKey":
        """
        Create a new LicenseKey instance replacing every editable field.

        Returns:
            New LicenseKey instance

        Raises:
            InvalidKeyPeriodError: If end_date is before start_date
        """
        return replace(
            self,
            key_value=(key_value or "").strip(),
            application_id=application_id,
            user_name=(user_name or "").strip(),
            user_contact=(user_contact or "").strip(),
            start_date=start_date,
            end_date=end_date,
            is_active=is_active,
            updated_at=datetime.now(timezone.utc),
        )

    def toggled(self) -> "LicenseKey":
        """
        Create a new LicenseKey instance with the active flag flipped.

        Returns:
            New LicenseKey instance
        """
        return replace(self, is_active=not self.is_active, updated_at=datetime.now(timezone.utc))

    def matches(self, search: str) -> bool:
        """
        Case-insensitive search over key value, user name and user contact.

        Args:
            search: Search term (blank matches everything)
        """
        term = (search or "").strip().lower()
        if not term:
            return True
        return any(
            term in field.lower() for field in (self.key_value, self.user_name, self.user_contact)
        )
