"""
License domain events.

Domain events represent something that happened in the license domain.
"""

import hashlib
import uuid
from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent


class LicenseKeyCreated(DomainEvent):
    """Event raised when a license key is created."""

    def __init__(
        self,
        license_key_id: uuid.UUID,
        application_id: uuid.UUID,
        key_value: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseKeyCreated event.

        Args:
            license_key_id: License key UUID
            application_id: Application UUID
            key_value: The issued key
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=str(license_key_id), occurred_at=occurred_at)
        self.license_key_id = license_key_id
        self.application_id = application_id
        self.key_value = key_value


class LicenseKeyUpdated(DomainEvent):
    """Event raised when a license key is edited."""

    def __init__(self, license_key_id: uuid.UUID, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=str(license_key_id), occurred_at=occurred_at)
        self.license_key_id = license_key_id


class LicenseKeyDeleted(DomainEvent):
    """Event raised when a license key is deleted."""

    def __init__(
        self,
        license_key_id: uuid.UUID,
        key_value: str,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(aggregate_id=str(license_key_id), occurred_at=occurred_at)
        self.license_key_id = license_key_id
        self.key_value = key_value


class LicenseKeyStatusToggled(DomainEvent):
    """Event raised when a license key is activated or deactivated."""

    def __init__(
        self,
        license_key_id: uuid.UUID,
        is_active: bool,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseKeyStatusToggled event.

        Args:
            license_key_id: License key UUID
            is_active: Active flag after the toggle
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=str(license_key_id), occurred_at=occurred_at)
        self.license_key_id = license_key_id
        self.is_active = is_active


class LicenseKeyValidated(DomainEvent):
    """Event raised when a client application validates a key."""

    def __init__(
        self,
        key_value: str,
        result: str,
        license_key_id: Optional[uuid.UUID] = None,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseKeyValidated event.

        Args:
            key_value: Key that was checked; only a digest of it is kept
            result: ``valid``, ``not_found`` or the lower-cased key status
            license_key_id: License key UUID when the key exists
            occurred_at: When the event occurred
        """
        key_digest = hashlib.sha256(key_value.encode()).hexdigest()[:16]
        aggregate_id = str(license_key_id) if license_key_id else f"key:{key_digest}"
        super().__init__(aggregate_id=aggregate_id, occurred_at=occurred_at)
        self.key_digest = key_digest
        self.result = result
        self.license_key_id = license_key_id
