"""
DeleteLicenseKeyCommand.

Command to delete a license key.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.user import AdminUser


@dataclass
class DeleteLicenseKeyCommand:
    """Command to delete a license key."""

    actor: Optional[AdminUser]
    license_key_id: uuid.UUID
