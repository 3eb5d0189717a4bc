"""
UpdateLicenseKeyCommand.

Command to replace the editable fields of a license key.
"""
import uuid
from dataclasses import dataclass
from datetime import date
from typing import Optional

from accounts.domain.user import AdminUser


@dataclass
class UpdateLicenseKeyCommand:
    """Command to update a license key."""

    actor: Optional[AdminUser]
    license_key_id: uuid.UUID
    key_value: str
    application_id: uuid.UUID
    user_name: str
    user_contact: str
    start_date: date
    end_date: date
    is_active: bool
