"""
CreateLicenseKeyCommand.

Command to issue a license key.
"""
import uuid
from dataclasses import dataclass
from datetime import date
from typing import Optional

from accounts.domain.user import AdminUser


@dataclass
class CreateLicenseKeyCommand:
    """
    Command to create a license key.

    ``key_value`` is generated when omitted and ``start_date``
    defaults to today.
    """

    actor: Optional[AdminUser]
    application_id: uuid.UUID
    user_name: str
    user_contact: str
    end_date: date
    start_date: Optional[date] = None
    key_value: Optional[str] = None
    is_active: bool = True
