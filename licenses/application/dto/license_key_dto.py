"""
License key DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from licenses.domain.license_key import LicenseKey
from licenses.domain.services import KeyValidationResult


@dataclass
class LicenseKeyDTO:
    """DTO for license key information, including its derived status."""

    id: uuid.UUID
    key_value: str
    application_id: uuid.UUID
    user_name: str
    user_contact: str
    start_date: date
    end_date: date
    is_active: bool
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, license_key: LicenseKey, today: date) -> "LicenseKeyDTO":
        """Build the DTO from a domain entity, deriving status on ``today``."""
        return cls(
            id=license_key.id,
            key_value=license_key.key_value,
            application_id=license_key.application_id,
            user_name=license_key.user_name,
            user_contact=license_key.user_contact,
            start_date=license_key.start_date,
            end_date=license_key.end_date,
            is_active=license_key.is_active,
            status=license_key.status(today).value,
            created_at=license_key.created_at,
        )


@dataclass
class KeyValidationDTO:
    """DTO for a key validation response."""

    status: bool
    info: Optional[Dict[str, Any]]
    result: str = "not_found"
    license_key_id: Optional[uuid.UUID] = None

    @classmethod
    def from_result(cls, result: KeyValidationResult) -> "KeyValidationDTO":
        """
        Build the wire shape of a validation result.

        A valid key carries its details, a rejected key a message and an
        unknown key no info at all.
        """
        if result.key is None:
            return cls(status=False, info=None)
        if not result.is_valid:
            return cls(
                status=False,
                info={"message": result.message},
                result=result.result,
                license_key_id=result.key.id,
            )
        key = result.key
        return cls(
            status=True,
            info={
                "keyValue": key.key_value,
                "applicationName": result.application_name,
                "userName": key.user_name,
                "userContact": key.user_contact,
                "startDate": key.start_date.isoformat(),
                "endDate": key.end_date.isoformat(),
            },
            result=result.result,
            license_key_id=key.id,
        )
