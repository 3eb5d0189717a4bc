"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import uuid
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from core.domain.value_objects import KeyStatus
from licenses.domain.license_key import LicenseKey

UNKNOWN_APPLICATION = "Unknown Application"


@dataclass(frozen=True)
class KeyValidationResult:
    """Outcome of checking a key on behalf of a client application."""

    is_valid: bool
    key: Optional[LicenseKey] = None
    status: Optional[KeyStatus] = None
    application_name: Optional[str] = None
    message: Optional[str] = None

    @property
    def result(self) -> str:
        """Short outcome label used for metrics and logs."""
        if self.status is None:
            return "not_found"
        return "valid" if self.is_valid else self.status.value.lower()


class KeyValidator:
    """Domain service deciding whether a key grants access."""

    @staticmethod
    def validate(
        key: Optional[LicenseKey],
        today: date,
        application_name: Optional[str] = None,
    ) -> KeyValidationResult:
        """
        Validate a key on a given day.

        Args:
            key: Key found for the submitted value, or None
            today: Day to evaluate against
            application_name: Name of the key's application, if it still exists

        Returns:
            KeyValidationResult
        """
        if key is None:
            return KeyValidationResult(is_valid=False)

        status = key.status(today)
        if status == KeyStatus.ACTIVE:
            return KeyValidationResult(
                is_valid=True,
                key=key,
                status=status,
                application_name=application_name or UNKNOWN_APPLICATION,
            )
        return KeyValidationResult(
            is_valid=False,
            key=key,
            status=status,
            message=KeyValidator.rejection_message(key, status),
        )

    @staticmethod
    def rejection_message(key: LicenseKey, status: KeyStatus) -> str:
        """
        Explain why a key is not valid.

        Args:
            key: Rejected key
            status: Its derived status

        Returns:
            Message shown to the client application
        """
        if status == KeyStatus.DEACTIVATED:
            return "Key has been deactivated by an administrator."
        if status == KeyStatus.EXPIRED:
            return f"Key expired on {key.end_date.isoformat()}."
        return f"Key is not yet active. It will be valid from {key.start_date.isoformat()}."


class KeyFilter:
    """Domain service filtering key listings."""

    @staticmethod
    def apply(
        keys: Iterable[LicenseKey],
        today: date,
        status: Optional[KeyStatus] = None,
        application_id: Optional[uuid.UUID] = None,
        search: Optional[str] = None,
    ) -> List[LicenseKey]:
        """
        Filter keys by derived status, application and free-text search.

        Args:
            keys: Keys to filter
            today: Day statuses are derived for
            status: Keep only keys in this status
            application_id: Keep only keys of this application
            search: Case-insensitive term over key value, user name and contact

        Returns:
            Matching keys in their original order
        """
        return [
            key
            for key in keys
            if (status is None or key.status(today) == status)
            and (application_id is None or key.application_id == application_id)
            and key.matches(search)
        ]
