"""
ListLicenseKeysQuery.

Query to list license keys with optional filters.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.user import AdminUser
from core.domain.value_objects import KeyStatus


@dataclass
class ListLicenseKeysQuery:
    """Query to list license keys, newest first."""

    actor: Optional[AdminUser]
    status: Optional[KeyStatus] = None
    application_id: Optional[uuid.UUID] = None
    search: Optional[str] = None
