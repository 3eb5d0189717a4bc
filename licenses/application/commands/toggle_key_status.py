"""
ToggleKeyStatusCommand.

Command to flip the active flag of a license key.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.user import AdminUser


@dataclass
class ToggleKeyStatusCommand:
    """Command to activate or deactivate a license key."""

    actor: Optional[AdminUser]
    license_key_id: uuid.UUID
