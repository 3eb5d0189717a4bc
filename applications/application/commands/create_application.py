"""
CreateApplicationCommand.

Command to register an application.
"""
from dataclasses import dataclass
from typing import Optional

from accounts.domain.user import AdminUser


@dataclass
class CreateApplicationCommand:
    """Command to create an application."""

    actor: Optional[AdminUser]
    name: str
