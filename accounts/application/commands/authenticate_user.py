"""
AuthenticateUserCommand.

Command to sign an admin in with email and password.
"""
from dataclasses import dataclass


@dataclass
class AuthenticateUserCommand:
    """Command to authenticate an admin user."""

    email: str
    password: str
