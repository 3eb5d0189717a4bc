"""
ValidateLicenseKeyQuery.

Query a client application sends to check a key.
"""
from dataclasses import dataclass


@dataclass
class ValidateLicenseKeyQuery:
    """Query to validate a key value."""

    key_value: str
