"""
Licenses module - License keys and their validity.

This module handles:
- LicenseKey entity and status derivation
- Key validation for client applications
- License key repository (port) and Django ORM adapters
"""
