"""
Applications module - Registry of licensed applications.

This module handles:
- Application entity and domain logic
- Application repository (port)
- Application infrastructure (Django ORM adapters)
"""
