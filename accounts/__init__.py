"""
Accounts module - Admin users and permissions.

This module handles:
- AdminUser entity and permission checks
- Sign-in with email and password
- User management (create, update, delete, password reset)
"""
