"""
Core module for shared domain infrastructure.

This module contains:
- Domain events, exceptions and value objects
- Event bus, cache and event handlers
- Middleware components (observability, metrics, acting admin)
- Health checks and management commands
"""
