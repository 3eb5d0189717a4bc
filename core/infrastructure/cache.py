"""
Cache abstraction (port).

This module defines the cache interface that can be implemented
with different backends (Redis, in-memory, etc.).
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional


class CachePort(ABC):
    """
    Abstract cache port.

    Cache failures never break a request: implementations log them and
    behave as a miss.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """
        Get a value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        """
        Set a value in cache.

        Args:
            key: Cache key
            value: Value to cache
            timeout: Timeout in seconds (None for the backend default)
        """
        pass

    @abstractmethod
    async def delete_many(self, keys: List[str]) -> None:
        """
        Delete several values from cache.

        Args:
            keys: Cache keys
        """
        pass
