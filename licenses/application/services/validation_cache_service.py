"""
Validation cache service.

Caches key validation responses for client applications. Entries are
keyed by key value and day, so a cached answer never outlives the day it
was computed for, and they are invalidated whenever the key changes.
"""
import hashlib
import logging
import uuid
from datetime import date
from typing import Iterable, Optional

from core.infrastructure.cache import CachePort
from core.infrastructure.cache_adapters import cache_adapter
from licenses.application.dto.license_key_dto import KeyValidationDTO

logger = logging.getLogger(__name__)

CACHE_TTL_KEY_VALIDATION = 60  # 1 minute


class ValidationCacheService:
    """Service for caching key validation responses."""

    def __init__(self, cache: Optional[CachePort] = None):
        """Initialize service with a cache port (the Django cache by default)."""
        self.cache = cache or cache_adapter

    @staticmethod
    def _validation_key(key_value: str, today: date) -> str:
        """Generate cache key for a validation response."""
        key_hash = hashlib.sha256(key_value.encode()).hexdigest()[:16]
        return f"license:validation:{key_hash}:{today.isoformat()}"

    async def get(self, key_value: str, today: date) -> Optional[KeyValidationDTO]:
        """
        Get a cached validation response.

        Args:
            key_value: Validated key
            today: Day the response was computed for

        Returns:
            Cached KeyValidationDTO or None
        """
        cached = await self.cache.get(self._validation_key(key_value, today))
        if cached is None:
            return None
        license_key_id = cached.get("license_key_id")
        return KeyValidationDTO(
            status=cached["status"],
            info=cached["info"],
            result=cached["result"],
            license_key_id=uuid.UUID(license_key_id) if license_key_id else None,
        )

    async def set(self, key_value: str, today: date, response: KeyValidationDTO) -> None:
        """
        Cache a validation response.

        Args:
            key_value: Validated key
            today: Day the response was computed for
            response: KeyValidationDTO to cache
        """
        await self.cache.set(
            self._validation_key(key_value, today),
            {
                "status": response.status,
                "info": response.info,
                "result": response.result,
                "license_key_id": str(response.license_key_id) if response.license_key_id else None,
            },
            timeout=CACHE_TTL_KEY_VALIDATION,
        )

    async def invalidate(self, key_values: Iterable[str], today: date) -> None:
        """
        Invalidate cached responses for the given key values.

        Args:
            key_values: Key values whose responses changed
            today: Current day
        """
        keys = [self._validation_key(value, today) for value in set(key_values) if value]
        if keys:
            await self.cache.delete_many(keys)
            logger.info("Invalidated %d validation cache entr(ies)", len(keys))
