"""In-memory cache adapter.

Stores values with an optional time-to-live and logs hits, misses and
evictions for monitoring.
"""

import threading
import time
from typing import Any, Dict, Optional

from langrules.application.ports import CachePort
from langrules.shared.logging import get_logger, get_correlation_id


class InMemoryCache(CachePort):
    """
    In-memory implementation of CachePort.

    A ``default_ttl_seconds`` of 0 keeps entries until they are deleted.
    """

    def __init__(self, default_ttl_seconds: int = 3600):
        """
        Initialize in-memory cache.

        Args:
            default_ttl_seconds: Default time-to-live for cached entries
        """
        self._logger = get_logger("infrastructure.cache")
        self._cache: Dict[str, Dict[str, Any]] = {}
        self._default_ttl = default_ttl_seconds
        self._lock = threading.Lock()

        self._logger.info(
            "cache_initialized",
            implementation="in_memory",
            default_ttl_seconds=default_ttl_seconds,
            correlation_id=get_correlation_id(),
        )

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._logger.debug("cache_miss", cache_key=key, correlation_id=get_correlation_id())
                return None

            current_time = time.time()
            if entry["expires_at"] is not None and entry["expires_at"] <= current_time:
                del self._cache[key]
                self._logger.debug(
                    "cache_expired",
                    cache_key=key,
                    expired_at=entry["expires_at"],
                    correlation_id=get_correlation_id(),
                )
                return None

        self._logger.debug(
            "cache_hit",
            cache_key=key,
            age_seconds=current_time - entry["stored_at"],
            correlation_id=get_correlation_id(),
        )
        return entry["value"]

    def put(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl
        current_time = time.time()
        with self._lock:
            self._cache[key] = {
                "value": value,
                "stored_at": current_time,
                "expires_at": current_time + ttl if ttl else None,
            }
            total = len(self._cache)

        self._logger.debug(
            "cache_stored",
            cache_key=key,
            ttl_seconds=ttl,
            total_cached_entries=total,
            correlation_id=get_correlation_id(),
        )

    def delete(self, key: str) -> None:
        with self._lock:
            removed = self._cache.pop(key, None) is not None
        self._logger.debug(
            "cache_invalidated",
            cache_key=key,
            removed=removed,
            correlation_id=get_correlation_id(),
        )

    def cleanup_expired_entries(self) -> int:
        """
        Remove expired entries.

        Returns:
            Number of entries removed
        """
        current_time = time.time()
        with self._lock:
            expired_keys = [
                key
                for key, entry in self._cache.items()
                if entry["expires_at"] is not None and entry["expires_at"] <= current_time
            ]
            for key in expired_keys:
                del self._cache[key]
            remaining = len(self._cache)

        self._logger.info(
            "cache_cleanup_completed",
            expired_entries=len(expired_keys),
            remaining_entries=remaining,
            correlation_id=get_correlation_id(),
        )
        return len(expired_keys)

    def __len__(self) -> int:
        return len(self._cache)
