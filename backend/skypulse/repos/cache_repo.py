"""
In-memory TTL cache for shaped weather snapshots.
Entries live for a fixed time from insertion and are dropped lazily on lookup
or by `purge_expired()`, which the app runs periodically.
"""
import time
import logging
from typing import Callable, Dict, Optional, Tuple

from skypulse.models.weather_model import WeatherSnapshot
from skypulse.core.logger import logs


class WeatherCache:
    """Process-wide key -> WeatherSnapshot store with a fixed expiry."""

    def __init__(self, ttl_seconds: int = 600, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        # key -> (expires_at, snapshot)
        self._entries: Dict[str, Tuple[float, WeatherSnapshot]] = {}

    def get(self, key: str) -> Optional[WeatherSnapshot]:
        """Return the live snapshot for `key`, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, snapshot = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return snapshot

    def set(self, key: str, value: WeatherSnapshot) -> None:
        """Store `value` under `key`, replacing any previous entry."""
        self._entries[key] = (self._clock() + self.ttl_seconds, value)

    def purge_expired(self) -> int:
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        if expired:
            logs.log(logging.DEBUG, f"Purged {len(expired)} expired weather cache entries")
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
