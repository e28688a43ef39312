"""In-memory cache of resolved special-case versions.

Entries are keyed by special-case token and are reclaimable: each carries an
expiry and is dropped lazily the next time a lookup walks past it. The cache
is bounded and evicts its oldest entries when full.

Not thread-safe. A cache shared between threads needs external locking.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from fxdeps.constants import Constants

from .models import ArtifactCoordinate


@dataclass
class CacheEntry:
    """A resolved coordinate and the token it was resolved from."""

    coordinate: ArtifactCoordinate
    token: str
    expires_at: float
    created_at: float = field(default_factory=time.time)

    def is_expired(self, now: Optional[float] = None) -> bool:
        """Check whether this entry has been reclaimed."""
        return (now if now is not None else time.time()) > self.expires_at


class ArtifactCache:
    """Token -> ArtifactCoordinate cache, first writer wins."""

    def __init__(self, max_entries: Optional[int] = None, ttl: Optional[float] = None):
        """Initialize the cache.

        Args:
            max_entries: Capacity before oldest entries are evicted.
            ttl: Seconds an entry stays valid.
        """
        self._max_entries = max_entries if max_entries is not None else Constants.CACHE_MAX_ENTRIES
        self._ttl = ttl if ttl is not None else Constants.CACHE_TTL_SEC
        self._entries: Dict[str, CacheEntry] = {}

    def lookup(self, token: Optional[str]) -> Tuple[bool, Optional[ArtifactCoordinate]]:
        """Find the coordinate cached for ``token``.

        Walks all entries, pruning reclaimed ones on the way. Literal
        versions (no token) are never served from the cache.

        Returns:
            Tuple of (found, coordinate_or_none).
        """
        if not token:
            return False, None

        now = time.time()
        found: Optional[CacheEntry] = None
        for key in list(self._entries):
            entry = self._entries[key]
            if entry.is_expired(now):
                del self._entries[key]
                continue
            if found is None and entry.token == token:
                found = entry

        if found is None:
            return False, None
        return True, found.coordinate

    def store(self, token: Optional[str], coordinate: ArtifactCoordinate) -> bool:
        """Cache ``coordinate`` for ``token`` unless a live entry already exists.

        Returns:
            True when the entry was inserted.
        """
        if not token:
            return False

        now = time.time()
        existing = self._entries.get(token)
        if existing is not None and not existing.is_expired(now):
            return False

        self._entries[token] = CacheEntry(
            coordinate=coordinate, token=token, expires_at=now + self._ttl, created_at=now
        )
        if len(self._entries) > self._max_entries:
            self._evict_oldest(len(self._entries) - self._max_entries)
        return True

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        now = time.time()
        expired = sum(1 for e in self._entries.values() if e.is_expired(now))
        return {
            "total_entries": len(self._entries),
            "expired_entries": expired,
            "active_entries": len(self._entries) - expired,
            "max_entries": self._max_entries,
            "ttl": self._ttl,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def _evict_oldest(self, count: int) -> None:
        sorted_keys = sorted(self._entries, key=lambda k: self._entries[k].created_at)
        for key in sorted_keys[:count]:
            del self._entries[key]
