"""In-memory page cache with passive TTL expiry.

Entries live for the lifetime of the process and are never deleted: an entry
older than the TTL is simply reported as a miss and overwritten by the next
successful retrieval. Keys are the caller-supplied URL strings, verbatim.

A lock guards the map. It does not deduplicate concurrent retrievals of the
same URL; two simultaneous misses both fetch and the last write wins.
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta

import structlog

from pagereader.models.cache import PageCacheEntry

log = structlog.get_logger()


class Cache:
    """Process-local URL → Markdown cache."""

    def __init__(self, ttl_hours: int = 24) -> None:
        self._ttl = timedelta(hours=ttl_hours)
        self._entries: dict[str, PageCacheEntry] = {}
        self._lock = asyncio.Lock()

    async def get_page(self, url: str) -> PageCacheEntry | None:
        """Return the entry for ``url``, or ``None`` if absent or expired."""
        async with self._lock:
            entry = self._entries.get(url)
        if entry is None:
            return None
        if datetime.now(UTC) - entry.fetched_at >= self._ttl:
            log.debug("cache_expired", url=url, fetched_at=entry.fetched_at.isoformat())
            return None
        return entry

    async def set_page(self, url: str, content: str) -> PageCacheEntry:
        """Store ``content`` for ``url``, replacing any existing entry."""
        now = datetime.now(UTC)
        entry = PageCacheEntry(
            url=url,
            content=content,
            fetched_at=now,
            expires_at=now + self._ttl,
        )
        async with self._lock:
            self._entries[url] = entry
        return entry

    def __len__(self) -> int:
        return len(self._entries)
