"""In-memory ETag store for conditional GitHub requests."""

import asyncio
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CachedResponse:
    """Last ETag seen for a URL and the body it was served with."""

    etag: str
    body: Any


class RevalidationCache:
    """Coroutine-safe URL -> ETag map.

    Entries are never evicted: the key space is bounded by the distinct
    GitHub URLs the process actually requests. Writes to the same URL are
    last-write-wins.
    """

    def __init__(self) -> None:
        """Initialize empty cache."""
        self._entries: dict[str, CachedResponse] = {}
        self._lock = asyncio.Lock()

    async def get(self, url: str) -> CachedResponse | None:
        """Get the cached entry for a URL."""
        async with self._lock:
            return self._entries.get(url)

    async def get_etag(self, url: str) -> str | None:
        """Get the ETag to send as If-None-Match for a URL."""
        entry = await self.get(url)
        return entry.etag if entry else None

    async def store(self, url: str, etag: str, body: Any) -> None:
        """Record the ETag and body for a URL, replacing any previous entry."""
        async with self._lock:
            self._entries[url] = CachedResponse(etag=etag, body=body)

    async def clear(self) -> int:
        """Drop all entries. Returns count of removed items."""
        async with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count

    def __contains__(self, url: object) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)
