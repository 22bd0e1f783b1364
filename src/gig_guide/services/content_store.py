# ABOUTME: Storage interface for content log entries and an in-memory implementation.
# ABOUTME: The database repository and the in-memory store both satisfy ContentLogStore.

import asyncio
from typing import Protocol

from gig_guide.models import ContentLogEntry


class ContentLogStore(Protocol):
    """Append-only store the content generator writes to."""

    async def create(self, entry: ContentLogEntry) -> ContentLogEntry: ...

    async def get_by_id(self, entry_id: str) -> ContentLogEntry | None: ...

    async def list_recent(
        self, limit: int = 100, subscriber_id: str | None = None
    ) -> list[ContentLogEntry]: ...

    async def delete_by_id(self, entry_id: str) -> bool: ...


class InMemoryContentLogStore:
    """Process-local content log store, used for previews and tests."""

    def __init__(self) -> None:
        self._entries: dict[str, ContentLogEntry] = {}
        self._lock = asyncio.Lock()

    async def create(self, entry: ContentLogEntry) -> ContentLogEntry:
        async with self._lock:
            self._entries[entry.id] = entry
        return entry

    async def get_by_id(self, entry_id: str) -> ContentLogEntry | None:
        return self._entries.get(entry_id)

    async def list_recent(
        self, limit: int = 100, subscriber_id: str | None = None
    ) -> list[ContentLogEntry]:
        entries = [
            entry
            for entry in self._entries.values()
            if subscriber_id is None or entry.subscriber_id == subscriber_id
        ]
        entries.sort(key=lambda entry: (entry.generated_date, entry.created_at), reverse=True)
        return entries[:limit]

    async def delete_by_id(self, entry_id: str) -> bool:
        async with self._lock:
            return self._entries.pop(entry_id, None) is not None
