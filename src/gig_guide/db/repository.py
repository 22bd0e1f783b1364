# ABOUTME: Repository classes for database access patterns.
# ABOUTME: Provides SubscriberRepository and ContentLogRepository for CRUD operations.

from collections.abc import Sequence
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from gig_guide.db.models import ContentLog, Subscriber
from gig_guide.models import ContentLogEntry


class SubscriberRepository:
    """Repository for Subscriber CRUD operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, subscriber: Subscriber) -> Subscriber:
        """Save a subscriber (insert or update)."""
        self.session.add(subscriber)
        await self.session.flush()
        return subscriber

    async def get_by_id(self, subscriber_id: str) -> Subscriber | None:
        """Get subscriber by ID."""
        return await self.session.get(Subscriber, subscriber_id)

    async def get_by_email(self, email: str) -> Subscriber | None:
        """Get subscriber by email address."""
        result = await self.session.execute(select(Subscriber).where(Subscriber.email == email))
        return result.scalar_one_or_none()

    async def list_all(self) -> Sequence[Subscriber]:
        """List all subscribers ordered by name."""
        result = await self.session.execute(select(Subscriber).order_by(Subscriber.name))
        return result.scalars().all()

    async def list_active(self) -> Sequence[Subscriber]:
        """List active subscribers ordered by creation time."""
        result = await self.session.execute(
            select(Subscriber)
            .where(Subscriber.active == True)  # noqa: E712
            .order_by(Subscriber.created_at)
        )
        return result.scalars().all()

    async def delete_by_id(self, subscriber_id: str) -> bool:
        """Delete subscriber and their content logs. Returns True if deleted."""
        await self.session.execute(
            delete(ContentLog).where(ContentLog.subscriber_id == subscriber_id)
        )
        result = await self.session.execute(
            delete(Subscriber).where(Subscriber.id == subscriber_id)
        )
        return result.rowcount > 0


class ContentLogRepository:
    """Repository for ContentLog records. Entries are created once, never updated."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: ContentLogEntry) -> ContentLogEntry:
        """Persist a content log entry."""
        self.session.add(
            ContentLog(
                id=entry.id,
                subscriber_id=entry.subscriber_id,
                generated_date=entry.generated_date,
                event_ids=list(entry.event_ids),
                source_kind=entry.source_kind.value,
                used_mock_events=entry.used_mock_events,
                content=entry.content,
                created_at=entry.created_at,
            )
        )
        await self.session.flush()
        return entry

    async def get_by_id(self, entry_id: str) -> ContentLogEntry | None:
        """Get content log entry by ID."""
        row = await self.session.get(ContentLog, entry_id)
        return ContentLogEntry.model_validate(row) if row else None

    async def list_recent(
        self, limit: int = 100, subscriber_id: str | None = None
    ) -> list[ContentLogEntry]:
        """List entries newest first, optionally for one subscriber."""
        query = select(ContentLog)
        if subscriber_id:
            query = query.where(ContentLog.subscriber_id == subscriber_id)
        query = query.order_by(ContentLog.generated_date.desc(), ContentLog.created_at.desc())
        result = await self.session.execute(query.limit(limit))
        return [ContentLogEntry.model_validate(row) for row in result.scalars().all()]

    async def get_latest_for_subscriber(self, subscriber_id: str) -> ContentLogEntry | None:
        """Most recent entry for a subscriber."""
        entries = await self.list_recent(limit=1, subscriber_id=subscriber_id)
        return entries[0] if entries else None

    async def list_by_date(self, generated_date: date) -> list[ContentLogEntry]:
        """All entries generated for a date."""
        result = await self.session.execute(
            select(ContentLog)
            .where(ContentLog.generated_date == generated_date)
            .order_by(ContentLog.created_at)
        )
        return [ContentLogEntry.model_validate(row) for row in result.scalars().all()]

    async def delete_by_id(self, entry_id: str) -> bool:
        """Delete an entry. Returns True if deleted."""
        result = await self.session.execute(delete(ContentLog).where(ContentLog.id == entry_id))
        return result.rowcount > 0
