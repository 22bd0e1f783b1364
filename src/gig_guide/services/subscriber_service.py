# ABOUTME: Service for managing gig guide subscribers.
# ABOUTME: Handles creation, updates, deletion, and send-day scheduling lookups.

from datetime import date
from uuid import uuid4

import structlog

from gig_guide.db.models import Subscriber as SubscriberRecord
from gig_guide.db.repository import SubscriberRepository
from gig_guide.models import Subscriber, SubscriberCreate, SubscriberUpdate

log = structlog.get_logger()


class SubscriberService:
    """Service for managing subscribers. Inputs arrive already validated."""

    def __init__(self, repo: SubscriberRepository) -> None:
        self.repo = repo

    async def create_subscriber(self, data: SubscriberCreate) -> Subscriber:
        """Create a new subscriber.

        Raises:
            ValueError: If the email is already registered.
        """
        existing = await self.repo.get_by_email(data.email)
        if existing:
            log.warning("subscriber_exists", email=data.email)
            raise ValueError(f"Email {data.email} is already subscribed")

        record = SubscriberRecord(
            id=str(uuid4()),
            name=data.name,
            email=data.email,
            latitude=data.latitude,
            longitude=data.longitude,
            languages=list(data.languages),
            send_days=[day.value for day in data.send_days],
            active=data.active,
        )
        saved = await self.repo.save(record)
        log.info("subscriber_created", subscriber_id=saved.id, email=saved.email)
        return Subscriber.model_validate(saved)

    async def update_subscriber(
        self, subscriber_id: str, data: SubscriberUpdate
    ) -> Subscriber | None:
        """Apply a partial update. Returns None if the subscriber does not exist.

        Raises:
            ValueError: If the new email belongs to another subscriber.
        """
        record = await self.repo.get_by_id(subscriber_id)
        if record is None:
            return None

        changes = data.model_dump(exclude_none=True)
        if "email" in changes and changes["email"] != record.email:
            other = await self.repo.get_by_email(changes["email"])
            if other is not None and other.id != subscriber_id:
                raise ValueError(f"Email {changes['email']} is already subscribed")
        if "send_days" in changes:
            changes["send_days"] = [day.value for day in data.send_days or []]

        for field, value in changes.items():
            setattr(record, field, value)

        saved = await self.repo.save(record)
        log.info("subscriber_updated", subscriber_id=subscriber_id, fields=sorted(changes))
        return Subscriber.model_validate(saved)

    async def delete_subscriber(self, subscriber_id: str) -> bool:
        deleted = await self.repo.delete_by_id(subscriber_id)
        if deleted:
            log.info("subscriber_deleted", subscriber_id=subscriber_id)
        return deleted

    async def get_subscriber(self, subscriber_id: str) -> Subscriber | None:
        record = await self.repo.get_by_id(subscriber_id)
        return Subscriber.model_validate(record) if record else None

    async def list_subscribers(self) -> list[Subscriber]:
        return [Subscriber.model_validate(record) for record in await self.repo.list_all()]

    async def list_active(self) -> list[Subscriber]:
        return [Subscriber.model_validate(record) for record in await self.repo.list_active()]

    async def list_scheduled(self, day: date) -> list[Subscriber]:
        """Active subscribers whose send days include the weekday of day."""
        return [s for s in await self.list_active() if s.is_scheduled_on(day)]
