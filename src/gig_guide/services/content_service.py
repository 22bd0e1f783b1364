# ABOUTME: Content generation workflow for one subscriber or a batch of subscribers.
# ABOUTME: Fetches events, selects nearby gigs, renders and templates bulletins, logs content.

import asyncio
from collections.abc import Sequence
from datetime import date

import structlog

from gig_guide.bulletin.editions import compose_editions
from gig_guide.bulletin.renderer import BulletinRenderer
from gig_guide.config import Settings, get_settings
from gig_guide.events.client import EventFetch, EventsClient
from gig_guide.events.mock import mock_events
from gig_guide.models import (
    BatchResult,
    ContentLogEntry,
    GenerationDetail,
    SourceKind,
    Subscriber,
)
from gig_guide.selection import select_fallback, select_nearby
from gig_guide.services.content_store import ContentLogStore
from gig_guide.templating.engine import PhraseTemplatingEngine

log = structlog.get_logger()

ERROR_PLACEHOLDER = (
    "Error generating content: {error}\n\n"
    "This is a placeholder content that was generated because an error occurred "
    "during the normal content generation process."
)


class ContentGenerator:
    """Generates and stores gig guide content for subscribers.

    Generation never fails for a subscriber: unexpected errors are stored
    as an error-tagged content log entry instead.
    """

    def __init__(
        self,
        store: ContentLogStore,
        events_client: EventsClient | None = None,
        renderer: BulletinRenderer | None = None,
        engine: PhraseTemplatingEngine | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.store = store
        self.events_client = events_client or EventsClient(self.settings)
        self.renderer = renderer or BulletinRenderer(self.settings)
        self.engine = engine or PhraseTemplatingEngine(
            source_language=self.settings.source_language
        )
        self._store_lock = asyncio.Lock()

    async def close(self) -> None:
        await self.events_client.close()

    async def __aenter__(self) -> "ContentGenerator":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def generate_for_subscriber(
        self,
        subscriber: Subscriber,
        generated_date: date | None = None,
        fetch: EventFetch | None = None,
    ) -> ContentLogEntry:
        """Generate, store, and return the content log entry for one subscriber.

        Args:
            subscriber: Recipient of the guide.
            generated_date: Date the events are queried for. Defaults to today.
            fetch: Events already fetched for this date, shared across a batch.
        """
        generated_date = generated_date or date.today()
        log.info(
            "generating_content", subscriber_id=subscriber.id, date=generated_date.isoformat()
        )

        try:
            if fetch is None:
                fetch = await self.events_client.fetch_events(generated_date)
            entry = self.build_entry(subscriber, generated_date, fetch)
        except Exception as e:
            log.exception("content_generation_failed", subscriber_id=subscriber.id)
            entry = ContentLogEntry(
                subscriber_id=subscriber.id,
                generated_date=generated_date,
                event_ids=[],
                source_kind=SourceKind.ERROR,
                content=ERROR_PLACEHOLDER.format(error=e),
            )

        async with self._store_lock:
            stored = await self.store.create(entry)

        log.info(
            "content_generated",
            subscriber_id=subscriber.id,
            content_id=stored.id,
            source_kind=stored.source_kind.value,
            events=len(stored.event_ids),
        )
        return stored

    def build_entry(
        self, subscriber: Subscriber, generated_date: date, fetch: EventFetch
    ) -> ContentLogEntry:
        """Select events, render the bulletin in every subscriber language."""
        events = fetch.events
        used_mock = fetch.used_mock
        if not events:
            events = mock_events()
            used_mock = True

        cap = self.settings.max_gigs_per_bulletin
        selected = select_nearby(
            events, subscriber.location, self.settings.proximity_radius_km, cap
        )
        source_kind = SourceKind.NEARBY
        if not selected:
            log.info("no_nearby_events", subscriber_id=subscriber.id, candidates=len(events))
            selected = select_fallback(events, cap)
            source_kind = SourceKind.FALLBACK_GENERAL

        text = self.renderer.render_text(selected, subscriber)
        content = compose_editions(self.engine.editions(text, subscriber.languages))

        return ContentLogEntry(
            subscriber_id=subscriber.id,
            generated_date=generated_date,
            event_ids=[event.id for event in selected],
            source_kind=source_kind,
            used_mock_events=used_mock,
            content=content,
        )

    async def generate_for_subscribers(
        self, subscribers: Sequence[Subscriber], generated_date: date | None = None
    ) -> BatchResult:
        """Generate content for many subscribers with a bounded worker pool.

        Events are fetched once for the whole batch. Error-tagged entries
        count as failures; one failure never stops the rest.
        """
        generated_date = generated_date or date.today()
        if not subscribers:
            return BatchResult()

        try:
            fetch: EventFetch | None = await self.events_client.fetch_events(generated_date)
        except Exception:
            log.exception("batch_event_fetch_failed", date=generated_date.isoformat())
            fetch = None

        semaphore = asyncio.Semaphore(max(1, self.settings.generation_concurrency))

        async def run(subscriber: Subscriber) -> GenerationDetail:
            async with semaphore:
                try:
                    entry = await self.generate_for_subscriber(subscriber, generated_date, fetch)
                except Exception as e:
                    log.exception("content_store_failed", subscriber_id=subscriber.id)
                    return GenerationDetail(
                        subscriber_id=subscriber.id,
                        name=subscriber.name,
                        success=False,
                        error=str(e),
                    )
            succeeded = entry.source_kind != SourceKind.ERROR
            return GenerationDetail(
                subscriber_id=subscriber.id,
                name=subscriber.name,
                success=succeeded,
                content_id=entry.id,
                source_kind=entry.source_kind,
                error=None if succeeded else entry.content.split("\n", 1)[0],
            )

        details = await asyncio.gather(*(run(subscriber) for subscriber in subscribers))
        result = BatchResult(
            success=sum(1 for detail in details if detail.success),
            failed=sum(1 for detail in details if not detail.success),
            details=list(details),
        )
        log.info("batch_generation_complete", success=result.success, failed=result.failed)
        return result

    async def generate_scheduled(
        self, subscribers: Sequence[Subscriber], generated_date: date | None = None
    ) -> BatchResult:
        """Generate for active subscribers whose send days include the date's weekday."""
        generated_date = generated_date or date.today()
        scheduled = [s for s in subscribers if s.is_scheduled_on(generated_date)]
        log.info(
            "scheduled_subscribers",
            date=generated_date.isoformat(),
            scheduled=len(scheduled),
            total=len(subscribers),
        )
        return await self.generate_for_subscribers(scheduled, generated_date)
