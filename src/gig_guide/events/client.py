# ABOUTME: Async client for the live music events API.
# ABOUTME: Uses httpx with a bounded timeout and tenacity retries, falling back to mock gigs.

from datetime import date, timedelta
from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from gig_guide.config import Settings, get_settings
from gig_guide.events.mock import mock_events
from gig_guide.models import EventRecord

log = structlog.get_logger()

QUERY_PATH = "/gigs/query"


class EventFetch(BaseModel):
    """Events for one query, and whether they came from the mock set."""

    events: list[EventRecord]
    used_mock: bool = False


class EventsClient:
    """Fetches gigs by date and location. Never fails: errors yield the mock set."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialized HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.events_api_base_url,
                timeout=self.settings.events_timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "EventsClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def fetch_events(self, on_date: date) -> EventFetch:
        """Fetch gigs for on_date (plus events_days_ahead).

        Falls back to the mock gigs on timeout, transport error, non-2xx
        status, undecodable body, or an empty result.
        """
        date_to = on_date + timedelta(days=self.settings.events_days_ahead)
        params = {
            "location": self.settings.events_location,
            "date_from": on_date.isoformat(),
            "date_to": date_to.isoformat(),
        }
        log.debug("fetching_events", **params)

        try:
            payload = await self._get(params)
        except (httpx.HTTPError, ValueError) as e:
            log.warning("events_api_unavailable", error=str(e), date=on_date.isoformat())
            return EventFetch(events=mock_events(), used_mock=True)

        events = self._parse(payload)
        if not events:
            log.warning("events_api_empty", date=on_date.isoformat())
            return EventFetch(events=mock_events(), used_mock=True)

        log.info("events_fetched", count=len(events), date=on_date.isoformat())
        return EventFetch(events=events)

    async def _get(self, params: dict[str, str]) -> Any:
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(self.settings.events_api_attempts),
            wait=wait_exponential(multiplier=self.settings.events_retry_backoff, max=10),
            before_sleep=lambda retry_state: log.warning(
                "events_api_retry",
                attempt=retry_state.attempt_number,
                wait=retry_state.next_action.sleep,
            ),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                response = await self.client.get(QUERY_PATH, params=params)
                response.raise_for_status()
                return response.json()

    def _parse(self, payload: Any) -> list[EventRecord]:
        if not isinstance(payload, list):
            log.warning("events_payload_not_list", type=type(payload).__name__)
            return []

        events: list[EventRecord] = []
        for item in payload:
            try:
                events.append(EventRecord.model_validate(item))
            except ValidationError as e:
                log.warning("event_record_invalid", error=str(e))
        return events
