# ABOUTME: Pydantic models for subscribers, event records, and content logs.
# ABOUTME: Defines Coordinate, EventRecord, ScoredEvent, Subscriber, ContentLogEntry schemas.

import math
import re
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gig_guide.languages import SOURCE_LANGUAGE, SUPPORTED_LANGUAGES

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

FREE_TAG = "Free"


def _single_line(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, str):
        return " ".join(value.split())
    return value


class Weekday(str, Enum):
    """Day of week a subscriber receives the guide."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def for_date(cls, value: date) -> "Weekday":
        return list(cls)[value.weekday()]


class SourceKind(str, Enum):
    """How the events in a content log entry were chosen."""

    NEARBY = "nearby"
    FALLBACK_GENERAL = "general"
    ERROR = "error"


class Coordinate(BaseModel):
    """A point on the earth in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class Venue(BaseModel):
    """Venue block of an event record as returned by the events API."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str = ""
    address: str = ""
    latitude: float | None = None
    longitude: float | None = None
    location_url: str | None = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _numeric_or_none(cls, value: Any) -> float | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        return number if math.isfinite(number) else None

    @field_validator("name", "address", mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> Any:
        return _single_line(value)

    @property
    def coordinate(self) -> Coordinate | None:
        """Venue location, or None when the API gave no usable coordinates."""
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class Price(BaseModel):
    """One ticket price entry."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    price: str | None = None


class EventRecord(BaseModel):
    """A gig from the external events API. Read-only to this package."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = "unknown"
    name: str = ""
    venue: Venue = Field(default_factory=Venue)
    start_time: str | None = None
    prices: list[Price] = Field(default_factory=list)
    genre_tags: list[str] = Field(default_factory=list)
    information_tags: list[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _clean_name(cls, value: Any) -> Any:
        return _single_line(value)

    @field_validator("genre_tags", mode="after")
    @classmethod
    def _clean_tags(cls, value: list[str]) -> list[str]:
        return [_single_line(tag) for tag in value]

    @field_validator("venue", mode="before")
    @classmethod
    def _venue_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("prices", "genre_tags", "information_tags", mode="before")
    @classmethod
    def _list_default(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def price(self) -> str | None:
        """First listed price, if any."""
        if self.prices and self.prices[0].price:
            return self.prices[0].price
        return None

    @property
    def is_free(self) -> bool:
        return FREE_TAG in self.information_tags


class ScoredEvent(EventRecord):
    """Event record with its distance from the subscriber.

    distance_km is None for events chosen by the general fallback.
    """

    distance_km: float | None = Field(default=None, ge=0)

    @classmethod
    def from_event(cls, event: EventRecord, distance_km: float | None = None) -> "ScoredEvent":
        return cls(**event.model_dump(exclude={"distance_km"}), distance_km=distance_km)


def _normalize_languages(value: list[str]) -> list[str]:
    codes: list[str] = []
    for raw in value:
        code = raw.strip()
        if not code or code in codes:
            continue
        if code not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {code}")
        codes.append(code)
    if not codes:
        raise ValueError("At least one language is required")
    if SOURCE_LANGUAGE not in codes:
        codes.insert(0, SOURCE_LANGUAGE)
    return codes


def _normalize_days(value: list[Weekday]) -> list[Weekday]:
    days: list[Weekday] = []
    for day in value:
        if day not in days:
            days.append(day)
    if not days:
        raise ValueError("At least one send day is required")
    return days


def _normalize_email(value: str) -> str:
    email = value.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise ValueError(f"Invalid email address: {value}")
    return email


def _normalize_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise ValueError("Name is required")
    return name


class SubscriberCreate(BaseModel):
    """Validated input for a new subscriber."""

    name: str
    email: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    languages: list[str] = Field(default_factory=lambda: [SOURCE_LANGUAGE])
    send_days: list[Weekday]
    active: bool = True

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return _normalize_name(value)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return _normalize_email(value)

    @field_validator("languages")
    @classmethod
    def _check_languages(cls, value: list[str]) -> list[str]:
        return _normalize_languages(value)

    @field_validator("send_days")
    @classmethod
    def _check_days(cls, value: list[Weekday]) -> list[Weekday]:
        return _normalize_days(value)


class SubscriberUpdate(BaseModel):
    """Partial update of a subscriber. Omitted fields are left unchanged."""

    name: str | None = None
    email: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    languages: list[str] | None = None
    send_days: list[Weekday] | None = None
    active: bool | None = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str | None) -> str | None:
        return None if value is None else _normalize_name(value)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str | None) -> str | None:
        return None if value is None else _normalize_email(value)

    @field_validator("languages")
    @classmethod
    def _check_languages(cls, value: list[str] | None) -> list[str] | None:
        return None if value is None else _normalize_languages(value)

    @field_validator("send_days")
    @classmethod
    def _check_days(cls, value: list[Weekday] | None) -> list[Weekday] | None:
        return None if value is None else _normalize_days(value)


class Subscriber(BaseModel):
    """A mailing-list member with a home location and language preferences."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    languages: list[str] = Field(default_factory=lambda: [SOURCE_LANGUAGE])
    send_days: list[Weekday]
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("languages")
    @classmethod
    def _check_languages(cls, value: list[str]) -> list[str]:
        return _normalize_languages(value)

    @field_validator("send_days")
    @classmethod
    def _check_days(cls, value: list[Weekday]) -> list[Weekday]:
        return _normalize_days(value)

    @property
    def location(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    def is_scheduled_on(self, day: date) -> bool:
        """Whether this subscriber is active and receives the guide on the given day."""
        return self.active and Weekday.for_date(day) in self.send_days


class ContentLogEntry(BaseModel):
    """Record of one generation call. Immutable once created."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    subscriber_id: str
    generated_date: date
    event_ids: list[str] = Field(default_factory=list)
    source_kind: SourceKind
    used_mock_events: bool = False
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def content_preview(self) -> str:
        """First 100 characters of the content."""
        return self.content[:100]


class GenerationDetail(BaseModel):
    """Outcome of generation for one subscriber within a batch."""

    subscriber_id: str
    name: str
    success: bool
    content_id: str | None = None
    source_kind: SourceKind | None = None
    error: str | None = None


class BatchResult(BaseModel):
    """Aggregate outcome of generating content for many subscribers."""

    success: int = 0
    failed: int = 0
    details: list[GenerationDetail] = Field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Generated content for {self.success} subscribers ({self.failed} failed)"
