# ABOUTME: Renders nearby events and subscriber identity into a structured bulletin.
# ABOUTME: Picks the scene description, builds event blocks with labels and QR references.

import random
import threading
from collections.abc import Callable, Sequence
from datetime import date

import structlog

from gig_guide.bulletin.models import Bulletin, EventBlock
from gig_guide.bulletin.text import (
    PRICE_FREE,
    PRICE_UNKNOWN,
    TIME_UNKNOWN,
    distance_label,
    format_bulletin,
)
from gig_guide.config import Settings, get_settings
from gig_guide.models import ScoredEvent, Subscriber
from gig_guide.qr import QRCodeService

log = structlog.get_logger()

DESCRIPTIONS = (
    "Melbourne's vibrant live music scene offers everything from intimate jazz clubs to "
    "stadium rock concerts. With over 460 live music venues, it's one of the world's "
    "leading music cities.",
    "Melbourne has a thriving live music culture, with venues ranging from historic pubs to "
    "modern performance spaces. The city hosts more live music venues per capita than any "
    "other city in the world.",
    "Known as Australia's music capital, Melbourne's live scene spans genres from indie rock "
    "and electronic to jazz and classical. The city's diverse venues create a unique "
    "cultural tapestry for music lovers.",
    "Melbourne's iconic music scene has launched countless careers and attracts global acts "
    "year-round. With venues scattered across unique neighborhoods, each offering its own "
    "musical flavor and atmosphere.",
)

DescriptionChooser = Callable[[Sequence[str]], str]


class RoundRobinDescriptions:
    """Deterministic description chooser cycling through the pool in order."""

    def __init__(self) -> None:
        self._index = 0
        self._lock = threading.Lock()

    def __call__(self, pool: Sequence[str]) -> str:
        with self._lock:
            choice = pool[self._index % len(pool)]
            self._index += 1
        return choice


def format_date_label(value: date) -> str:
    """Long US-style date, e.g. 'Monday, October 19, 2026'."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


class BulletinRenderer:
    """Builds the English bulletin for one subscriber."""

    def __init__(
        self,
        settings: Settings | None = None,
        qr: QRCodeService | None = None,
        choose_description: DescriptionChooser | None = None,
        descriptions: Sequence[str] = DESCRIPTIONS,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.settings = settings or get_settings()
        self.qr = qr or QRCodeService(self.settings)
        self.descriptions = descriptions
        self.clock = clock
        if choose_description is not None:
            self.choose_description = choose_description
        elif self.settings.description_mode == "round_robin":
            self.choose_description = RoundRobinDescriptions()
        else:
            self.choose_description = random.choice

    def render(self, events: Sequence[ScoredEvent], subscriber: Subscriber) -> Bulletin:
        """Build the structured bulletin, capped at max_gigs_per_bulletin events."""
        capped = list(events)[: self.settings.max_gigs_per_bulletin]
        bulletin = Bulletin(
            date_label=format_date_label(self.clock()),
            description=self.choose_description(self.descriptions),
            events=[self.build_block(index + 1, event) for index, event in enumerate(capped)],
            subscriber_name=subscriber.name,
            subscriber_email=subscriber.email,
        )
        log.debug("bulletin_rendered", subscriber_id=subscriber.id, events=len(bulletin.events))
        return bulletin

    def render_text(self, events: Sequence[ScoredEvent], subscriber: Subscriber) -> str:
        return format_bulletin(self.render(events, subscriber))

    def build_block(self, ordinal: int, event: ScoredEvent) -> EventBlock:
        map_url = self.map_url(event)
        return EventBlock(
            ordinal=ordinal,
            name=event.name,
            venue_name=event.venue.name,
            distance_label=distance_label(event.distance_km),
            address=event.venue.address,
            time_label=event.start_time or TIME_UNKNOWN,
            price_label=price_label(event),
            genre_label=", ".join(event.genre_tags) or None,
            map_url=map_url,
            qr_ref=self.qr.reference(map_url),
        )

    def map_url(self, event: ScoredEvent) -> str:
        """Venue map link: the API's link, else a coordinate search, else the default."""
        if event.venue.location_url:
            return event.venue.location_url
        location = event.venue.coordinate
        if location is not None:
            return f"{self.settings.default_map_url}/?q={location.latitude},{location.longitude}"
        return self.settings.default_map_url


def price_label(event: ScoredEvent) -> str:
    """Explicit price, else 'Free' for free-tagged gigs, else 'Check venue'."""
    if event.price:
        return event.price
    if event.is_free:
        return PRICE_FREE
    return PRICE_UNKNOWN
