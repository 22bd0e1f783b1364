# ABOUTME: Proximity selection of events around a subscriber.
# ABOUTME: Filters by radius, orders nearest-first, and bounds the list size.

from collections.abc import Sequence

import structlog

from gig_guide.geo import distance_km
from gig_guide.models import Coordinate, EventRecord, ScoredEvent

log = structlog.get_logger()


def select_nearby(
    events: Sequence[EventRecord],
    origin: Coordinate,
    radius_km: float,
    max_count: int,
) -> list[ScoredEvent]:
    """Select events within radius_km of origin, nearest first.

    Events whose venue lacks usable coordinates are dropped. Ties keep their
    input order (sorted() is stable). Returns at most max_count events and
    may return an empty list.
    """
    scored: list[ScoredEvent] = []
    skipped = 0
    for event in events:
        location = event.venue.coordinate
        if location is None:
            skipped += 1
            continue
        distance = distance_km(origin, location)
        if distance <= radius_km:
            scored.append(ScoredEvent.from_event(event, distance))

    nearby = sorted(scored, key=lambda item: item.distance_km)[: max(max_count, 0)]
    log.debug(
        "events_selected",
        candidates=len(events),
        skipped_no_coordinates=skipped,
        nearby=len(nearby),
        radius_km=radius_km,
    )
    return nearby


def select_fallback(events: Sequence[EventRecord], max_count: int) -> list[ScoredEvent]:
    """First max_count events in input order, with no distance.

    Used when nothing is nearby so subscribers in sparse areas still get a guide.
    """
    return [ScoredEvent.from_event(event) for event in events[: max(max_count, 0)]]
