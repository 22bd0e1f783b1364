# ABOUTME: Main package for the Melbourne gig guide mailing tool.
# ABOUTME: Exports settings access and the core domain models.

from gig_guide.config import get_settings
from gig_guide.models import ContentLogEntry, Coordinate, EventRecord, ScoredEvent, Subscriber

__all__ = [
    "get_settings",
    "ContentLogEntry",
    "Coordinate",
    "EventRecord",
    "ScoredEvent",
    "Subscriber",
]
