# ABOUTME: Events API access for gig listings.
# ABOUTME: Exports the async client and the fixed mock event set.

from gig_guide.events.client import EventFetch, EventsClient
from gig_guide.events.mock import mock_events

__all__ = ["EventFetch", "EventsClient", "mock_events"]
