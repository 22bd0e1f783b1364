# ABOUTME: Services module initialization.
# ABOUTME: Exports content generation, content log storage, and subscriber management services.

from gig_guide.services.content_service import ContentGenerator
from gig_guide.services.content_store import ContentLogStore, InMemoryContentLogStore
from gig_guide.services.subscriber_service import SubscriberService

__all__ = [
    "ContentGenerator",
    "ContentLogStore",
    "InMemoryContentLogStore",
    "SubscriberService",
]
