# ABOUTME: Database module initialization.
# ABOUTME: Exports ORM models and session helpers for the persistence layer.

from gig_guide.db.models import Base, ContentLog, Subscriber
from gig_guide.db.session import get_session, init_db

__all__ = [
    "Base",
    "ContentLog",
    "Subscriber",
    "get_session",
    "init_db",
]
