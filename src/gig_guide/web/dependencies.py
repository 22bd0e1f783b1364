# ABOUTME: FastAPI dependency injection for database sessions and services.
# ABOUTME: Provides reusable dependencies for route handlers.

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gig_guide.config import get_settings
from gig_guide.db.repository import ContentLogRepository, SubscriberRepository
from gig_guide.db.session import get_db_session
from gig_guide.services.content_service import ContentGenerator
from gig_guide.services.subscriber_service import SubscriberService
from gig_guide.templating.engine import PhraseTemplatingEngine

# Type aliases for common dependencies
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_subscriber_repository(
    session: DbSession,
) -> AsyncGenerator[SubscriberRepository]:
    """Get subscriber repository with session."""
    yield SubscriberRepository(session)


SubscriberRepo = Annotated[SubscriberRepository, Depends(get_subscriber_repository)]


async def get_content_log_repository(
    session: DbSession,
) -> AsyncGenerator[ContentLogRepository]:
    """Get content log repository with session."""
    yield ContentLogRepository(session)


ContentLogRepo = Annotated[ContentLogRepository, Depends(get_content_log_repository)]


def get_subscriber_service(repo: SubscriberRepo) -> SubscriberService:
    """Get subscriber service instance."""
    return SubscriberService(repo)


SubscriberSvc = Annotated[SubscriberService, Depends(get_subscriber_service)]


@lru_cache
def get_templating_engine() -> PhraseTemplatingEngine:
    """Process-wide templating engine, sharing one translation cache."""
    return PhraseTemplatingEngine(source_language=get_settings().source_language)


TemplatingEngine = Annotated[PhraseTemplatingEngine, Depends(get_templating_engine)]


async def get_content_generator(
    repo: ContentLogRepo,
    engine: TemplatingEngine,
) -> AsyncGenerator[ContentGenerator]:
    """Get a content generator writing to the request's content log repository."""
    generator = ContentGenerator(store=repo, engine=engine)
    try:
        yield generator
    finally:
        await generator.close()


ContentGen = Annotated[ContentGenerator, Depends(get_content_generator)]
