# ABOUTME: Content log routes: browse, delete, and generate gig guide content.
# ABOUTME: Generation endpoints run the content workflow for one or all scheduled subscribers.

from datetime import date

import structlog
from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel

from gig_guide.models import BatchResult, ContentLogEntry
from gig_guide.web.dependencies import ContentGen, ContentLogRepo, SubscriberSvc

router = APIRouter(prefix="/api/content", tags=["content"])
log = structlog.get_logger()


class BatchResponse(BaseModel):
    """Response model for batch generation."""

    message: str
    result: BatchResult


@router.get("/logs", response_model=list[ContentLogEntry])
async def list_logs(
    repo: ContentLogRepo,
    limit: int = Query(default=100, ge=1, le=1000),
    subscriber_id: str | None = None,
):
    """List content logs, newest first."""
    return await repo.list_recent(limit=limit, subscriber_id=subscriber_id)


@router.get("/logs/{entry_id}", response_model=ContentLogEntry)
async def get_log(entry_id: str, repo: ContentLogRepo):
    """Get one content log entry."""
    entry = await repo.get_by_id(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Content log not found")
    return entry


@router.delete("/logs/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_log(entry_id: str, repo: ContentLogRepo):
    """Delete one content log entry."""
    if not await repo.delete_by_id(entry_id):
        raise HTTPException(status_code=404, detail="Content log not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/subscriber/{subscriber_id}/latest", response_model=ContentLogEntry)
async def latest_for_subscriber(subscriber_id: str, repo: ContentLogRepo):
    """Most recent content generated for a subscriber."""
    entry = await repo.get_latest_for_subscriber(subscriber_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="No content found for subscriber")
    return entry


@router.get("/date/{generated_date}", response_model=list[ContentLogEntry])
async def logs_for_date(generated_date: date, repo: ContentLogRepo):
    """All content generated for a date (YYYY-MM-DD)."""
    return await repo.list_by_date(generated_date)


@router.post("/generate/all", response_model=BatchResponse)
async def generate_all(
    subscribers: SubscriberSvc,
    generator: ContentGen,
    generated_date: date | None = Query(default=None, alias="date"),
):
    """Generate content for every active subscriber scheduled on the date's weekday."""
    generated_date = generated_date or date.today()
    scheduled = await subscribers.list_scheduled(generated_date)
    result = await generator.generate_for_subscribers(scheduled, generated_date)
    return BatchResponse(message=result.message, result=result)


@router.post(
    "/generate/{subscriber_id}",
    response_model=ContentLogEntry,
    status_code=status.HTTP_201_CREATED,
)
async def generate_one(
    subscriber_id: str,
    subscribers: SubscriberSvc,
    generator: ContentGen,
    generated_date: date | None = Query(default=None, alias="date"),
):
    """Generate content for one subscriber."""
    subscriber = await subscribers.get_subscriber(subscriber_id)
    if subscriber is None:
        raise HTTPException(status_code=404, detail="Subscriber not found")
    if not subscriber.active:
        raise HTTPException(status_code=400, detail="Subscriber is not active")
    return await generator.generate_for_subscriber(subscriber, generated_date or date.today())
