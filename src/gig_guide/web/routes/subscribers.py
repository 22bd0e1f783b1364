# ABOUTME: Subscriber management routes.
# ABOUTME: List, read, create, update, and delete subscribers.

import structlog
from fastapi import APIRouter, HTTPException, Response, status

from gig_guide.models import Subscriber, SubscriberCreate, SubscriberUpdate
from gig_guide.web.dependencies import SubscriberSvc

router = APIRouter(prefix="/api/subscribers", tags=["subscribers"])
log = structlog.get_logger()


@router.get("", response_model=list[Subscriber])
async def list_subscribers(service: SubscriberSvc):
    """List all subscribers."""
    return await service.list_subscribers()


@router.get("/{subscriber_id}", response_model=Subscriber)
async def get_subscriber(subscriber_id: str, service: SubscriberSvc):
    """Get a subscriber by ID."""
    subscriber = await service.get_subscriber(subscriber_id)
    if subscriber is None:
        raise HTTPException(status_code=404, detail="Subscriber not found")
    return subscriber


@router.post("", response_model=Subscriber, status_code=status.HTTP_201_CREATED)
async def create_subscriber(data: SubscriberCreate, service: SubscriberSvc):
    """Create a subscriber. Duplicate emails are rejected with 409."""
    try:
        return await service.create_subscriber(data)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e


@router.put("/{subscriber_id}", response_model=Subscriber)
async def update_subscriber(subscriber_id: str, data: SubscriberUpdate, service: SubscriberSvc):
    """Update some or all fields of a subscriber."""
    try:
        subscriber = await service.update_subscriber(subscriber_id, data)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    if subscriber is None:
        raise HTTPException(status_code=404, detail="Subscriber not found")
    return subscriber


@router.delete("/{subscriber_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subscriber(subscriber_id: str, service: SubscriberSvc):
    """Delete a subscriber and their content logs."""
    if not await service.delete_subscriber(subscriber_id):
        raise HTTPException(status_code=404, detail="Subscriber not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
