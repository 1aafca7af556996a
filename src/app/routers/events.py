"""Event API endpoints — create and list events."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from src.emails import EventStore

from ..dependencies import get_event_store
from ..schemas import EventCreate, EventResponse
from ..services import event_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=list[EventResponse])
async def get_events(
    store: EventStore = Depends(get_event_store),
) -> list[EventResponse]:
    """Get all events in creation order."""
    data = event_service.list_events(store)
    return [EventResponse(**d) for d in data]


@router.post("", response_model=EventResponse, status_code=201)
async def create_event(
    request: EventCreate,
    store: EventStore = Depends(get_event_store),
) -> EventResponse:
    """Create a new event. ``name`` and ``slug`` are required."""
    data = event_service.create_event(store, request.model_dump())
    return EventResponse(**data)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    store: EventStore = Depends(get_event_store),
) -> EventResponse:
    """Get a single event by ID."""
    data = event_service.get_event(store, event_id)
    if data is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return EventResponse(**data)
