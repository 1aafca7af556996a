"""
Event service — create and read stored events.
"""

import logging
from dataclasses import asdict

from src.emails import EventStore

logger = logging.getLogger(__name__)


def list_events(store: EventStore) -> list[dict]:
    """Get all events in insertion order."""
    return [asdict(e) for e in store.list()]


def get_event(store: EventStore, event_id: str) -> dict | None:
    """Get a single event by ID."""
    event = store.get(event_id)
    return asdict(event) if event else None


def create_event(store: EventStore, draft: dict) -> dict:
    """Create a new event. Raises MissingRequiredField / DuplicateSlug."""
    event = store.add(draft)
    return asdict(event)
