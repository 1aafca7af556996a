"""
In-memory event store.

Events live for the lifetime of the process only. Each store is an
independent object, so the web app, the CLI, and tests can hold
isolated instances.
"""

import logging
import threading
import uuid
from collections.abc import Callable, Mapping
from typing import Any

from .errors import DuplicateEventId, DuplicateSlug, MissingRequiredField
from .models import EVENT_TEXT_FIELDS, Event

logger = logging.getLogger("eventmail.store")

REQUIRED_FIELDS = ("name", "slug")


def _new_event_id() -> str:
    return uuid.uuid4().hex


class EventStore:
    """Append-only collection of events keyed by id.

    Slug uniqueness is not enforced unless ``unique_slugs`` is set; by
    default two events may share a slug (and therefore a CTA route and
    UTM campaign).
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = _new_event_id,
        unique_slugs: bool = False,
    ):
        self._events: dict[str, Event] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory
        self.unique_slugs = unique_slugs

    def __len__(self) -> int:
        return len(self._events)

    def add(self, draft: Mapping[str, Any]) -> Event:
        """Create an event from a partial draft.

        Args:
            draft: Mapping with any of the event text fields. Missing
                optional fields default to an empty string.

        Returns:
            The stored Event.

        Raises:
            MissingRequiredField: ``name`` or ``slug`` is empty or blank.
            DuplicateSlug: slug already used and ``unique_slugs`` is on.
            DuplicateEventId: the id factory returned an id already stored.
        """
        values = {name: str(draft.get(name) or "") for name in EVENT_TEXT_FIELDS}

        for name in REQUIRED_FIELDS:
            if not values[name].strip():
                logger.warning(f"Rejected event draft: missing {name}")
                raise MissingRequiredField(name)

        with self._lock:
            if self.unique_slugs and any(
                e.slug == values["slug"] for e in self._events.values()
            ):
                logger.warning(f"Rejected event draft: duplicate slug {values['slug']}")
                raise DuplicateSlug(values["slug"])

            event_id = self._id_factory()
            if event_id in self._events:
                logger.error(f"Id factory returned an id already in use: {event_id}")
                raise DuplicateEventId(event_id)

            event = Event(id=event_id, **values)
            self._events[event.id] = event

        logger.info(f"Event added: {event.name} (id={event.id}, slug={event.slug})")
        return event

    def list(self) -> list[Event]:
        """Return a snapshot of all events in insertion order."""
        with self._lock:
            return list(self._events.values())

    def get(self, event_id: str) -> Event | None:
        return self._events.get(event_id)
