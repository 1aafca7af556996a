"""
Exception types raised by the EventMail core.

Structural problems (missing ids, missing required fields, broken
templates) are raised. Content-quality problems are never raised; they
travel as ``ValidationError`` records inside ``EmailOutput.errors``.
"""


class EventMailError(Exception):
    """Base class for all EventMail failures."""


class MissingRequiredField(EventMailError):
    """An event draft is missing ``name`` or ``slug``."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required field is empty: {field}")


class DuplicateSlug(EventMailError):
    """Slug already taken while the store enforces unique slugs."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"An event with slug '{slug}' already exists")


class DuplicateEventId(EventMailError):
    """The id factory produced an id that is already stored."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"An event with id '{event_id}' already exists")


class MalformedOutput(EventMailError):
    """A serialized EmailOutput cannot be rebuilt."""


class MissingSelection(EventMailError):
    """Generation was requested without an event id."""

    def __init__(self):
        super().__init__("No event selected")


class MissingEvent(EventMailError):
    """The supplied event id does not resolve to a stored event."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event not found: {event_id}")


class TemplateSyntaxError(EventMailError):
    """Unmatched or nested conditional markers in an HTML template."""

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)
