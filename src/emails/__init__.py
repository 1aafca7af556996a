"""
EventMail content engine.

Generates marketing-email slots from event data, validates them, and
merges them into HTML templates with placeholders and conditional blocks.

For CLI usage:
    python -m src.emails.cli types
    python -m src.emails.cli generate event.json --type announce
    python -m src.emails.cli render template.html output.json
"""

from .config import EngineConfig
from .errors import (
    DuplicateEventId,
    DuplicateSlug,
    EventMailError,
    MalformedOutput,
    MissingEvent,
    MissingRequiredField,
    MissingSelection,
    TemplateSyntaxError,
)
from .generator import generate, generate_email
from .models import (
    UTM_MEDIUM,
    UTM_SOURCE,
    ContentType,
    EmailOutput,
    Event,
    UTMParams,
    ValidationError,
)
from .renderer import DEFAULT_TEMPLATE, render_as_plaintext, render_template
from .store import EventStore
from .strategies import STRATEGY_REGISTRY, ContentStrategy, get_strategy
from .validator import (
    DEFAULT_RULES,
    EXTENDED_RULES,
    ValidationRule,
    Validator,
    min_length_rule,
    validate,
)

__all__ = [
    # Configuration
    "EngineConfig",
    # Models
    "ContentType",
    "Event",
    "EmailOutput",
    "UTMParams",
    "ValidationError",
    "UTM_SOURCE",
    "UTM_MEDIUM",
    # Errors
    "EventMailError",
    "MissingRequiredField",
    "DuplicateSlug",
    "DuplicateEventId",
    "MalformedOutput",
    "MissingSelection",
    "MissingEvent",
    "TemplateSyntaxError",
    # Store
    "EventStore",
    # Validation
    "ValidationRule",
    "Validator",
    "DEFAULT_RULES",
    "EXTENDED_RULES",
    "min_length_rule",
    "validate",
    # Generation
    "ContentStrategy",
    "STRATEGY_REGISTRY",
    "get_strategy",
    "generate",
    "generate_email",
    # Rendering
    "DEFAULT_TEMPLATE",
    "render_template",
    "render_as_plaintext",
]
