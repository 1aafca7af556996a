"""
Content validation rules for generated emails.

Rules are plain data: a slot name, a check, and a reason code. The
generator never knows which rules exist, so new checks are added by
extending a rule tuple, not by editing generation code.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from urllib.parse import urlparse

from .config import EngineConfig
from .models import ContentType, EmailOutput, Event, ValidationError

logger = logging.getLogger("eventmail.validator")

MISSING_REQUIRED_FACT = "missing_required_fact"
INVALID_URL = "invalid_url"
BELOW_MIN_LENGTH = "below_min_length"

Check = Callable[[Event, ContentType, EmailOutput | None, EngineConfig], bool]


@dataclass(frozen=True)
class ValidationRule:
    """A single check. ``check`` returns True when the rule is violated."""

    slot: str
    check: Check
    reason: str


def _program_missing(
    event: Event, content_type: ContentType, output: EmailOutput | None, config: EngineConfig
) -> bool:
    return not event.program.strip()


def _cta_url_invalid(
    event: Event, content_type: ContentType, output: EmailOutput | None, config: EngineConfig
) -> bool:
    if output is None:
        return False
    parsed = urlparse(output.cta_url)
    return parsed.scheme not in ("http", "https") or not parsed.netloc


def min_length_rule(slot: str, min_length: int | None = None) -> ValidationRule:
    """Flag a generated text slot shorter than ``min_length`` characters.

    Without an explicit ``min_length`` the limit is read from the engine
    config at check time, as ``<slot>_min_length``.
    """

    def check(
        event: Event, content_type: ContentType, output: EmailOutput | None, config: EngineConfig
    ) -> bool:
        if output is None:
            return False
        limit = min_length if min_length is not None else getattr(config, f"{slot}_min_length")
        return len(getattr(output, slot) or "") < limit

    return ValidationRule(slot, check, BELOW_MIN_LENGTH)


DEFAULT_RULES: tuple[ValidationRule, ...] = (
    ValidationRule("program", _program_missing, MISSING_REQUIRED_FACT),
)

EXTENDED_RULES: tuple[ValidationRule, ...] = DEFAULT_RULES + (
    ValidationRule("cta_url", _cta_url_invalid, INVALID_URL),
    min_length_rule("preheader"),
)


class Validator:
    """Runs a fixed rule set and reports violations in rule order."""

    def __init__(self, rules: Sequence[ValidationRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def validate(
        self,
        event: Event,
        content_type: ContentType,
        output: EmailOutput | None = None,
        config: EngineConfig | None = None,
    ) -> list[ValidationError]:
        """Check an event (and optionally its generated output).

        Args:
            event: Source event.
            content_type: Strategy the output was generated with.
            output: Generated email, for rules that inspect slots.
            config: Engine config the output was generated with; rules
                read their limits from it.

        Returns:
            One ValidationError per violated rule, in rule order.
        """
        config = config or EngineConfig()
        errors = [
            ValidationError(slot=rule.slot, reason=rule.reason)
            for rule in self.rules
            if rule.check(event, content_type, output, config)
        ]

        if errors:
            logger.info(
                f"Validation found {len(errors)} issue(s) for event {event.id}: "
                + ", ".join(f"{e.slot}:{e.reason}" for e in errors)
            )
        return errors


def validate(
    event: Event,
    content_type: ContentType,
    output: EmailOutput | None = None,
) -> list[ValidationError]:
    """Validate with the default rule set."""
    return Validator().validate(event, content_type, output)
