"""
Email content generation.

Turns an event plus a content type into an EmailOutput: the strategy
fills the text slots, shared slots (agenda, speakers, CTA link, UTM
fields) are derived here, length limits are applied by truncation, and
validation issues are attached as data rather than raised.
"""

import logging

from .config import EngineConfig
from .errors import MissingEvent, MissingSelection
from .models import ContentType, EmailOutput, Event, UTMParams
from .store import EventStore
from .strategies import get_strategy
from .validator import Validator

logger = logging.getLogger("eventmail.generator")


def _present(text: str) -> str | None:
    """Copy a block field, or None when it is empty or only whitespace.

    A whitespace-only program is also what the validator reports as
    ``missing_required_fact``, so the two always agree.
    """
    return text if text.strip() else None


def build_cta_url(base_url: str, slug: str) -> str:
    return f"{base_url.rstrip('/')}/events/{slug}"


def generate(
    event: Event,
    content_type: ContentType | str,
    topic: str | None = None,
    config: EngineConfig | None = None,
    validator: Validator | None = None,
) -> EmailOutput:
    """Generate email slots for an event.

    The result depends only on the arguments: no clock, no randomness.

    Args:
        event: Source event.
        content_type: Marketing angle (enum member or its string value).
        topic: Optional extra topic, appended to the intro when not blank.
        config: Engine configuration (base URL, length limits).
        validator: Rule set to run; defaults to the baseline rules.

    Returns:
        A fully populated EmailOutput, with any validation issues in
        ``errors``.
    """
    config = config or EngineConfig()
    validator = validator or Validator()
    content_type = ContentType(content_type)

    slots = get_strategy(content_type).build(event)

    intro = slots.intro
    if topic and topic.strip():
        intro = f"{intro} Topic in focus: {topic.strip()}."

    output = EmailOutput(
        subject=slots.subject[: config.subject_max_length],
        preheader=slots.preheader[: config.preheader_max_length],
        headline=slots.headline,
        intro=intro,
        pain_point=slots.pain_point,
        value_proposition=slots.value_proposition,
        agenda_block=_present(event.program),
        speakers_block=_present(event.speakers),
        offer=slots.offer,
        cta_text=slots.cta_text,
        cta_url=build_cta_url(config.base_url, event.slug),
        utm_params=UTMParams.for_event(event, content_type),
    )
    output.errors = validator.validate(event, content_type, output, config)

    logger.info(
        f"Generated {content_type.value} email for event {event.id} "
        f"({len(output.errors)} validation issue(s))"
    )
    return output


def generate_email(
    store: EventStore,
    event_id: str | None,
    content_type: ContentType | str,
    topic: str | None = None,
    config: EngineConfig | None = None,
    validator: Validator | None = None,
) -> EmailOutput:
    """Resolve an event by id and generate its email.

    Raises:
        MissingSelection: no event id was supplied.
        MissingEvent: the id does not resolve to a stored event.
    """
    if not event_id:
        logger.warning("Generation requested without an event id")
        raise MissingSelection()

    event = store.get(event_id)
    if event is None:
        logger.warning(f"Generation requested for unknown event {event_id}")
        raise MissingEvent(event_id)

    return generate(event, content_type, topic, config=config, validator=validator)
