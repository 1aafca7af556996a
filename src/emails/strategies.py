"""
Content-type strategy definitions.

Pure Python, no templating or I/O. Each content type maps to one slot
builder; generation is fully deterministic: same event always produces
the same slots.

Comma-separated event fields are split on a literal ``,`` with no
escaping and without dropping empty segments, so an item that itself
contains a comma is split in two. This is a data-entry constraint.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .models import ContentType, Event

logger = logging.getLogger("eventmail.strategies")


@dataclass(frozen=True)
class Slots:
    """Text slots a strategy fills; the rest of EmailOutput is shared."""

    subject: str
    preheader: str
    headline: str
    intro: str
    value_proposition: str
    offer: str
    cta_text: str
    pain_point: str | None = None


@dataclass(frozen=True)
class ContentStrategy:
    """A marketing angle: presentation metadata plus its slot builder."""

    content_type: ContentType
    label: str
    description: str
    build: Callable[[Event], Slots]


def split_items(text: str) -> list[str]:
    """Split a comma-separated field exactly as entered."""
    return text.split(",")


# =============================================================================
# Slot Builders
# =============================================================================


def build_announce(event: Event) -> Slots:
    program = split_items(event.program)
    return Slots(
        subject=f"{event.name} — {event.date}",
        preheader="Registration is open for the main event of the year",
        headline=f"{event.name} is coming soon",
        intro=(
            f"We invite you to {event.name}, taking place on {event.date}. "
            "Leading industry experts will share their knowledge and experience."
        ),
        value_proposition=f"The program includes: {','.join(program[:2])}",
        offer="Register now and get access to all materials",
        cta_text="Register",
    )


def build_sale(event: Event) -> Slots:
    sessions = len(split_items(event.program))
    speakers = len(split_items(event.speakers))
    return Slots(
        subject=f"Discount offer for {event.name} until {event.date}",
        preheader="Last days of the special offer",
        headline="Get your ticket at a discount",
        intro=f"{event.name} is a unique chance to learn from the best experts.",
        value_proposition=(
            f"You get: access to {sessions} sessions, networking with "
            f"{speakers} speakers, recordings of all talks"
        ),
        offer="The special price is valid only until the end of the week",
        cta_text="Buy a discounted ticket",
    )


def build_pain_sale(event: Event) -> Slots:
    pain = split_items(event.pains)[0]
    return Slots(
        subject=f"A solution for {pain}",
        preheader="Learn how to overcome the main challenges",
        headline="Sound familiar?",
        intro=f"Many people face the same problem: {pain}.",
        pain_point=(
            f"Without the right approach, {pain} leads to lost time and money. "
            "Every day of delay costs more."
        ),
        value_proposition=(
            f"At {event.name} you will learn proven solutions from experts "
            "who have already walked this path"
        ),
        offer=f"Register before {event.date} and get bonus materials",
        cta_text="Get the solution",
    )


def build_reminder(event: Event) -> Slots:
    program = split_items(event.program)
    return Slots(
        subject=f"Tomorrow: {event.name}!",
        preheader="Don't miss the start of the event",
        headline="See you tomorrow",
        intro=(
            f"A reminder: {event.name} starts on {event.date}. "
            "Please check your registration."
        ),
        value_proposition=f"On the program: {', '.join(program[:3])}",
        offer="Join on time so you don't miss anything important",
        cta_text="Go to the event",
    )


def build_digest(event: Event) -> Slots:
    topics = [item.strip() for item in split_items(event.program)[:3]]
    return Slots(
        subject=f"5 key topics of {event.name}",
        preheader="An overview of the event's main insights",
        headline=f"Highlights from {event.name}",
        intro="We've gathered the key takeaways and ideas from the event for you.",
        value_proposition="• " + "\n• ".join(topics),
        offer="Download the full recording and materials",
        cta_text="Get the materials",
    )


# =============================================================================
# Strategy Registry
# =============================================================================


STRATEGY_REGISTRY: dict[ContentType, ContentStrategy] = {
    ContentType.ANNOUNCE: ContentStrategy(
        content_type=ContentType.ANNOUNCE,
        label="Announcement",
        description="Novelty + value, soft CTA",
        build=build_announce,
    ),
    ContentType.SALE: ContentStrategy(
        content_type=ContentType.SALE,
        label="Sale",
        description="Benefits + proof + deadline",
        build=build_sale,
    ),
    ContentType.PAIN_SALE: ContentStrategy(
        content_type=ContentType.PAIN_SALE,
        label="Pain → Solution",
        description="Pain, escalation, solution chain",
        build=build_pain_sale,
    ),
    ContentType.REMINDER: ContentStrategy(
        content_type=ContentType.REMINDER,
        label="Reminder",
        description="Short: when / where / what you'll miss",
        build=build_reminder,
    ),
    ContentType.DIGEST: ContentStrategy(
        content_type=ContentType.DIGEST,
        label="Digest",
        description="3-5 useful takeaways",
        build=build_digest,
    ),
}


def get_strategy(content_type: ContentType | str) -> ContentStrategy:
    """Look up the strategy for a content type.

    Raises:
        ValueError: ``content_type`` is not a known content type.
    """
    strategy = STRATEGY_REGISTRY[ContentType(content_type)]
    logger.debug(f"Selected strategy: {strategy.label} ({strategy.content_type.value})")
    return strategy
