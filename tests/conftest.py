"""
Shared test fixtures for the EventMail test suite.

Provides isolated event stores, sample events, and engine configs.
"""

import itertools

import pytest

from src.emails import EngineConfig, Event, EventStore


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def id_factory():
    """Deterministic event ids: evt-1, evt-2, ..."""
    counter = itertools.count(1)
    return lambda: f"evt-{next(counter)}"


@pytest.fixture
def store(id_factory) -> EventStore:
    """Empty store with predictable ids."""
    return EventStore(id_factory=id_factory)


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def conf_event() -> Event:
    """Minimal event with a three-session program."""
    return Event(
        id="evt-conf",
        name="Conf",
        slug="conf",
        date="1 May",
        program="A(10:00),B(14:00),C(16:00)",
    )


@pytest.fixture
def full_event() -> Event:
    """Event with every text field filled, using ', ' separators."""
    return Event(
        id="evt-full",
        name="AI Conference 2024",
        slug="ai-conf-2024",
        date="15 December 2024",
        program=(
            "Keynote: The Future of AI (10:00), Workshop: Practical ML (14:00), "
            "Panel: AI Ethics (16:00), Closing (18:00)"
        ),
        speakers="Anna Petrova (CEO AI Labs), Dmitry Smirnov (ML Engineer), Elena Ivanova",
        pains="Hard to bring AI into the business, not enough data, high costs",
        rag_links="https://docs.google.com/document/d/abc",
        html_template="<p>{{headline}}</p>",
    )


@pytest.fixture
def empty_program_event() -> Event:
    """Event carrying only the required fields."""
    return Event(id="evt-bare", name="Bare Meetup", slug="bare-meetup")


@pytest.fixture
def engine_config() -> EngineConfig:
    return EngineConfig(base_url="https://events.example.org")
