"""
Deterministic fixture data for demo mode.

Seeds the event store with a sample conference so the app works out of
the box, without anyone entering events first.
"""

import logging

from src.emails import Event, EventStore

logger = logging.getLogger(__name__)

# =============================================================================
# Event Fixtures
# =============================================================================

_DEMO_TEMPLATE = (
    "<html><body>"
    "<h1>{{headline}}</h1>"
    "<p>{{intro}}</p>"
    "<!--IF:pain_point--><p><em>{{pain_point}}</em></p><!--ENDIF-->"
    "<p>{{value_proposition}}</p>"
    "<!--IF:agenda_block--><h2>Program</h2><p>{{agenda_block}}</p><!--ENDIF-->"
    "<!--IF:speakers_block--><h2>Speakers</h2><p>{{speakers_block}}</p><!--ENDIF-->"
    "<p>{{offer}}</p>"
    '<a href="{{cta_url}}">{{cta_text}}</a>'
    "</body></html>"
)

DEMO_EVENTS: list[dict[str, str]] = [
    {
        "name": "AI Conference 2024",
        "slug": "ai-conf-2024",
        "date": "15 December 2024",
        "program": (
            "Keynote: The Future of AI (10:00), Workshop: Practical ML (14:00), "
            "Panel: AI Ethics (16:00)"
        ),
        "speakers": (
            "Anna Petrova (CEO AI Labs), Dmitry Smirnov (ML Engineer Google), "
            "Elena Ivanova (Data Scientist)"
        ),
        "pains": (
            "Hard to bring AI into the business, not enough data to train models, "
            "high infrastructure costs"
        ),
        "rag_links": "",
        "html_template": "",
    },
    {
        "name": "Data Engineering Summit",
        "slug": "de-summit-2025",
        "date": "20 March 2025",
        "program": "Streaming at scale (11:00), Lakehouse patterns (15:00)",
        "speakers": "Ivan Orlov (Staff Engineer), Maria Kuznetsova (Head of Data)",
        "pains": "Pipelines break silently, nobody trusts the dashboards",
        "rag_links": "https://docs.google.com/document/d/demo-agenda",
        "html_template": _DEMO_TEMPLATE,
    },
]


def seed_demo_events(store: EventStore) -> list[Event]:
    """Add every demo event to the store, in fixture order."""
    events = [store.add(draft) for draft in DEMO_EVENTS]
    logger.info(f"Seeded {len(events)} demo events")
    return events
