"""
FastAPI dependency injection for EventMail.

Provides the event store, engine config, and validator as injectable
dependencies.
"""

import logging
from functools import lru_cache

from src.emails import (
    DEFAULT_RULES,
    EXTENDED_RULES,
    EngineConfig,
    EventStore,
    Validator,
)

from .config import AppConfig, get_app_config

logger = logging.getLogger(__name__)

_store: EventStore | None = None


@lru_cache
def get_config() -> AppConfig:
    """Return cached application config."""
    return get_app_config()


def get_demo_mode() -> bool:
    """Return whether app is running in demo mode."""
    return get_config().demo_mode


def get_event_store() -> EventStore:
    """Return the process-wide event store.

    Uses the store created at app startup via lifespan. Falls back to
    creating an empty one if needed.
    """
    global _store
    if _store is None:
        logger.warning("Event store not initialized by lifespan, creating an empty one")
        _store = EventStore(unique_slugs=get_config().unique_slugs)
    return _store


def set_event_store(store: EventStore | None) -> None:
    """Set the event store (used by lifespan and tests)."""
    global _store
    _store = store


def get_engine_config() -> EngineConfig:
    """Return the content engine config for the configured site."""
    return EngineConfig(base_url=get_config().base_url)


def get_validator() -> Validator:
    """Return the validator for the configured rule set."""
    if get_config().strict_validation:
        return Validator(EXTENDED_RULES)
    return Validator(DEFAULT_RULES)
