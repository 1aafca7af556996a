"""Shared fixtures for API endpoint tests."""

import os

import pytest
from fastapi.testclient import TestClient

# Force demo mode and a known site before any app imports
os.environ["DEMO_MODE"] = "true"
os.environ["BASE_URL"] = "https://events.example.org"

from src.app.main import create_app  # noqa: E402


@pytest.fixture(scope="session")
def app():
    """Create a FastAPI app instance in demo mode."""
    return create_app()


@pytest.fixture(scope="session")
def client(app):
    """Provide a TestClient for the demo-mode app."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="session")
def demo_event_ids(client):
    """IDs of the seeded demo events, keyed by slug."""
    return {e["slug"]: e["id"] for e in client.get("/api/v1/events").json()}
