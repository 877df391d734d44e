"""Shared fixtures for API testing.

These fixtures provide a TestClient whose relay talks to a fresh FakeSlack,
so each test starts from a known configuration.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import initialize_relay, shutdown_relay
from main import app


@pytest.fixture
def test_client(settings, fake_slack):
    """Provide a FastAPI TestClient with an initialized relay.

    The lifespan is not run, so no environment variables are needed.
    Background tasks complete before each request returns.

    Returns:
        A FastAPI TestClient instance.
    """
    initialize_relay(settings, transport=fake_slack.transport())
    yield TestClient(app)
    shutdown_relay()
