"""Unit tests for API dependency injection.

This module tests the dependency injection providers in api/dependencies.py,
including relay initialization, retrieval, shutdown, and error handling.

Test Organization:
- get_relay tests - retrieval behavior and error handling
- initialize_relay tests - relay creation from settings
- shutdown_relay tests - cleanup behavior
"""

import pytest

import api.dependencies as deps
from api.dependencies import get_relay, initialize_relay, shutdown_relay
from models.exceptions import ConfigurationError
from models.relay import Relay
from tests.fixtures.core import T1_C1, T2_C2, create_settings, create_team


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_relay():
    """Reset the global relay state before and after each test.

    This ensures tests are isolated and don't affect each other.
    """
    deps._relay = None
    deps._slack = None

    yield

    shutdown_relay()


# =============================================================================
# get_relay Tests
# =============================================================================


class TestGetRelay:
    """Tests for get_relay dependency function."""

    def test_raises_runtime_error_when_not_initialized(self):
        """Test that RuntimeError is raised when the relay is not initialized."""
        with pytest.raises(RuntimeError) as exc_info:
            get_relay()

        assert "Relay not initialized" in str(exc_info.value)
        assert "initialize_relay()" in str(exc_info.value)

    def test_returns_relay_after_initialization(self, settings, fake_slack):
        initialize_relay(settings, transport=fake_slack.transport())

        assert isinstance(get_relay(), Relay)

    def test_returns_same_instance_on_multiple_calls(self, settings, fake_slack):
        initialize_relay(settings, transport=fake_slack.transport())

        assert get_relay() is get_relay()


# =============================================================================
# initialize_relay Tests
# =============================================================================


class TestInitializeRelay:
    """Tests for initialize_relay."""

    def test_returns_the_shared_relay(self, settings, fake_slack):
        relay = initialize_relay(settings, transport=fake_slack.transport())

        assert relay is get_relay()
        assert len(relay.registry) == 3
        assert len(relay.groups) == 2

    def test_replaces_previous_relay(self, settings, fake_slack):
        first = initialize_relay(settings, transport=fake_slack.transport())
        second = initialize_relay(settings, transport=fake_slack.transport())

        assert first is not second
        assert get_relay() is second

    def test_loads_settings_when_omitted(self, monkeypatch, fake_slack):
        monkeypatch.setattr(
            deps,
            "load_settings",
            lambda: create_settings(channel_groups=[[T1_C1, T2_C2]], outbound_tokens={T1_C1: "a"}),
        )

        relay = initialize_relay(transport=fake_slack.transport())

        assert len(relay.registry) == 3
        assert len(relay.groups) == 1

    def test_configuration_error_leaves_no_relay(self, fake_slack):
        settings = create_settings(teams=[create_team("T1")])

        with pytest.raises(ConfigurationError):
            initialize_relay(settings, transport=fake_slack.transport())

        assert deps._relay is None
        assert deps._slack is None


# =============================================================================
# shutdown_relay Tests
# =============================================================================


class TestShutdownRelay:
    """Tests for shutdown_relay."""

    def test_clears_relay(self, settings, fake_slack):
        initialize_relay(settings, transport=fake_slack.transport())

        shutdown_relay()

        with pytest.raises(RuntimeError):
            get_relay()

    def test_safe_when_not_initialized(self):
        shutdown_relay()
        shutdown_relay()

        assert deps._relay is None
