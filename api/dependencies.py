"""Dependency injection providers for the FastAPI application.

The relay is built once when the app starts and is read-only afterwards.
Route handlers receive it through ``RelayDep`` instead of reaching for a
module-level table.
"""

import logging
from typing import Annotated

import httpx
from fastapi import Depends

from client.client import SlackClient
from models.config import RelaySettings, load_settings
from models.relay import Relay, build_relay

logger = logging.getLogger(__name__)

_relay: Relay | None = None
_slack: SlackClient | None = None


def get_relay() -> Relay:
    """Get the shared Relay instance.

    Returns:
        The shared Relay instance.

    Raises:
        RuntimeError: If the relay hasn't been initialized yet.
    """
    if _relay is None:
        raise RuntimeError("Relay not initialized. Call initialize_relay() first.")
    return _relay


def initialize_relay(
    settings: RelaySettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Relay:
    """Build the shared Relay instance.

    Called once when the app starts.

    Args:
        settings: Settings to build from. Loaded from the environment when
            omitted.
        transport: Custom HTTP transport for the Slack client (for testing).

    Returns:
        The newly created Relay.

    Raises:
        ConfigurationError: If the configuration is missing or invalid.
    """
    global _relay, _slack

    if settings is None:
        settings = load_settings()

    slack = SlackClient(
        api_url=settings.api_url,
        webhook_url=settings.webhook_url,
        timeout=settings.delivery_timeout,
        transport=transport,
    )
    try:
        relay = build_relay(settings, slack)
    except Exception:
        slack.close()
        raise

    shutdown_relay()
    _relay, _slack = relay, slack
    return relay


def shutdown_relay() -> None:
    """Drop the shared relay and close its Slack client."""
    global _relay, _slack

    if _slack is not None:
        _slack.close()

    _relay = None
    _slack = None


RelayDep = Annotated[Relay, Depends(get_relay)]
