"""Main Slack client class.

Slack serves the Web API and incoming webhooks from different hosts, so the
client holds one HTTP client per host and exposes them through namespaced
sub-clients.

Example:
    Posting a message::

        from client import SlackClient, WebhookPayload

        with SlackClient(timeout=5.0) as slack:
            slack.webhooks.post_message(
                "/T0001/B0001/XXXXXXXX",
                WebhookPayload(channel="C0001", username="alice", text="hi"),
            )
"""

from typing import Any

import httpx

from client._http import DEFAULT_TIMEOUT, HTTPClient
from client._users import UsersClient
from client._webhooks import WebhooksClient

DEFAULT_API_URL = "https://slack.com/api"
DEFAULT_WEBHOOK_URL = "https://hooks.slack.com/services"


class SlackClient:
    """Synchronous client for the parts of Slack the relay uses.

    Attributes:
        users: User lookups through the Web API.
        webhooks: Incoming-webhook posts.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        webhook_url: str = DEFAULT_WEBHOOK_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_url: Base URL of the Web API.
            webhook_url: Base URL of incoming webhooks.
            timeout: Timeout in seconds applied to every request.
            transport: Custom transport shared by both hosts (for testing).
        """
        self._api_http = HTTPClient(api_url, timeout=timeout, transport=transport)
        self._webhook_http = HTTPClient(webhook_url, timeout=timeout, transport=transport)
        self.users = UsersClient(self._api_http)
        self.webhooks = WebhooksClient(self._webhook_http)

    def close(self) -> None:
        """Close both HTTP clients."""
        self._api_http.close()
        self._webhook_http.close()

    def __enter__(self) -> "SlackClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
