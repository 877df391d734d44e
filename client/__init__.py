"""Slack client library.

A small synchronous client for the two Slack surfaces the relay talks to:
Web API user lookups and incoming-webhook posts.

Example:
    Looking up a user::

        from client import SlackClient

        with SlackClient() as slack:
            user = slack.users.info("xoxb-...", "U0001")
            print(user.name, user.profile.best_image)

Exports:
    SlackClient: Client holding the users and webhooks sub-clients.

    Exceptions:
        SlackClientError: Base exception for all client errors.
        ConnectionError: Failed to reach Slack.
        TimeoutError: Request timed out.
        APIError: Slack answered with a non-200 status.
        NotFoundError: HTTP 404.
        ServerError: HTTP 5xx.
        SlackAPIError: A Web API method answered ``"ok": false``.
"""

from client._users import UsersClient
from client._webhooks import WebhooksClient
from client.client import SlackClient
from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    SlackAPIError,
    SlackClientError,
    TimeoutError,
)
from client.models import SlackProfile, SlackUser, WebhookPayload

__all__ = [
    # Main client
    "SlackClient",
    "UsersClient",
    "WebhooksClient",
    # Models
    "SlackProfile",
    "SlackUser",
    "WebhookPayload",
    # Exceptions
    "SlackClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "NotFoundError",
    "ServerError",
    "SlackAPIError",
]
