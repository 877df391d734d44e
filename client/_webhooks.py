"""Slack incoming-webhook posts.

This is an internal module and should not be imported directly by users.
"""

from client._base import BaseClient
from client.models import WebhookPayload


class WebhooksClient(BaseClient):
    """Posts messages through incoming webhooks."""

    def post_message(self, path: str, payload: WebhookPayload) -> None:
        """Post one message.

        Args:
            path: Webhook path, ``/<team_id>/<incoming_token>``.
            payload: The message to post.

        Raises:
            SlackClientError: On transport errors, timeouts, or any status
                other than 200.
        """
        self._post(path, json=payload.to_json())
