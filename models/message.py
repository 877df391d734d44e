"""The message record carried through the relay."""

from pydantic import BaseModel, Field

from client.models import WebhookPayload
from models.channel import Channel


class RelayMessage(BaseModel):
    """A message received from one channel, to be re-posted to its peers.

    Created per inbound request and mutated in place by the avatar fetch
    and the mention rewriter.

    Args:
        channel: Channel the message was posted in.
        username: Username of the sender.
        text: Message body.
        icon_url: Avatar URL of the sender, once fetched.
        user_id: Slack id of the sender, when the webhook supplied it.
    """

    channel: Channel = Field(description="Channel the message was posted in")
    username: str = Field(description="Username of the sender")
    text: str = Field(default="", description="Message body")
    icon_url: str | None = Field(default=None, description="Avatar URL of the sender")
    user_id: str | None = Field(default=None, description="Slack id of the sender")

    def to_payload(self, destination: Channel) -> WebhookPayload:
        """Build the incoming-webhook payload that posts this message to ``destination``."""
        return WebhookPayload(
            channel=destination.channel_id,
            username=self.username,
            text=self.text,
            icon_url=self.icon_url,
        )
