"""Models for data exchanged with Slack.

Only the fields the relay uses are modelled; everything else Slack sends is
ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class SlackProfile(BaseModel):
    """The profile part of a Slack user object."""

    model_config = ConfigDict(extra="ignore")

    display_name: str = ""
    real_name: str = ""
    image_original: str | None = None
    image_192: str | None = None
    image_72: str | None = None

    @property
    def best_image(self) -> str | None:
        """Largest available avatar URL.

        ``image_original`` only exists for users who uploaded a custom
        picture.
        """
        return self.image_original or self.image_192 or self.image_72


class SlackUser(BaseModel):
    """A Slack user as returned by ``users.info`` and ``users.list``."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    deleted: bool = False
    profile: SlackProfile = Field(default_factory=SlackProfile)


class WebhookPayload(BaseModel):
    """Body posted to an incoming webhook.

    Attributes:
        channel: Destination channel id.
        username: Name to post as.
        text: Message text.
        icon_url: Avatar to post with; omitted when unset.
        link_names: Ask Slack to turn ``@name`` into real mentions.
    """

    channel: str
    username: str
    text: str
    icon_url: str | None = None
    link_names: bool = True

    def to_json(self) -> dict:
        return self.model_dump(exclude_none=True)
