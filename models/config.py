"""Relay settings loaded from the environment.

Configuration format::

    SLACKLINE_TEAMS=TEAM_ID:API_TOKEN:INCOMING_TOKEN,...
    SLACKLINE_CHANNEL_MAP=TID/CID:TID/CID:TID/CID,...
    SLACKLINE_OUTBOUND_TOKENS=TID/CID:OUTGOING_TOKEN,...

Incoming tokens have the form ``Bxxxxxxx/xxxxxxxxxxxxxxx``. In the channel
map, commas separate groups and colons separate the channels of a group.
A ``.env`` file in the working directory is honoured.
"""

import os
from typing import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from client.client import DEFAULT_API_URL, DEFAULT_WEBHOOK_URL
from models.channel import Channel
from models.exceptions import ConfigurationError
from models.relay import DEFAULT_IGNORED_USERNAMES
from models.team import Team


def _items(value: str) -> list[str]:
    """Split a comma-separated list, dropping blank items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_teams(value: str) -> list[Team]:
    """Parse ``SLACKLINE_TEAMS``."""
    return [Team.parse(item) for item in _items(value)]


def parse_channel_groups(value: str) -> list[list[Channel]]:
    """Parse ``SLACKLINE_CHANNEL_MAP`` into one channel list per group."""
    return [[Channel.parse(part) for part in item.split(":")] for item in _items(value)]


def parse_outbound_tokens(value: str) -> dict[Channel, str]:
    """Parse ``SLACKLINE_OUTBOUND_TOKENS``.

    Raises:
        ConfigurationError: If an entry is malformed or a channel is listed
            twice.
    """
    tokens: dict[Channel, str] = {}
    for item in _items(value):
        parts = item.split(":")
        if len(parts) != 2 or not parts[1]:
            raise ConfigurationError(
                f"Malformed outbound token for '{parts[0]}', expected TEAM/CHANNEL:TOKEN"
            )
        channel = Channel.parse(parts[0])
        if channel in tokens:
            raise ConfigurationError(f"Outbound token for {channel} configured more than once")
        tokens[channel] = parts[1]
    return tokens


class RelaySettings(BaseModel):
    """Everything the relay needs to start.

    Attributes:
        teams: Configured teams.
        channel_groups: Channels that mirror each other, one list per group.
        outbound_tokens: Secret each channel's outgoing webhook presents.
        port: Port to serve on, when run as a server.
        delivery_timeout: Timeout in seconds for each Slack request.
        max_workers: Upper bound on concurrent deliveries per message.
        ignored_usernames: Senders whose messages are never relayed.
        api_url: Base URL of the Slack Web API.
        webhook_url: Base URL of Slack incoming webhooks.
        log_level: Root log level.
    """

    teams: list[Team]
    channel_groups: list[list[Channel]]
    outbound_tokens: dict[Channel, str]
    port: int | None = Field(default=None, ge=1, le=65535)
    delivery_timeout: float = Field(default=10.0, gt=0)
    max_workers: int = Field(default=8, ge=1)
    ignored_usernames: list[str] = Field(default_factory=lambda: sorted(DEFAULT_IGNORED_USERNAMES))
    api_url: str = DEFAULT_API_URL
    webhook_url: str = DEFAULT_WEBHOOK_URL
    log_level: str = "INFO"

    @field_validator("api_url", "webhook_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"${name} must be set")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> RelaySettings:
    """Build settings from environment variables.

    Args:
        environ: Variables to read. Defaults to ``os.environ`` after loading
            a ``.env`` file, if present.

    Returns:
        The parsed settings.

    Raises:
        ConfigurationError: If a required variable is missing or any value
            is malformed.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    optional = {
        "port": environ.get("PORT"),
        "delivery_timeout": environ.get("SLACKLINE_DELIVERY_TIMEOUT"),
        "max_workers": environ.get("SLACKLINE_MAX_WORKERS"),
        "api_url": environ.get("SLACKLINE_API_URL"),
        "webhook_url": environ.get("SLACKLINE_WEBHOOK_URL"),
        "log_level": environ.get("SLACKLINE_LOG_LEVEL"),
    }
    if environ.get("SLACKLINE_IGNORED_USERS") is not None:
        optional["ignored_usernames"] = _items(environ["SLACKLINE_IGNORED_USERS"])

    try:
        return RelaySettings(
            teams=parse_teams(_require(environ, "SLACKLINE_TEAMS")),
            channel_groups=parse_channel_groups(_require(environ, "SLACKLINE_CHANNEL_MAP")),
            outbound_tokens=parse_outbound_tokens(_require(environ, "SLACKLINE_OUTBOUND_TOKENS")),
            **{key: value for key, value in optional.items() if value not in (None, "")},
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid relay settings: {e}") from e
