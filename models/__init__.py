"""Slackline domain models package.

This package contains the routing core of the relay: channel keys and
groups, teams, inbound token verification, mention rewriting, forwarding,
and the settings the relay is built from.
"""

from models.channel import Channel, ChannelGroupTable
from models.exceptions import ConfigurationError, TeamNotFoundError, UserLookupError
from models.forwarder import Forwarder, ForwardResult
from models.mentions import MentionRewriter
from models.message import RelayMessage
from models.relay import Relay, RelayOutcome, build_relay
from models.team import Team, TeamRegistry
from models.tokens import OutboundTokenTable

__all__ = [
    "Channel",
    "ChannelGroupTable",
    "ConfigurationError",
    "TeamNotFoundError",
    "UserLookupError",
    "Forwarder",
    "ForwardResult",
    "MentionRewriter",
    "RelayMessage",
    "Relay",
    "RelayOutcome",
    "build_relay",
    "Team",
    "TeamRegistry",
    "OutboundTokenTable",
]
