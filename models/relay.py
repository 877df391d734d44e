"""The relay: verification, enrichment and forwarding of inbound messages.

A ``Relay`` bundles the read-only tables built at startup with the steps
applied to each inbound message. It is created once by ``build_relay`` and
injected into the ingress route.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Iterable

from models.channel import ChannelGroupTable
from models.exceptions import ConfigurationError, UserLookupError
from models.forwarder import DEFAULT_MAX_WORKERS, Forwarder, ForwardResult
from models.mentions import MentionRewriter
from models.message import RelayMessage
from models.team import TeamRegistry
from models.tokens import OutboundTokenTable

if TYPE_CHECKING:
    from client.client import SlackClient
    from models.config import RelaySettings

logger = logging.getLogger(__name__)

DEFAULT_IGNORED_USERNAMES = frozenset({"slackbot"})


class RelayOutcome(str, Enum):
    """What happened to an inbound message."""

    REJECTED = "rejected"
    IGNORED = "ignored"
    FORWARDED = "forwarded"


class Relay:
    """Handles inbound messages for a fixed configuration.

    Attributes:
        registry: Configured teams.
        groups: Channel group table.
        tokens: Outbound token table.
        ignored_usernames: Senders whose messages are never relayed.
    """

    def __init__(
        self,
        registry: TeamRegistry,
        groups: ChannelGroupTable,
        tokens: OutboundTokenTable,
        forwarder: Forwarder,
        ignored_usernames: Iterable[str] = DEFAULT_IGNORED_USERNAMES,
    ):
        self.registry = registry
        self.groups = groups
        self.tokens = tokens
        self.ignored_usernames = frozenset(ignored_usernames)
        self._rewriter = MentionRewriter(registry)
        self._forwarder = forwarder

    def handle(self, message: RelayMessage, token: str) -> tuple[RelayOutcome, ForwardResult | None]:
        """Verify, enrich and forward one inbound message.

        Args:
            message: The decoded inbound message.
            token: Token presented by the outgoing webhook.

        Returns:
            The outcome, and the forwarding result when the message was
            forwarded.
        """
        if not self.tokens.verify(message.channel, token):
            logger.warning(f"Incorrect webhook token for {message.channel}, message dropped")
            return RelayOutcome.REJECTED, None

        if message.username in self.ignored_usernames:
            logger.debug(f"Ignoring message from {message.username} in {message.channel}")
            return RelayOutcome.IGNORED, None

        self.fetch_avatar(message)
        self._rewriter.rewrite(message)
        return RelayOutcome.FORWARDED, self._forwarder.forward(message)

    def fetch_avatar(self, message: RelayMessage) -> RelayMessage:
        """Set ``message.icon_url`` from the sender's Slack profile.

        Failure leaves the avatar unset and is only logged.
        """
        team_id = message.channel.team_id
        try:
            if message.user_id:
                user = self.registry.get_user(team_id, message.user_id)
            else:
                user = self.registry.find_user(team_id, message.username)
        except UserLookupError as e:
            logger.warning(f"No avatar for {message.username} in {team_id}: {e.reason}")
            return message

        message.icon_url = user.profile.best_image
        return message


def build_relay(settings: "RelaySettings", slack: "SlackClient") -> Relay:
    """Assemble a relay from parsed settings.

    Args:
        settings: Validated relay settings.
        slack: Slack client used for lookups and webhook posts.

    Returns:
        The ready-to-use relay.

    Raises:
        ConfigurationError: If the configuration is inconsistent, e.g. a
            channel is grouped twice or belongs to an unknown team.
    """
    registry = TeamRegistry(settings.teams, slack.users)
    groups = ChannelGroupTable.from_groups(settings.channel_groups)

    for channel in groups.channels():
        if channel.team_id not in registry:
            raise ConfigurationError(f"{channel} belongs to unconfigured team '{channel.team_id}'")

    tokens = OutboundTokenTable(settings.outbound_tokens)
    forwarder = Forwarder(
        groups,
        registry,
        slack.webhooks,
        max_workers=settings.max_workers or DEFAULT_MAX_WORKERS,
    )

    logger.info(
        f"Relay configured with {len(registry)} teams, {len(groups)} channel groups "
        f"and {len(tokens)} outbound tokens"
    )
    return Relay(registry, groups, tokens, forwarder, settings.ignored_usernames)
