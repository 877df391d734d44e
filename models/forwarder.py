"""Fan-out of a verified message to every peer channel in its group.

Each peer is delivered independently on a thread pool. A failure for one
peer is logged and recorded in the result; it never stops delivery to the
others and never propagates to the caller. Deliveries are not retried.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from pydantic import BaseModel, Field

from client._webhooks import WebhooksClient
from client.exceptions import SlackClientError
from models.channel import Channel, ChannelGroupTable
from models.exceptions import TeamNotFoundError
from models.message import RelayMessage
from models.team import TeamRegistry

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


class ForwardResult(BaseModel):
    """Outcome of forwarding one message.

    Attributes:
        origin: Channel the message came from.
        delivered: Peers the message was posted to.
        failed: Error description per peer that could not be reached.
    """

    origin: Channel
    delivered: list[Channel] = Field(default_factory=list)
    failed: dict[Channel, str] = Field(default_factory=dict)

    @property
    def attempted(self) -> int:
        return len(self.delivered) + len(self.failed)


class Forwarder:
    """Posts a message to every other channel of its group.

    Args:
        groups: Channel group table used to find peers.
        registry: Team registry holding each destination's webhook secret.
        webhooks: Client that performs the webhook posts.
        max_workers: Upper bound on concurrent deliveries.
    """

    def __init__(
        self,
        groups: ChannelGroupTable,
        registry: TeamRegistry,
        webhooks: WebhooksClient,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._groups = groups
        self._registry = registry
        self._webhooks = webhooks
        self._max_workers = max_workers

    def targets(self, channel: Channel) -> list[Channel]:
        """Return the channels a message from ``channel`` is delivered to."""
        return [peer for peer in self._groups.peers_of(channel) if peer != channel]

    def forward(self, message: RelayMessage) -> ForwardResult:
        """Deliver ``message`` to each peer of its origin channel.

        Args:
            message: A verified, already rewritten message.

        Returns:
            Which peers were reached and which failed.
        """
        result = ForwardResult(origin=message.channel)
        peers = self.targets(message.channel)
        if not peers:
            logger.debug(f"{message.channel} has no peers, nothing to forward")
            return result

        if len(peers) == 1:
            outcomes = [self._deliver(message, peers[0])]
        else:
            workers = min(self._max_workers, len(peers))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="forward") as pool:
                outcomes = list(pool.map(lambda peer: self._deliver(message, peer), peers))

        for peer, error in zip(peers, outcomes):
            if error is None:
                result.delivered.append(peer)
            else:
                result.failed[peer] = error

        logger.info(
            f"Forwarded message from {message.channel}: "
            f"{len(result.delivered)} delivered, {len(result.failed)} failed"
        )
        return result

    def _deliver(self, message: RelayMessage, peer: Channel) -> str | None:
        """Post to one peer. Returns an error description on failure."""
        try:
            path = self._registry.webhook_path(peer.team_id)
            self._webhooks.post_message(path, message.to_payload(peer))
        except (TeamNotFoundError, SlackClientError) as e:
            logger.warning(f"Delivery from {message.channel} to {peer} failed: {e}")
            return str(e)
        return None
