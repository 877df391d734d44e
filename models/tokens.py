"""Per-channel tokens that authenticate inbound outgoing-webhook posts."""

import hmac
from typing import Mapping

from models.channel import Channel


class OutboundTokenTable:
    """Maps a channel to the secret its outgoing webhook must present.

    Channels without a registered secret never verify.

    Args:
        tokens: Secret per channel.
    """

    def __init__(self, tokens: Mapping[Channel, str]):
        self._tokens = dict(tokens)

    def verify(self, channel: Channel, token: str) -> bool:
        """Check that ``token`` is the secret registered for ``channel``."""
        expected = self._tokens.get(channel)
        if expected is None:
            return False
        return hmac.compare_digest(expected.encode(), token.encode())

    def __contains__(self, channel: object) -> bool:
        return channel in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)
