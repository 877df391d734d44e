"""Rewriting of Slack user-mention markup into plain ``@name`` mentions.

Slack delivers mentions as ``<@U123>`` or ``<@U123|alice>``. Those ids mean
nothing in another team, so before a message is relayed every mention is
turned into ``@name``, which the receiving team links back up because the
relay posts with ``link_names`` set.
"""

import logging
import re

from models.exceptions import UserLookupError
from models.message import RelayMessage
from models.team import TeamRegistry

logger = logging.getLogger(__name__)

MENTION_PATTERN = re.compile(r"<@(?=[^>])([^>|]*)(?:\|([^>|]*)[^>]*)?>")


class MentionRewriter:
    """Replaces mention markup using inline names or registry lookups.

    Args:
        registry: Registry used to resolve ids without an inline name.
    """

    def __init__(self, registry: TeamRegistry):
        self._registry = registry

    def rewrite(self, message: RelayMessage) -> RelayMessage:
        """Rewrite every mention in ``message.text`` in place.

        An inline display name, the text between the first and second
        ``|``, is used as is, even when the id is empty. Otherwise the id is
        looked up in the origin team; if that fails the raw id is kept and a
        warning is logged.

        Args:
            message: The message to rewrite.

        Returns:
            The same message, for chaining.
        """
        team_id = message.channel.team_id
        resolved: dict[str, str] = {}

        def replace(match: re.Match) -> str:
            user_id, display_name = match.group(1), match.group(2)
            if display_name:
                return f"@{display_name}"
            if not user_id:
                return match.group(0)

            if user_id not in resolved:
                try:
                    resolved[user_id] = self._registry.lookup_user(team_id, user_id)
                except UserLookupError as e:
                    logger.warning(f"Unable to map {user_id} to username: {e.reason}")
                    resolved[user_id] = user_id
            return f"@{resolved[user_id]}"

        message.text = MENTION_PATTERN.sub(replace, message.text)
        return message
