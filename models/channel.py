"""Channel keys and the channel group table.

A channel is identified by the pair (team id, channel id). Channels are
grouped into sets that mirror each other's messages; the group table answers
"who are my peers" for any member in constant time.
"""

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from models.exceptions import ConfigurationError


class Channel(BaseModel):
    """A conversation stream within a team.

    Frozen so it can be used as a dictionary key.

    Args:
        team_id: Identifier of the owning team.
        channel_id: Identifier of the channel within the team.
    """

    model_config = ConfigDict(frozen=True)

    team_id: str = Field(description="Identifier of the owning team")
    channel_id: str = Field(description="Identifier of the channel within the team")

    @classmethod
    def parse(cls, value: str) -> "Channel":
        """Parse a channel from its ``TEAM/CHANNEL`` form.

        Args:
            value: String of the form ``TEAM/CHANNEL``.

        Returns:
            The parsed Channel.

        Raises:
            ConfigurationError: If the value is not exactly two non-empty
                parts separated by ``/``.
        """
        parts = value.strip().split("/")
        if len(parts) != 2 or not all(parts):
            raise ConfigurationError(f"Malformed channel '{value}', expected TEAM/CHANNEL")
        return cls(team_id=parts[0], channel_id=parts[1])

    def __str__(self) -> str:
        return f"{self.team_id}/{self.channel_id}"


class ChannelGroupTable:
    """Symmetric mapping from a channel to every channel in its group.

    Groups are stored once in an arena; each member channel maps to the
    index of its group record, so every member sees the same membership.

    Attributes:
        groups: The group records, in configuration order.
    """

    def __init__(self, groups: tuple[tuple[Channel, ...], ...], index: dict[Channel, int]):
        self._groups = groups
        self._index = index

    @classmethod
    def from_groups(cls, groups: Iterable[Iterable[Channel]]) -> "ChannelGroupTable":
        """Build the table from ordered lists of channels.

        Args:
            groups: Each item is one group's members, in order.

        Returns:
            The constructed table.

        Raises:
            ConfigurationError: If a channel appears more than once, whether
                in two groups or twice in the same group.
        """
        arena: list[tuple[Channel, ...]] = []
        index: dict[Channel, int] = {}

        for members in groups:
            group = tuple(members)
            if not group:
                continue

            group_index = len(arena)
            for channel in group:
                if channel in index:
                    raise ConfigurationError(
                        f"{channel} already present in channel map configuration"
                    )
                index[channel] = group_index
            arena.append(group)

        return cls(tuple(arena), index)

    @property
    def groups(self) -> tuple[tuple[Channel, ...], ...]:
        return self._groups

    def peers_of(self, channel: Channel) -> tuple[Channel, ...]:
        """Return the full group of a channel, including the channel itself.

        Args:
            channel: The channel to look up.

        Returns:
            The group's members in configuration order, or an empty tuple
            when the channel is not grouped.
        """
        group_index = self._index.get(channel)
        if group_index is None:
            return ()
        return self._groups[group_index]

    def channels(self) -> list[Channel]:
        """Return every grouped channel."""
        return list(self._index)

    def __contains__(self, channel: object) -> bool:
        return channel in self._index

    def __len__(self) -> int:
        return len(self._groups)
