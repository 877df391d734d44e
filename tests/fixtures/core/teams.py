"""Fixtures for teams, channels and relay settings."""

import pytest

from models.channel import Channel
from models.config import RelaySettings
from models.team import Team


def create_team(team_id: str = "T1") -> Team:
    """Create a Team whose tokens are derived from its id.

    Args:
        team_id: Team identifier.

    Returns:
        Team with API token ``xoxb-<team_id>`` and incoming token
        ``B<team_id>/secret-<team_id>``.
    """
    return Team(
        team_id=team_id,
        api_token=f"xoxb-{team_id}",
        incoming_token=f"B{team_id}/secret-{team_id}",
    )


def create_settings(**overrides) -> RelaySettings:
    """Create RelaySettings for three teams and two channel groups.

    Groups: ``[T1/C1, T2/C2, T3/C3]`` and ``[T1/C9, T2/C9]``.
    Every grouped channel except ``T2/C9`` has an outbound token
    ``tok-<team>-<channel>``.

    Args:
        **overrides: Fields to replace.

    Returns:
        RelaySettings ready for building a relay.
    """
    data = {
        "teams": [create_team("T1"), create_team("T2"), create_team("T3")],
        "channel_groups": [[T1_C1, T2_C2, T3_C3], [T1_C9, T2_C9]],
        "outbound_tokens": {
            T1_C1: "tok-T1-C1",
            T2_C2: "tok-T2-C2",
            T3_C3: "tok-T3-C3",
            T1_C9: "tok-T1-C9",
        },
        "delivery_timeout": 2.0,
    }
    data.update(overrides)
    return RelaySettings(**data)


T1_C1 = Channel(team_id="T1", channel_id="C1")
T2_C2 = Channel(team_id="T2", channel_id="C2")
T3_C3 = Channel(team_id="T3", channel_id="C3")
T1_C9 = Channel(team_id="T1", channel_id="C9")
T2_C9 = Channel(team_id="T2", channel_id="C9")
UNGROUPED = Channel(team_id="T1", channel_id="C404")


@pytest.fixture
def settings():
    """Provide the default three-team RelaySettings."""
    return create_settings()
