"""Core relay fixtures."""

from tests.fixtures.core.slack import FakeSlack, create_member
from tests.fixtures.core.teams import (
    create_settings,
    create_team,
    T1_C1,
    T2_C2,
    T3_C3,
    T1_C9,
    T2_C9,
    UNGROUPED,
)

__all__ = [
    "FakeSlack",
    "create_member",
    "create_settings",
    "create_team",
    "T1_C1",
    "T2_C2",
    "T3_C3",
    "T1_C9",
    "T2_C9",
    "UNGROUPED",
]
