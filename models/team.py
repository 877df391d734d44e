"""Teams and the team registry.

The registry is built once at startup and resolves a team identifier to its
credentials. It also gives the rest of the relay a way to look users up
through the Slack API with the right team's token.
"""

import logging
from typing import TYPE_CHECKING, Iterable

from pydantic import BaseModel, ConfigDict, Field

from client.exceptions import SlackClientError
from models.exceptions import ConfigurationError, TeamNotFoundError, UserLookupError

if TYPE_CHECKING:
    from client._users import UsersClient
    from client.models import SlackUser

logger = logging.getLogger(__name__)


class Team(BaseModel):
    """A Slack workspace the relay can read from and post to.

    Args:
        team_id: Slack team identifier.
        api_token: API token used for user lookups.
        incoming_token: Incoming-webhook secret (``Bxxxxxxx/xxxxxxxx``) used
            to build the URL this relay posts to.
    """

    model_config = ConfigDict(frozen=True)

    team_id: str = Field(description="Slack team identifier")
    api_token: str = Field(description="API token used for user lookups", repr=False)
    incoming_token: str = Field(description="Incoming-webhook secret", repr=False)

    @classmethod
    def parse(cls, value: str) -> "Team":
        """Parse a team from its ``TEAM_ID:API_TOKEN:INCOMING_TOKEN`` form.

        Raises:
            ConfigurationError: If the value does not have exactly three
                non-empty parts.
        """
        parts = value.strip().split(":")
        if len(parts) != 3 or not all(parts):
            raise ConfigurationError(
                "Malformed team specification, expected TEAM_ID:API_TOKEN:INCOMING_TOKEN"
            )
        return cls(team_id=parts[0], api_token=parts[1], incoming_token=parts[2])

    @property
    def webhook_path(self) -> str:
        """Path of this team's incoming webhook, relative to the webhook base URL."""
        return f"/{self.team_id}/{self.incoming_token}"


class TeamRegistry:
    """Read-only registry of configured teams.

    Args:
        teams: The configured teams.
        users: Slack users API client used for lookups.

    Raises:
        ConfigurationError: If two teams share an identifier.
    """

    def __init__(self, teams: Iterable[Team], users: "UsersClient"):
        self._teams: dict[str, Team] = {}
        for team in teams:
            if team.team_id in self._teams:
                raise ConfigurationError(f"Team '{team.team_id}' configured more than once")
            self._teams[team.team_id] = team
        self._users = users

    def resolve(self, team_id: str) -> Team:
        """Return the team registered under ``team_id``.

        Raises:
            TeamNotFoundError: If no such team is configured.
        """
        try:
            return self._teams[team_id]
        except KeyError:
            raise TeamNotFoundError(team_id) from None

    def webhook_path(self, team_id: str) -> str:
        """Return the incoming-webhook path used to post into ``team_id``."""
        return self.resolve(team_id).webhook_path

    def get_user(self, team_id: str, user_id: str) -> "SlackUser":
        """Fetch a user's profile by id.

        Raises:
            UserLookupError: If the team is unknown or the API call fails.
        """
        try:
            team = self.resolve(team_id)
            return self._users.info(team.api_token, user_id)
        except (TeamNotFoundError, SlackClientError) as e:
            raise UserLookupError(team_id, user_id, str(e)) from e

    def lookup_user(self, team_id: str, user_id: str) -> str:
        """Return the name a mention of ``user_id`` should display."""
        return self.get_user(team_id, user_id).name

    def find_user(self, team_id: str, username: str) -> "SlackUser":
        """Find a user by username.

        Raises:
            UserLookupError: If the team is unknown, the API call fails or
                nobody in the team has that username.
        """
        try:
            team = self.resolve(team_id)
            user = self._users.find_by_name(team.api_token, username)
        except (TeamNotFoundError, SlackClientError) as e:
            raise UserLookupError(team_id, username, str(e)) from e

        if user is None:
            raise UserLookupError(team_id, username, "no user with that name")
        return user

    def __contains__(self, team_id: object) -> bool:
        return team_id in self._teams

    def __len__(self) -> int:
        return len(self._teams)
