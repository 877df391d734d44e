"""Exceptions raised by the relay domain models.

Configuration errors are fatal and only raised while the relay is being
built at startup. Lookup errors are recoverable and are caught by the
mention rewriter, the avatar fetch and the forwarder.
"""


class ConfigurationError(Exception):
    """Raised when team, channel-group or token configuration is invalid.

    Args:
        message: Description of what is wrong with the configuration.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TeamNotFoundError(LookupError):
    """Raised when a team identifier is not registered.

    Args:
        team_id: The identifier that was requested.
    """

    def __init__(self, team_id: str):
        self.team_id = team_id
        super().__init__(f"Team '{team_id}' is not configured")


class UserLookupError(LookupError):
    """Raised when a user cannot be resolved through the Slack API.

    Args:
        team_id: Team the lookup was made against.
        user: The user id or username that was looked up.
        reason: Why the lookup failed.
    """

    def __init__(self, team_id: str, user: str, reason: str):
        self.team_id = team_id
        self.user = user
        self.reason = reason
        super().__init__(f"Unable to look up user '{user}' in team '{team_id}': {reason}")
