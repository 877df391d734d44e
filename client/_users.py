"""Slack Web API user lookups.

This is an internal module and should not be imported directly by users.
"""

from typing import Any

from client._base import BaseClient
from client.exceptions import SlackAPIError
from client.models import SlackUser

USERS_LIST_PAGE_SIZE = 200


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _check_ok(method: str, body: Any) -> dict[str, Any]:
    """Return the body of a Web API response, raising if it reports failure.

    Raises:
        SlackAPIError: If the body is not a JSON object with ``"ok": true``.
    """
    if not isinstance(body, dict):
        raise SlackAPIError(method, "invalid_response")
    if not body.get("ok"):
        raise SlackAPIError(method, str(body.get("error", "unknown_error")))
    return body


class UsersClient(BaseClient):
    """Looks users up with a team's API token.

    The token is passed per call so one client serves every configured team.
    """

    def info(self, token: str, user_id: str) -> SlackUser:
        """Fetch one user by id with ``users.info``.

        Args:
            token: The team's API token.
            user_id: Slack user id (e.g. ``U123ABC``).

        Returns:
            The user.

        Raises:
            SlackAPIError: If Slack reports an error such as ``user_not_found``.
            SlackClientError: For transport or HTTP failures.
        """
        body = _check_ok(
            "users.info",
            self._get("/users.info", params={"user": user_id}, headers=_auth(token)),
        )
        return SlackUser.model_validate(body["user"])

    def list_page(
        self,
        token: str,
        cursor: str | None = None,
        limit: int = USERS_LIST_PAGE_SIZE,
    ) -> tuple[list[SlackUser], str | None]:
        """Fetch one page of ``users.list``.

        Returns:
            The users on the page and the cursor of the next page, or None
            on the last page.
        """
        body = _check_ok(
            "users.list",
            self._get(
                "/users.list",
                params={"cursor": cursor or None, "limit": limit},
                headers=_auth(token),
            ),
        )
        users = [SlackUser.model_validate(member) for member in body.get("members", [])]
        next_cursor = body.get("response_metadata", {}).get("next_cursor") or None
        return users, next_cursor

    def find_by_name(self, token: str, username: str) -> SlackUser | None:
        """Find a non-deleted user by username, walking every page of ``users.list``."""
        cursor = None
        while True:
            users, cursor = self.list_page(token, cursor)
            for user in users:
                if user.name == username and not user.deleted:
                    return user
            if cursor is None:
                return None
