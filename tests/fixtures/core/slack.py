"""A fake Slack served through httpx.MockTransport.

FakeSlack answers ``users.info`` and ``users.list`` from an in-memory user
table per API token, and records every incoming-webhook post. Individual
webhook paths can be made to fail with a status code or a transport error.
"""

import json
from urllib.parse import parse_qs

import httpx
import pytest

from client.client import SlackClient


def create_member(user_id: str, name: str, image: str | None = None, **extra) -> dict:
    """Create a Slack user object as the Web API returns it."""
    profile = {"display_name": name, "real_name": name.title()}
    if image is not None:
        profile["image_original"] = image
    return {"id": user_id, "name": name, "deleted": False, "profile": profile, **extra}


class FakeSlack:
    """In-memory stand-in for the Slack Web API and incoming webhooks.

    Attributes:
        members: User objects per API token.
        posts: ``(path, body)`` of every webhook post received.
        failures: Webhook path to an HTTP status code, a canned response or
            an exception.
        api_calls: ``(method, params)`` of every Web API call received.
        page_size: Page size used by ``users.list``.
        api_failure: Exception raised for every Web API call, when set.
    """

    def __init__(self):
        self.members: dict[str, list[dict]] = {}
        self.posts: list[tuple[str, dict]] = []
        self.failures: dict[str, int | httpx.Response | Exception] = {}
        self.api_calls: list[tuple[str, dict]] = []
        self.page_size = 100
        self.api_failure: Exception | None = None

    def add_member(self, team_id: str, user_id: str, name: str, image: str | None = None) -> dict:
        member = create_member(user_id, name, image)
        self.members.setdefault(f"xoxb-{team_id}", []).append(member)
        return member

    def fail_webhook(self, team_id: str, failure: int | httpx.Response | Exception) -> None:
        self.failures[f"/services/{team_id}/B{team_id}/secret-{team_id}"] = failure

    def posts_to(self, team_id: str) -> list[dict]:
        prefix = f"/services/{team_id}/"
        return [body for path, body in self.posts if path.startswith(prefix)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "hooks.slack.com":
            return self._webhook(request)
        return self._api(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def _webhook(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        failure = self.failures.get(path)
        if isinstance(failure, Exception):
            raise failure
        if isinstance(failure, httpx.Response):
            return failure
        if failure is not None:
            return httpx.Response(failure, text="no_service")

        self.posts.append((path, json.loads(request.content)))
        return httpx.Response(200, text="ok")

    def _api(self, request: httpx.Request) -> httpx.Response:
        if self.api_failure is not None:
            raise self.api_failure

        method = request.url.path.rsplit("/", 1)[-1]
        params = {k: v[0] for k, v in parse_qs(request.url.query.decode()).items()}
        self.api_calls.append((method, params))

        token = request.headers.get("Authorization", "").removeprefix("Bearer ")
        if token not in self.members:
            return httpx.Response(200, json={"ok": False, "error": "invalid_auth"})
        members = self.members[token]

        if method == "users.info":
            for member in members:
                if member["id"] == params.get("user"):
                    return httpx.Response(200, json={"ok": True, "user": member})
            return httpx.Response(200, json={"ok": False, "error": "user_not_found"})

        if method == "users.list":
            start = int(params.get("cursor") or 0)
            end = start + self.page_size
            next_cursor = str(end) if end < len(members) else ""
            return httpx.Response(
                200,
                json={
                    "ok": True,
                    "members": members[start:end],
                    "response_metadata": {"next_cursor": next_cursor},
                },
            )

        return httpx.Response(200, json={"ok": False, "error": "unknown_method"})


@pytest.fixture
def fake_slack():
    """Provide an empty FakeSlack."""
    return FakeSlack()


@pytest.fixture
def slack_client(fake_slack):
    """Provide a SlackClient wired to the fake Slack."""
    client = SlackClient(timeout=2.0, transport=fake_slack.transport())
    yield client
    client.close()
