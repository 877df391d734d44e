"""Exception hierarchy for the Slack client.

Exception Hierarchy:
    SlackClientError (base)
    ├── ConnectionError - Network/connection failures
    ├── TimeoutError - Request timeout
    ├── APIError - Slack answered with a non-200 status
    │   ├── NotFoundError (HTTP 404)
    │   └── ServerError (HTTP 5xx)
    └── SlackAPIError - Slack answered 200 but with ``"ok": false``

Example:
    Treating every failure of a webhook post the same way::

        try:
            client.webhooks.post_message(path, payload)
        except SlackClientError as e:
            logger.warning(f"Delivery failed: {e}")
"""

from typing import Any


class SlackClientError(Exception):
    """Base exception for all Slack client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(SlackClientError):
    """Failed to reach Slack.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to connect.
        cause: The underlying transport exception.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including URL if available."""
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(SlackClientError):
    """Request timed out.

    Attributes:
        message: Human-readable error description.
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including timeout if available."""
        parts = [self.message]
        if self.timeout is not None:
            parts.append(f"timeout: {self.timeout}s")
        if self.url:
            parts.append(f"url: {self.url}")
        return " ".join(parts) if len(parts) == 1 else f"{parts[0]} ({', '.join(parts[1:])})"


class APIError(SlackClientError):
    """Slack returned an error status.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code.
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including status code."""
        return f"[HTTP {self.status_code}] {self.message}"


class NotFoundError(APIError):
    """Resource not found (HTTP 404).

    Incoming webhooks answer 404 when the team id or webhook secret in the
    URL is wrong.
    """

    def __init__(self, message: str, response_body: Any = None) -> None:
        super().__init__(message=message, status_code=404, response_body=response_body)


class ServerError(APIError):
    """Slack-side error (HTTP 5xx)."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        response_body: Any = None,
    ) -> None:
        super().__init__(message=message, status_code=status_code, response_body=response_body)


class SlackAPIError(SlackClientError):
    """A Web API method reported failure in its response body.

    Attributes:
        method: The API method that was called (e.g. ``users.info``).
        error: Slack's error code (e.g. ``user_not_found``).
    """

    def __init__(self, method: str, error: str) -> None:
        self.method = method
        self.error = error
        super().__init__(f"{method} failed: {error}")
