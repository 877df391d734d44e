"""Internal HTTP handling utilities for the Slack client.

This module provides the low-level HTTP communication layer used by the
sub-clients. It handles:
- Making HTTP requests with an explicit timeout
- Response parsing and error handling
- Connection management

This is an internal module and should not be imported directly by users.
"""

from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
)


# HTTP methods supported by the client
HttpMethod = Literal["GET", "POST"]

DEFAULT_TIMEOUT = 10.0  # seconds


def _parse_error_response(response: httpx.Response) -> str:
    """Extract a readable message from an error response.

    Slack webhooks answer errors in plain text (``no_service``,
    ``channel_not_found``); the Web API answers JSON with an ``error`` key.

    Args:
        response: The HTTP response to parse.

    Returns:
        The error message.
    """
    try:
        body = response.json()
        if isinstance(body, dict) and "error" in body:
            return str(body["error"])
        return str(body)
    except ValueError:
        text = response.text.strip()
        if text:
            return text
        return f"HTTP {response.status_code} error"


def _raise_for_status(response: httpx.Response) -> None:
    """Raise an appropriate exception unless the response is HTTP 200.

    Args:
        response: The HTTP response to check.

    Raises:
        NotFoundError: For HTTP 404 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For any other status except 200.
    """
    if response.status_code == httpx.codes.OK:
        return

    message = _parse_error_response(response)
    status_code = response.status_code
    response_body = response.text

    if status_code == 404:
        raise NotFoundError(message=message, response_body=response_body)
    elif status_code >= 500:
        raise ServerError(message=message, status_code=status_code, response_body=response_body)
    else:
        raise APIError(message=message, status_code=status_code, response_body=response_body)


def _decode(response: httpx.Response) -> Any:
    """Return the JSON body, the text body, or None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HTTPClient:
    """Synchronous HTTP client for talking to one Slack host.

    Wraps httpx.Client with error handling. The underlying client is safe to
    share between the forwarding worker threads.

    Attributes:
        base_url: The base URL for all requests.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: The base URL for all requests.
            timeout: Request timeout in seconds.
            transport: Custom transport (e.g., MockTransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an HTTP request and return the decoded response body.

        Args:
            method: The HTTP method.
            path: The URL path (appended to base_url).
            params: Query parameters; None values are dropped.
            json: JSON body to send.
            headers: Extra request headers.

        Returns:
            The parsed JSON body, the text body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails or the response cannot be read.
            TimeoutError: If the request times out.
            APIError: If Slack answers with a status other than 200.
        """
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = self._client.request(
                method=method,
                url=path,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(
                message=f"Request to {self.base_url} timed out",
                timeout=self.timeout,
            ) from e
        except httpx.TransportError as e:
            # Only the base URL is reported; webhook paths carry secrets.
            raise ConnectionError(
                message="Failed to connect to Slack",
                url=self.base_url,
                cause=e,
            ) from e
        except httpx.RequestError as e:
            raise ConnectionError(
                message="Failed to read response from Slack",
                url=self.base_url,
                cause=e,
            ) from e

        _raise_for_status(response)
        return _decode(response)

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a GET request."""
        return self.request("GET", path, params=params, headers=headers)

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a POST request."""
        return self.request("POST", path, json=json, headers=headers)
