"""Base class for all sub-clients.

This is an internal module and should not be imported directly by users.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from client._http import HTTPClient


class BaseClient:
    """Base class for the Slack sub-clients.

    Attributes:
        _http: The HTTP client bound to the host this sub-client talks to.
    """

    def __init__(self, http_client: "HTTPClient") -> None:
        self._http = http_client

    def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a GET request.

        Args:
            path: The URL path.
            params: Query parameters.
            headers: Extra request headers.

        Returns:
            The decoded response body.
        """
        return self._http.get(path, params=params, headers=headers)

    def _post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a POST request.

        Args:
            path: The URL path.
            json: JSON body to send.
            headers: Extra request headers.

        Returns:
            The decoded response body.
        """
        return self._http.post(path, json=json, headers=headers)
