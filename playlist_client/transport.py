"""Synchronous HTTP transport for the Spotify Web API."""

from typing import Any

import httpx

from playlist_client.config import Settings
from playlist_client.exceptions import ConfigurationException, ErrorCode, SpotifyAPIException, SpotifyAuthException
from playlist_client.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def fetch_access_token(client: httpx.Client, settings: Settings) -> str:
    """
    Exchange the configured refresh token for an access token.

    Args:
        client: HTTP client used for the token request.
        settings: Settings carrying client id/secret, refresh token and grant type.

    Returns:
        Access token string.

    Raises:
        ConfigurationException: If no refresh token is configured.
        SpotifyAuthException: If the token request fails or the reply has no token.
    """
    if not settings.spotify_refresh_token:
        raise ConfigurationException(
            "No refresh token available. Set SPOTIFY_REFRESH_TOKEN or SPOTIFY_ACCESS_TOKEN.",
            code=ErrorCode.CONFIG_MISSING,
        )

    try:
        response = client.post(
            settings.spotify_token_url,
            auth=(settings.spotify_client_id, settings.spotify_client_secret),
            data={"grant_type": settings.spotify_grant_type, "refresh_token": settings.spotify_refresh_token},
            timeout=settings.request_timeout,
        )
        response.raise_for_status()
        data = response.json()
        return data["access_token"]
    except httpx.HTTPStatusError as e:
        raise SpotifyAuthException(
            f"Spotify token refresh failed: {e.response.status_code}",
            details={"body": e.response.text},
        ) from e
    except httpx.HTTPError as e:
        raise SpotifyAuthException(f"Spotify auth error: {str(e)}") from e
    except (KeyError, ValueError) as e:
        raise SpotifyAuthException(f"Invalid Spotify auth response: {str(e)}") from e


class SpotifyTransport:
    """Issues authenticated requests against the Spotify Web API.

    Owns one ``httpx.Client`` and the access token obtained for it. The
    token is fetched on the first request and kept for the lifetime of the
    transport.
    """

    def __init__(self, settings: Settings, client: httpx.Client | None = None):
        if not settings.has_credentials:
            raise ConfigurationException(
                "No Spotify token configured. Set SPOTIFY_REFRESH_TOKEN or SPOTIFY_ACCESS_TOKEN.",
                code=ErrorCode.CONFIG_MISSING,
            )
        self._settings = settings
        self._client = client or httpx.Client(timeout=settings.request_timeout)
        self._owns_client = client is None
        self._access_token: str | None = settings.spotify_access_token or None

    def __enter__(self) -> "SpotifyTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
        self._access_token = None

    def url_for(self, path: str) -> str:
        return f"{self._settings.spotify_api_base_url}/{path.lstrip('/')}"

    def _headers(self) -> dict[str, str]:
        if self._access_token is None:
            self._access_token = fetch_access_token(self._client, self._settings)
        return {"Authorization": f"Bearer {self._access_token}"}

    def request(self, method: str, path: str, json: Any = None, *, check: bool = True) -> httpx.Response:
        """
        Send one request to the Spotify API.

        Args:
            method: HTTP verb.
            path: Path relative to the API base URL.
            json: Optional JSON body.
            check: Raise on non-2xx statuses when True.

        Returns:
            The httpx response.

        Raises:
            SpotifyAPIException: On network failure, or on a non-2xx status when ``check`` is set.
        """
        url = self.url_for(path)
        try:
            response = self._client.request(method, url, headers=self._headers(), json=json)
        except httpx.HTTPError as e:
            raise SpotifyAPIException(
                f"Spotify {method} {path} failed: {str(e)}",
                details={"method": method, "path": path, "error": str(e)},
            ) from e

        log_with_context(
            logger,
            "debug",
            "Spotify request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            event_type="spotify_request",
        )

        if check and not response.is_success:
            raise SpotifyAPIException(
                f"Spotify {method} {path} returned {response.status_code}",
                status_code=response.status_code,
                details={
                    "method": method,
                    "path": path,
                    "body": response.text,
                    "error": _error_body(response),
                },
            )
        return response

    def get(self, path: str, *, check: bool = True) -> httpx.Response:
        return self.request("GET", path, check=check)

    def post(self, path: str, json: Any = None, *, check: bool = True) -> httpx.Response:
        return self.request("POST", path, json=json, check=check)

    def put(self, path: str, json: Any = None, *, check: bool = True) -> httpx.Response:
        return self.request("PUT", path, json=json, check=check)

    def delete(self, path: str, *, check: bool = True) -> httpx.Response:
        return self.request("DELETE", path, check=check)


def _error_body(response: httpx.Response) -> dict[str, Any] | None:
    """Return the ``error`` object of an error envelope body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        return data["error"]
    return None
