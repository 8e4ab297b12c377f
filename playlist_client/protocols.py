"""Protocol definitions for dependency injection."""

from typing import Any, Protocol

import httpx


class TransportProtocol(Protocol):
    """Interface the playlist client needs from an HTTP transport.

    Paths are relative to the Spotify API base URL. Every method raises
    SpotifyAPIException on a non-2xx status unless ``check`` is False, in
    which case the response is returned whatever its status.
    """

    def get(self, path: str, *, check: bool = True) -> httpx.Response:
        ...

    def post(self, path: str, json: Any = None, *, check: bool = True) -> httpx.Response:
        ...

    def put(self, path: str, json: Any = None, *, check: bool = True) -> httpx.Response:
        ...

    def delete(self, path: str, *, check: bool = True) -> httpx.Response:
        ...

    def close(self) -> None:
        """Release connections held by the transport."""
        ...
