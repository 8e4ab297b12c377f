"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import httpx
import pytest

from playlist_client.client import PlaylistResourceClient
from playlist_client.config import Settings
from playlist_client.transport import SpotifyTransport


def make_response(status_code: int = 200, json=None, text: str | None = None) -> httpx.Response:
    """Build a real httpx.Response the way the transport would return it."""
    if json is not None:
        return httpx.Response(status_code, json=json)
    return httpx.Response(status_code, text=text or "")


@pytest.fixture
def response_factory():
    """Factory for canned httpx responses."""
    return make_response


@pytest.fixture
def mock_settings():
    """Settings instance with test values, independent of any .env file."""
    return Settings(
        _env_file=None,
        spotify_client_id="test-spotify-client-id",
        spotify_client_secret="test-spotify-client-secret",
        spotify_refresh_token="test-refresh-token",
    )


@pytest.fixture
def mock_transport():
    """Mock SpotifyTransport; tests set return values per verb."""
    transport = MagicMock(spec=SpotifyTransport)
    transport.get.return_value = make_response(json={})
    transport.post.return_value = make_response(201, json={})
    transport.put.return_value = make_response(200)
    transport.delete.return_value = make_response(200)
    return transport


@pytest.fixture
def playlist_client(mock_transport):
    return PlaylistResourceClient(mock_transport)


@pytest.fixture
def mock_playlist_response():
    """Spotify playlist object, trimmed to what the client reads plus a few extras."""
    return {
        "id": "3cEYpjA9oz9GiPac4AsH4n",
        "name": "Spotify Web API Testing playlist",
        "description": "A playlist for testing pourposes",
        "uri": "spotify:playlist:3cEYpjA9oz9GiPac4AsH4n",
        "public": True,
        "collaborative": False,
        "owner": {"id": "jmperezperez", "type": "user"},
        "snapshot_id": "MTgsZWFmNmZiNTIzYTg4ODM0OGQzZWQzOGI4NTdkNTJlMjU0OWFkYTUxMA==",
    }


@pytest.fixture
def mock_user_playlists_response(mock_playlist_response):
    """Spotify paging object for GET /users/{id}/playlists."""
    second = {
        "id": "37i9dQZF1DXcBWIGoYBM5M",
        "name": "Today's Top Hits",
        "description": None,
        "uri": "spotify:playlist:37i9dQZF1DXcBWIGoYBM5M",
    }
    return {
        "href": "https://api.spotify.com/v1/users/test-user/playlists?offset=0&limit=20",
        "items": [mock_playlist_response, second],
        "limit": 20,
        "next": None,
        "offset": 0,
        "previous": None,
        "total": 2,
    }


@pytest.fixture
def mock_featured_response(mock_playlist_response):
    """Spotify response for GET /browse/featured-playlists."""
    return {
        "message": "Popular Playlists",
        "playlists": {
            "href": "https://api.spotify.com/v1/browse/featured-playlists?offset=0&limit=1",
            "items": [mock_playlist_response],
            "limit": 1,
            "next": "https://api.spotify.com/v1/browse/featured-playlists?offset=1&limit=1",
            "offset": 0,
            "previous": None,
            "total": 12,
        },
    }


@pytest.fixture
def mock_tracks_response():
    """Spotify paging object for GET /playlists/{id}/tracks with one removed track."""
    return {
        "items": [
            {
                "added_at": "2015-01-15T12:39:22Z",
                "is_local": False,
                "track": {
                    "id": "4rzfv0JLZfVhOhbSQ8o5jZ",
                    "name": "Api",
                    "uri": "spotify:track:4rzfv0JLZfVhOhbSQ8o5jZ",
                    "artists": [{"name": "Odiseo"}],
                    "duration_ms": 207959,
                },
            },
            {"added_at": "2015-01-15T12:40:03Z", "is_local": False, "track": None},
            {
                "added_at": "2015-01-15T12:41:10Z",
                "is_local": False,
                "track": {
                    "id": "5o3jMYOSbaVz3tkgwhELSV",
                    "name": "Is",
                    "uri": "spotify:track:5o3jMYOSbaVz3tkgwhELSV",
                    "artists": [{"name": "Vlasta Marek"}],
                    "duration_ms": 237348,
                },
            },
        ],
        "limit": 100,
        "next": None,
        "offset": 0,
        "total": 3,
    }
