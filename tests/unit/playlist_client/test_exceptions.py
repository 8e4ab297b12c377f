"""Tests for custom exception classes."""

from playlist_client.exceptions import (
    ConfigurationException,
    DecodeException,
    ErrorCode,
    PlaylistClientException,
    SpotifyAPIException,
    SpotifyAuthException,
    SpotifyException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        assert ErrorCode.CLIENT_ERROR == "CLIENT_ERROR"
        assert ErrorCode.DECODE_ERROR == "DECODE_ERROR"
        assert ErrorCode.SPOTIFY_API_ERROR == "SPOTIFY_API_ERROR"
        assert ErrorCode.CONFIG_MISSING == "CONFIG_MISSING"


class TestPlaylistClientException:
    """Tests for PlaylistClientException."""

    def test_basic(self):
        exc = PlaylistClientException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.CLIENT_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_with_details(self):
        exc = PlaylistClientException(
            message="Test error", code=ErrorCode.DECODE_ERROR, status_code=503, details={"key": "value"}
        )

        assert exc.code == ErrorCode.DECODE_ERROR
        assert exc.status_code == 503
        assert exc.details["key"] == "value"


class TestSpotifyExceptions:
    """Tests for the Spotify exception family."""

    def test_spotify_exception_defaults(self):
        exc = SpotifyException(message="Spotify error")

        assert exc.code == ErrorCode.SPOTIFY_ERROR
        assert exc.status_code == 500
        assert isinstance(exc, PlaylistClientException)

    def test_auth_exception(self):
        exc = SpotifyAuthException()

        assert exc.message == "Spotify authentication failed"
        assert exc.code == ErrorCode.SPOTIFY_AUTH_ERROR
        assert exc.status_code == 401

    def test_api_exception_keeps_status(self):
        exc = SpotifyAPIException("Not found", status_code=404, details={"error": {"status": 404}})

        assert exc.code == ErrorCode.SPOTIFY_API_ERROR
        assert exc.status_code == 404
        assert exc.details["error"]["status"] == 404
        assert isinstance(exc, SpotifyException)

    def test_api_exception_default_status(self):
        assert SpotifyAPIException("Connection refused").status_code == 502


def test_decode_exception():
    exc = DecodeException("bad body", details={"body": "<html>"})

    assert exc.code == ErrorCode.DECODE_ERROR
    assert exc.status_code == 502
    assert not isinstance(exc, SpotifyException)


def test_configuration_exception():
    exc = ConfigurationException("missing", code=ErrorCode.CONFIG_MISSING)

    assert exc.code == ErrorCode.CONFIG_MISSING
    assert exc.status_code == 500
