"""Custom exceptions for the playlist client with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error reporting."""

    # Generic errors
    CLIENT_ERROR = "CLIENT_ERROR"
    DECODE_ERROR = "DECODE_ERROR"

    # Spotify errors
    SPOTIFY_ERROR = "SPOTIFY_ERROR"
    SPOTIFY_AUTH_ERROR = "SPOTIFY_AUTH_ERROR"
    SPOTIFY_API_ERROR = "SPOTIFY_API_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISSING = "CONFIG_MISSING"


class PlaylistClientException(Exception):
    """Base exception for playlist client errors with HTTP status code support.

    All custom exceptions inherit from this class so callers can catch
    every client failure in one place.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CLIENT_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize playlist client exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class SpotifyException(PlaylistClientException):
    """Spotify-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SPOTIFY_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class SpotifyAuthException(SpotifyException):
    """Exchanging the refresh token for an access token failed."""

    def __init__(self, message: str = "Spotify authentication failed", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SPOTIFY_AUTH_ERROR,
            status_code=401,
            details=details,
        )


class SpotifyAPIException(SpotifyException):
    """Spotify API request failed or returned a non-2xx status.

    ``status_code`` is the HTTP status Spotify answered with, or 502 when no
    response was received. ``details["body"]`` holds the raw response text.
    """

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SPOTIFY_API_ERROR,
            status_code=status_code,
            details=details,
        )


class DecodeException(PlaylistClientException):
    """Response body is not JSON or does not have the expected shape."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.DECODE_ERROR,
            status_code=502,
            details=details,
        )


class ConfigurationException(PlaylistClientException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
