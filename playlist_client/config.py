from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # playlist-client/

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Spotify credentials and transport settings.

    Values come from environment variables or a .env file. Nothing here is
    cached process-wide: build an instance with ``load_settings`` and pass it
    to whatever needs it.
    """

    # Spotify OAuth credentials
    spotify_client_id: str = Field(min_length=1, description="Spotify OAuth client ID")
    spotify_client_secret: str = Field(min_length=1, description="Spotify OAuth client secret")
    spotify_refresh_token: str = Field(default="", description="Refresh token exchanged for an access token")
    spotify_grant_type: str = Field(default="refresh_token", description="OAuth grant type for the token request")
    spotify_access_token: str = Field(default="", description="Pre-issued access token; skips the token exchange")

    # Endpoints
    spotify_api_base_url: str = Field(default="https://api.spotify.com/v1", description="Spotify Web API base URL")
    spotify_token_url: str = Field(
        default="https://accounts.spotify.com/api/token", description="Spotify accounts token endpoint"
    )

    request_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    log_level: str = Field(default="INFO", description="Logging level used by setup_logging")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator(
        "spotify_client_id", "spotify_client_secret", "spotify_refresh_token", "spotify_access_token", mode="after"
    )
    @classmethod
    def strip_credentials(cls, v: str) -> str:
        """Strip whitespace copied along with credentials."""
        return v.strip()

    @field_validator("spotify_api_base_url", "spotify_token_url", mode="after")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure endpoint URLs are http(s) and have no trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Spotify URLs must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @property
    def has_credentials(self) -> bool:
        """True when a token can be obtained without further input."""
        return bool(self.spotify_access_token or self.spotify_refresh_token)


def load_settings(env_file: Path | str | None = None) -> Settings:
    """Build a fresh Settings instance.

    Args:
        env_file: Optional .env file overriding the default one at the project root

    Returns:
        New Settings instance
    """
    if env_file is None:
        return Settings()
    return Settings(_env_file=env_file)
