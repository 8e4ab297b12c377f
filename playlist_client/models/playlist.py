"""Pydantic models for Spotify playlist resources."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

# Opaque JSON tree: objects, arrays and scalars kept as Spotify sent them.
JSONValue = dict[str, Any] | list[Any] | str | int | float | bool | None

PAYLOAD_FIELDS = {"name", "description"}


class Playlist(BaseModel):
    """A Spotify playlist reduced to the fields the client works with.

    Instances decoded from a response are treated as values. Instances
    built with ``draft`` are request payloads and may be edited before
    they are sent.
    """

    id: str = Field(..., description="Spotify ID of the playlist")
    name: str = Field(..., description="Playlist name")
    description: str = Field(..., description="Playlist description")
    uri: str = Field(..., description="Spotify URI (spotify:playlist:...)")

    @field_validator("description", mode="before")
    @classmethod
    def null_description(cls, v: Any) -> Any:
        """Spotify sends null for playlists that never had a description."""
        return "" if v is None else v

    @classmethod
    def draft(cls, name: str, description: str = "") -> "Playlist":
        """Build a request payload for create/update calls.

        The id and uri stay empty; Spotify assigns them.
        """
        return cls(id="", name=name, description=description, uri="")

    def to_payload(self) -> dict[str, Any]:
        """JSON body sent on create/update. Spotify ignores client-side ids."""
        return self.model_dump(include=PAYLOAD_FIELDS)
