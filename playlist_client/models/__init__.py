"""Playlist client models"""

from playlist_client.models.error import ErrorBody, ErrorEnvelope
from playlist_client.models.playlist import JSONValue, Playlist

__all__ = [
    "ErrorBody",
    "ErrorEnvelope",
    "JSONValue",
    "Playlist",
]
