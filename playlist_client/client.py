"""Spotify playlist resource client.

Maps Spotify's playlist endpoints onto typed results. Transport failures
propagate as SpotifyAPIException and malformed bodies as DecodeException;
nothing is retried. The one exception is ``update_playlist_details``,
which returns Spotify's error envelope as a value.
"""

from collections.abc import Sequence
from typing import Any

from playlist_client import codec, endpoints
from playlist_client.config import Settings
from playlist_client.exceptions import DecodeException
from playlist_client.logging_config import get_logger, log_with_context
from playlist_client.models import ErrorEnvelope, JSONValue, Playlist
from playlist_client.protocols import TransportProtocol
from playlist_client.transport import SpotifyTransport

logger = get_logger(__name__)


class PlaylistResourceClient:
    """One method per Spotify playlist capability.

    Holds nothing but its transport, so a single instance can be shared
    between threads as long as the transport can.
    """

    def __init__(self, transport: TransportProtocol):
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlaylistResourceClient":
        """Build a client over a SpotifyTransport configured from ``settings``."""
        return cls(SpotifyTransport(settings))

    def __enter__(self) -> "PlaylistResourceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    # GET

    def list_featured_playlists(self) -> list[Playlist]:
        """
        Get the playlists featured on the browse page.

        Only the first page Spotify returns is used.

        Returns:
            Featured playlists, empty if Spotify lists none.

        Raises:
            SpotifyAPIException: If the request fails.
            DecodeException: If the body has no ``playlists`` object or an item is malformed.
        """
        response = self._transport.get(endpoints.FEATURED_PLAYLISTS)
        body = codec.require_object(codec.parse(response.content), "featured playlists response")
        if "playlists" not in body:
            raise DecodeException("Featured playlists response has no 'playlists' object")
        page = codec.require_object(body["playlists"], "'playlists'")
        return codec.playlists_from_items(codec.get_items(page))

    def list_playlists_for_user(self, user_id: str) -> list[Playlist]:
        """
        Get all playlists of one user.

        Args:
            user_id: Spotify user ID.

        Returns:
            Playlists with id, name, description and uri filled in. Non-string
            values are kept as their JSON text.

        Raises:
            SpotifyAPIException: If the request fails.
            DecodeException: If an item is not an object or lacks one of those fields.
        """
        response = self._transport.get(endpoints.user_playlists(user_id))
        body = codec.require_object(codec.parse(response.content), "user playlists response")
        return [codec.lenient_playlist(item) for item in codec.get_items(body)]

    def get_playlist_by_id(self, playlist_id: str) -> Playlist:
        """Get one playlist by its ID."""
        response = self._transport.get(endpoints.playlist(playlist_id))
        return codec.decode(response.content, Playlist)

    def get_playlist_tracks(self, playlist_id: str) -> list[JSONValue]:
        """
        Get the tracks of a playlist as raw JSON objects.

        Items whose ``track`` is null are skipped; Spotify leaves such
        placeholders behind when a track is pulled from the catalog.

        Args:
            playlist_id: Spotify playlist ID.

        Returns:
            The ``track`` object of every item that still has one.

        Raises:
            SpotifyAPIException: If the request fails.
            DecodeException: If an item is not an object or has no ``track`` key.
        """
        response = self._transport.get(endpoints.playlist_tracks(playlist_id))
        body = codec.require_object(codec.parse(response.content), "playlist tracks response")

        tracks: list[JSONValue] = []
        for item in codec.get_items(body):
            item = codec.require_object(item, "playlist track item")
            if "track" not in item:
                raise DecodeException("Playlist track item has no 'track' field")
            if item["track"] is None:
                log_with_context(
                    logger,
                    "debug",
                    "Skipping unavailable track",
                    playlist_id=playlist_id,
                    event_type="playlist_track_skipped",
                )
                continue
            tracks.append(item["track"])
        return tracks

    # DELETE

    def delete_playlist_by_id(self, playlist_id: str) -> None:
        """
        Remove a playlist from the current user's library.

        Spotify has no delete endpoint; this unfollows the playlist, which
        is what deleting it in the Spotify apps does too.

        Raises:
            SpotifyAPIException: On a non-2xx status. Spotify's
                ``{"error": {...}}`` object is in ``details["error"]``.
        """
        self._transport.delete(endpoints.playlist_followers(playlist_id))

    def delete_all_playlists_for_user(self, user_id: str) -> None:
        """
        Unfollow every playlist of a user, one at a time.

        The first failing unfollow propagates and the remaining playlists
        are left alone.
        """
        for playlist in self.list_playlists_for_user(user_id):
            log_with_context(
                logger,
                "debug",
                "Unfollowing playlist",
                user_id=user_id,
                playlist_id=playlist.id,
                event_type="playlist_unfollow",
            )
            self.delete_playlist_by_id(playlist.id)

    # POST

    def create_playlist(self, user_id: str, playlist: Playlist) -> Playlist:
        """
        Create a playlist for a user.

        Args:
            user_id: Spotify user ID that will own the playlist.
            playlist: Payload; only name and description are sent.

        Returns:
            The playlist Spotify created, carrying its new id and uri.
        """
        response = self._transport.post(endpoints.user_playlists(user_id), json=playlist.to_payload())
        return codec.decode(response.content, Playlist)

    def add_items_to_playlist(self, playlist_id: str, items: Sequence[str]) -> None:
        """Add tracks or episodes, given as Spotify URIs, to a playlist.

        The URIs go in a ``{"uris": [...]}`` object, the body Spotify
        documents, rather than as a bare JSON array.
        """
        self._transport.post(endpoints.playlist_tracks(playlist_id), json={"uris": list(items)})

    # PUT

    def update_playlist_details(self, playlist_id: str, updated: Playlist) -> ErrorEnvelope:
        """
        Change the name and description of a playlist.

        Spotify answers a successful update with an empty 200. That is
        reported as ``{"error": {"status": 200, "message": "success"}}`` so
        callers always get the same envelope shape back.

        Args:
            playlist_id: Spotify playlist ID.
            updated: Payload holding the new name and description.

        Returns:
            The success envelope on 200, otherwise Spotify's error body as sent.

        Raises:
            SpotifyAPIException: If no response was received.
            DecodeException: If a non-200 body is not an error envelope.
        """
        response = self._transport.put(endpoints.playlist(playlist_id), json=updated.to_payload(), check=False)
        if response.status_code == 200:
            return ErrorEnvelope.success()

        log_with_context(
            logger,
            "debug",
            "Playlist update rejected",
            playlist_id=playlist_id,
            status_code=response.status_code,
            event_type="playlist_update_failed",
        )
        return codec.decode(response.content, ErrorEnvelope)
