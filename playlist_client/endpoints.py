"""Spotify Web API paths, relative to the API base URL."""

USERS = "users"
PLAYLISTS = "playlists"
TRACKS = "tracks"
FOLLOWERS = "followers"
FEATURED_PLAYLISTS = "browse/featured-playlists"


def user_playlists(user_id: str) -> str:
    return f"{USERS}/{user_id}/{PLAYLISTS}"


def playlist(playlist_id: str) -> str:
    return f"{PLAYLISTS}/{playlist_id}"


def playlist_tracks(playlist_id: str) -> str:
    return f"{PLAYLISTS}/{playlist_id}/{TRACKS}"


def playlist_followers(playlist_id: str) -> str:
    # Spotify has no playlist delete; removing a playlist means unfollowing it.
    return f"{PLAYLISTS}/{playlist_id}/{FOLLOWERS}"
