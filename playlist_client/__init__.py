"""Spotify playlist resource client"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("playlist-client")
except PackageNotFoundError:
    __version__ = "dev"
