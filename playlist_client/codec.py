"""JSON decoding for Spotify response bodies.

``decode`` validates a body against a pydantic model. ``parse`` returns the
raw JSON tree for shapes that are not modelled (tracks, the featured
playlists wrapper). Both raise DecodeException instead of leaking
json/pydantic errors to callers.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from playlist_client.exceptions import DecodeException
from playlist_client.models import JSONValue, Playlist

ModelT = TypeVar("ModelT", bound=BaseModel)

# Fields copied out of each item of a user's playlist listing
PLAYLIST_FIELDS = ("id", "name", "description", "uri")


def parse(body: str | bytes) -> JSONValue:
    """Parse a raw body into a JSON tree.

    Raises:
        DecodeException: If the body is not valid JSON
    """
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeException(f"Response body is not valid JSON: {e}", details={"body": _preview(body)}) from e


def decode(body: str | bytes, shape: type[ModelT]) -> ModelT:
    """Validate a raw JSON body into ``shape``.

    Raises:
        DecodeException: If the body is not JSON or a required field is missing
    """
    try:
        return shape.model_validate_json(body)
    except ValidationError as e:
        raise DecodeException(
            f"Response body is not a valid {shape.__name__}",
            details={"errors": e.errors(include_url=False), "body": _preview(body)},
        ) from e


def decode_tree(tree: JSONValue, shape: type[ModelT]) -> ModelT:
    """Validate an already-parsed JSON value into ``shape``."""
    try:
        return shape.model_validate(tree)
    except ValidationError as e:
        raise DecodeException(
            f"JSON value is not a valid {shape.__name__}",
            details={"errors": e.errors(include_url=False)},
        ) from e


def require_object(tree: JSONValue, what: str) -> dict[str, Any]:
    """Return ``tree`` if it is a JSON object, else raise DecodeException."""
    if not isinstance(tree, dict):
        raise DecodeException(f"Expected {what} to be a JSON object, got {type(tree).__name__}")
    return tree


def get_items(tree: dict[str, Any]) -> list[Any]:
    """Return the ``items`` array of a paging object.

    A missing or null ``items`` counts as empty. Anything other than an
    array is a decode error.
    """
    items = tree.get("items")
    if items is None:
        return []
    if not isinstance(items, list):
        raise DecodeException(f"Expected 'items' to be a JSON array, got {type(items).__name__}")
    return items


def playlists_from_items(items: list[Any]) -> list[Playlist]:
    """Convert a JSON array of playlist objects into Playlist records."""
    return [decode_tree(item, Playlist) for item in items]


def stringify(value: Any) -> str:
    """Render a JSON value as text: strings unchanged, everything else as JSON.

    ``None`` becomes ``"null"`` and ``12`` becomes ``"12"``.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value)


def lenient_playlist(item: JSONValue) -> Playlist:
    """Build a Playlist from a listing item, stringifying non-string fields.

    Raises:
        DecodeException: If the item is not an object or lacks one of the fields
    """
    obj = require_object(item, "playlist item")
    missing = [field for field in PLAYLIST_FIELDS if field not in obj]
    if missing:
        raise DecodeException(
            f"Playlist item is missing {', '.join(missing)}",
            details={"missing": missing, "id": obj.get("id")},
        )
    return Playlist(**{field: stringify(obj[field]) for field in PLAYLIST_FIELDS})


def _preview(body: str | bytes, limit: int = 500) -> str:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return body[:limit]
