"""Assets: versioned units of content within a project."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from objdata.content import ContentHash
from objdata.errors import DeserializationError, InvalidAssetError

MAX_ID_LENGTH = 64


def _is_id_char(char: str) -> bool:
    return char == "-" or (char.isascii() and char.isalnum())


def _field(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise DeserializationError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind) or isinstance(value, bool):
        raise DeserializationError(f"invalid type for field `{key}`")
    if kind is int and value < 0:
        raise DeserializationError(f"field `{key}` must be non-negative")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise DeserializationError(f"invalid type for field `{key}`")
    return value


@dataclass(frozen=True)
class Asset:
    """A validated asset record.

    The ID is 1-64 ASCII letters, digits or hyphens, the name is non-empty,
    and ``created_at`` is not later than ``updated_at``.
    """

    id: str
    name: str
    author_id: str
    content_hash: ContentHash
    content_size: int
    format: str | None
    created_at: int
    updated_at: int

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        size = len(self.id.encode("utf-8"))
        if size == 0 or size > MAX_ID_LENGTH:
            raise InvalidAssetError("id must be 1-64 characters")
        if not all(_is_id_char(c) for c in self.id):
            raise InvalidAssetError("id must be alphanumeric with hyphens only")
        if not self.name:
            raise InvalidAssetError("name is required")
        if self.created_at > self.updated_at:
            raise InvalidAssetError("created_at must not be greater than updated_at")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the asset."""
        return {
            "id": self.id,
            "name": self.name,
            "author_id": self.author_id,
            "content_hash": self.content_hash.to_json(),
            "content_size": self.content_size,
            "format": self.format,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Asset:
        """Build an asset from a mapping produced by to_dict."""
        if "content_hash" not in data:
            raise DeserializationError("missing field `content_hash`")
        return cls(
            id=_field(data, "id", str),
            name=_field(data, "name", str),
            author_id=_field(data, "author_id", str),
            content_hash=ContentHash.from_json(data["content_hash"]),
            content_size=_field(data, "content_size", int),
            format=_optional_str(data, "format"),
            created_at=_field(data, "created_at", int),
            updated_at=_field(data, "updated_at", int),
        )