"""Projects: organizational groupings of assets, one per sync replica."""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from objdata.errors import DeserializationError, InvalidProjectError

_HEX_DIGITS = frozenset(string.hexdigits)


def project_id_from_replica(replica_id: bytes) -> str:
    """Return the project ID for a 32-byte replica ID: hex of its first 16 bytes."""
    if not isinstance(replica_id, (bytes, bytearray)):
        raise TypeError("replica_id must be bytes")
    if len(replica_id) != 32:
        raise ValueError(f"replica_id must be exactly 32 bytes, got {len(replica_id)}")
    return bytes(replica_id[:16]).hex()


def _field(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise DeserializationError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind) or isinstance(value, bool):
        raise DeserializationError(f"invalid type for field `{key}`")
    if kind is int and value < 0:
        raise DeserializationError(f"field `{key}` must be non-negative")
    return value


@dataclass(frozen=True)
class Project:
    """A validated project record.

    The ID is 32 hex characters, the name is non-empty, and ``created_at``
    is not later than ``updated_at``. Only the ID's format is checked, not
    that it came from a real replica.
    """

    id: str
    name: str
    description: str | None
    owner_id: str
    created_at: int
    updated_at: int

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if len(self.id.encode("utf-8")) != 32:
            raise InvalidProjectError("id must be 32 hex characters (16 bytes)")
        if not all(c in _HEX_DIGITS for c in self.id):
            raise InvalidProjectError("id must be hex characters only")
        if not self.name:
            raise InvalidProjectError("name is required")
        if self.created_at > self.updated_at:
            raise InvalidProjectError("created_at must not be greater than updated_at")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the project."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "owner_id": self.owner_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Project:
        """Build a project from a mapping produced by to_dict."""
        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise DeserializationError("invalid type for field `description`")
        return cls(
            id=_field(data, "id", str),
            name=_field(data, "name", str),
            description=description,
            owner_id=_field(data, "owner_id", str),
            created_at=_field(data, "created_at", int),
            updated_at=_field(data, "updated_at", int),
        )