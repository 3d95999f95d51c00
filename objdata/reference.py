"""Typed links between assets, within a project and across projects."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from objdata.content import ContentHash
from objdata.errors import DeserializationError, InvalidReferenceError


class ReferenceType(enum.IntEnum):
    """Kind of relationship between a source and a target asset."""

    UNSPECIFIED = 0
    CONTAINS = 1
    DEPENDS_ON = 2
    DERIVED_FROM = 3
    REFERENCES = 4

    def as_str_name(self) -> str:
        """Return the protocol-buffer name of this value."""
        return f"REFERENCE_TYPE_{self.name}"

    @classmethod
    def from_str_name(cls, value: str) -> ReferenceType | None:
        """Look up a value by its protocol-buffer name, or return None."""
        prefix = "REFERENCE_TYPE_"
        if not value.startswith(prefix):
            return None
        return cls.__members__.get(value[len(prefix):])

    @property
    def _json_name(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def _from_json_name(cls, value: object) -> ReferenceType:
        for member in cls:
            if member._json_name == value:
                return member
        raise DeserializationError(f"unknown reference type: {value!r}")


def _require(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise DeserializationError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind) or isinstance(value, bool):
        raise DeserializationError(f"invalid type for field `{key}`")
    if kind is int and value < 0:
        raise DeserializationError(f"field `{key}` must be non-negative")
    return value


def _optional_hash(data: Mapping[str, Any]) -> ContentHash | None:
    value = data.get("target_content_hash")
    return None if value is None else ContentHash.from_json(value)


def _hash_json(value: ContentHash | None) -> list[int] | None:
    return None if value is None else value.to_json()


@dataclass
class Reference:
    """A typed link between two assets in the same project."""

    id: str
    source_asset_id: str
    target_asset_id: str
    target_content_hash: ContentHash | None
    reference_type: ReferenceType
    created_at: int

    def validate(self) -> None:
        """Raise InvalidReferenceError unless id, source and target are set."""
        if not self.id:
            raise InvalidReferenceError("id is required")
        if not self.source_asset_id:
            raise InvalidReferenceError("source_asset_id is required")
        if not self.target_asset_id:
            raise InvalidReferenceError("target_asset_id is required")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the reference."""
        return {
            "id": self.id,
            "source_asset_id": self.source_asset_id,
            "target_asset_id": self.target_asset_id,
            "target_content_hash": _hash_json(self.target_content_hash),
            "reference_type": self.reference_type._json_name,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Reference:
        """Build a reference from a mapping produced by to_dict."""
        return cls(
            id=_require(data, "id", str),
            source_asset_id=_require(data, "source_asset_id", str),
            target_asset_id=_require(data, "target_asset_id", str),
            target_content_hash=_optional_hash(data),
            reference_type=ReferenceType._from_json_name(data.get("reference_type")),
            created_at=_require(data, "created_at", int),
        )


@dataclass
class CrossProjectReference:
    """A link from an asset in this project to an asset in another project."""

    id: str
    source_asset_id: str
    target_project_id: str
    target_asset_id: str
    target_content_hash: ContentHash | None
    reference_type: ReferenceType
    created_at: int

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the reference."""
        return {
            "id": self.id,
            "source_asset_id": self.source_asset_id,
            "target_project_id": self.target_project_id,
            "target_asset_id": self.target_asset_id,
            "target_content_hash": _hash_json(self.target_content_hash),
            "reference_type": self.reference_type._json_name,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CrossProjectReference:
        """Build a cross-project reference from a mapping produced by to_dict."""
        return cls(
            id=_require(data, "id", str),
            source_asset_id=_require(data, "source_asset_id", str),
            target_project_id=_require(data, "target_project_id", str),
            target_asset_id=_require(data, "target_asset_id", str),
            target_content_hash=_optional_hash(data),
            reference_type=ReferenceType._from_json_name(data.get("reference_type")),
            created_at=_require(data, "created_at", int),
        )