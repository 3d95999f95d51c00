"""Storage keys for project, asset and reference entries."""

from __future__ import annotations

import enum
from dataclasses import dataclass

PROJECT_KEY = "/project"
ASSETS_PREFIX = "/assets/"
REFS_PREFIX = "/refs/"


class KeyType(enum.Enum):
    """The kind of entry a storage key addresses."""

    PROJECT = "project"
    ASSET = "asset"
    REFERENCE = "reference"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ParsedKey:
    """A storage key split into its kind and, for assets and references, an ID."""

    kind: KeyType
    id: str | None = None


def asset_key(id: str) -> str:
    """Return the storage key for an asset."""
    return f"{ASSETS_PREFIX}{id}"


def reference_key(id: str) -> str:
    """Return the storage key for a reference."""
    return f"{REFS_PREFIX}{id}"


def parse_key(key: str) -> ParsedKey:
    """Split a storage key into its kind and ID."""
    if key == PROJECT_KEY:
        return ParsedKey(KeyType.PROJECT)
    if key.startswith(ASSETS_PREFIX):
        return ParsedKey(KeyType.ASSET, key[len(ASSETS_PREFIX):])
    if key.startswith(REFS_PREFIX):
        return ParsedKey(KeyType.REFERENCE, key[len(REFS_PREFIX):])
    return ParsedKey(KeyType.UNKNOWN)