"""Fixed-size byte values: content hashes and identity nonces."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from objdata.errors import DeserializationError


def _check_length(value: bytes | bytearray, size: int, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"{name} must be bytes")
    if len(value) != size:
        raise ValueError(f"{name} must be exactly {size} bytes, got {len(value)}")
    return bytes(value)


def _bytes_from_json(value: object, size: int, name: str) -> bytes:
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        raise DeserializationError(f"expected a byte array for {name}")
    if not all(isinstance(b, int) and not isinstance(b, bool) and 0 <= b <= 255 for b in value):
        raise DeserializationError(f"invalid byte value in {name}")
    if len(value) != size:
        raise DeserializationError(f"expected {size} bytes for {name}")
    return bytes(value)


@dataclass(frozen=True)
class ContentHash:
    """A 32-byte BLAKE3 hash of a content blob."""

    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _check_length(self.value, 32, "ContentHash"))

    def to_hex(self) -> str:
        """Return the hash as a lowercase hex string."""
        return self.value.hex()

    def to_json(self) -> list[int]:
        """Return the hash as a JSON-ready list of byte values."""
        return list(self.value)

    @classmethod
    def from_json(cls, value: object) -> ContentHash:
        """Build a hash from a list of 32 byte values."""
        return cls(_bytes_from_json(value, 32, "ContentHash"))


@dataclass(frozen=True)
class Nonce:
    """An 8-byte nonce used when deriving an identity ID."""

    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _check_length(self.value, 8, "Nonce"))

    def to_json(self) -> list[int]:
        """Return the nonce as a JSON-ready list of byte values."""
        return list(self.value)

    @classmethod
    def from_json(cls, value: object) -> Nonce:
        """Build a nonce from a list of 8 byte values."""
        return cls(_bytes_from_json(value, 8, "Nonce"))