"""Protocol-buffer wire encoding of vault catalog entries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from objdata.errors import DeserializationError

_VARINT = 0
_FIXED64 = 1
_LENGTH_DELIMITED = 2
_FIXED32 = 5

_MAX_UINT64 = (1 << 64) - 1


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _key(field: int, wire_type: int) -> bytes:
    return _encode_varint((field << 3) | wire_type)


def _length_delimited(field: int, payload: bytes) -> bytes:
    return _key(field, _LENGTH_DELIMITED) + _encode_varint(len(payload)) + payload


class _Reader:
    """Sequential reader over protocol-buffer wire data."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def varint(self) -> int:
        result = 0
        for shift in range(0, 70, 7):
            if self._pos >= len(self._data):
                raise DeserializationError("buffer underflow while reading varint")
            byte = self._data[self._pos]
            self._pos += 1
            if shift == 63 and byte > 1:
                raise DeserializationError("invalid varint")
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result
        raise DeserializationError("invalid varint")

    def take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise DeserializationError("buffer underflow")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def fields(self) -> Iterator[tuple[int, int]]:
        while not self.at_end():
            key = self.varint()
            if key > 0xFFFFFFFF:
                raise DeserializationError(f"invalid key value: {key}")
            field, wire_type = key >> 3, key & 0x07
            if field == 0:
                raise DeserializationError("invalid field number: 0")
            yield field, wire_type

    def skip(self, wire_type: int) -> None:
        if wire_type == _VARINT:
            self.varint()
        elif wire_type == _FIXED64:
            self.take(8)
        elif wire_type == _LENGTH_DELIMITED:
            self.take(self.varint())
        elif wire_type == _FIXED32:
            self.take(4)
        else:
            raise DeserializationError(f"unsupported wire type: {wire_type}")

    def expect(self, wire_type: int, expected: int, field: str) -> None:
        if wire_type != expected:
            raise DeserializationError(
                f"invalid wire type for field `{field}`: expected {expected}, got {wire_type}"
            )


def _decode_str(raw: bytes, field: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DeserializationError(f"field `{field}` is not valid UTF-8") from exc


@dataclass
class ProjectCatalogEntry:
    """A project as listed in a user's vault catalog.

    Stored encrypted in the vault replica under ``/catalog/{project_id}``.
    """

    project_id: str = ""
    replica_id: bytes = b""
    project_name: str = ""
    created_at: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.replica_id, bytearray):
            self.replica_id = bytes(self.replica_id)

    def encode(self) -> bytes:
        """Serialize to protocol-buffer wire format, leaving out default values."""
        if not 0 <= self.created_at <= _MAX_UINT64:
            raise ValueError("created_at must fit in an unsigned 64-bit integer")
        parts = []
        if self.project_id:
            parts.append(_length_delimited(1, self.project_id.encode("utf-8")))
        if self.replica_id:
            parts.append(_length_delimited(2, bytes(self.replica_id)))
        if self.project_name:
            parts.append(_length_delimited(3, self.project_name.encode("utf-8")))
        if self.created_at:
            parts.append(_key(4, _VARINT) + _encode_varint(self.created_at))
        return b"".join(parts)

    @classmethod
    def decode(cls, data: bytes) -> ProjectCatalogEntry:
        """Parse protocol-buffer wire data; unknown fields are skipped."""
        reader = _Reader(bytes(data))
        entry = cls()
        for field, wire_type in reader.fields():
            if field == 1:
                reader.expect(wire_type, _LENGTH_DELIMITED, "project_id")
                entry.project_id = _decode_str(reader.take(reader.varint()), "project_id")
            elif field == 2:
                reader.expect(wire_type, _LENGTH_DELIMITED, "replica_id")
                entry.replica_id = reader.take(reader.varint())
            elif field == 3:
                reader.expect(wire_type, _LENGTH_DELIMITED, "project_name")
                entry.project_name = _decode_str(reader.take(reader.varint()), "project_name")
            elif field == 4:
                reader.expect(wire_type, _VARINT, "created_at")
                entry.created_at = reader.varint()
            else:
                reader.skip(wire_type)
        return entry