"""Exceptions raised by data operations."""

from __future__ import annotations


class DataError(Exception):
    """Base class for every error raised by this package."""

    prefix = "data error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class InvalidAssetError(DataError):
    """An asset failed validation."""

    prefix = "invalid asset"


class InvalidProjectError(DataError):
    """A project failed validation."""

    prefix = "invalid project"


class InvalidReferenceError(DataError):
    """A reference failed validation."""

    prefix = "invalid reference"


class ContentHashMismatchError(DataError):
    """A content hash did not match the expected value."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected}, got {actual}")

    def __str__(self) -> str:
        return f"content hash mismatch: expected {self.expected}, got {self.actual}"


class EncryptionError(DataError):
    """Encrypting data failed."""

    prefix = "encryption failed"


class DecryptionError(DataError):
    """Decrypting data failed."""

    prefix = "decryption failed"


class DeserializationError(DataError):
    """Stored data could not be turned back into an object."""

    prefix = "deserialization failed"