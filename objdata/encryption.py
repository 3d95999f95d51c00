"""XChaCha20-Poly1305 encryption of vault catalog entries."""

from __future__ import annotations

from Crypto.Cipher import ChaCha20_Poly1305
from Crypto.Random import get_random_bytes

from objdata.errors import DecryptionError, EncryptionError
from objdata.proto import ProjectCatalogEntry

NONCE_SIZE = 24
TAG_SIZE = 16
KEY_SIZE = 32


def _check_key(key: bytes) -> bytes:
    if not isinstance(key, (bytes, bytearray)):
        raise TypeError("key must be bytes")
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be exactly {KEY_SIZE} bytes, got {len(key)}")
    return bytes(key)


def encrypt_catalog_entry(entry: ProjectCatalogEntry, key: bytes) -> bytes:
    """Encrypt an entry; the result is a 24-byte nonce followed by ciphertext and tag."""
    key = _check_key(key)
    nonce = get_random_bytes(NONCE_SIZE)
    plaintext = entry.encode()
    try:
        cipher = ChaCha20_Poly1305.new(key=key, nonce=nonce)
        ciphertext, tag = cipher.encrypt_and_digest(plaintext)
    except ValueError as exc:
        raise EncryptionError(str(exc)) from exc
    return nonce + ciphertext + tag


def decrypt_catalog_entry(encrypted: bytes, key: bytes) -> ProjectCatalogEntry:
    """Decrypt data produced by encrypt_catalog_entry and decode the entry."""
    key = _check_key(key)
    encrypted = bytes(encrypted)
    if len(encrypted) < NONCE_SIZE:
        raise DecryptionError("encrypted data too short")
    nonce, body = encrypted[:NONCE_SIZE], encrypted[NONCE_SIZE:]
    if len(body) < TAG_SIZE:
        raise DecryptionError("aead::Error")
    ciphertext, tag = body[:-TAG_SIZE], body[-TAG_SIZE:]
    try:
        cipher = ChaCha20_Poly1305.new(key=key, nonce=nonce)
        plaintext = cipher.decrypt_and_verify(ciphertext, tag)
    except ValueError as exc:
        raise DecryptionError("aead::Error") from exc
    return ProjectCatalogEntry.decode(plaintext)