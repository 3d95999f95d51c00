# objdata

Data types for versioned assets, projects and the references between them,
with helpers for laying them out in a key/value store and for encrypting
project catalog entries.

## Installation

Install the `objdata` distribution with pip. Its only dependency is
`pycryptodome`. The `test` extra adds `pytest` and `hypothesis`, which the
test suite in `tests/` uses.

## Overview

- `objdata.content`
  - `ContentHash` is a frozen 32-byte content hash. `to_hex()` returns it as lowercase hex.
  - `Nonce` is a frozen 8-byte nonce.
  - Both convert to and from a JSON list of byte values with `to_json()` and `from_json()`.
  - Building either one from bytes of the wrong length raises `ValueError`, and from a
    value that is not bytes raises `TypeError`.
- `objdata.asset`: `Asset` is a frozen, validated asset record. It is checked when created:
  - the id is 1–64 ASCII letters, digits or hyphens;
  - the name is not empty;
  - `created_at` is not later than `updated_at`.

  `author_id` is a plain string. `to_dict()` and `from_dict()` convert an asset to and from
  a JSON-ready mapping.
- `objdata.project`
  - `Project` is a frozen, validated project record. Its id is 32 hex characters, its name
    is not empty, and its timestamps are ordered as for assets.
  - `project_id_from_replica(replica_id)` takes a 32-byte replica id and returns the hex of
    its first 16 bytes.
  - `Project` has `to_dict()` and `from_dict()`.
- `objdata.reference`
  - `ReferenceType` is an integer enum: `UNSPECIFIED`, `CONTAINS`, `DEPENDS_ON`,
    `DERIVED_FROM` and `REFERENCES`, numbered 0–4.
  - `as_str_name()` and `from_str_name()` convert to and from names such as
    `REFERENCE_TYPE_CONTAINS`. `from_str_name()` returns `None` for an unknown name.
  - `Reference` links two assets in the same project. `validate()` requires that the id,
    the source asset id and the target asset id are non-empty.
  - `CrossProjectReference` links to an asset in another project.
  - Both reference classes have `to_dict()` and `from_dict()`.
- `objdata.storage`
  - The keys are `PROJECT_KEY` (`/project`), `ASSETS_PREFIX` (`/assets/`) and
    `REFS_PREFIX` (`/refs/`).
  - `asset_key(id)` and `reference_key(id)` build keys.
  - `parse_key(key)` returns a `ParsedKey` that holds a `KeyType` (`PROJECT`, `ASSET`,
    `REFERENCE` or `UNKNOWN`) and, for assets and references, the id.
- `objdata.proto`: `ProjectCatalogEntry` has `project_id`, `replica_id`, `project_name` and
  `created_at`.
  - `encode()` writes protocol-buffer wire format and leaves out fields that hold default
    values.
  - `decode()` reads that format and skips unknown fields.
- `objdata.encryption`: `encrypt_catalog_entry(entry, key)` and
  `decrypt_catalog_entry(encrypted, key)`.
  - They use XChaCha20-Poly1305 with a 32-byte key.
  - The output is a random 24-byte nonce, then the ciphertext, then a 16-byte
    authentication tag.
  - A wrong key, tampered data or data that is too short raises `DecryptionError`.

Validation and decoding failures raise subclasses of `objdata.errors.DataError`:

- `InvalidAssetError`
- `InvalidProjectError`
- `InvalidReferenceError`
- `EncryptionError`
- `DecryptionError`
- `DeserializationError`

`ContentHashMismatchError` is defined there as well.

## Example

```python
import secrets

from objdata.encryption import decrypt_catalog_entry, encrypt_catalog_entry
from objdata.project import project_id_from_replica
from objdata.proto import ProjectCatalogEntry
from objdata.storage import KeyType, asset_key, parse_key

replica_id = bytes(range(32))
entry = ProjectCatalogEntry(
    project_id=project_id_from_replica(replica_id),
    replica_id=replica_id,
    project_name="Example Project",
    created_at=1704542400,
)

vault_key = secrets.token_bytes(32)
blob = encrypt_catalog_entry(entry, vault_key)
assert decrypt_catalog_entry(blob, vault_key) == entry

parsed = parse_key(asset_key("motor-mount"))
assert parsed.kind is KeyType.ASSET and parsed.id == "motor-mount"
```

## What it does not do

- It does not sign assets or verify who wrote them. There is no signed-asset type, and it
  does not derive identity IDs from public keys and nonces.
- Author and owner ids are stored as plain strings and are not checked.
- It provides no store of its own. The storage module only builds and parses key strings.
- It has no command-line interface.