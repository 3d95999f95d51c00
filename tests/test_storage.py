import pytest
from hypothesis import given
from hypothesis import strategies as st

from objdata.storage import (
    ASSETS_PREFIX,
    PROJECT_KEY,
    REFS_PREFIX,
    KeyType,
    ParsedKey,
    asset_key,
    parse_key,
    reference_key,
)

ids = st.from_regex(r"\A[a-zA-Z0-9-]+\Z")


def test_asset_key():
    assert asset_key("motor-mount") == "/assets/motor-mount"
    assert asset_key("gear-assembly") == "/assets/gear-assembly"


def test_reference_key():
    assert reference_key("assembly-to-part-1") == "/refs/assembly-to-part-1"


def test_parse_key_project():
    assert parse_key("/project") == ParsedKey(KeyType.PROJECT)
    assert PROJECT_KEY == "/project"
    assert parse_key(PROJECT_KEY).kind is KeyType.PROJECT


def test_parse_key_asset():
    assert parse_key("/assets/motor-mount") == ParsedKey(KeyType.ASSET, "motor-mount")


def test_parse_key_reference():
    assert parse_key("/refs/link-1") == ParsedKey(KeyType.REFERENCE, "link-1")


@pytest.mark.parametrize("key", ["/unknown/path", "", "/unknown/key"])
def test_parse_key_unknown(key):
    assert parse_key(key) == ParsedKey(KeyType.UNKNOWN)


def test_storage_key_parsing_roundtrip():
    assert parse_key(asset_key("asset-123")) == ParsedKey(KeyType.ASSET, "asset-123")
    assert parse_key(reference_key("ref-456")) == ParsedKey(KeyType.REFERENCE, "ref-456")


def test_distinct_asset_keys():
    key1 = asset_key("asset-1")
    key2 = asset_key("asset-2")
    assert key1 != key2
    assert parse_key(key1).kind is KeyType.ASSET
    assert parse_key(key2).kind is KeyType.ASSET


@given(ids)
def test_storage_keys_deterministic(id_):
    first_asset = asset_key(id_)
    second_asset = asset_key(id_)
    assert first_asset == second_asset
    assert first_asset == f"/assets/{id_}"

    first_ref = reference_key(id_)
    second_ref = reference_key(id_)
    assert first_ref == second_ref
    assert first_ref == f"/refs/{id_}"


@given(ids)
def test_storage_key_format_and_reversible(id_):
    akey = asset_key(id_)
    rkey = reference_key(id_)
    assert akey.startswith(ASSETS_PREFIX)
    assert rkey.startswith(REFS_PREFIX)
    assert parse_key(akey) == ParsedKey(KeyType.ASSET, id_)
    assert parse_key(rkey) == ParsedKey(KeyType.REFERENCE, id_)