import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from objdata.content import ContentHash
from objdata.errors import DeserializationError, InvalidReferenceError
from objdata.reference import CrossProjectReference, Reference, ReferenceType


def valid_reference():
    return Reference(
        id="ref-1",
        source_asset_id="motor-mount",
        target_asset_id="gear-assembly",
        target_content_hash=None,
        reference_type=ReferenceType.CONTAINS,
        created_at=1704542400,
    )


def test_reference_validate_valid():
    ref = valid_reference()
    ref.validate()
    assert ref.reference_type is ReferenceType.CONTAINS


@pytest.mark.parametrize(
    "field, message",
    [
        ("id", "id is required"),
        ("source_asset_id", "source_asset_id is required"),
        ("target_asset_id", "target_asset_id is required"),
    ],
)
def test_reference_validate_empty_fields(field, message):
    ref = valid_reference()
    setattr(ref, field, "")
    with pytest.raises(InvalidReferenceError) as info:
        ref.validate()
    assert info.value.message == message


@pytest.mark.parametrize(
    "value, member",
    [
        (0, ReferenceType.UNSPECIFIED),
        (1, ReferenceType.CONTAINS),
        (2, ReferenceType.DEPENDS_ON),
        (3, ReferenceType.DERIVED_FROM),
        (4, ReferenceType.REFERENCES),
    ],
)
def test_reference_type_values(value, member):
    assert ReferenceType(value) is member
    assert int(member) == value


def test_reference_type_str_names():
    assert ReferenceType.UNSPECIFIED.as_str_name() == "REFERENCE_TYPE_UNSPECIFIED"
    assert ReferenceType.DEPENDS_ON.as_str_name() == "REFERENCE_TYPE_DEPENDS_ON"
    assert ReferenceType.from_str_name("REFERENCE_TYPE_REFERENCES") is ReferenceType.REFERENCES
    assert ReferenceType.from_str_name("REFERENCES") is None
    assert ReferenceType.from_str_name("REFERENCE_TYPE_BOGUS") is None


@pytest.mark.parametrize("member", list(ReferenceType))
def test_reference_type_str_name_roundtrip(member):
    assert ReferenceType.from_str_name(member.as_str_name()) is member


def test_reference_with_content_hash():
    ref = valid_reference()
    ref.target_content_hash = ContentHash(b"\xab" * 32)
    ref.validate()
    assert ref.target_content_hash == ContentHash(b"\xab" * 32)


def test_reference_json_uses_variant_name():
    data = valid_reference().to_dict()
    assert data["reference_type"] == "Contains"
    assert data["target_content_hash"] is None


def test_reference_roundtrip_with_hash():
    ref = valid_reference()
    ref.target_content_hash = ContentHash(bytes(range(32)))
    ref.reference_type = ReferenceType.DERIVED_FROM
    restored = Reference.from_dict(json.loads(json.dumps(ref.to_dict())))
    assert restored == ref


@given(st.text(min_size=1), st.text(min_size=1), st.text(min_size=1))
def test_reference_non_empty_fields_validate(source, target, id_):
    ref = Reference(id_, source, target, None, ReferenceType.REFERENCES, 0)
    ref.validate()
    assert ref.source_asset_id == source


@given(st.text(min_size=1), st.text(min_size=1))
def test_reference_serialization_roundtrip(source, target):
    ref = Reference(
        f"ref-{source[:3]}-{target[:3]}", source, target, None, ReferenceType.DEPENDS_ON, 5
    )
    restored = Reference.from_dict(json.loads(json.dumps(ref.to_dict())))
    assert restored.source_asset_id == ref.source_asset_id
    assert restored.target_asset_id == ref.target_asset_id
    assert restored == ref


def test_reference_from_dict_errors():
    data = valid_reference().to_dict()
    with pytest.raises(DeserializationError):
        Reference.from_dict({k: v for k, v in data.items() if k != "id"})
    with pytest.raises(DeserializationError):
        Reference.from_dict({**data, "reference_type": "Nope"})
    with pytest.raises(DeserializationError):
        Reference.from_dict({**data, "created_at": -1})
    with pytest.raises(DeserializationError):
        Reference.from_dict({**data, "target_content_hash": [1, 2]})


def test_cross_project_reference_roundtrip():
    ref = CrossProjectReference(
        id="xref-1",
        source_asset_id="proj2-asset",
        target_project_id="ab" * 16,
        target_asset_id="proj1-asset",
        target_content_hash=ContentHash(b"\x07" * 32),
        reference_type=ReferenceType.REFERENCES,
        created_at=1704542400,
    )
    data = ref.to_dict()
    assert data["reference_type"] == "References"
    assert CrossProjectReference.from_dict(json.loads(json.dumps(data))) == ref


def test_cross_project_reference_missing_project():
    data = {
        "id": "x",
        "source_asset_id": "a",
        "target_asset_id": "b",
        "target_content_hash": None,
        "reference_type": "Contains",
        "created_at": 1,
    }
    with pytest.raises(DeserializationError):
        CrossProjectReference.from_dict(data)