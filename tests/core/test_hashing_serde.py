import json

import pytest
from pydantic import ValidationError

from rowschema.core import FieldKind, SchemaDescriptor
from rowschema.core.errors import InvalidArgument, VersionMismatch
from rowschema.core.hashing import descriptor_digest, descriptor_fingerprint, json_dumps_canonical
from rowschema.core.serde import (
    DescriptorPayload,
    FieldPayload,
    descriptor_from_json,
    descriptor_from_payload,
    descriptor_to_json,
    descriptor_to_payload,
    json_loads,
)
from rowschema.core.serde import json_dumps_canonical as serde_dumps
from rowschema.core.versioning import FORMAT_V

INT = FieldKind.INT
STRING = FieldKind.STRING


def _payload(fields: list[dict], major: int = FORMAT_V.major, minor: int = FORMAT_V.minor) -> dict:
    return {"version": {"major": major, "minor": minor, "date": FORMAT_V.date}, "fields": fields}


def test_json_dumps_canonical_sorted_and_ascii_policy() -> None:
    obj1 = {"b": 2, "a": 1, "nested": {"y": 2, "x": 1}, "name": "größe"}
    obj2 = {"nested": {"x": 1, "y": 2}, "a": 1, "name": "größe", "b": 2}
    s1 = json_dumps_canonical(obj1)
    assert s1 == json_dumps_canonical(obj2)
    assert "größe" in s1
    assert serde_dumps is json_dumps_canonical


def test_fingerprint_follows_equality() -> None:
    a = SchemaDescriptor.from_kinds([INT, STRING], ["id", "name"])
    b = SchemaDescriptor.anonymous([INT, STRING])
    c = SchemaDescriptor.anonymous([STRING, INT])
    assert descriptor_fingerprint(a) == descriptor_fingerprint(b)
    assert descriptor_fingerprint(a) != descriptor_fingerprint(c)
    assert len(descriptor_fingerprint(a)) == 64


def test_digest_detects_renames() -> None:
    a = SchemaDescriptor.from_kinds([INT, STRING], ["id", "name"])
    b = SchemaDescriptor.from_kinds([INT, STRING], ["id", "label"])
    assert descriptor_digest(a) != descriptor_digest(b)
    assert descriptor_digest(a) == descriptor_digest(
        SchemaDescriptor.from_kinds(["int", "string"], ["id", "name"])
    )


def test_payload_roundtrip_keeps_names() -> None:
    desc = SchemaDescriptor.from_kinds([INT, STRING, INT], ["id", None, "id"])
    payload = descriptor_to_payload(desc)
    assert [f.kind for f in payload.fields] == ["int", "string", "int"]
    back = descriptor_from_payload(payload)
    assert back == desc
    assert back.field_names() == ("id", None, "id")


def test_json_roundtrip_is_canonical() -> None:
    desc = SchemaDescriptor.from_kinds([INT, STRING], ["id", "name"])
    text = descriptor_to_json(desc)
    assert text == descriptor_to_json(SchemaDescriptor.from_kinds(["INT", "string"], ["id", "name"]))
    data = json_loads(text)
    assert data["fields"][1] == {"kind": "string", "name": "name"}
    back = descriptor_from_json(text)
    assert back == desc and back.field_names() == desc.field_names()


def test_from_payload_accepts_mappings_and_labels() -> None:
    desc = descriptor_from_payload(_payload([{"kind": "INT", "name": "id"}, {"kind": "string"}]))
    assert desc.field_kinds() == (INT, STRING)
    assert desc.field_names() == ("id", None)


@pytest.mark.parametrize(
    "fields",
    [
        [],
        [{"kind": "float", "name": "x"}],
        [{"kind": "int", "name": ""}],
        [{"kind": "int", "name": "x", "width": 8}],
    ],
)
def test_from_payload_rejects_malformed(fields: list[dict]) -> None:
    with pytest.raises(InvalidArgument):
        descriptor_from_payload(_payload(fields))


def test_from_payload_rejects_non_mapping() -> None:
    with pytest.raises(InvalidArgument):
        descriptor_from_payload([{"kind": "int"}])  # type: ignore[arg-type]


def test_from_payload_rejects_incompatible_version() -> None:
    with pytest.raises(VersionMismatch):
        descriptor_from_payload(_payload([{"kind": "int"}], major=FORMAT_V.major + 1, minor=0))
    with pytest.raises(VersionMismatch):
        descriptor_from_payload(_payload([{"kind": "int"}], minor=FORMAT_V.minor + 1))


def test_from_payload_rejects_bad_version_date() -> None:
    bad = _payload([{"kind": "int"}])
    bad["version"]["date"] = "2026/10/18"
    with pytest.raises(InvalidArgument):
        descriptor_from_payload(bad)


def test_from_json_rejects_garbage() -> None:
    with pytest.raises(InvalidArgument):
        descriptor_from_json("{not json")
    with pytest.raises(InvalidArgument):
        descriptor_from_json(json.dumps({"fields": [{"kind": "int"}]}))


def test_payload_models_surface_validation_errors() -> None:
    with pytest.raises(ValidationError):
        FieldPayload(kind="blob")
    with pytest.raises(ValidationError):
        DescriptorPayload.model_validate(_payload([{"kind": "int", "name": 5}]))
