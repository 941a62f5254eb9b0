import polars as pl
import pytest

from rowschema.core import FieldKind, SchemaDescriptor
from rowschema.frames import FrameSchemaError, FrameSettings, validate_frame_against_descriptor

INT = FieldKind.INT
STRING = FieldKind.STRING


@pytest.fixture()
def people() -> SchemaDescriptor:
    return SchemaDescriptor.from_kinds([INT, STRING], ["id", "name"])


def test_valid_frame_is_cast_and_reordered(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"name": ["ada", "grace"], "id": [1, 2]})
    out = validate_frame_against_descriptor(df, people)
    assert out.columns == ["id", "name"]
    assert out.schema["id"] == pl.Int32
    assert out["id"].to_list() == [1, 2]


def test_missing_column_raises(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"id": [1]})
    with pytest.raises(FrameSchemaError, match="missing"):
        validate_frame_against_descriptor(df, people)


def test_extra_columns_rejected_when_strict(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"id": [1], "name": ["a"], "extra": [True]})
    with pytest.raises(FrameSchemaError, match="unexpected"):
        validate_frame_against_descriptor(df, people)


def test_extra_columns_allowed_when_not_strict(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"extra": [True], "name": ["a"], "id": [1]})
    out = validate_frame_against_descriptor(df, people, strict=False)
    assert out.columns == ["id", "name", "extra"]

    out = validate_frame_against_descriptor(df, people, settings=FrameSettings(strict_schema=False))
    assert out.columns == ["id", "name", "extra"]


def test_int_overflow_fails_cast(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"id": [1, 2**40], "name": ["a", "b"]})
    with pytest.raises(FrameSchemaError, match="cast"):
        validate_frame_against_descriptor(df, people)


def test_unparsable_int_fails_cast(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"id": ["1", "two"], "name": ["a", "b"]})
    with pytest.raises(FrameSchemaError):
        validate_frame_against_descriptor(df, people)


def test_string_width_enforced(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"id": [1, 2], "name": ["a" * 128, "b" * 129]})
    with pytest.raises(FrameSchemaError, match="128 bytes"):
        validate_frame_against_descriptor(df, people)


def test_string_width_counts_encoded_bytes(people: SchemaDescriptor) -> None:
    # 65 two-byte characters: 65 chars but 130 bytes.
    df = pl.DataFrame({"id": [1], "name": ["é" * 65]})
    with pytest.raises(FrameSchemaError):
        validate_frame_against_descriptor(df, people)


def test_string_width_not_enforced_when_disabled(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"id": [1], "name": ["x" * 500]})
    out = validate_frame_against_descriptor(df, people, settings=FrameSettings(enforce_widths=False))
    assert out.height == 1


def test_anonymous_fields_validate_by_generated_name() -> None:
    desc = SchemaDescriptor.anonymous([INT, STRING])
    df = pl.DataFrame({"col_0": [7], "col_1": ["x"]})
    out = validate_frame_against_descriptor(df, desc, settings=FrameSettings(anonymous_prefix="col_"))
    assert out.columns == ["col_0", "col_1"]
    assert out.schema["col_0"] == pl.Int32


def test_nulls_in_descriptor_columns_rejected(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"id": [1, None], "name": ["a", "b"]})
    with pytest.raises(FrameSchemaError, match="null"):
        validate_frame_against_descriptor(df, people)

    df = pl.DataFrame({"id": [1, 2], "name": ["a", None]})
    with pytest.raises(FrameSchemaError, match="'name'"):
        validate_frame_against_descriptor(df, people)


def test_nulls_in_extra_columns_allowed_when_not_strict(people: SchemaDescriptor) -> None:
    df = pl.DataFrame({"id": [1], "name": ["a"], "note": [None]})
    out = validate_frame_against_descriptor(df, people, strict=False)
    assert out.columns == ["id", "name", "note"]


def test_string_width_ignores_byte_order_mark(people: SchemaDescriptor) -> None:
    # utf-16 writes 2 bytes per ASCII char plus a 2-byte BOM that is not payload.
    settings = FrameSettings(string_encoding="utf-16")
    ok = pl.DataFrame({"id": [1], "name": ["a" * 64]})
    assert validate_frame_against_descriptor(ok, people, settings=settings).height == 1

    too_wide = pl.DataFrame({"id": [1], "name": ["a" * 65]})
    with pytest.raises(FrameSchemaError, match="130 bytes"):
        validate_frame_against_descriptor(too_wide, people, settings=settings)
