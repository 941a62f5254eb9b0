"""
Materialize schema descriptors as polars and pyarrow schemas (and back).

Purpose
- Give tuple-producing code a columnar view of a descriptor: column names, polars dtypes,
  and an Arrow schema annotated with each field's kind and fixed width.
- Recover a descriptor from a polars or Arrow schema when a frame is the source of truth.

Mapping
- FieldKind.INT    -> pl.Int32 / pa.int32()   (4-byte signed integer)
- FieldKind.STRING -> pl.Utf8  / pa.string()  (fixed width enforced by validate.py)

Notes
- Anonymous fields get a generated column name, f"{settings.anonymous_prefix}{index}".
- A DataFrame cannot hold two columns with one name, so descriptors whose resulting column
  names collide (duplicate field names, or a name shadowing a generated one) are rejected.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

import polars as pl
import pyarrow as pa

from rowschema.core.descriptor import SchemaDescriptor
from rowschema.core.errors import InvalidArgument
from rowschema.core.grammar import FieldKind
from rowschema.core.hashing import descriptor_fingerprint

from .config import FrameSettings
from .errors import FrameSchemaError

__all__ = [
    "POLARS_DTYPES",
    "ARROW_TYPES",
    "column_names",
    "empty_frame",
    "to_polars_schema",
    "to_arrow_schema",
    "descriptor_from_polars_schema",
    "descriptor_from_arrow_schema",
]

# Polars exposes dtype singletons/classes (e.g., pl.Int32). Keep this mapping loosely typed.
POLARS_DTYPES: dict[FieldKind, object] = {
    FieldKind.INT: pl.Int32,
    FieldKind.STRING: pl.Utf8,
}

ARROW_TYPES: dict[FieldKind, pa.DataType] = {
    FieldKind.INT: pa.int32(),
    FieldKind.STRING: pa.string(),
}

FINGERPRINT_METADATA_KEY = b"rowschema.fingerprint"


def column_names(desc: SchemaDescriptor, settings: FrameSettings | None = None) -> list[str]:
    """
    Column names for a descriptor, in field order.

    Args:
        desc (SchemaDescriptor): Descriptor to name.
        settings (FrameSettings | None): Supplies anonymous_prefix; defaults when None.

    Returns:
        list[str]: One name per field.

    Raises:
        FrameSchemaError: If two fields end up with the same column name.
    """
    settings = settings or FrameSettings()
    names = [
        entry.name if entry.name is not None else f"{settings.anonymous_prefix}{i}"
        for i, entry in enumerate(desc)
    ]
    dupes = sorted(n for n, count in Counter(names).items() if count > 1)
    if dupes:
        raise FrameSchemaError(f"duplicate column names for descriptor {desc}: {dupes!r}")
    return names


def to_polars_schema(
    desc: SchemaDescriptor, settings: FrameSettings | None = None
) -> dict[str, object]:
    """
    Ordered column -> polars dtype mapping for a descriptor.

    Suitable for ``pl.DataFrame(data, schema=...)`` or comparison with ``df.schema``.
    """
    names = column_names(desc, settings)
    return {name: POLARS_DTYPES[entry.kind] for name, entry in zip(names, desc)}


def empty_frame(desc: SchemaDescriptor, settings: FrameSettings | None = None) -> pl.DataFrame:
    """Zero-row DataFrame whose columns and dtypes follow the descriptor."""
    return pl.DataFrame(schema=to_polars_schema(desc, settings))


def to_arrow_schema(desc: SchemaDescriptor, settings: FrameSettings | None = None) -> pa.Schema:
    """
    Arrow schema for a descriptor.

    Each field carries metadata ``kind`` (lower_snake FieldKind value) and ``byte_len``;
    the schema carries the descriptor fingerprint under ``rowschema.fingerprint``.
    Fields are non-nullable: a fixed-width tuple slot always holds a value.
    """
    names = column_names(desc, settings)
    fields = [
        pa.field(
            name,
            ARROW_TYPES[entry.kind],
            nullable=False,
            metadata={
                b"kind": entry.kind.value.encode(),
                b"byte_len": str(entry.kind.byte_len).encode(),
            },
        )
        for name, entry in zip(names, desc)
    ]
    return pa.schema(
        fields, metadata={FINGERPRINT_METADATA_KEY: descriptor_fingerprint(desc).encode()}
    )


def _kind_for_polars(col: str, dtype: pl.DataType) -> FieldKind:
    if dtype.is_integer():
        return FieldKind.INT
    if dtype == pl.Utf8:
        return FieldKind.STRING
    raise FrameSchemaError(
        f"column {col!r} has unsupported dtype {dtype}; expected integer or string"
    )


def descriptor_from_polars_schema(schema: Mapping[str, pl.DataType]) -> SchemaDescriptor:
    """
    Infer a descriptor from a polars schema (e.g. ``df.schema``).

    Integer dtypes map to INT and string dtypes to STRING; column names become field names.

    Raises:
        FrameSchemaError: If the schema is empty or holds any other dtype.
    """
    if not schema:
        raise FrameSchemaError("cannot build a descriptor from an empty schema")
    names = list(schema.keys())
    kinds = [_kind_for_polars(col, dtype) for col, dtype in schema.items()]
    return _build(kinds, names)


def descriptor_from_arrow_schema(schema: pa.Schema) -> SchemaDescriptor:
    """
    Infer a descriptor from an Arrow schema.

    Raises:
        FrameSchemaError: If the schema is empty or holds a non-integer, non-string type.
    """
    if len(schema) == 0:
        raise FrameSchemaError("cannot build a descriptor from an empty schema")
    kinds: list[FieldKind] = []
    for field in schema:
        if pa.types.is_integer(field.type):
            kinds.append(FieldKind.INT)
        elif pa.types.is_string(field.type) or pa.types.is_large_string(field.type):
            kinds.append(FieldKind.STRING)
        else:
            raise FrameSchemaError(
                f"column {field.name!r} has unsupported arrow type {field.type}; "
                "expected integer or string"
            )
    return _build(kinds, schema.names)


def _build(kinds: list[FieldKind], names: list[str]) -> SchemaDescriptor:
    try:
        return SchemaDescriptor.from_kinds(kinds, names)
    except InvalidArgument as exc:
        raise FrameSchemaError(f"cannot build a descriptor from schema: {exc}") from exc
