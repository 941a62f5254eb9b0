"""
Schema validation utilities for rowschema.frames.

Purpose
- Validate Polars DataFrames against schema descriptors from rowschema.core.
- Cast columns to the dtype of their field kind, failing loudly when a value does not fit.

Checks performed
- Every descriptor column present (column names from materialize.column_names).
- No nulls in descriptor columns (Arrow fields from to_arrow_schema are non-nullable).
- When strict: no columns beyond the descriptor's.
- Dtype compatibility: INT columns cast to Int32, STRING columns to Utf8, with strict
  casts so overflowing or unparsable values raise instead of turning into nulls.
- When enforce_widths: no STRING value longer than STRING_BYTE_LEN encoded bytes.

Notes
- The returned frame has descriptor columns first, in field order; extra columns (only
  possible when not strict) follow in their original order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import polars as pl

from rowschema.core.constants import STRING_BYTE_LEN
from rowschema.core.descriptor import SchemaDescriptor
from rowschema.core.grammar import FieldKind

from .config import FrameSettings
from .errors import FrameSchemaError
from .materialize import POLARS_DTYPES, column_names

__all__ = [
    "validate_frame_against_descriptor",
]

logger = logging.getLogger(__name__)


def _ensure_columns_present(df: pl.DataFrame, needed: Iterable[str]) -> None:
    missing = [c for c in needed if c not in df.columns]
    if missing:
        raise FrameSchemaError(f"missing required columns: {missing!r}")


def _ensure_no_extra_columns(df: pl.DataFrame, allowed: set[str]) -> None:
    extras = [c for c in df.columns if c not in allowed]
    if extras:
        raise FrameSchemaError(
            f"unexpected columns present: {extras!r} (allowed={sorted(allowed)!r})"
        )


def _strict_cast(df: pl.DataFrame, col: str, target: object) -> pl.DataFrame:
    try:
        # Polars dtypes are singleton-like objects (e.g., pl.Int32); type checker may not resolve.
        return df.with_columns(pl.col(col).cast(target, strict=True))  # type: ignore[arg-type]
    except Exception as exc:
        raise FrameSchemaError(f"failed to cast column {col!r} to {target}: {exc}") from exc


def _max_encoded_len(series: pl.Series, encoding: str) -> int:
    values = series.drop_nulls()
    if values.is_empty():
        return 0
    if encoding == "utf-8":
        return int(values.str.len_bytes().max())  # type: ignore[arg-type]
    # Codecs such as utf-16 prepend a BOM to every encoded value; it is not payload.
    bom = len("".encode(encoding))
    return max(len(v.encode(encoding)) - bom for v in values.to_list())


def _ensure_no_nulls(df: pl.DataFrame, col: str) -> None:
    nulls = df.get_column(col).null_count()
    if nulls:
        raise FrameSchemaError(
            f"column {col!r} holds {nulls} null value(s); descriptor fields are non-nullable"
        )


def _ensure_string_widths(df: pl.DataFrame, col: str, encoding: str) -> None:
    try:
        widest = _max_encoded_len(df.get_column(col), encoding)
    except UnicodeEncodeError as exc:
        raise FrameSchemaError(f"column {col!r} holds values not encodable as {encoding}") from exc
    if widest > STRING_BYTE_LEN:
        raise FrameSchemaError(
            f"column {col!r} holds a value of {widest} bytes; STRING fields are limited to "
            f"{STRING_BYTE_LEN} bytes"
        )


def validate_frame_against_descriptor(
    df: pl.DataFrame,
    desc: SchemaDescriptor,
    *,
    settings: FrameSettings | None = None,
    strict: bool | None = None,
) -> pl.DataFrame:
    """
    Validate a Polars DataFrame against a SchemaDescriptor.

    Args:
        df (pl.DataFrame): Frame to validate.
        desc (SchemaDescriptor): Descriptor the frame's rows must fit.
        settings (FrameSettings | None): Column naming, width, and strictness settings;
            defaults when None.
        strict (bool | None): Overrides settings.strict_schema when given.

    Returns:
        pl.DataFrame: Frame with columns cast to their kind's dtype, descriptor columns
        first and in field order.

    Raises:
        FrameSchemaError: If columns are missing, extras are present under strict mode, a
            column holds nulls, a cast fails, or a STRING value exceeds the fixed width.

    Examples:
        >>> import polars as pl
        >>> from rowschema.core import SchemaDescriptor
        >>> desc = SchemaDescriptor.from_kinds(["int", "string"], ["id", "name"])
        >>> out = validate_frame_against_descriptor(
        ...     pl.DataFrame({"name": ["a"], "id": [1]}), desc
        ... )
        >>> out.columns, out.schema["id"]
        (['id', 'name'], Int32)
    """
    settings = settings or FrameSettings()
    if strict is None:
        strict = settings.strict_schema

    names = column_names(desc, settings)
    _ensure_columns_present(df, names)
    if strict:
        _ensure_no_extra_columns(df, set(names))

    for col, entry in zip(names, desc):
        expected = POLARS_DTYPES[entry.kind]
        actual = df.schema[col]
        if actual != expected:
            logger.debug("casting column %r from %s to %s", col, actual, expected)
            df = _strict_cast(df, col, expected)
        _ensure_no_nulls(df, col)
        if entry.kind is FieldKind.STRING and settings.enforce_widths:
            _ensure_string_widths(df, col, settings.string_encoding)

    extras = [c for c in df.columns if c not in set(names)]
    return df.select(names + extras)
