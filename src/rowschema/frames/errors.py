"""
Custom exceptions for the rowschema.frames module.

Purpose
- Provide dataframe-boundary error types that map cleanly to responsibilities in rowschema.frames.
- Keep rowschema.core as the source of truth for descriptor errors (see rowschema.core.errors).

Source of truth and boundaries
- rowschema.core.errors.InvalidArgument / IndexOutOfRange / NoSuchField are raised by descriptors.
- rowschema.frames raises Frame* errors for materialization and validation concerns:
  - FrameConfigError: invalid or unsupported configuration.
  - FrameSchemaError: a descriptor cannot be materialized, or a DataFrame failed validation.

Notes
- These exceptions are stdlib-only.
"""

from __future__ import annotations


class FrameError(Exception):
    """
    Base class for dataframe-boundary errors in rowschema.frames.

    Notes:
        Use this as a catch-all for frame-layer failures, distinct from rowschema.core errors.
    """


class FrameConfigError(FrameError):
    """
    Raised when frame configuration is invalid or unsupported.

    Examples:
        - Empty anonymous column prefix
        - Unknown string encoding
    """


class FrameSchemaError(FrameError):
    """
    Raised when a descriptor and a DataFrame (or polars schema) do not line up.

    Notes:
        Covers missing/extra columns, failed strict casts, strings wider than the
        fixed STRING width, duplicate column names, and unsupported polars dtypes.
    """
