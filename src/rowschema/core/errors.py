"""
Core exception types raised by descriptor construction, lookup, and payload decoding.

Provides typed exceptions for core-domain failures:
- InvalidArgument for malformed construction input, bad index types, and bad lookup names.
- GrammarError for kind tokens that are not part of the closed FieldKind set.
- IndexOutOfRange for field indices outside ``[0, field_count())``.
- NoSuchField when a name lookup finds no matching field.
- VersionMismatch for payloads written under an incompatible format version.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Every error is raised at the call site; nothing in core corrects or defaults bad input.
    - IndexOutOfRange and NoSuchField also derive from IndexError and LookupError so
      callers written against the builtin protocols keep working.

Examples:
    Catch a failed name lookup.

    >>> from rowschema.core import FieldKind, SchemaDescriptor
    >>> from rowschema.core.errors import NoSuchField
    >>> desc = SchemaDescriptor.from_kinds([FieldKind.INT], ["id"])
    >>> try:
    ...     desc.index_of("missing")
    ... except NoSuchField as e:
    ...     msg = str(e)
    >>> "missing" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "InvalidArgument",
    "GrammarError",
    "IndexOutOfRange",
    "NoSuchField",
    "VersionMismatch",
]


class SchemaError(ValueError):
    """Base class for descriptor failures (shape, lookup, payload)."""


class InvalidArgument(SchemaError):
    """Malformed input: mismatched kind/name lengths, empty field list, bad name or index type."""


class GrammarError(InvalidArgument):
    """Kind token is not lower_snake or does not name a known FieldKind."""


class IndexOutOfRange(SchemaError, IndexError):
    """Field index outside the half-open range [0, field_count())."""


class NoSuchField(SchemaError, LookupError):
    """No field carries the requested name."""


class VersionMismatch(RuntimeError):
    """Incompatible or unexpected payload format version encountered."""
