"""
Canonical field-kind grammar and helpers.

Defines the closed set of scalar field kinds a schema descriptor may carry and the
zero-IO helpers used to normalize kind tokens and field names across the stack.

Responsibilities
- Define FieldKind, the only representable scalar kinds, with their fixed byte widths.
- Provide normalization and validation helpers for kind tokens and field names.
- Supply the display labels used by descriptor rendering.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values (payloads, config, catalogs): lower_snake
   - Display labels (descriptor rendering): UPPER

2) Closed set:
   - Every FieldKind member has a byte width and a label. There is no "unknown kind"
     member and no fallback width; an unrecognized token is a GrammarError at the
     boundary where it enters, never a silently skipped field.

Kind table
----------
| Member            | Serialized value | Label    | Byte width
|-------------------|------------------|----------|-----------
| FieldKind.INT     | int              | INT      | 4
| FieldKind.STRING  | string           | STRING   | 128

Examples
--------
>>> from rowschema.core.grammar import FieldKind, field_kind_from_value
>>> field_kind_from_value("string") is FieldKind.STRING
True
>>> field_kind_from_value("INT") is FieldKind.INT
True
>>> FieldKind.STRING.byte_len
128
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Final

from .constants import INT_BYTE_LEN, STRING_BYTE_LEN, UNKNOWN_KIND_LABEL
from .errors import GrammarError, InvalidArgument

__all__ = [
    "FieldKind",
    # helpers/validators
    "is_lower_snake",
    "assert_lower_snake",
    "kind_label",
    "field_kind_from_value",
    "normalize_field_name",
    "ensure_all_enum_values_lower_snake",
]


class FieldKind(Enum):
    """
    Scalar field kinds a descriptor may carry.

    Serialized values are used in:
      - descriptor payloads (rowschema.core.serde)
      - descriptor fingerprints (rowschema.core.hashing)
      - arrow field metadata (rowschema.frames.materialize)
    """

    INT = "int"
    STRING = "string"

    @property
    def byte_len(self) -> int:
        """Fixed width of this kind in bytes."""
        return _BYTE_LENS[self]

    @property
    def label(self) -> str:
        """Upper-case display label (``INT`` / ``STRING``)."""
        return _LABELS[self]


_BYTE_LENS: Final[dict[FieldKind, int]] = {
    FieldKind.INT: INT_BYTE_LEN,
    FieldKind.STRING: STRING_BYTE_LEN,
}

_LABELS: Final[dict[FieldKind, str]] = {
    FieldKind.INT: "INT",
    FieldKind.STRING: "STRING",
}


# ============================================================================
# Helpers & Validators (zero I/O)
# ============================================================================

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Args:
      value (str): Candidate string to validate.

    Returns:
      bool: True if value matches lower_snake (e.g., "string"), False otherwise.

    Examples:
      >>> is_lower_snake("string")
      True
      >>> is_lower_snake("String")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def assert_lower_snake(value: str, what: str = "value") -> None:
    """
    Validate that a string is lower_snake.

    Args:
      value (str): Candidate string to validate.
      what (str): Human-friendly label used in the error message.

    Raises:
      GrammarError: If value is not lower_snake.
    """
    if not is_lower_snake(value):
        raise GrammarError(f"{what} must be lower_snake (got: {value!r})")


def kind_label(kind: object) -> str:
    """
    Display label for a kind, with a fallback for anything outside FieldKind.

    Returns:
      str: "INT", "STRING", or "UNKNOWN".
    """
    if isinstance(kind, FieldKind):
        return kind.label
    return UNKNOWN_KIND_LABEL


def field_kind_from_value(s: FieldKind | str) -> FieldKind:
    """
    Parse a kind token into a FieldKind.

    Accepts a FieldKind member unchanged, a serialized value ("int", "string"), or a
    display label in any case ("INT", "String"). Surrounding whitespace is ignored.

    Args:
      s (FieldKind | str): Kind member or token.

    Returns:
      FieldKind: Parsed kind.

    Raises:
      GrammarError: If s is not a string, is not lower_snake after folding, or is not a
        known kind.
    """
    if isinstance(s, FieldKind):
        return s
    if not isinstance(s, str):
        raise GrammarError(f"field kind must be a FieldKind or str (got {type(s).__name__})")
    token = s.strip().lower()
    assert_lower_snake(token, "field_kind")
    try:
        return FieldKind(token)
    except ValueError as exc:
        allowed = sorted(k.value for k in FieldKind)
        raise GrammarError(f"field_kind must be one of {allowed} (got {s!r})") from exc


def normalize_field_name(name: object, what: str = "field name") -> str | None:
    """
    Validate an optional field name.

    Args:
      name (object): None for an anonymous field, otherwise a non-empty str.
      what (str): Human-friendly label used in the error message.

    Returns:
      str | None: The name unchanged.

    Raises:
      InvalidArgument: If name is neither None nor a non-empty str.

    Notes:
      Names are compared exactly; no case folding or trimming is applied.
    """
    if name is None:
        return None
    if not isinstance(name, str):
        raise InvalidArgument(f"{what} must be a str or None (got {type(name).__name__})")
    if name == "":
        raise InvalidArgument(f"{what} must not be empty; use None for an anonymous field")
    return name


def ensure_all_enum_values_lower_snake(enums: Iterable[type[Enum]]) -> None:
    """
    Assert that every enum member's value is lower_snake.

    Args:
      enums (Iterable[type[Enum]]): Iterable of Enum classes to inspect.

    Raises:
      AssertionError: If any enum member has a non-lower_snake value.

    Examples:
      >>> ensure_all_enum_values_lower_snake([FieldKind])
    """
    for E in enums:
        for m in E:
            if not is_lower_snake(m.value):
                raise AssertionError(
                    f"{E.__name__}.{m.name} has non-lower_snake value: {m.value!r}"
                )
