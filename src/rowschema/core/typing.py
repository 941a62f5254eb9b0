"""
Lightweight typing aliases used across descriptors, payloads, and frames.

Provides minimal aliases to improve readability and static checks.
This module contains no runtime logic and is zero-IO.

Examples:
    Use aliases in annotations.

    >>> from rowschema.core.typing import FieldIndex, FieldName, JsonDict
    >>> def first(i: FieldIndex = FieldIndex(0)) -> FieldIndex:
    ...     return i
    >>> first()
    0
    >>> def anonymous() -> FieldName:
    ...     return None
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NewType, Optional, Union

from .grammar import FieldKind

__all__ = [
    "FieldIndex",
    "FieldName",
    "KindLike",
    "KindSequence",
    "NameSequence",
    "JsonDict",
]

# Zero-based position of a field inside a descriptor.
FieldIndex = NewType("FieldIndex", int)

# None marks an anonymous field.
FieldName = Optional[str]

# Anything field_kind_from_value accepts.
KindLike = Union[FieldKind, str]
KindSequence = Sequence[KindLike]
NameSequence = Sequence[FieldName]

# JSON object as produced by payload model_dump and json.loads.
JsonDict = dict[str, Any]
