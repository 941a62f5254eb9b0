"""
Frozen schema descriptors for fixed-width tuples.

A SchemaDescriptor is the ordered sequence of typed, optionally named fields that tuple,
page, and operator layers rely on for layout, comparison, and composition.

Responsibilities
- Build descriptors from kind/name sequences, kinds alone, or a merge of two descriptors.
- Answer bounds-checked field introspection and first-match name lookup.
- Compute the fixed byte size of a tuple from field kinds.
- Provide structural equality and a matching hash that both ignore field names.

Notes:
    - Instances are immutable and safe to share across threads and tuples.
    - Field order is part of identity: equality, size, and indexed access depend on it.
    - Indices are bounds-checked against the half-open range [0, field_count());
      negative indices are rejected rather than wrapped.
    - Duplicate names are legal; index_of always returns the first match. Whether a
      catalog permits them is the catalog's policy.

Examples:
    >>> from rowschema.core.descriptor import SchemaDescriptor
    >>> from rowschema.core.grammar import FieldKind
    >>> desc = SchemaDescriptor.from_kinds([FieldKind.INT, FieldKind.STRING], ["id", "name"])
    >>> desc.byte_size()
    132
    >>> desc.to_display_string()
    'INT(id), STRING(name)'
    >>> desc == SchemaDescriptor.anonymous(["int", "string"])
    True
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import IndexOutOfRange, InvalidArgument, NoSuchField
from .grammar import FieldKind, field_kind_from_value, kind_label, normalize_field_name
from .typing import FieldIndex, FieldName, KindSequence, NameSequence

__all__ = [
    "FieldEntry",
    "SchemaDescriptor",
]

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class FieldEntry:
    """
    One field of a schema.

    Attributes:
        kind (FieldKind): Scalar kind; fixes the field's byte width.
        name (str | None): Optional name. None marks an anonymous field.
    """

    kind: FieldKind
    name: FieldName = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, FieldKind):
            raise InvalidArgument(
                f"FieldEntry kind must be a FieldKind (got {type(self.kind).__name__})"
            )
        normalize_field_name(self.name)

    def __str__(self) -> str:
        return f"{self.name}({self.kind.label})"


@dataclass(frozen=True, eq=False)
class SchemaDescriptor:
    """
    Immutable, ordered description of a tuple's fields.

    Attributes:
        fields (tuple[FieldEntry, ...]): Field entries in tuple order (at least one).

    Raises:
        InvalidArgument: If fields is empty or contains anything but FieldEntry.

    Notes:
        - Prefer the constructors from_kinds, anonymous, and merge over building the
          fields tuple by hand.
        - __eq__ and __hash__ are derived from field_count() and the kind sequence only;
          names never participate.
    """

    fields: tuple[FieldEntry, ...]

    def __post_init__(self) -> None:
        try:
            fields = tuple(self.fields)
        except TypeError as exc:
            raise InvalidArgument(
                f"fields must be an iterable of FieldEntry (got {type(self.fields).__name__})"
            ) from exc
        if not fields:
            raise InvalidArgument("a schema descriptor needs at least one field")
        for pos, entry in enumerate(fields):
            if not isinstance(entry, FieldEntry):
                raise InvalidArgument(
                    f"field {pos} must be a FieldEntry (got {type(entry).__name__})"
                )
        object.__setattr__(self, "fields", fields)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_kinds(cls, kinds: KindSequence, names: NameSequence) -> SchemaDescriptor:
        """
        Build a descriptor positionally from matched kind and name sequences.

        Args:
            kinds (Sequence[FieldKind | str]): Field kinds, in order. String tokens are
                normalized via rowschema.core.grammar.field_kind_from_value.
            names (Sequence[str | None]): Field names, one per kind; None for anonymous.

        Returns:
            SchemaDescriptor: New descriptor with len(kinds) fields.

        Raises:
            InvalidArgument: If the sequences differ in length, are empty, or carry an
                invalid name.
            GrammarError: If a kind token is not a known FieldKind.
        """
        kinds = _as_list(kinds, "kinds")
        names = _as_list(names, "names")
        if len(kinds) != len(names):
            raise InvalidArgument(
                f"kinds and names must have the same length (got {len(kinds)} and {len(names)})"
            )
        if not kinds:
            raise InvalidArgument("a schema descriptor needs at least one field")
        return cls(
            tuple(
                FieldEntry(field_kind_from_value(kind), normalize_field_name(name))
                for kind, name in zip(kinds, names)
            )
        )

    @classmethod
    def anonymous(cls, kinds: KindSequence) -> SchemaDescriptor:
        """Build a descriptor whose fields are all anonymous."""
        kinds = _as_list(kinds, "kinds")
        return cls.from_kinds(kinds, [None] * len(kinds))

    @staticmethod
    def merge(first: SchemaDescriptor, second: SchemaDescriptor) -> SchemaDescriptor:
        """
        Concatenate two descriptors into a new one.

        Args:
            first (SchemaDescriptor): Supplies the leading fields.
            second (SchemaDescriptor): Supplies the trailing fields.

        Returns:
            SchemaDescriptor: first.field_count() + second.field_count() fields, first's
            in order followed by second's in order.

        Raises:
            InvalidArgument: If either argument is not a SchemaDescriptor.

        Notes:
            Names are carried over as-is; clashing names are kept and resolved by
            index_of's first-match rule.
        """
        for arg in (first, second):
            if not isinstance(arg, SchemaDescriptor):
                raise InvalidArgument(
                    f"merge expects SchemaDescriptor arguments (got {type(arg).__name__})"
                )
        merged = SchemaDescriptor(first.fields + second.fields)
        if logger.isEnabledFor(logging.DEBUG):
            counts = Counter(n for n in merged.field_names() if n is not None)
            clashes = sorted(n for n, count in counts.items() if count > 1)
            if clashes:
                logger.debug("merged descriptor carries duplicate field names: %s", clashes)
        return merged

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def field_count(self) -> int:
        """Number of fields."""
        return len(self.fields)

    def field_name(self, i: int) -> FieldName:
        """
        Name of field i, or None for an anonymous field.

        Raises:
            IndexOutOfRange: If i is outside [0, field_count()).
            InvalidArgument: If i is not an int.
        """
        return self._entry(i).name

    def field_kind(self, i: int) -> FieldKind:
        """
        Kind of field i.

        Raises:
            IndexOutOfRange: If i is outside [0, field_count()).
            InvalidArgument: If i is not an int.
        """
        return self._entry(i).kind

    def field_kinds(self) -> tuple[FieldKind, ...]:
        return tuple(entry.kind for entry in self.fields)

    def field_names(self) -> tuple[FieldName, ...]:
        return tuple(entry.name for entry in self.fields)

    def index_of(self, name: str) -> FieldIndex:
        """
        Index of the first field named exactly ``name``.

        Args:
            name (str): Field name to look up. Anonymous fields never match.

        Returns:
            FieldIndex: Smallest index whose field name equals name.

        Raises:
            InvalidArgument: If name is None, empty, or not a str.
            NoSuchField: If no field carries the name.
        """
        if name is None:
            raise InvalidArgument("field name to look up must not be None")
        normalize_field_name(name, "field name to look up")
        for i, entry in enumerate(self.fields):
            if entry.name is not None and entry.name == name:
                return FieldIndex(i)
        raise NoSuchField(f"no field named {name!r} in {self.to_display_string()}")

    def byte_size(self) -> int:
        """Fixed size in bytes of a tuple with this layout (sum of kind widths)."""
        return sum(entry.kind.byte_len for entry in self.fields)

    def to_display_string(self) -> str:
        """
        Render fields as ``KIND(name)`` joined by ``", "``.

        Anonymous fields render with an empty name, e.g. ``INT()``.
        """
        return ", ".join(
            f"{kind_label(entry.kind)}({entry.name if entry.name is not None else ''})"
            for entry in self.fields
        )

    def _entry(self, i: int) -> FieldEntry:
        if isinstance(i, bool) or not isinstance(i, int):
            raise InvalidArgument(f"field index must be an int (got {type(i).__name__})")
        if not 0 <= i < len(self.fields):
            raise IndexOutOfRange(
                f"field index {i} not valid for a descriptor with {len(self.fields)} fields"
            )
        return self.fields[i]

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[FieldEntry]:
        return iter(self.fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaDescriptor):
            return NotImplemented
        if self.field_count() != other.field_count():
            return False
        return all(a.kind == b.kind for a, b in zip(self.fields, other.fields))

    def __hash__(self) -> int:
        # Sum keeps the kind aggregate order-independent; equal descriptors still agree.
        return hash((self.field_count(), sum(hash(entry.kind) for entry in self.fields)))

    def __str__(self) -> str:
        return self.to_display_string()


def _as_list(values: object, what: str) -> list:
    if isinstance(values, (str, bytes)):
        raise InvalidArgument(f"{what} must be a sequence, not a single {type(values).__name__}")
    try:
        return list(values)  # type: ignore[call-overload]
    except TypeError as exc:
        raise InvalidArgument(f"{what} must be a sequence (got {type(values).__name__})") from exc
