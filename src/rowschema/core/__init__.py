"""
Core package aggregator for rowschema contracts (kinds, descriptors, errors, hashing/serde, versioning).

## Contracts (single source of truth)
- Grammar: FieldKind, the closed set of fixed-width scalar kinds, plus normalization helpers.
- Descriptor: SchemaDescriptor / FieldEntry: construction, introspection, size, merge, equality.
- Errors: InvalidArgument, IndexOutOfRange, NoSuchField (all SchemaError), GrammarError, VersionMismatch.
- Hashing/Serde: canonical JSON, fingerprints, versioned pydantic payloads for catalogs.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Equality and hashing ignore field names; order and kinds are identity.
- Field widths: INT = 4 bytes, STRING = 128 bytes (rowschema.core.constants).

## Downstream usage
- Tuple/page layers size storage with `byte_size()` and read fields with `field_kind(i)`.
- Catalog layers persist descriptors with `rowschema.core.serde`.
- Join/project operators compute output shapes with `SchemaDescriptor.merge`.
- rowschema.frames materializes descriptors as polars/pyarrow schemas.

## Examples
```python
from rowschema.core import FieldKind, SchemaDescriptor

people = SchemaDescriptor.from_kinds([FieldKind.INT, FieldKind.STRING], ["id", "name"])
people.byte_size()            # 132
people.index_of("name")       # 1
str(people)                   # 'INT(id), STRING(name)'

orders = SchemaDescriptor.from_kinds(["int", "int"], ["id", "person_id"])
joined = SchemaDescriptor.merge(people, orders)
joined.field_count()          # 4
joined.index_of("id")         # 0 (first match wins)
```
"""

from .descriptor import FieldEntry, SchemaDescriptor
from .errors import (
    GrammarError,
    IndexOutOfRange,
    InvalidArgument,
    NoSuchField,
    SchemaError,
    VersionMismatch,
)
from .grammar import FieldKind, field_kind_from_value

__all__ = [
    "FieldKind",
    "FieldEntry",
    "SchemaDescriptor",
    "field_kind_from_value",
    "SchemaError",
    "InvalidArgument",
    "GrammarError",
    "IndexOutOfRange",
    "NoSuchField",
    "VersionMismatch",
]
