"""
rowschema: schema descriptors for fixed-width tuples.

## Packages
- rowschema.core: FieldKind, SchemaDescriptor, error taxonomy, hashing/serde, versioning (stdlib + pydantic).
- rowschema.frames: polars/pyarrow schema materialization and DataFrame validation.

## Import DAG discipline
- core imports nothing from frames.
- frames depends on core, polars, and pyarrow.
"""

from .core import FieldEntry, FieldKind, SchemaDescriptor

__all__ = [
    "FieldKind",
    "FieldEntry",
    "SchemaDescriptor",
]

__version__ = "0.1.0"
