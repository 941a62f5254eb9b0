"""
rowschema.frames: Polars/Arrow boundary for schema descriptors.

## Responsibilities
- Materialize a SchemaDescriptor as column names, a polars schema, or an Arrow schema.
- Infer a descriptor from a polars or Arrow schema.
- Validate DataFrames against a descriptor (presence, strictness, casts, fixed STRING width).

## Public API
- FrameSettings: configuration (env > TOML > defaults).
- to_polars_schema / to_arrow_schema / empty_frame / column_names.
- descriptor_from_polars_schema / descriptor_from_arrow_schema.
- validate_frame_against_descriptor.

## Import DAG discipline
- Depends only on stdlib, polars/pyarrow, and rowschema.core.*.

## Examples
```python
import polars as pl
from rowschema.core import SchemaDescriptor
from rowschema.frames import FrameSettings, validate_frame_against_descriptor

desc = SchemaDescriptor.from_kinds(["int", "string"], ["id", "name"])
df = pl.DataFrame({"id": [1, 2], "name": ["ada", "grace"]})
validate_frame_against_descriptor(df, desc, settings=FrameSettings.load())
```
"""

from __future__ import annotations

from .config import FrameSettings
from .errors import FrameConfigError, FrameError, FrameSchemaError
from .materialize import (
    column_names,
    descriptor_from_arrow_schema,
    descriptor_from_polars_schema,
    empty_frame,
    to_arrow_schema,
    to_polars_schema,
)
from .validate import validate_frame_against_descriptor

__all__ = [
    "FrameSettings",
    "FrameError",
    "FrameConfigError",
    "FrameSchemaError",
    "column_names",
    "empty_frame",
    "to_polars_schema",
    "to_arrow_schema",
    "descriptor_from_polars_schema",
    "descriptor_from_arrow_schema",
    "validate_frame_against_descriptor",
]
