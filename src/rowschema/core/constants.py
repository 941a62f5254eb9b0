"""
Fixed byte widths for the scalar field kinds.

Tuple and page layers size their storage from these values through
``SchemaDescriptor.byte_size()``. This module is zero-IO and uses only the
Python standard library.

Notes:
    - Widths are part of the on-page contract and are deliberately not configurable.
    - STRING fields are fixed width: shorter values are padded by the tuple layer,
      longer values are rejected at the dataframe boundary (rowschema.frames).
"""

from __future__ import annotations

__all__ = [
    "INT_BYTE_LEN",
    "STRING_BYTE_LEN",
    "UNKNOWN_KIND_LABEL",
]

# Signed 32-bit integer.
INT_BYTE_LEN: int = 4

# Maximum encoded length of a STRING field, in bytes.
STRING_BYTE_LEN: int = 128

# Display label used by to_display_string() for anything outside the known kinds.
UNKNOWN_KIND_LABEL: str = "UNKNOWN"
