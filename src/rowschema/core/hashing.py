"""
Canonical JSON serialization and hashing helpers for descriptors.

Provides a single canonical JSON policy and SHA-256 helpers so descriptor identities are
stable across runs, processes, and consumers. Unlike ``hash(desc)``, which is only
meaningful inside one interpreter, these digests can be stored by a catalog.

Notes:
    - Canonical JSON:
        - sort_keys=True
        - separators=(",", ":")
        - ensure_ascii=False
    - Hashing is performed over the UTF-8 encoded canonical JSON string.
    - descriptor_fingerprint covers field count and kinds only, matching descriptor
      equality; descriptor_digest also covers names and detects renames.
"""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .descriptor import SchemaDescriptor

__all__ = [
    "json_dumps_canonical",
    "descriptor_fingerprint",
    "descriptor_digest",
]


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON string with sort_keys=True, compact separators,
        and ensure_ascii=False.

    Notes:
        This function assumes the input is JSON-serializable and does not perform
        coercion of unsupported types.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _sha256_hexdigest(s: str) -> str:
    """Compute SHA-256 hex digest of a UTF-8 string."""
    h = hashlib.sha256()
    h.update(s.encode("utf-8"))
    return h.hexdigest()


def descriptor_fingerprint(desc: SchemaDescriptor) -> str:
    """
    Stable digest of a descriptor's shape.

    Args:
        desc (SchemaDescriptor): Descriptor to fingerprint.

    Returns:
        str: SHA-256 hex digest over the canonical JSON of the ordered kind values.

    Notes:
        Two descriptors compare equal exactly when their fingerprints match; names
        never affect the result.

    Examples:
        >>> from rowschema.core import SchemaDescriptor
        >>> a = SchemaDescriptor.from_kinds(["int", "string"], ["id", "name"])
        >>> b = SchemaDescriptor.anonymous(["int", "string"])
        >>> descriptor_fingerprint(a) == descriptor_fingerprint(b)
        True
    """
    return _sha256_hexdigest(json_dumps_canonical([kind.value for kind in desc.field_kinds()]))


def descriptor_digest(desc: SchemaDescriptor) -> str:
    """
    Stable digest of a descriptor including field names.

    Args:
        desc (SchemaDescriptor): Descriptor to hash.

    Returns:
        str: SHA-256 hex digest over the canonical JSON of ordered [kind, name] pairs.
    """
    pairs = [[entry.kind.value, entry.name] for entry in desc]
    return _sha256_hexdigest(json_dumps_canonical(pairs))
