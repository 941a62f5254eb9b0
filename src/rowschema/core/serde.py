"""
Pydantic v2 payload models and JSON round trip for schema descriptors.

A catalog layer persists descriptors in whatever store it chooses; this module gives it a
validated, versioned payload shape and canonical JSON text so reconstruction always yields
a descriptor equal to (and named like) the original. Nothing here touches files.

Responsibilities
- Define FieldPayload / DescriptorPayload with kinds normalized via grammar helpers.
- Stamp payloads with the current FORMAT_V and refuse incompatible versions on decode.
- Convert between SchemaDescriptor, payload models, plain mappings, and canonical JSON.

Style
- Zero-IO (stdlib + pydantic only).
- Constructing a payload model directly surfaces pydantic.ValidationError; the
  descriptor_from_* helpers translate validation failures into InvalidArgument so callers
  see the core error taxonomy.

Examples:
    >>> from rowschema.core import SchemaDescriptor
    >>> from rowschema.core.serde import descriptor_from_json, descriptor_to_json
    >>> desc = SchemaDescriptor.from_kinds(["int", "string"], ["id", None])
    >>> text = descriptor_to_json(desc)
    >>> back = descriptor_from_json(text)
    >>> back == desc and back.field_names() == ("id", None)
    True
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .descriptor import SchemaDescriptor
from .errors import InvalidArgument, VersionMismatch
from .grammar import field_kind_from_value, normalize_field_name

# Re-export canonical dumps to keep a single canonicalization policy.
from .hashing import json_dumps_canonical
from .typing import JsonDict
from .versioning import FORMAT_V, FormatVersion, is_compatible

__all__ = [
    "VersionPayload",
    "FieldPayload",
    "DescriptorPayload",
    "descriptor_to_payload",
    "descriptor_from_payload",
    "descriptor_to_json",
    "descriptor_from_json",
    "json_loads",
    "json_dumps_canonical",
]

logger = logging.getLogger(__name__)


class VersionPayload(BaseModel):
    """
    Serialized FormatVersion.

    Attributes:
        major (int): Non-negative major component.
        minor (int): Non-negative minor component.
        date (str): ISO YYYY-MM-DD release date.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    major: int = Field(..., ge=0)
    minor: int = Field(..., ge=0)
    date: str

    def to_version(self) -> FormatVersion:
        return FormatVersion(self.major, self.minor, self.date)


class FieldPayload(BaseModel):
    """
    Serialized FieldEntry.

    Attributes:
        kind (str): Lower_snake FieldKind value; labels such as "INT" are normalized.
        name (str | None): Field name, or None for an anonymous field.

    Raises:
        pydantic.ValidationError: If kind is unknown or name is empty/non-string.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: str
    name: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, v: Any) -> str:
        return field_kind_from_value(v).value

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, v: Any) -> str | None:
        return normalize_field_name(v)


class DescriptorPayload(BaseModel):
    """
    Serialized SchemaDescriptor.

    Attributes:
        version (VersionPayload): Format version the payload was written under.
        fields (list[FieldPayload]): Field entries in tuple order (at least one).

    Examples:
        >>> DescriptorPayload.model_validate(
        ...     {
        ...         "version": {"major": 1, "minor": 0, "date": "2026-10-18"},
        ...         "fields": [{"kind": "int", "name": "id"}],
        ...     }
        ... ).fields[0].kind
        'int'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: VersionPayload
    fields: list[FieldPayload] = Field(..., min_length=1)


def descriptor_to_payload(desc: SchemaDescriptor) -> DescriptorPayload:
    """
    Build the payload model for a descriptor, stamped with FORMAT_V.

    Args:
        desc (SchemaDescriptor): Descriptor to serialize.

    Returns:
        DescriptorPayload: Validated payload carrying kinds and names in order.
    """
    return DescriptorPayload(
        version=VersionPayload(major=FORMAT_V.major, minor=FORMAT_V.minor, date=FORMAT_V.date),
        fields=[FieldPayload(kind=entry.kind.value, name=entry.name) for entry in desc],
    )


def descriptor_from_payload(payload: DescriptorPayload | Mapping[str, Any]) -> SchemaDescriptor:
    """
    Reconstruct a descriptor from a payload model or a plain mapping.

    Args:
        payload (DescriptorPayload | Mapping[str, Any]): Payload to decode.

    Returns:
        SchemaDescriptor: Descriptor with the payload's kinds and names, in order.

    Raises:
        InvalidArgument: If the mapping does not validate as a DescriptorPayload.
        VersionMismatch: If the payload version is not compatible with FORMAT_V.
    """
    if not isinstance(payload, DescriptorPayload):
        if not isinstance(payload, Mapping):
            raise InvalidArgument(
                f"descriptor payload must be a mapping (got {type(payload).__name__})"
            )
        try:
            data: JsonDict = dict(payload)
            payload = DescriptorPayload.model_validate(data)
        except ValidationError as exc:
            raise InvalidArgument(f"invalid descriptor payload: {exc}") from exc

    try:
        version = payload.version.to_version()
    except ValueError as exc:
        raise InvalidArgument(f"invalid descriptor payload version: {exc}") from exc
    if not is_compatible(version):
        raise VersionMismatch(
            f"descriptor payload version {version} is not compatible with {FORMAT_V}"
        )

    logger.debug("decoding descriptor payload v%s with %d fields", version, len(payload.fields))
    return SchemaDescriptor.from_kinds(
        [f.kind for f in payload.fields],
        [f.name for f in payload.fields],
    )


def descriptor_to_json(desc: SchemaDescriptor) -> str:
    """Serialize a descriptor to canonical JSON text."""
    data: JsonDict = descriptor_to_payload(desc).model_dump(mode="json")
    return json_dumps_canonical(data)


def descriptor_from_json(s: str) -> SchemaDescriptor:
    """
    Reconstruct a descriptor from JSON text produced by descriptor_to_json.

    Raises:
        InvalidArgument: If s is not valid JSON or not a valid payload.
        VersionMismatch: If the payload version is not compatible with FORMAT_V.
    """
    try:
        data = json_loads(s)
    except (TypeError, json.JSONDecodeError) as exc:
        raise InvalidArgument(f"descriptor payload is not valid JSON: {exc}") from exc
    return descriptor_from_payload(data)


def json_loads(s: str) -> Any:
    """
    Deserialize a JSON string to Python objects using the stdlib json module.

    Args:
        s (str): JSON string to parse.

    Returns:
        Any: Decoded Python object (dict, list, str, int, float, bool, or None).
    """
    return json.loads(s)
