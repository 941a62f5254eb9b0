"""
Payload format version stamped by rowschema.core.serde.

FORMAT_V describes the JSON layout of a descriptor payload, not descriptor semantics;
kinds and widths are pinned by grammar and constants. A payload decodes only when
is_compatible(version) holds: same major, minor no newer than this release.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FormatVersion:
    """
    Payload layout version: major.minor plus the ISO date it was introduced.

    Raises:
        ValueError: On a negative component or a date that is not YYYY-MM-DD.
    """

    major: int
    minor: int
    date: str

    def __post_init__(self) -> None:
        for part in ("major", "minor"):
            value = getattr(self, part)
            if value < 0:
                raise ValueError(f"format {part} must be non-negative (got {value})")
        try:
            date.fromisoformat(self.date)
        except ValueError as exc:
            raise ValueError(f"format date must be YYYY-MM-DD (got {self.date!r})") from exc

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


FORMAT_V = FormatVersion(1, 0, "2026-10-18")


def is_compatible(ver: FormatVersion) -> bool:
    """
    True if a payload written under ``ver`` can be read by this release.

    Examples:
        >>> is_compatible(FORMAT_V)
        True
        >>> is_compatible(FormatVersion(FORMAT_V.major + 1, 0, FORMAT_V.date))
        False
    """
    return ver.major == FORMAT_V.major and ver.minor <= FORMAT_V.minor
