"""Tests for `rowschema.core.versioning` payload format version helpers."""

import pytest

from rowschema.core.versioning import FORMAT_V, FormatVersion, is_compatible


def test_format_version_renders_major_dot_minor() -> None:
    assert str(FormatVersion(3, 7, "2026-10-18")) == "3.7"
    assert str(FORMAT_V) == f"{FORMAT_V.major}.{FORMAT_V.minor}"


@pytest.mark.parametrize("bad_date", ["2026/10/18", "2026-10-1x", "18-10-2026"])
def test_format_version_rejects_non_iso_date(bad_date: str) -> None:
    with pytest.raises(ValueError, match="format date must be YYYY-MM-DD"):
        FormatVersion(major=1, minor=0, date=bad_date)


@pytest.mark.parametrize("field,value", [("major", -1), ("minor", -1)])
def test_format_version_rejects_negative_components(field: str, value: int) -> None:
    kwargs = {"major": 1, "minor": 0, "date": "2026-10-18"}
    kwargs[field] = value

    with pytest.raises(ValueError, match=f"format {field} must be non-negative"):
        FormatVersion(**kwargs)


def test_is_compatible_accepts_same_major_and_older_minor() -> None:
    assert is_compatible(FORMAT_V) is True
    assert is_compatible(FormatVersion(FORMAT_V.major, 0, "2026-01-01")) is True
    assert is_compatible(FormatVersion(FORMAT_V.major + 1, 0, "2026-10-18")) is False
    assert is_compatible(FormatVersion(FORMAT_V.major, FORMAT_V.minor + 1, "2026-10-18")) is False
