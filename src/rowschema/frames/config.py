"""
Configuration for the rowschema.frames module.

Defines FrameSettings, a frozen dataclass carrying runtime configuration for how
descriptors are materialized as polars/pyarrow schemas and how DataFrames are validated
against them.

Source of truth
- Field kinds and their fixed widths come from rowschema.core (grammar, constants) and are
  not configurable here.

Import DAG discipline
- Depends only on stdlib and rowschema.frames.errors.

Notes
- Precedence: environment > TOML > defaults (see FrameSettings.load).
- Values that cannot be coerced to the expected type are ignored (logged at debug level);
  values of the right type that are semantically invalid raise FrameConfigError.
"""

from __future__ import annotations

import codecs
import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .errors import FrameConfigError

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}
_FALSY = {"0", "false", "f", "no", "n", "off"}


@dataclass(frozen=True)
class FrameSettings:
    """
    Runtime settings for the rowschema.frames layer.

    Attributes:
        anonymous_prefix (str): Column name prefix for anonymous fields; field i becomes
            f"{anonymous_prefix}{i}".
        strict_schema (bool): If True, validation rejects columns the descriptor does not name.
        enforce_widths (bool): If True, validation rejects STRING values whose encoded length
            exceeds the fixed STRING width.
        string_encoding (str): Codec used when measuring STRING widths ("utf-8" matches
            polars' native byte length).

    Raises:
        FrameConfigError: If anonymous_prefix is empty or string_encoding is unknown.

    Examples:
        >>> from rowschema.frames import FrameSettings
        >>> FrameSettings(anonymous_prefix="col_")  # doctest: +ELLIPSIS
        FrameSettings(...)
    """

    anonymous_prefix: str = "field_"
    strict_schema: bool = True
    enforce_widths: bool = True
    string_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not isinstance(self.anonymous_prefix, str) or not self.anonymous_prefix:
            raise FrameConfigError("anonymous_prefix must be a non-empty string")
        try:
            normalized = codecs.lookup(self.string_encoding).name
        except (LookupError, TypeError) as exc:
            raise FrameConfigError(f"unknown string_encoding {self.string_encoding!r}") from exc
        object.__setattr__(self, "string_encoding", normalized)

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: FrameSettings, cfg: dict[str, Any] | None) -> FrameSettings:
        """Apply a loose config mapping onto FrameSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool | None:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                token = v.strip().lower()
                if token in _TRUTHY:
                    return True
                if token in _FALSY:
                    return False
            return None

        # anonymous_prefix
        if "anonymous_prefix" in cfg:
            if isinstance(cfg["anonymous_prefix"], str):
                s = replace(s, anonymous_prefix=cfg["anonymous_prefix"])
            else:
                logger.debug("ignoring non-string anonymous_prefix %r", cfg["anonymous_prefix"])

        # strict_schema / enforce_widths
        for key in ("strict_schema", "enforce_widths"):
            if key in cfg:
                flag = _bool(cfg[key])
                if flag is None:
                    logger.debug("ignoring unrecognized %s value %r", key, cfg[key])
                else:
                    s = replace(s, **{key: flag})

        # string_encoding
        if "string_encoding" in cfg:
            if isinstance(cfg["string_encoding"], str):
                s = replace(s, string_encoding=cfg["string_encoding"].strip())
            else:
                logger.debug("ignoring non-string string_encoding %r", cfg["string_encoding"])

        return s

    @classmethod
    def from_env(
        cls, base: FrameSettings | None = None, prefix: str = "ROWSCHEMA_FRAMES_"
    ) -> FrameSettings:
        """
        Build FrameSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - ROWSCHEMA_FRAMES_ANONYMOUS_PREFIX
            - ROWSCHEMA_FRAMES_STRICT_SCHEMA (1/0/true/false/yes/no/on/off)
            - ROWSCHEMA_FRAMES_ENFORCE_WIDTHS (1/0/true/false/yes/no/on/off)
            - ROWSCHEMA_FRAMES_STRING_ENCODING
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("anonymous_prefix", "strict_schema", "enforce_widths", "string_encoding"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> FrameSettings:
        """
        Build FrameSettings from a TOML file.

        Search order when `path` is None:
            1) ./rowschema.toml (with either a [frames] table or direct keys)
            2) ./pyproject.toml under [tool.rowschema.frames]

        Returns defaults if no file is present.

        Raises:
            FrameConfigError: If an explicitly given file cannot be parsed as TOML.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "rowschema.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                if path is not None:
                    raise FrameConfigError(f"cannot parse {p}: {exc}") from exc
                logger.debug("skipping unparsable config file %s: %s", p, exc)
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                section = tool.get("rowschema", {}) if isinstance(tool, dict) else {}
                cfg = section.get("frames") if isinstance(section, dict) else None
            else:
                # rowschema.toml - accept either [frames] table or top-level keys
                frames = data.get("frames")
                cfg = frames if isinstance(frames, dict) else data
            if cfg:
                logger.debug("loaded frame settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> FrameSettings:
        """
        Load FrameSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (rowschema.toml, pyproject.toml).

        Returns:
            FrameSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
