"""
Configuration for the refgraph.io module.

Defines CodecSettings, a frozen dataclass carrying runtime configuration for the
text codec, the boundary reducer and table file IO.

Configuration sources (precedence env > TOML > defaults)
- Environment variables prefixed ``REFGRAPH_`` (see CodecSettings.from_env).
- ``./refgraph.toml`` with a ``[codec]`` table or top-level keys.
- ``./pyproject.toml`` under ``[tool.refgraph.codec]``.

Notes
- Unknown keys and unparsable values are ignored, leaving the previous value in place.
- CodecSettings.load() validates the merged result and raises IoConfigError.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from refgraph.core.constants import DEFAULT_ENCODING
from refgraph.core.serde import JsonTextCodec

from .errors import IoConfigError

_TRUE = {"1", "true", "t", "yes", "y", "on"}


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in _TRUE
    return False


@dataclass(frozen=True)
class CodecSettings:
    """
    Runtime settings for the refgraph codec facade.

    Attributes:
        indent (int | None): JSON indentation for written tables; None for compact.
        ensure_ascii (bool): Escape non-ASCII characters in JSON output.
        allow_nan (bool): Accept and emit NaN/Infinity literals.
        reduce_objects (bool): Run the boundary reducer (dataclasses, pydantic
            models, plain instances → records) before encoding. When False, host
            objects reach the encoder and raise UnsupportedValueKind.
        max_entries (int): Upper bound on entries accepted when decoding; 0 disables.
        encoding (str): Text encoding for table files.

    Examples:
        >>> from refgraph.io import CodecSettings
        >>> CodecSettings(indent=2).text_codec().indent
        2
    """

    indent: int | None = None
    ensure_ascii: bool = False
    allow_nan: bool = False
    reduce_objects: bool = True
    max_entries: int = 0
    encoding: str = DEFAULT_ENCODING

    def validate(self) -> CodecSettings:
        """
        Check value ranges.

        Raises:
            IoConfigError: If indent or max_entries is negative, or encoding is empty.
        """
        if self.indent is not None and self.indent < 0:
            raise IoConfigError(f"indent must be >= 0 or None, got {self.indent}")
        if self.max_entries < 0:
            raise IoConfigError(f"max_entries must be >= 0, got {self.max_entries}")
        if not self.encoding:
            raise IoConfigError("encoding must be a non-empty codec name")
        return self

    def text_codec(self) -> JsonTextCodec:
        """Build the JSON text codec configured by these settings."""
        return JsonTextCodec(
            indent=self.indent, ensure_ascii=self.ensure_ascii, allow_nan=self.allow_nan
        )

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: CodecSettings, cfg: dict[str, Any] | None) -> CodecSettings:
        """Apply a loose config mapping onto CodecSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "indent" in cfg:
            raw = cfg["indent"]
            if raw is None or (isinstance(raw, str) and raw.strip().lower() in {"", "none"}):
                s = replace(s, indent=None)
            else:
                try:
                    s = replace(s, indent=int(raw))
                except (TypeError, ValueError):
                    pass

        for flag in ("ensure_ascii", "allow_nan", "reduce_objects"):
            if flag in cfg:
                s = replace(s, **{flag: _bool(cfg[flag])})

        if "max_entries" in cfg:
            try:
                s = replace(s, max_entries=int(cfg["max_entries"]))
            except (TypeError, ValueError):
                pass

        if "encoding" in cfg and isinstance(cfg["encoding"], str):
            s = replace(s, encoding=cfg["encoding"].strip())

        return s

    @classmethod
    def from_env(
        cls, base: CodecSettings | None = None, prefix: str = "REFGRAPH_"
    ) -> CodecSettings:
        """
        Build CodecSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - REFGRAPH_INDENT ("none" for compact)
            - REFGRAPH_ENSURE_ASCII (1/0/true/false/yes/no/on/off)
            - REFGRAPH_ALLOW_NAN
            - REFGRAPH_REDUCE_OBJECTS
            - REFGRAPH_MAX_ENTRIES
            - REFGRAPH_ENCODING
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for name in ("indent", "ensure_ascii", "allow_nan", "reduce_objects", "max_entries", "encoding"):
            v = os.getenv(prefix + name.upper())
            if v:
                mapping[name] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> CodecSettings:
        """
        Build CodecSettings from a TOML file.

        Search order when `path` is None:
            1) ./refgraph.toml (with either a [codec] table or direct keys)
            2) ./pyproject.toml under [tool.refgraph.codec]

        Returns defaults if no file is present or none parses.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "refgraph.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("refgraph", {}).get("codec") if isinstance(tool, dict) else None
            elif isinstance(data.get("codec"), dict):
                cfg = data["codec"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> CodecSettings:
        """
        Load CodecSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search refgraph.toml then pyproject.toml.

        Raises:
            IoConfigError: If the merged settings are out of range.
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s.validate()
