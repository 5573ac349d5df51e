"""Configuration models for bulk font downloads.

Configuration files are YAML or JSON documents. Keys may be written in
snake_case or in camelCase, as found in existing JavaScript configs.

FontEntry

`name` (`str`)
: Family name as published by Google Fonts, e.g. ``"Roboto"``.

`weights` (`int | str | list[int | str] | None`)
: Numeric weights, named aliases (``bold``, ``semibold``...) or ``"*"`` to
  download every available variant. Defaults to ``[400]``.

`formats` (`list[str] | str | None`)
: Formats for this family; inherits `DownloadConfig.formats` when omitted.

`all` (`bool`)
: Download every variant of this family.

DownloadConfig

`fonts` (`list[FontEntry]`)
: Families to download, processed in order.

`formats` (`list[str]`)
: Default formats (``woff2``, ``woff``, ``ttf``). Default ``["woff2"]``.

`subsets` (`list[str]`)
: Character subsets forwarded to the CSS API. Default ``["latin"]``.

`output_dir` (`Path`)
: Root directory receiving one folder per family.

`file_name_options` (`FileNameOptions`)
: File naming settings, see :mod:`massfonts.fonts.naming`.

`generate_options_file` / `options_file_path`
: Emit a manifest of downloaded files at `options_file_path`.

`timeout` (`float`)
: Network timeout in seconds for each request.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
import yaml

from massfonts.core.exceptions import ConfigurationError
from massfonts.fonts.formats import FALLBACK_FORMATS, normalize_formats
from massfonts.fonts.naming import FileNameOptions


DEFAULT_OUTPUT_DIR = Path("output/fonts")
DEFAULT_OPTIONS_FILE = Path("output/font-options.ts")


class FontEntry(BaseModel):
    """One family to download."""

    # Entries often carry notes (category, pairings...) that are irrelevant here.
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    weights: int | str | list[int | str] | None = None
    formats: list[str] | str | None = None
    all: bool = False

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Font family name cannot be empty.")
        return cleaned


class DownloadConfig(BaseModel):
    """Top-level configuration for a download run."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    fonts: list[FontEntry] = Field(default_factory=list)
    formats: list[str] = Field(default_factory=lambda: list(FALLBACK_FORMATS))
    subsets: list[str] = Field(default_factory=lambda: ["latin"])
    output_dir: Path = DEFAULT_OUTPUT_DIR
    file_name_options: FileNameOptions = Field(default_factory=FileNameOptions)
    generate_options_file: bool = False
    options_file_path: Path = DEFAULT_OPTIONS_FILE
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("formats", mode="before")
    @classmethod
    def _normalise_formats(cls, value: Any) -> list[str]:
        return normalize_formats(value)

    @field_validator("subsets", mode="before")
    @classmethod
    def _split_subsets(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


def _read_payload(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Configuration file not found: {path}") from exc
    if not text.strip():
        raise ConfigurationError(f"Empty configuration file: {path}")
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Invalid configuration in {path}: {exc}") from exc


def load_config(path: Path | str) -> DownloadConfig:
    """Load and validate a YAML/JSON configuration file."""
    path = Path(path)
    payload = _read_payload(path)
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping.")
    try:
        return DownloadConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in {path}:\n{exc}") from exc


def parse_fonts_option(value: str) -> list[FontEntry]:
    """Parse ``"Roboto:400,700;Poppins:bold;Inter:*"`` into font entries."""
    entries: list[FontEntry] = []
    for chunk in value.split(";"):
        if not chunk.strip():
            continue
        name, _, weights = chunk.partition(":")
        if not name.strip():
            raise ConfigurationError(f"Missing family name in font specification '{chunk}'.")
        entries.append(FontEntry(name=name, weights=weights.strip() or None))
    return entries


__all__ = [
    "DEFAULT_OPTIONS_FILE",
    "DEFAULT_OUTPUT_DIR",
    "DownloadConfig",
    "FontEntry",
    "load_config",
    "parse_fonts_option",
]
