"""Safe, configurable file names for downloaded font faces.

Every positional input is sanitised on its own, so a family name such as
``"../../etc"`` can never introduce a path separator into the final name.

`separator` (`str`)
: Joins the family and weight segments. Default ``-``.

`italic_separator` (`str | None`)
: Joins the weight and italic segments; inherits `separator` when omitted.

`italic_suffix` (`str`)
: Marker appended to italic faces. Default ``italic``.

`family_case`, `weight_case`, `italic_case`
: Casing applied to each segment: ``kebab`` (default), ``preserve``,
  ``upper``, ``lower``, ``snake``, ``pascal`` or ``camel``.

`extension_case`
: ``lower`` (default), ``upper`` or ``preserve``.

`weight_naming`
: ``numeric`` keeps ``400``; ``named`` writes ``Regular``, ``Bold``...
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from slugify import slugify

from massfonts.fonts.models import SingleWeight, Weight, WeightRange


CaseStyle = Literal["kebab", "preserve", "upper", "lower", "snake", "pascal", "camel"]
ExtensionCase = Literal["lower", "upper", "preserve"]
WeightNaming = Literal["numeric", "named"]

WEIGHT_LABELS: dict[int, str] = {
    100: "Thin",
    200: "ExtraLight",
    300: "Light",
    400: "Regular",
    500: "Medium",
    600: "SemiBold",
    700: "Bold",
    800: "ExtraBold",
    900: "Black",
}

_DISALLOWED_RE = r"[^-A-Za-z0-9_]+"
_TOKEN_SPLIT_RE = re.compile(r"[-_]+")
_SEPARATOR_RE = re.compile(r"[-_.]{0,3}")


class FileNameOptions(BaseModel):
    """Enumerated file naming settings (camelCase keys are accepted)."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    separator: str = "-"
    italic_separator: str | None = None
    italic_suffix: str = "italic"
    family_case: CaseStyle = "kebab"
    weight_case: CaseStyle = "kebab"
    italic_case: CaseStyle = "kebab"
    extension_case: ExtensionCase = "lower"
    weight_naming: WeightNaming = "numeric"

    @field_validator("separator", "italic_separator")
    @classmethod
    def _check_separator(cls, value: str | None) -> str | None:
        if value is not None and not _SEPARATOR_RE.fullmatch(value):
            raise ValueError(
                f"Invalid separator '{value}': use up to three of '-', '_' or '.'."
            )
        return value

    @property
    def resolved_italic_separator(self) -> str:
        return self.separator if self.italic_separator is None else self.italic_separator


DEFAULT_FILE_NAME_OPTIONS = FileNameOptions()


def sanitize_segment(value: object, fallback: str) -> str:
    """Reduce ``value`` to ``[A-Za-z0-9_-]`` characters, or ``fallback`` if empty."""
    text = "" if value is None else str(value)
    cleaned = slugify(text, lowercase=False, regex_pattern=_DISALLOWED_RE)
    return cleaned or fallback


def apply_case(value: str, style: str) -> str:
    """Apply a :data:`CaseStyle` to a sanitised segment."""
    if style == "preserve":
        return value
    if style == "upper":
        return value.upper()
    if style == "lower":
        return value.lower()
    tokens = [token for token in _TOKEN_SPLIT_RE.split(value) if token]
    if style == "snake":
        return "_".join(token.lower() for token in tokens)
    if style in {"pascal", "camel"}:
        joined = "".join(token[:1].upper() + token[1:].lower() for token in tokens)
        if style == "camel":
            return joined[:1].lower() + joined[1:]
        return joined
    return "-".join(token.lower() for token in tokens)


def _segment(value: object, fallback: str, style: str) -> str:
    return apply_case(sanitize_segment(value, fallback), style) or fallback


def _weight_text(weight: Weight | int | str, naming: str) -> str:
    if isinstance(weight, (SingleWeight, WeightRange)):
        label = weight.label
    else:
        label = str(weight).strip()
    if naming == "named" and label.isdigit():
        return WEIGHT_LABELS.get(int(label), label)
    return label


def _extension(extension: object, style: str) -> str:
    cleaned = sanitize_segment(extension, "bin")
    if style == "upper":
        return cleaned.upper()
    if style == "preserve":
        return cleaned
    return cleaned.lower()


def build_file_name(
    folder: object,
    weight: Weight | int | str,
    italic: bool,
    extension: object,
    options: FileNameOptions | None = None,
) -> str:
    """Return ``<folder><sep><weight>[<italic-sep><suffix>].<ext>``."""
    options = options or DEFAULT_FILE_NAME_OPTIONS
    family_part = _segment(folder, "font", options.family_case)
    weight_part = _segment(_weight_text(weight, options.weight_naming), "regular", options.weight_case)
    name = f"{family_part}{options.separator}{weight_part}"
    if italic:
        suffix = _segment(options.italic_suffix, "italic", options.italic_case)
        name = f"{name}{options.resolved_italic_separator}{suffix}"
    return f"{name}.{_extension(extension, options.extension_case)}"


def slugify_font_folder(name: object) -> str:
    """Return the kebab-case folder name used for a family."""
    return _segment(name, "font", "kebab")


__all__ = [
    "DEFAULT_FILE_NAME_OPTIONS",
    "WEIGHT_LABELS",
    "CaseStyle",
    "FileNameOptions",
    "apply_case",
    "build_file_name",
    "sanitize_segment",
    "slugify_font_folder",
]
