"""Value objects shared by the font resolution pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias

from massfonts.fonts.formats import canonical_format


VariantSourceName = Literal["variants", "fonts", "axes"]


@dataclass(frozen=True, slots=True, order=True)
class Variant:
    """One concrete (weight, italic) instance of a family.

    Ordering follows the weight first, upright before italic.
    """

    weight: int
    italic: bool = False

    @property
    def key(self) -> tuple[int, bool]:
        return (self.weight, self.italic)


@dataclass(frozen=True, slots=True)
class Axis:
    """A variable-font design axis as described by family metadata."""

    tag: str
    start: float | None = None
    end: float | None = None
    step: float | None = None

    _START_KEYS = ("start", "min", "minimum", "lower", "default", "defaultValue")
    _END_KEYS = ("end", "max", "maximum", "upper", "default", "defaultValue")
    _STEP_KEYS = ("step", "increment", "precision")

    @classmethod
    def from_metadata(cls, payload: Any) -> Axis | None:
        """Build an axis from a metadata record, or ``None`` when it has no tag."""
        if not isinstance(payload, Mapping) or not payload.get("tag"):
            return None
        return cls(
            tag=str(payload["tag"]),
            start=_pick_number(payload, cls._START_KEYS),
            end=_pick_number(payload, cls._END_KEYS),
            step=_pick_number(payload, cls._STEP_KEYS),
        )


def coerce_number(value: Any) -> float | None:
    """Return ``value`` as a number when it holds one (strings are parsed)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _pick_number(payload: Mapping[str, Any], keys: tuple[str, ...]) -> float | None:
    for key in keys:
        if payload.get(key) is None:
            continue
        numeric = coerce_number(payload[key])
        if numeric is not None:
            return numeric
    return None


@dataclass(frozen=True, slots=True)
class SingleWeight:
    value: int

    @property
    def label(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True, slots=True)
class WeightRange:
    """Weight span declared by a variable ``@font-face`` rule."""

    start: int
    end: int

    @property
    def label(self) -> str:
        return f"{self.start}-{self.end}"

    def __str__(self) -> str:
        return self.label


Weight: TypeAlias = SingleWeight | WeightRange


@dataclass(frozen=True, slots=True)
class SourceRecord:
    """A downloadable face extracted from one ``@font-face`` rule."""

    url: str
    format: str
    weight: Weight
    italic: bool = False

    @property
    def canonical_format(self) -> str:
        return canonical_format(self.format)


@dataclass(frozen=True, slots=True)
class FontRequest:
    """Everything needed to download one family, fixed before any network call."""

    name: str
    weights: tuple[int, ...] = ()
    include_all: bool = False
    formats: tuple[str, ...] | None = None


@dataclass(slots=True)
class FamilyResult:
    """Files written (or already present) for one processed family."""

    name: str
    folder: str
    files: list[str] = field(default_factory=list)

    def to_manifest(self) -> dict[str, Any]:
        return {"name": self.name, "folder": self.folder, "files": list(self.files)}


__all__ = [
    "Axis",
    "FamilyResult",
    "FontRequest",
    "SingleWeight",
    "SourceRecord",
    "Variant",
    "VariantSourceName",
    "Weight",
    "WeightRange",
    "coerce_number",
]
