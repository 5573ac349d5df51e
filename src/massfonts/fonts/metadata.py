"""Family metadata lookup and variant discovery.

Google Fonts publishes a single metadata table describing every family. The
table is downloaded at most once per :class:`MetadataCache` and shared by all
families processed in a run.

A family record describes its styles in one of three shapes, tried in order:

: ``variants`` - strings such as ``"regular"`` or ``"700italic"``, or objects.
: ``fonts`` - objects carrying ``fontStyle``/``fontWeight`` style fields.
: ``axes`` - variable-font axes from which the weight grid is generated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
import json
import logging
import re
import threading
from typing import Any, TypeAlias

from massfonts.core.exceptions import (
    FontNotFoundError,
    MetadataFetchError,
    VariantResolutionError,
)
from massfonts.fonts.models import Axis, Variant, VariantSourceName


logger = logging.getLogger(__name__)

#: Anti JSON-hijacking prefix prepended to the metadata payload.
XSSI_PREFIX = ")]}'"

MetadataFetcher = Callable[[], Any]

_ITALIC_RE = re.compile(r"italic|oblique", re.IGNORECASE)
_DIGITS_RE = re.compile(r"([0-9]+)")
_STYLE_KEYS = ("style", "fontStyle", "italicStyle")
_WEIGHT_KEYS = ("weight", "fontWeight", "ttfWeight", "wght", "axisValue")


def parse_metadata_payload(payload: Any) -> list[dict[str, Any]]:
    """Return the family table from a raw metadata response."""
    if hasattr(payload, "data"):
        payload = payload.data
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8")
    if isinstance(payload, str):
        text = payload.lstrip()
        if text.startswith(XSSI_PREFIX):
            text = text[len(XSSI_PREFIX) :]
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MetadataFetchError(f"Font metadata is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise MetadataFetchError("Font metadata must be a JSON object.")
    table = payload.get("familyMetadataList") or payload.get("fonts") or []
    return [entry for entry in table if isinstance(entry, Mapping)]


def _default_fetcher() -> Any:
    from massfonts.core.http import fetch_metadata

    return fetch_metadata()


class MetadataCache:
    """Process-lifetime holder of the family metadata table.

    The first :meth:`load` fetches and parses the table; concurrent callers
    wait on the same lock so a single request is issued. The table is never
    invalidated.
    """

    def __init__(self, fetcher: MetadataFetcher | None = None) -> None:
        self._fetcher = fetcher or _default_fetcher
        self._table: list[dict[str, Any]] | None = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._table is not None

    def load(self) -> list[dict[str, Any]]:
        if self._table is not None:
            return self._table
        with self._lock:
            if self._table is None:
                logger.debug("Fetching font metadata table")
                self._table = parse_metadata_payload(self._fetcher())
                logger.debug("Loaded metadata for %d families", len(self._table))
        return self._table

    def find(self, name: str) -> dict[str, Any] | None:
        """Return the record for ``name`` (case-insensitive) if present."""
        wanted = name.strip().casefold()
        for entry in self.load():
            family = entry.get("family")
            if isinstance(family, str) and family.casefold() == wanted:
                return entry
        return None


def parse_variant_entry(entry: Any) -> Variant | None:
    """Parse one ``variants``/``fonts`` item into a :class:`Variant`."""
    if isinstance(entry, str):
        lowered = entry.strip().lower()
        if lowered == "regular":
            return Variant(400, False)
        if lowered == "italic":
            return Variant(400, True)
        italic = lowered.endswith("italic")
        numeric = lowered.removesuffix("italic") if italic else lowered
        match = re.match(r"\d+", numeric)
        if match is None:
            return None
        return Variant(int(match.group(0)), italic)

    if isinstance(entry, Mapping):
        style = next((entry[key] for key in _STYLE_KEYS if entry.get(key)), "normal")
        italic = bool(_ITALIC_RE.search(str(style)))
        for key in _WEIGHT_KEYS:
            value = entry.get(key)
            if value is None or isinstance(value, bool):
                continue
            weight = _coerce_weight(value)
            if weight is not None:
                return Variant(weight, italic)
    return None


def _coerce_weight(value: Any) -> int | None:
    if isinstance(value, (int, float)):
        return int(value)
    text = str(value).strip()
    if re.fullmatch(r"[0-9]+(\.[0-9]+)?", text):
        return int(float(text))
    match = _DIGITS_RE.search(text)
    return int(match.group(1)) if match else None


def normalize_axes(entry: Mapping[str, Any]) -> list[Axis]:
    """Return the usable axes declared by a metadata record, in order."""
    raw = entry.get("axes")
    if not isinstance(raw, Sequence) or isinstance(raw, str):
        return []
    return [axis for axis in (Axis.from_metadata(item) for item in raw) if axis is not None]


def find_axis(axes: Iterable[Axis], tag: str) -> Axis | None:
    return next((axis for axis in axes if axis.tag == tag), None)


def generate_axis_variants(axes: Sequence[Axis]) -> list[Variant]:
    """Expand a ``wght`` axis (and optional ``ital`` axis) into variants."""
    wght = find_axis(axes, "wght")
    if wght is None:
        return []
    ital = find_axis(axes, "ital")
    with_italic = ital is not None and ital.end is not None and ital.end >= 1

    start = wght.start if wght.start is not None else 100
    end = wght.end if wght.end is not None else start
    start, end = sorted((start, end))
    step = wght.step if wght.step is not None and wght.step > 0 else 100

    variants: list[Variant] = []
    weight = start
    while weight <= end:
        variants.append(Variant(int(weight), False))
        if with_italic:
            variants.append(Variant(int(weight), True))
        weight += step
    return variants


@dataclass(frozen=True, slots=True)
class ExplicitVariants:
    """Variants listed verbatim under ``variants`` or ``fonts``."""

    source: VariantSourceName
    entries: tuple[Any, ...]

    def parse(self) -> list[Variant]:
        return [variant for variant in map(parse_variant_entry, self.entries) if variant]


@dataclass(frozen=True, slots=True)
class GeneratedVariants:
    """Variants derived from variable-font axis ranges."""

    axes: tuple[Axis, ...]
    source: VariantSourceName = "axes"

    def parse(self) -> list[Variant]:
        return generate_axis_variants(self.axes)


VariantSource: TypeAlias = ExplicitVariants | GeneratedVariants


def variant_sources(entry: Mapping[str, Any]) -> list[VariantSource]:
    """Return the candidate variant sources of a record in priority order."""
    sources: list[VariantSource] = []
    for key in ("variants", "fonts"):
        raw = entry.get(key)
        if isinstance(raw, Sequence) and not isinstance(raw, str) and raw:
            sources.append(ExplicitVariants(source=key, entries=tuple(raw)))
    sources.append(GeneratedVariants(axes=tuple(normalize_axes(entry))))
    return sources


def dedupe_variants(variants: Iterable[Variant]) -> list[Variant]:
    """Drop out-of-range weights and duplicate ``(weight, italic)`` pairs, then sort."""
    unique = {variant.key: variant for variant in variants if 1 <= variant.weight <= 1000}
    return sorted(unique.values())


@dataclass(frozen=True, slots=True)
class ResolvedVariants:
    variants: list[Variant]
    source: VariantSourceName
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def axes(self) -> list[Axis]:
        return normalize_axes(self.metadata)


class MetadataResolver:
    """Resolve every available variant of a family from the metadata table."""

    def __init__(self, cache: MetadataCache | None = None) -> None:
        self.cache = cache or MetadataCache()

    def resolve(self, name: str) -> ResolvedVariants:
        entry = self.cache.find(name)
        if entry is None:
            raise FontNotFoundError(name)

        for source in variant_sources(entry):
            variants = dedupe_variants(source.parse())
            if variants:
                return ResolvedVariants(variants=variants, source=source.source, metadata=entry)

        raise VariantResolutionError(name)


__all__ = [
    "XSSI_PREFIX",
    "ExplicitVariants",
    "GeneratedVariants",
    "MetadataCache",
    "MetadataResolver",
    "ResolvedVariants",
    "VariantSource",
    "dedupe_variants",
    "find_axis",
    "generate_axis_variants",
    "normalize_axes",
    "parse_metadata_payload",
    "parse_variant_entry",
    "variant_sources",
]
