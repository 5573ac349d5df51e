"""Construction of CSS2 ``family=`` queries from requested variants."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from urllib.parse import quote

from massfonts.core.exceptions import VariantResolutionError
from massfonts.fonts.metadata import MetadataResolver, find_axis
from massfonts.fonts.models import Axis, Variant
from massfonts.fonts.weights import DEFAULT_WEIGHT, LEADING_INT_RE, MAX_WEIGHT, MIN_WEIGHT


# Characters ``encodeURIComponent`` leaves untouched besides ``-._~``.
_URI_COMPONENT_SAFE = "!'()*"


@dataclass(frozen=True, slots=True)
class FamilyQuery:
    query: str
    variants: list[Variant]


def encode_family_name(name: str) -> str:
    return quote(name, safe=_URI_COMPONENT_SAFE)


def format_axis_number(value: float | int | None) -> str | None:
    """Render an axis bound, dropping the ``.0`` of integral values."""
    if value is None:
        return None
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_axis_range(axis: Axis | None) -> str | None:
    """Return ``start..end`` for a real range, a single value, or ``None``.

    Descending bounds are reordered so the range is always ascending.
    """
    if axis is None:
        return None
    start = axis.start if axis.start is not None else axis.end
    end = axis.end if axis.end is not None else axis.start
    if start is None or end is None:
        return None
    low, high = sorted((start, end))
    low_text = format_axis_number(low)
    high_text = format_axis_number(high)
    if low_text != high_text:
        return f"{low_text}..{high_text}"
    return low_text


def _is_progression(values: Sequence[int]) -> bool:
    if len(values) < 2:
        return False
    step = values[1] - values[0]
    return step > 0 and all(b - a == step for a, b in zip(values, values[1:]))


def _format_weight_entries(
    weights: Iterable[int],
    *,
    italic_flag: int | None,
    use_ranges: bool,
    axis_values: Sequence[str],
    weight_range: str | None,
) -> list[str]:
    def payload(value: str | int) -> str:
        parts = [*axis_values, str(value)]
        if italic_flag is not None:
            parts.insert(0, str(italic_flag))
        return ",".join(parts)

    if weight_range:
        return [payload(weight_range)]

    unique = sorted(set(weights))
    if not unique:
        return []
    if use_ranges and _is_progression(unique):
        return [payload(f"{unique[0]}..{unique[-1]}")]
    return [payload(weight) for weight in unique]


def sanitize_weights(weights: Iterable[int | str] | None) -> list[int]:
    """Keep weights within ``[1, 1000]``, de-duplicated and sorted (``[400]`` if empty)."""
    sanitized: set[int] = set()
    for value in weights or ():
        if isinstance(value, bool):
            continue
        if isinstance(value, (int, float)):
            number = int(value)
        else:
            match = LEADING_INT_RE.match(str(value))
            if match is None:
                continue
            number = int(match.group(1))
        if MIN_WEIGHT <= number <= MAX_WEIGHT:
            sanitized.add(number)
    return sorted(sanitized) or [DEFAULT_WEIGHT]


def build_family_query(
    name: str,
    weights: Iterable[int | str] | None = None,
    *,
    include_all: bool = False,
    resolver: MetadataResolver | None = None,
) -> FamilyQuery:
    """Build the ``family=`` query for ``name``.

    Explicit weights produce ``family=Name:wght@400;700``. With
    ``include_all`` the family metadata is consulted and the query spans every
    available variant, including italic and any extra variable axes.
    """
    encoded = encode_family_name(name)
    if not include_all:
        unique = sanitize_weights(weights)
        return FamilyQuery(
            query=f"family={encoded}:wght@{';'.join(map(str, unique))}",
            variants=[Variant(weight, False) for weight in unique],
        )

    resolver = resolver or MetadataResolver()
    resolved = resolver.resolve(name)
    variants = list(resolved.variants)
    upright = [variant.weight for variant in variants if not variant.italic]
    italic = [variant.weight for variant in variants if variant.italic]

    axes = resolved.axes
    extra_axes: list[tuple[str, str]] = []
    for axis in axes:
        if axis.tag in {"wght", "ital"}:
            continue
        value = format_axis_range(axis)
        if value:
            extra_axes.append((axis.tag, value))

    wght_range = format_axis_range(find_axis(axes, "wght"))
    use_axis_range = resolved.source == "axes" or bool(wght_range and ".." in wght_range)
    weight_range = wght_range if use_axis_range else None
    include_ital = bool(italic) or find_axis(axes, "ital") is not None

    axis_order = (["ital"] if include_ital else []) + [tag for tag, _ in extra_axes] + ["wght"]
    axis_values = [value for _, value in extra_axes]

    entries: list[str] = []
    if upright or weight_range:
        entries.extend(
            _format_weight_entries(
                upright,
                italic_flag=0 if include_ital else None,
                use_ranges=use_axis_range,
                axis_values=axis_values,
                weight_range=weight_range,
            )
        )
    if italic:
        entries.extend(
            _format_weight_entries(
                italic,
                italic_flag=1 if include_ital else None,
                use_ranges=use_axis_range,
                axis_values=axis_values,
                weight_range=weight_range,
            )
        )

    if not entries:
        raise VariantResolutionError(name)

    return FamilyQuery(
        query=f"family={encoded}:{','.join(axis_order)}@{';'.join(entries)}",
        variants=variants,
    )


def format_variant_summary(variants: Iterable[Variant]) -> str:
    """Summarise variants as ``"400, 700, 400i"``; long even runs become ranges."""
    upright: set[int] = set()
    italic: set[int] = set()
    for variant in variants:
        (italic if variant.italic else upright).add(variant.weight)

    def group(weights: set[int], suffix: str) -> list[str]:
        ordered = sorted(weights)
        if len(ordered) > 6 and _is_progression(ordered):
            return [f"{ordered[0]}..{ordered[-1]}{suffix}"]
        return [f"{weight}{suffix}" for weight in ordered]

    return ", ".join([*group(upright, ""), *group(italic, "i")])


__all__ = [
    "FamilyQuery",
    "build_family_query",
    "encode_family_name",
    "format_axis_number",
    "format_axis_range",
    "format_variant_summary",
    "sanitize_weights",
]
