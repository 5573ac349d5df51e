"""Resolution of heterogeneous weight specifications into numeric weights."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import re
from typing import TYPE_CHECKING, Any, Protocol

from massfonts.fonts.formats import FALLBACK_FORMATS, normalize_formats
from massfonts.fonts.models import FontRequest


if TYPE_CHECKING:
    from massfonts.fonts.logging import FontPipelineLogger


MIN_WEIGHT = 1
MAX_WEIGHT = 1000
DEFAULT_WEIGHT = 400
ALL_TOKENS = frozenset({"*", "all"})

WEIGHT_ALIASES: dict[str, int] = {
    "thin": 100,
    "extralight": 200,
    "ultralight": 200,
    "light": 300,
    "normal": 400,
    "regular": 400,
    "book": 400,
    "medium": 500,
    "semibold": 600,
    "demibold": 600,
    "demi": 600,
    "bold": 700,
    "extrabold": 800,
    "ultrabold": 800,
    "black": 900,
    "heavy": 900,
    "extrablack": 900,
    "ultrablack": 900,
}

_SEPARATORS_RE = re.compile(r"[\s_-]+")
LEADING_INT_RE = re.compile(r"\s*([0-9]+)")

WeightSpec = int | str | Iterable[int | str] | None


class FontEntryLike(Protocol):
    name: str
    weights: Any
    formats: Any
    all: bool


@dataclass(frozen=True, slots=True)
class WeightSelection:
    """Outcome of weight resolution: explicit weights or "resolve everything"."""

    weights: tuple[int, ...]
    include_all: bool = False


def parse_weight_token(token: int | str) -> int | None:
    """Resolve a single weight token (``700``, ``"bold"``, ``"Semi Bold"``...)."""
    if isinstance(token, bool):
        return None
    if isinstance(token, int):
        return token if MIN_WEIGHT <= token <= MAX_WEIGHT else None
    text = str(token).strip().lower()
    if not text:
        return None
    match = LEADING_INT_RE.match(text)
    if match is not None:
        value = int(match.group(1))
        return value if MIN_WEIGHT <= value <= MAX_WEIGHT else None
    compact = _SEPARATORS_RE.sub("", text)
    if compact in WEIGHT_ALIASES:
        return WEIGHT_ALIASES[compact]
    if compact == "italic":
        return DEFAULT_WEIGHT
    return None


def _tokens(spec: WeightSpec) -> list[int | str]:
    if spec is None:
        return []
    if isinstance(spec, (int, str)):
        items: Iterable[int | str] = [spec]
    else:
        items = spec
    tokens: list[int | str] = []
    for item in items:
        if isinstance(item, str):
            tokens.extend(part for part in item.split(",") if part.strip())
        else:
            tokens.append(item)
    return tokens


def is_all_token(spec: WeightSpec) -> bool:
    """Return whether ``spec`` asks for every available variant (``*``/``all``)."""
    tokens = _tokens(spec)
    return len(tokens) == 1 and str(tokens[0]).strip().lower() in ALL_TOKENS


def parse_weights(spec: WeightSpec, *, logger: FontPipelineLogger | None = None) -> list[int]:
    """Return the ascending, de-duplicated weights named by ``spec``.

    Unknown tokens are dropped with a warning; ``[400]`` is returned when no
    token could be resolved.
    """
    resolved: set[int] = set()
    for token in _tokens(spec):
        value = parse_weight_token(token)
        if value is None:
            if logger is not None:
                logger.warning("Ignoring unrecognised font weight '%s'.", str(token).strip())
            continue
        resolved.add(value)
    return sorted(resolved) or [DEFAULT_WEIGHT]


def resolve_weights(
    spec: WeightSpec,
    *,
    override: WeightSpec = None,
    download_all: bool = False,
    family_all: bool = False,
    logger: FontPipelineLogger | None = None,
) -> WeightSelection:
    """Apply the weight precedence rules for one family.

    A non-empty global ``override`` beats every per-family setting and also
    suppresses ``download_all``; an override of ``*``/``all`` selects every
    variant. Without an override, the global flag, the per-family flag or a
    per-family ``*``/``all`` token select every variant.
    """
    if _tokens(override):
        if is_all_token(override):
            return WeightSelection(weights=(), include_all=True)
        return WeightSelection(weights=tuple(parse_weights(override, logger=logger)))

    if download_all or family_all or is_all_token(spec):
        return WeightSelection(weights=(), include_all=True)

    return WeightSelection(weights=tuple(parse_weights(spec, logger=logger)))


def build_font_request(
    entry: FontEntryLike,
    *,
    default_formats: Iterable[str] | None = None,
    override: WeightSpec = None,
    download_all: bool = False,
    logger: FontPipelineLogger | None = None,
) -> FontRequest:
    """Freeze the weights and formats requested for ``entry``."""
    selection = resolve_weights(
        entry.weights,
        override=override,
        download_all=download_all,
        family_all=bool(entry.all),
        logger=logger,
    )
    formats: tuple[str, ...] | None = None
    if entry.formats:
        formats = tuple(normalize_formats(entry.formats, default_formats or FALLBACK_FORMATS))
    return FontRequest(
        name=entry.name.strip(),
        weights=selection.weights,
        include_all=selection.include_all,
        formats=formats,
    )


__all__ = [
    "ALL_TOKENS",
    "DEFAULT_WEIGHT",
    "LEADING_INT_RE",
    "MAX_WEIGHT",
    "MIN_WEIGHT",
    "WEIGHT_ALIASES",
    "WeightSelection",
    "build_font_request",
    "is_all_token",
    "parse_weight_token",
    "parse_weights",
    "resolve_weights",
]
