"""Extraction of downloadable sources from CSS2 API style sheets."""

from __future__ import annotations

from collections.abc import Iterable
import re

from massfonts.fonts.models import SingleWeight, SourceRecord, Weight, WeightRange


FONT_FACE_BLOCK_RE = re.compile(r"@font-face\s*\{[^}]*\}", re.IGNORECASE)
FONT_STYLE_RE = re.compile(r"font-style\s*:\s*([^;}]+)", re.IGNORECASE)
FONT_WEIGHT_RE = re.compile(r"font-weight\s*:\s*([0-9]+)(?:\s+([0-9]+))?", re.IGNORECASE)
FONT_SRC_RE = re.compile(
    r"""url\(\s*(['"]?)([^)'"\s]+)\1\s*\)\s*"""
    r"""format\(\s*['"]?"""
    r"""(woff2-variations|woff-variations|truetype-variations|woff2|woff|truetype)"""
    r"""['"]?\s*\)""",
    re.IGNORECASE,
)
_ITALIC_RE = re.compile(r"italic|oblique", re.IGNORECASE)


def _block_weight(block: str) -> Weight:
    match = FONT_WEIGHT_RE.search(block)
    if match is None:
        return SingleWeight(400)
    start, end = match.group(1), match.group(2)
    if end is None:
        return SingleWeight(int(start))
    return WeightRange(int(start), int(end))


def _block_italic(block: str) -> bool:
    match = FONT_STYLE_RE.search(block)
    return bool(match and _ITALIC_RE.search(match.group(1)))


def extract_sources_from_css(css: str) -> list[SourceRecord]:
    """Return one :class:`SourceRecord` per recognised ``src`` URL, in order."""
    sources: list[SourceRecord] = []
    for block_match in FONT_FACE_BLOCK_RE.finditer(css or ""):
        block = block_match.group(0)
        italic = _block_italic(block)
        weight = _block_weight(block)
        for src in FONT_SRC_RE.finditer(block):
            sources.append(
                SourceRecord(
                    url=src.group(2),
                    format=src.group(3).lower(),
                    weight=weight,
                    italic=italic,
                )
            )
    return sources


def available_formats(sources: Iterable[SourceRecord]) -> list[str]:
    """Return the canonical formats present in ``sources``, first seen first."""
    return list(dict.fromkeys(source.canonical_format for source in sources))


__all__ = [
    "available_formats",
    "extract_sources_from_css",
]
