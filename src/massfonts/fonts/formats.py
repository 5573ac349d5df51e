"""Canonicalisation and negotiation of webfont container formats.

Style sheets declare sources with ``format(...)`` hints that may use the
``-variations`` spelling for variable fonts, while users usually type file
extensions such as ``ttf``. Everything is folded into three canonical tokens
(``woff2``, ``woff`` and ``truetype``) before it reaches file naming.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


FORMAT_ALIASES: dict[str, str] = {
    "woff2": "woff2",
    "woff2-variations": "woff2",
    "woff": "woff",
    "woff-variations": "woff",
    "truetype": "truetype",
    "truetype-variations": "truetype",
    "ttf": "truetype",
}

FORMAT_EXTENSIONS: dict[str, str] = {
    "woff2": "woff2",
    "woff": "woff",
    "truetype": "ttf",
}

FALLBACK_FORMATS: tuple[str, ...] = ("woff2",)
FORMAT_PRIORITY: tuple[str, ...] = ("woff2", "woff", "truetype")


def _split_formats(formats: str | Iterable[str] | None) -> list[str]:
    if formats is None:
        return []
    if isinstance(formats, str):
        return formats.split(",")
    return [str(item) for item in formats]


def canonical_format(token: str) -> str:
    """Return the canonical spelling of ``token``, or ``token`` itself if unknown."""
    return FORMAT_ALIASES.get(token.strip().lower(), token)


def format_extension(format_name: str) -> str:
    """Return the file extension used for a canonical format."""
    return FORMAT_EXTENSIONS.get(format_name, format_name)


def normalize_formats(
    requested: str | Iterable[str] | None,
    fallback: Iterable[str] = FALLBACK_FORMATS,
) -> list[str]:
    """Return the canonical, de-duplicated formats named by ``requested``.

    Unknown tokens are ignored. When nothing usable remains the de-duplicated
    ``fallback`` is returned instead.
    """
    canonical = [
        FORMAT_ALIASES[token]
        for token in (raw.strip().lower() for raw in _split_formats(requested))
        if token in FORMAT_ALIASES
    ]
    if canonical:
        return list(dict.fromkeys(canonical))
    return list(dict.fromkeys(fallback))


def select_available_formats(
    preferred: Sequence[str] | None,
    available: Iterable[str] | None,
) -> list[str]:
    """Reconcile preferred formats with those a family actually offers.

    Requested formats that are available keep their order. Otherwise the first
    available entry of :data:`FORMAT_PRIORITY` is used, then whatever is
    available. An empty result means no compatible format exists.
    """
    requested = list(preferred) if preferred else list(FALLBACK_FORMATS)
    available_set = dict.fromkeys(
        canonical_format(item) for item in (available or ()) if item
    )

    matching = [item for item in requested if item in available_set]
    if matching:
        return matching

    for candidate in FORMAT_PRIORITY:
        if candidate in available_set:
            return [candidate]

    return list(available_set)


def describe_format_fallback(
    requested: Sequence[str], selected: Sequence[str]
) -> tuple[list[str], list[str]]:
    """Return ``(dropped, used)`` for a partial format fallback message."""
    dropped = [item for item in requested if item not in selected]
    return dropped, list(selected)


__all__ = [
    "FALLBACK_FORMATS",
    "FORMAT_ALIASES",
    "FORMAT_EXTENSIONS",
    "FORMAT_PRIORITY",
    "canonical_format",
    "describe_format_fallback",
    "format_extension",
    "normalize_formats",
    "select_available_formats",
]
