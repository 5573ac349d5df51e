from __future__ import annotations

import pytest

from massfonts.fonts.formats import (
    canonical_format,
    describe_format_fallback,
    format_extension,
    normalize_formats,
    select_available_formats,
)


def test_normalize_formats_keeps_known_aliases_in_order() -> None:
    assert normalize_formats("WOFF2, ttf, unknown") == ["woff2", "truetype"]


def test_normalize_formats_folds_variation_spellings() -> None:
    requested = ["woff2-variations", "truetype-variations", "woff", "woff2"]
    assert normalize_formats(requested) == ["woff2", "truetype", "woff"]


@pytest.mark.parametrize("requested", [None, "", "eot, svg", []])
def test_normalize_formats_falls_back_when_nothing_is_recognised(requested) -> None:
    assert normalize_formats(requested) == ["woff2"]


def test_normalize_formats_deduplicates_custom_fallback() -> None:
    assert normalize_formats("nope", fallback=["woff", "woff", "truetype"]) == [
        "woff",
        "truetype",
    ]


def test_select_available_formats_preserves_preferred_order() -> None:
    result = select_available_formats(["woff2", "woff"], ["woff", "woff2", "truetype"])
    assert result == ["woff2", "woff"]


def test_select_available_formats_falls_back_to_priority_order() -> None:
    assert select_available_formats(["woff2"], ["truetype"]) == ["truetype"]
    assert select_available_formats(["woff2"], ["truetype-variations", "woff"]) == ["woff"]


def test_select_available_formats_defaults_and_empty_availability() -> None:
    assert select_available_formats(None, ["woff2", "woff"]) == ["woff2"]
    assert select_available_formats(["woff2"], []) == []
    assert select_available_formats(["woff2"], None) == []


def test_select_available_formats_keeps_unknown_availability_last() -> None:
    assert select_available_formats(["woff2"], ["opentype"]) == ["opentype"]


def test_describe_format_fallback_lists_dropped_and_used() -> None:
    dropped, used = describe_format_fallback(["woff2", "woff"], ["woff"])
    assert dropped == ["woff2"]
    assert used == ["woff"]


def test_canonical_format_and_extension() -> None:
    assert canonical_format(" TrueType-Variations ") == "truetype"
    assert canonical_format("eot") == "eot"
    assert format_extension("truetype") == "ttf"
    assert format_extension("woff2") == "woff2"
