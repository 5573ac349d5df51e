from __future__ import annotations

from typing import Any

import pytest

from massfonts.fonts.metadata import MetadataCache, MetadataResolver


ROBOTO = {
    "family": "Roboto",
    "variants": ["regular", "italic", "500", "700italic"],
}

MULTI_AXIS = {
    "family": "Multi Axis",
    "variants": ["regular", "italic"],
    "axes": [
        {"tag": "opsz", "min": 14, "max": 32},
        {"tag": "wght", "min": 100, "max": 900, "step": 100},
        {"tag": "ital", "min": 0, "max": 1},
    ],
}

FALLBACK = {
    "family": "Fallback",
    "fonts": [
        {"fontStyle": "normal", "fontWeight": "400"},
        {"fontStyle": "italic", "fontWeight": "400"},
        {"style": "normal", "weight": 700},
    ],
}

VARIABLE_FAMILY = {
    "family": "Variable Family",
    "axes": [
        {"tag": "wght", "min": 200, "max": 600, "step": 200},
        {"tag": "ital", "min": 0, "max": 1},
    ],
}

EMPTY_FAMILY = {"family": "Empty Family", "variants": [], "axes": []}

METADATA_FAMILIES = [ROBOTO, MULTI_AXIS, FALLBACK, VARIABLE_FAMILY, EMPTY_FAMILY]


def metadata_payload(*families: dict[str, Any]) -> dict[str, Any]:
    return {"familyMetadataList": list(families or METADATA_FAMILIES)}


@pytest.fixture
def resolver() -> MetadataResolver:
    return MetadataResolver(MetadataCache(lambda: metadata_payload()))
