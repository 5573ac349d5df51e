from __future__ import annotations

import pytest

from massfonts.core.config import FontEntry
from massfonts.fonts.weights import (
    build_font_request,
    is_all_token,
    parse_weight_token,
    parse_weights,
    resolve_weights,
)


class RecordingLogger:
    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warning(self, message: str, *args) -> None:
        self.warnings.append(message % args if args else message)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        (700, 700),
        ("300", 300),
        ("bold", 700),
        ("Semi Bold", 600),
        ("extra-bold", 800),
        ("ultra_light", 200),
        ("ITALIC", 400),
        ("heavy", 900),
        ("400.0", 400),
        (" 300px", 300),
        (0, None),
        (1001, None),
        ("1200", None),
        (True, None),
        ("", None),
        ("chunky", None),
    ],
)
def test_parse_weight_token(token, expected) -> None:
    assert parse_weight_token(token) == expected


def test_parse_weights_sorts_and_deduplicates() -> None:
    assert parse_weights("400, bold, Semi Bold") == [400, 600, 700]
    assert parse_weights([700, "300", 700, "bold"]) == [300, 700]


def test_parse_weights_defaults_to_regular() -> None:
    assert parse_weights(None) == [400]
    assert parse_weights([]) == [400]


def test_parse_weights_reads_leading_integers() -> None:
    logger = RecordingLogger()
    assert parse_weights("400.0, 700", logger=logger) == [400, 700]
    assert logger.warnings == []


def test_parse_weights_warns_on_unknown_tokens() -> None:
    logger = RecordingLogger()
    assert parse_weights(["heavyish", "500"], logger=logger) == [500]
    assert logger.warnings == ["Ignoring unrecognised font weight 'heavyish'."]


def test_is_all_token() -> None:
    assert is_all_token("*")
    assert is_all_token(["ALL"])
    assert not is_all_token("400,*")
    assert not is_all_token(None)


def test_override_wins_over_family_settings() -> None:
    selection = resolve_weights(["400"], override="700,900", family_all=True)
    assert selection.weights == (700, 900)
    assert selection.include_all is False


def test_override_suppresses_download_all() -> None:
    selection = resolve_weights(["400"], override="700", download_all=True)
    assert selection.weights == (700,)
    assert selection.include_all is False


def test_override_of_star_selects_everything() -> None:
    selection = resolve_weights([400], override="*")
    assert selection.include_all is True
    assert selection.weights == ()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"spec": "*"},
        {"spec": "all"},
        {"spec": [400], "family_all": True},
        {"spec": [400], "download_all": True},
    ],
)
def test_all_variants_requested(kwargs) -> None:
    spec = kwargs.pop("spec")
    assert resolve_weights(spec, **kwargs).include_all is True


def test_blank_override_is_ignored() -> None:
    selection = resolve_weights("bold", override="")
    assert selection.weights == (700,)


def test_build_font_request_freezes_weights_and_formats() -> None:
    entry = FontEntry(name="  Roboto ", weights="bold, 400", formats="ttf")
    request = build_font_request(entry, default_formats=["woff2"])
    assert request.name == "Roboto"
    assert request.weights == (400, 700)
    assert request.include_all is False
    assert request.formats == ("truetype",)


def test_build_font_request_inherits_formats_when_unset() -> None:
    request = build_font_request(FontEntry(name="Inter", all=True))
    assert request.formats is None
    assert request.include_all is True


def test_build_font_request_uses_defaults_for_unknown_formats() -> None:
    entry = FontEntry(name="Inter", formats=["eot"])
    request = build_font_request(entry, default_formats=["woff"])
    assert request.formats == ("woff",)
