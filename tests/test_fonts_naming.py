from __future__ import annotations

import re

from pydantic import ValidationError
import pytest

from massfonts.fonts.models import SingleWeight, WeightRange
from massfonts.fonts.naming import (
    FileNameOptions,
    apply_case,
    build_file_name,
    sanitize_segment,
    slugify_font_folder,
)


def test_default_file_names() -> None:
    assert build_file_name("roboto", SingleWeight(400), False, "woff2") == "roboto-400.woff2"
    assert build_file_name("roboto", 700, True, "ttf") == "roboto-700-italic.ttf"
    assert build_file_name("inter", WeightRange(100, 900), False, "woff2") == (
        "inter-100-900.woff2"
    )


def test_named_weights_and_custom_casing() -> None:
    options = FileNameOptions(
        separator="_",
        italic_suffix="Italic",
        family_case="pascal",
        weight_case="preserve",
        italic_case="pascal",
        weight_naming="named",
    )
    assert build_file_name("noto-sans-jp", 700, True, "woff2", options) == (
        "NotoSansJp_Bold_Italic.woff2"
    )
    assert build_file_name("noto-sans-jp", 450, False, "woff2", options) == "NotoSansJp_450.woff2"


def test_options_accept_camel_case_keys() -> None:
    options = FileNameOptions.model_validate({"italicSeparator": "", "extensionCase": "upper"})
    assert build_file_name("roboto", 400, True, "woff2", options) == "roboto-400italic.WOFF2"


@pytest.mark.parametrize("payload", [{"separator": "/"}, {"separator": "----"}, {"bogus": 1}])
def test_options_reject_invalid_settings(payload) -> None:
    with pytest.raises(ValidationError):
        FileNameOptions.model_validate(payload)


def test_hostile_inputs_cannot_escape_the_folder() -> None:
    name = build_file_name("../../etc", "400", False, "../WOFF2")
    assert name == "etc-400.woff2"
    assert "/" not in name
    assert ".." not in name


def test_sanitize_segment() -> None:
    assert sanitize_segment("Ünïcödé Fámily", "x") == "Unicode-Family"
    assert sanitize_segment("snake_case name", "x") == "snake_case-name"
    assert sanitize_segment("", "font") == "font"
    assert sanitize_segment(None, "font") == "font"
    assert sanitize_segment("///", "font") == "font"


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        ("kebab", "open-sans-bold"),
        ("snake", "open_sans_bold"),
        ("pascal", "OpenSansBold"),
        ("camel", "openSansBold"),
        ("upper", "OPEN_SANS-BOLD"),
        ("lower", "open_sans-bold"),
        ("preserve", "Open_Sans-Bold"),
    ],
)
def test_apply_case(style: str, expected: str) -> None:
    assert apply_case("Open_Sans-Bold", style) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Noto Sans JP", "noto-sans-jp"),
        ("../Weird/Name", "weird-name"),
        ("", "font"),
        ("  Roboto  Mono ", "roboto-mono"),
    ],
)
def test_slugify_font_folder(name: str, expected: str) -> None:
    assert slugify_font_folder(name) == expected
    assert slugify_font_folder(slugify_font_folder(name)) == expected


@pytest.mark.parametrize(
    "name",
    [
        "Ünïcödé Fámily",
        "思源黑体",
        "Ελληνικά Sans",
        "Noto Sans &amp; Serif",
        "1,000 Weights",
        "__",
        "---",
        "Ｆｕｌｌｗｉｄｔｈ",
        "Tab\tand\nnewline",
        "emoji 🎉 font",
    ],
)
def test_slugify_font_folder_is_idempotent_kebab_case(name: str) -> None:
    folder = slugify_font_folder(name)
    assert re.fullmatch(r"[a-z0-9]+(-[a-z0-9]+)*", folder)
    assert slugify_font_folder(folder) == folder


def test_traversal_payloads_in_every_argument() -> None:
    assert build_file_name("../Roboto", "../400", True, "../WOFF2") == "roboto-400-italic.woff2"
