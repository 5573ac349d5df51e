from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from massfonts.core.config import DownloadConfig, load_config, parse_fonts_option
from massfonts.core.exceptions import ConfigurationError


YAML_CONFIG = """\
formats: [woff2, ttf]
subsets: latin,latin-ext
outputDir: public/fonts
generateOptionsFile: true
optionsFilePath: src/fonts.ts
timeout: 5
fileNameOptions:
  separator: _
  italicSuffix: it
fonts:
  - name: Roboto
    weights: [400, bold]
    category: sans-serif
    notes: body text
  - name: Inter
    all: true
"""


def test_load_yaml_config_with_camel_case_keys(tmp_path: Path) -> None:
    path = tmp_path / "fonts.yml"
    path.write_text(YAML_CONFIG, encoding="utf-8")

    config = load_config(path)

    assert config.formats == ["woff2", "truetype"]
    assert config.subsets == ["latin", "latin-ext"]
    assert config.output_dir == Path("public/fonts")
    assert config.generate_options_file is True
    assert config.options_file_path == Path("src/fonts.ts")
    assert config.timeout == 5
    assert config.file_name_options.separator == "_"
    assert config.file_name_options.italic_suffix == "it"
    assert [font.name for font in config.fonts] == ["Roboto", "Inter"]
    assert config.fonts[0].weights == [400, "bold"]
    assert config.fonts[1].all is True


def test_load_json_config(tmp_path: Path) -> None:
    path = tmp_path / "fonts.json"
    path.write_text(
        json.dumps({"fonts": [{"name": "Lato", "formats": "woff"}], "output_dir": "out"}),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.fonts[0].formats == "woff"
    assert config.output_dir == Path("out")
    assert config.formats == ["woff2"]


def test_defaults() -> None:
    config = DownloadConfig()
    assert config.fonts == []
    assert config.formats == ["woff2"]
    assert config.subsets == ["latin"]
    assert config.output_dir == Path("output/fonts")
    assert config.generate_options_file is False
    assert config.options_file_path == Path("output/font-options.ts")
    assert config.timeout == 30


def test_formats_are_normalised() -> None:
    assert DownloadConfig(formats="ttf,WOFF").formats == ["truetype", "woff"]
    assert DownloadConfig(formats=["eot"]).formats == ["woff2"]


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        DownloadConfig(timeout=0)


@pytest.mark.parametrize(
    ("name", "content"),
    [
        ("empty.yml", "   \n"),
        ("broken.yml", "fonts: [\n"),
        ("list.yml", "- Roboto\n"),
        ("extra.yml", "fonts: []\nunknownKey: 1\n"),
        ("broken.json", "{"),
        ("blank-name.yml", "fonts:\n  - name: '  '\n"),
    ],
)
def test_invalid_configs_raise_configuration_error(tmp_path: Path, name: str, content: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path / "absent.yml")


def test_parse_fonts_option() -> None:
    entries = parse_fonts_option("Roboto:400,700; Poppins:bold;Inter:*;Lato;")
    assert [entry.name for entry in entries] == ["Roboto", "Poppins", "Inter", "Lato"]
    assert [entry.weights for entry in entries] == ["400,700", "bold", "*", None]


def test_parse_fonts_option_requires_family_names() -> None:
    with pytest.raises(ConfigurationError):
        parse_fonts_option(":400")


def test_bundled_example_config_is_valid() -> None:
    path = Path(__file__).resolve().parents[1] / "examples" / "fonts.yml"
    config = load_config(path)
    assert [font.name for font in config.fonts] == [
        "Roboto",
        "Poppins",
        "Inter",
        "Playfair Display",
    ]
    assert config.subsets == ["latin", "latin-ext"]
