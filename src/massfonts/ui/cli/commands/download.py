"""Implementation of the ``massfonts download`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from massfonts.core.config import DownloadConfig, load_config, parse_fonts_option
from massfonts.core.exceptions import MassFontsError
from massfonts.fonts.downloader import FontDownloader
from massfonts.fonts.formats import normalize_formats
from massfonts.fonts.logging import FontPipelineLogger

from .._options import (
    AllOption,
    ConfigOption,
    FontsOption,
    FormatsOption,
    ManifestOption,
    OutputDirOption,
    SubsetOption,
    WeightsOption,
)
from ..presenter import present_download_summary
from ..state import emit_error, get_cli_state


def build_settings(
    *,
    config: Path | None = None,
    fonts: str | None = None,
    output: Path | None = None,
    manifest: Path | None = None,
    subset: str | None = None,
    formats: str | None = None,
) -> DownloadConfig:
    """Merge a configuration file with command line values (CLI wins)."""
    settings = load_config(config) if config is not None else DownloadConfig()

    updates: dict[str, object] = {}
    if fonts:
        updates["fonts"] = parse_fonts_option(fonts)
    if output is not None:
        updates["output_dir"] = output
    if manifest is not None:
        updates["generate_options_file"] = True
        updates["options_file_path"] = manifest
    if subset:
        updates["subsets"] = [item.strip() for item in subset.split(",") if item.strip()]
    if formats:
        updates["formats"] = normalize_formats(formats)

    if updates:
        settings = settings.model_copy(update=updates)
    return settings


def download(
    config: ConfigOption = None,
    fonts: FontsOption = None,
    output: OutputDirOption = None,
    manifest: ManifestOption = None,
    subset: SubsetOption = None,
    formats: FormatsOption = None,
    weights: WeightsOption = None,
    download_all: AllOption = False,
) -> None:
    """Download Google Fonts families into one folder per family."""
    state = get_cli_state()

    try:
        settings = build_settings(
            config=config,
            fonts=fonts,
            output=output,
            manifest=manifest,
            subset=subset,
            formats=formats,
        )
    except MassFontsError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if not settings.fonts:
        raise typer.BadParameter("Provide fonts with --fonts or a --config file.")

    logger = FontPipelineLogger(verbose=state.verbosity >= 1)
    downloader = FontDownloader(settings, logger=logger)

    try:
        report = downloader.run(weights_override=weights, download_all=download_all)
    except MassFontsError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    present_download_summary(state, report, settings.output_dir)


__all__ = ["build_settings", "download"]
