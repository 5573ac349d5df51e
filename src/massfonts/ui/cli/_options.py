"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


SELECTION_PANEL = "Font Selection"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML or JSON configuration file listing the fonts to download.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=SELECTION_PANEL,
    ),
]

FontsOption = Annotated[
    str | None,
    typer.Option(
        "--fonts",
        help="Fonts to download, e.g. 'Roboto:400,700;Poppins:bold;Inter:*'.",
        rich_help_panel=SELECTION_PANEL,
    ),
]

WeightsOption = Annotated[
    str | None,
    typer.Option(
        "--weights",
        help="Weights applied to every family, overriding per-font settings ('*' for all).",
        rich_help_panel=SELECTION_PANEL,
    ),
]

AllOption = Annotated[
    bool,
    typer.Option(
        "--all",
        help="Download every available variant of each family.",
        rich_help_panel=SELECTION_PANEL,
    ),
]

FormatsOption = Annotated[
    str | None,
    typer.Option(
        "--formats",
        help="Comma-separated formats to keep (woff2, woff, ttf).",
        rich_help_panel=SELECTION_PANEL,
    ),
]

SubsetOption = Annotated[
    str | None,
    typer.Option(
        "--subset",
        help="Comma-separated character subsets (e.g. 'latin,latin-ext').",
        rich_help_panel=SELECTION_PANEL,
    ),
]

OutputDirOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Directory receiving one folder per family.",
        file_okay=False,
        dir_okay=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

ManifestOption = Annotated[
    Path | None,
    typer.Option(
        "--ts",
        help="Write a manifest of downloaded files (.ts module or .json).",
        dir_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "AllOption",
    "ConfigOption",
    "DebugOption",
    "FontsOption",
    "FormatsOption",
    "ManifestOption",
    "OutputDirOption",
    "SubsetOption",
    "VerbosityOption",
    "WeightsOption",
]
