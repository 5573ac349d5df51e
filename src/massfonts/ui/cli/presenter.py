"""Rich-aware presenters for CLI output."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from massfonts.fonts.downloader import DownloadReport
from massfonts.fonts.utils import format_path_for_display

from .state import CLIState


if TYPE_CHECKING:  # pragma: no cover - typing only
    from rich.console import Console


def _get_console(state: CLIState) -> Console | None:
    """Return the stdout console when it is attached to a terminal."""
    console = state.console
    if getattr(console, "is_terminal", False):
        return console
    return None


def _size_details(paths: Sequence[Path]) -> str:
    total = 0
    for path in paths:
        try:
            total += path.stat().st_size
        except OSError:
            continue
    if total >= 1024 * 1024:
        return f"{total / (1024 * 1024):.2f} MiB"
    if total >= 1024:
        return f"{total / 1024:.1f} KiB"
    return f"{total} B"


def present_download_summary(state: CLIState, report: DownloadReport, output_dir: Path) -> None:
    """Display the families, folders and files produced by a download run."""
    base = Path(output_dir)
    rows: list[tuple[str, str, str, str]] = []
    for family in report.families:
        folder = base / family.folder
        paths = [folder / name for name in family.files]
        rows.append(
            (
                family.name,
                format_path_for_display(folder),
                ", ".join(family.files) or "-",
                _size_details(paths),
            )
        )

    console = _get_console(state)
    if console is not None:
        from rich import box
        from rich.table import Table

        table = Table(title="Downloaded fonts", box=box.SQUARE, header_style="bold cyan")
        table.add_column("Family", style="cyan")
        table.add_column("Folder")
        table.add_column("Files")
        table.add_column("Size", style="magenta", justify="right", no_wrap=True)
        for row in rows:
            table.add_row(*row)
        console.print(table)
    else:
        typer.echo("Downloaded fonts:")
        for family, folder, files, size in rows:
            typer.echo(f"  * {family}: {folder} ({files}) {size}")

    typer.echo(
        f"{len(report.downloaded)} file(s) downloaded, {len(report.existing)} already present."
    )
    if report.skipped:
        typer.echo(f"Skipped: {', '.join(report.skipped)}")
    if report.manifest_path is not None:
        typer.echo(f"Manifest: {format_path_for_display(report.manifest_path)}")


def present_variants(state: CLIState, rows: Sequence[tuple[str, str, str]]) -> None:
    """Render ``(family, summary, query)`` rows for the ``variants`` command."""
    console = _get_console(state)
    if console is not None:
        from rich import box
        from rich.table import Table

        table = Table(box=box.SQUARE, header_style="bold cyan")
        table.add_column("Family", style="cyan")
        table.add_column("Variants")
        table.add_column("Query", overflow="fold")
        for row in rows:
            table.add_row(*row)
        console.print(table)
        return

    for family, summary, query in rows:
        typer.echo(f"{family}: {summary}")
        typer.echo(f"  {query}")


__all__ = ["present_download_summary", "present_variants"]
