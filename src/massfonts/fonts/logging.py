"""Small logging helpers that integrate with the massfonts CLI."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import typer


if TYPE_CHECKING:
    from massfonts.ui.cli.state import CLIState


def _resolve_state() -> CLIState:
    from massfonts.ui.cli.state import get_cli_state

    return get_cli_state()


@dataclass(slots=True)
class FontPipelineLogger:
    """Console logger shared by the download pipeline.

    Messages go through the CLI state so they share the Rich consoles used by
    the command line; ``quiet`` silences info output (warnings still print).
    """

    verbose: bool = False
    quiet: bool = False
    _state: CLIState = field(default_factory=_resolve_state, repr=False)

    def _render_message(self, message: str, args: tuple[Any, ...]) -> str:
        if args:
            try:
                message = message % args
            except (TypeError, ValueError):
                message = " ".join([message, *(str(arg) for arg in args)])
        return message

    def info(self, message: str, *args: Any) -> None:
        if self.quiet:
            return
        self._state.console.log(self._render_message(message, args), markup=False)

    def warning(self, message: str, *args: Any) -> None:
        from massfonts.ui.cli.state import emit_warning

        emit_warning(self._render_message(message, args), state=self._state)

    def debug(self, message: str, *args: Any) -> None:
        """Emit a debug/verbose message when verbose mode is enabled."""
        if not (self.verbose or self._state.verbosity >= 1):
            return
        self.info("[debug] " + message, *args)

    @contextmanager
    def progress(self, task: str, total: int | None = None) -> Iterator[Callable[[int], None]]:
        """Yield a progress updater backed by a Rich progress bar."""
        if self.quiet:
            yield lambda step=1: None
            return

        from rich.progress import (
            BarColumn,
            Progress,
            SpinnerColumn,
            TaskID,
            TextColumn,
            TimeElapsedColumn,
        )

        console = self._state.console
        if not console.is_terminal:
            count = 0

            def _advance_plain(step: int = 1) -> None:
                nonlocal count
                count += step
                if self.verbose or self._state.verbosity >= 1:
                    typer.echo(f"{task}: {count}/{total}" if total else f"{task}: {count}", err=True)

            yield _advance_plain
            return

        with Progress(
            SpinnerColumn(),
            TextColumn(f"[bold cyan]{task}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}" if total else "{task.completed}"),
            TimeElapsedColumn(),
            console=console,
            transient=not self.verbose,
        ) as progress:
            task_id: TaskID = progress.add_task(task, total=total)

            def _advance(step: int = 1) -> None:
                progress.update(task_id, advance=step)

            yield _advance


__all__ = ["FontPipelineLogger"]
