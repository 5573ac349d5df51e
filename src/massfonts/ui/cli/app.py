"""Typer application wiring for the massfonts CLI."""

from __future__ import annotations

import typer

from massfonts.ui.cli.commands import download, variants

from ._options import DebugOption, VerbosityOption
from .state import debug_enabled, emit_error, set_cli_state


app = typer.Typer(
    name="massfonts",
    help="Bulk-download webfonts from Google Fonts.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


@app.callback()
def _configure(
    ctx: typer.Context,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
) -> None:
    """Bulk-download webfonts from Google Fonts."""
    set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)


app.command()(download)
app.command()(variants)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - last-resort reporting
        from .state import get_cli_state

        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
