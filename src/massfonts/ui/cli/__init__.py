"""Public CLI exports for massfonts."""

from __future__ import annotations

from .app import app, main
from .commands import download, variants
from .state import debug_enabled, emit_error, emit_warning, get_cli_state


__all__ = [
    "app",
    "debug_enabled",
    "download",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "main",
    "variants",
]
