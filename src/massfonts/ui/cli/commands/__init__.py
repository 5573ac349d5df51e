"""CLI command implementations exposed via `massfonts.ui.cli`."""

from __future__ import annotations

from .download import download
from .variants import variants


__all__ = ["download", "variants"]
