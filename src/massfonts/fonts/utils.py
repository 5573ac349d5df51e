"""Shared helpers for font handling."""

from __future__ import annotations

from pathlib import Path

from massfonts.core.exceptions import UnsafePathError


def resolve_safe_path(base: Path | str, *segments: str) -> Path:
    """
    Join ``segments`` onto ``base`` and ensure the result stays inside ``base``.

    Raises :class:`UnsafePathError` when the resolved path escapes the base
    directory (``..`` components, absolute segments, symlinks pointing out).
    """
    resolved_base = Path(base).resolve()
    target = resolved_base.joinpath(*segments).resolve()
    if target == resolved_base or target.is_relative_to(resolved_base):
        return target
    raise UnsafePathError(
        f"Refusing to write outside '{resolved_base}': {'/'.join(segments)}"
    )


def format_path_for_display(path: Path) -> str:
    """Return ``path`` relative to the working directory when possible."""
    try:
        resolved = path.resolve()
    except OSError:
        resolved = path
    try:
        return str(resolved.relative_to(Path.cwd()))
    except ValueError:
        return str(resolved)


__all__ = ["format_path_for_display", "resolve_safe_path"]
