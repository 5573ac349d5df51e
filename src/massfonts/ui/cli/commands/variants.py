"""Implementation of the ``massfonts variants`` command."""

from __future__ import annotations

from typing import Annotated

import typer

from massfonts.core.exceptions import (
    FontNotFoundError,
    MassFontsError,
    VariantResolutionError,
)
from massfonts.fonts.metadata import MetadataResolver
from massfonts.fonts.query import build_family_query, format_variant_summary

from ..presenter import present_variants
from ..state import emit_error, emit_warning, get_cli_state


def variants(
    families: Annotated[
        list[str],
        typer.Argument(metavar="FAMILY...", help="Font families to inspect."),
    ],
) -> None:
    """Show every variant a family offers and the matching CSS2 query."""
    state = get_cli_state()
    resolver = MetadataResolver()

    rows: list[tuple[str, str, str]] = []
    for family in families:
        try:
            query = build_family_query(family, include_all=True, resolver=resolver)
        except (FontNotFoundError, VariantResolutionError) as exc:
            emit_warning(str(exc), exception=exc)
            continue
        except MassFontsError as exc:
            emit_error(str(exc), exception=exc)
            raise typer.Exit(code=1) from exc
        rows.append((family, format_variant_summary(query.variants), query.query))

    if not rows:
        raise typer.Exit(code=1)
    present_variants(state, rows)


__all__ = ["variants"]
