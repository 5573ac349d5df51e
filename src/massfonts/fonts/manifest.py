"""Generated manifest listing downloaded families and their files."""

from __future__ import annotations

from collections.abc import Iterable
import json
from pathlib import Path

from massfonts.fonts.models import FamilyResult


MANIFEST_HEADER = "// Generated automatically by massfonts"


def render_manifest(families: Iterable[FamilyResult], *, as_module: bool = True) -> str:
    """Serialise ``families`` as a TypeScript module or as bare JSON."""
    payload = json.dumps([family.to_manifest() for family in families], indent=2)
    if not as_module:
        return payload + "\n"
    return f"{MANIFEST_HEADER}\nexport const FONT_OPTIONS = {payload};\n"


def write_manifest(path: Path, families: Iterable[FamilyResult]) -> Path:
    """Write the manifest to ``path``; ``.json`` targets receive plain JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = render_manifest(families, as_module=path.suffix.lower() != ".json")
    path.write_text(content, encoding="utf-8")
    return path


__all__ = ["MANIFEST_HEADER", "render_manifest", "write_manifest"]
