"""Font resolution and download pipeline.

Architecture
: `parse_weights`/`build_font_request` turn loose weight specifications
  (``700``, ``"bold"``, ``"*"``) into a frozen `FontRequest` per family.
: `MetadataResolver` reads the Google Fonts metadata table, fetched once per
  `MetadataCache`, and lists every (weight, italic) variant a family offers
  from its ``variants``, ``fonts`` or variable ``axes`` records.
: `build_family_query` shapes the CSS2 ``family=`` query, spanning variable
  axes as ranges when the family declares them.
: `extract_sources_from_css` parses the returned style sheet into
  `SourceRecord` entries, which `select_available_formats` filters against
  the requested formats.
: `build_file_name` and `slugify_font_folder` give each face a safe path, and
  `FontDownloader` ties the steps together, optionally writing a manifest.
"""

from massfonts.fonts.css import available_formats, extract_sources_from_css
from massfonts.fonts.downloader import DownloadReport, FontDownloader
from massfonts.fonts.formats import normalize_formats, select_available_formats
from massfonts.fonts.logging import FontPipelineLogger
from massfonts.fonts.manifest import write_manifest
from massfonts.fonts.metadata import MetadataCache, MetadataResolver
from massfonts.fonts.models import (
    Axis,
    FamilyResult,
    FontRequest,
    SingleWeight,
    SourceRecord,
    Variant,
    WeightRange,
)
from massfonts.fonts.naming import FileNameOptions, build_file_name, slugify_font_folder
from massfonts.fonts.query import FamilyQuery, build_family_query, format_variant_summary
from massfonts.fonts.weights import build_font_request, parse_weights


__all__ = [
    "Axis",
    "DownloadReport",
    "FamilyQuery",
    "FamilyResult",
    "FileNameOptions",
    "FontDownloader",
    "FontPipelineLogger",
    "FontRequest",
    "MetadataCache",
    "MetadataResolver",
    "SingleWeight",
    "SourceRecord",
    "Variant",
    "WeightRange",
    "available_formats",
    "build_family_query",
    "build_file_name",
    "build_font_request",
    "extract_sources_from_css",
    "format_variant_summary",
    "normalize_formats",
    "parse_weights",
    "select_available_formats",
    "slugify_font_folder",
    "write_manifest",
]
