"""Bulk webfont downloads from the Google Fonts CSS2 API."""

from __future__ import annotations

from massfonts.core.config import DownloadConfig, FontEntry, load_config
from massfonts.core.exceptions import (
    ConfigurationError,
    DownloadError,
    FontNotFoundError,
    FormatMismatchError,
    MassFontsError,
    MetadataFetchError,
    UnsafePathError,
    VariantResolutionError,
)
from massfonts.fonts.downloader import DownloadReport, FontDownloader
from massfonts.version import get_version


__version__ = get_version()

__all__ = [
    "ConfigurationError",
    "DownloadConfig",
    "DownloadError",
    "DownloadReport",
    "FontDownloader",
    "FontEntry",
    "FontNotFoundError",
    "FormatMismatchError",
    "MassFontsError",
    "MetadataFetchError",
    "UnsafePathError",
    "VariantResolutionError",
    "__version__",
    "load_config",
]
