"""Bulk download of Google Fonts families into per-family folders."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from massfonts.core import http
from massfonts.core.exceptions import (
    FontNotFoundError,
    FormatMismatchError,
    VariantResolutionError,
)
from massfonts.fonts.css import available_formats, extract_sources_from_css
from massfonts.fonts.formats import (
    describe_format_fallback,
    format_extension,
    select_available_formats,
)
from massfonts.fonts.logging import FontPipelineLogger
from massfonts.fonts.manifest import write_manifest
from massfonts.fonts.metadata import MetadataCache, MetadataResolver
from massfonts.fonts.models import FamilyResult, FontRequest
from massfonts.fonts.naming import build_file_name, slugify_font_folder
from massfonts.fonts.query import build_family_query, format_variant_summary
from massfonts.fonts.utils import format_path_for_display, resolve_safe_path
from massfonts.fonts.weights import WeightSpec, build_font_request


if TYPE_CHECKING:
    from massfonts.core.config import DownloadConfig


StylesheetFetcher = Callable[[str, Sequence[str]], str]
BinaryFetcher = Callable[[str], bytes]

# Failures that only cost the current family.
_SKIPPABLE = (FontNotFoundError, VariantResolutionError, FormatMismatchError)


@dataclass(slots=True)
class DownloadReport:
    """Outcome of a download run."""

    families: list[FamilyResult] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    downloaded: list[Path] = field(default_factory=list)
    existing: list[Path] = field(default_factory=list)
    manifest_path: Path | None = None


class FontDownloader:
    """Download every family listed in a :class:`DownloadConfig`.

    Families are processed one after the other. The network collaborators
    are injectable so the pipeline can run against canned responses.
    """

    def __init__(
        self,
        config: DownloadConfig,
        *,
        resolver: MetadataResolver | None = None,
        fetch_stylesheet: StylesheetFetcher | None = None,
        fetch_binary: BinaryFetcher | None = None,
        logger: FontPipelineLogger | None = None,
    ):
        self.config = config
        self.resolver = resolver or MetadataResolver(
            MetadataCache(partial(http.fetch_metadata, timeout=config.timeout))
        )
        self._fetch_stylesheet = fetch_stylesheet or partial(
            http.fetch_stylesheet, timeout=config.timeout
        )
        self._fetch_binary = fetch_binary or partial(http.fetch_binary, timeout=config.timeout)
        self.logger = logger or FontPipelineLogger()

    def run(
        self,
        weights_override: WeightSpec = None,
        download_all: bool = False,
    ) -> DownloadReport:
        """Download all configured families and write the manifest if enabled."""
        report = DownloadReport()
        if not self.config.fonts:
            self.logger.warning("No fonts configured; nothing to download.")

        for entry in self.config.fonts:
            request = build_font_request(
                entry,
                default_formats=self.config.formats,
                override=weights_override,
                download_all=download_all,
                logger=self.logger,
            )
            try:
                result = self.download_family(request, report=report)
            except _SKIPPABLE as exc:
                self.logger.warning("Skipping %s: %s", request.name, exc)
                report.skipped.append(request.name)
                continue
            report.families.append(result)

        if self.config.generate_options_file:
            report.manifest_path = write_manifest(self.config.options_file_path, report.families)
            self.logger.info(
                "Wrote font manifest %s", format_path_for_display(report.manifest_path)
            )
        return report

    def _negotiate_formats(self, request: FontRequest, available: list[str]) -> list[str]:
        requested = list(request.formats or self.config.formats)
        if not any(item in available for item in requested):
            raise FormatMismatchError(request.name, requested)
        selected = select_available_formats(requested, available)
        dropped, used = describe_format_fallback(requested, selected)
        if dropped:
            self.logger.info(
                "%s: %s not available, using %s instead.",
                request.name,
                ", ".join(dropped),
                ", ".join(used),
            )
        return selected

    def download_family(
        self,
        request: FontRequest,
        *,
        report: DownloadReport | None = None,
    ) -> FamilyResult:
        """Download the faces of a single family.

        Raises :class:`FontNotFoundError`, :class:`VariantResolutionError` or
        :class:`FormatMismatchError` when the family cannot be served.
        """
        report = report if report is not None else DownloadReport()
        family_query = build_family_query(
            request.name,
            request.weights,
            include_all=request.include_all,
            resolver=self.resolver,
        )
        formats = request.formats or tuple(self.config.formats)
        self.logger.info(
            "%s (%s) -> %s",
            request.name,
            format_variant_summary(family_query.variants),
            ", ".join(format_extension(item) for item in formats),
        )
        self.logger.debug("Query: %s", family_query.query)

        css = self._fetch_stylesheet(family_query.query, self.config.subsets)
        sources = extract_sources_from_css(css)
        if not sources:
            raise FontNotFoundError(
                request.name, f"No font sources found in the stylesheet for '{request.name}'."
            )

        selected = self._negotiate_formats(request, available_formats(sources))
        matching = [source for source in sources if source.canonical_format in selected]

        folder = slugify_font_folder(request.name)
        result = FamilyResult(name=request.name, folder=folder)
        options = self.config.file_name_options

        with self.logger.progress(request.name, total=len(matching)) as advance:
            for source in matching:
                file_name = build_file_name(
                    folder,
                    source.weight,
                    source.italic,
                    format_extension(source.canonical_format),
                    options,
                )
                if file_name in result.files:
                    advance()
                    continue
                result.files.append(file_name)

                target = resolve_safe_path(self.config.output_dir, folder, file_name)
                if target.exists():
                    self.logger.debug("Keeping existing %s", format_path_for_display(target))
                    report.existing.append(target)
                else:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    target.write_bytes(self._fetch_binary(source.url))
                    self.logger.debug("Downloaded %s", format_path_for_display(target))
                    report.downloaded.append(target)
                advance()

        return result


__all__ = ["BinaryFetcher", "DownloadReport", "FontDownloader", "StylesheetFetcher"]
