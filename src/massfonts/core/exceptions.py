"""Custom exception hierarchy for the font download pipeline."""

from __future__ import annotations

from collections.abc import Sequence


class MassFontsError(RuntimeError):
    """Base exception for font download failures."""


class FontNotFoundError(MassFontsError):
    """Raised when a family is absent from metadata or yields no sources."""

    def __init__(self, family: str, reason: str | None = None) -> None:
        self.family = family
        super().__init__(reason or f"No metadata found for font family '{family}'.")


class VariantResolutionError(MassFontsError):
    """Raised when no weight/italic combination can be derived for a family."""

    def __init__(self, family: str) -> None:
        self.family = family
        super().__init__(f"Unable to determine the available variants for '{family}'.")


class FormatMismatchError(MassFontsError):
    """Raised when none of the requested formats is offered for a family."""

    def __init__(self, family: str, requested: Sequence[str]) -> None:
        self.family = family
        self.requested = list(requested)
        super().__init__(
            f"None of the requested formats ({', '.join(self.requested) or '-'}) "
            f"is available for '{family}'."
        )


class MetadataFetchError(MassFontsError):
    """Raised when the family metadata table cannot be retrieved or parsed."""


class DownloadError(MassFontsError):
    """Raised when a stylesheet or font binary cannot be downloaded."""


class ConfigurationError(MassFontsError):
    """Raised for missing or invalid configuration files."""


class UnsafePathError(MassFontsError):
    """Raised when an output path would escape its base directory."""


__all__ = [
    "ConfigurationError",
    "DownloadError",
    "FontNotFoundError",
    "FormatMismatchError",
    "MassFontsError",
    "MetadataFetchError",
    "UnsafePathError",
    "VariantResolutionError",
]
