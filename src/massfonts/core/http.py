"""HTTP helpers for the Google Fonts endpoints, with TLS guidance."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import ssl
from typing import Any
import urllib.error
import urllib.request

from massfonts.core.exceptions import DownloadError


GOOGLE_FONTS_CSS_API = "https://fonts.googleapis.com/css2"
FONT_METADATA_URL = "https://fonts.google.com/metadata/fonts"
DEFAULT_TIMEOUT = 30.0

# Google serves woff2 sources only to agents it recognises as modern browsers.
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

METADATA_HEADERS = {
    "User-Agent": BROWSER_USER_AGENT,
    "Accept": "application/json,text/plain,*/*",
    "Accept-Language": "en-US,en;q=0.9",
    "Referer": "https://fonts.google.com/",
}

STYLESHEET_HEADERS = {
    "User-Agent": BROWSER_USER_AGENT,
    "Accept": "text/css,*/*;q=0.1",
}


class TLSCertificateError(DownloadError):
    """Raised when TLS certificate verification fails during downloads."""


def _tls_help(url: str) -> str:
    return (
        "TLS certificate verification failed while downloading "
        f"'{url}'. On macOS run the Python 'Install Certificates.command' "
        "(from the python.org installer). On Windows run 'py -m pip install --upgrade certifi'. "
        "On Linux install your 'ca-certificates' package (apt/yum/apk). "
        "Also check system date/time and any proxy or corporate SSL inspection."
    )


def _ssl_context() -> ssl.SSLContext:
    try:
        import certifi  # type: ignore[import]
    except Exception:
        return ssl.create_default_context()
    return ssl.create_default_context(cafile=certifi.where())


def _is_cert_error(error: urllib.error.URLError) -> bool:
    reason = getattr(error, "reason", None)
    return isinstance(reason, ssl.SSLCertVerificationError)


def open_url(
    url: str | urllib.request.Request,
    *,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> Any:
    """Open a URL with a certifi SSL context and cert guidance on failure."""
    request = url
    if isinstance(url, str):
        request = urllib.request.Request(url, headers=dict(headers or {}))
    try:
        return urllib.request.urlopen(request, timeout=timeout, context=_ssl_context())
    except urllib.error.URLError as exc:
        if _is_cert_error(exc):
            raise TLSCertificateError(_tls_help(str(getattr(request, "full_url", url)))) from exc
        raise


def _read(url: str, *, headers: Mapping[str, str], timeout: float | None) -> bytes:
    try:
        with open_url(url, headers=headers, timeout=timeout) as response:
            return response.read()
    except TLSCertificateError:
        raise
    except urllib.error.HTTPError as exc:
        raise DownloadError(f"HTTP {exc.code} while fetching '{url}'.") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise DownloadError(f"Unable to fetch '{url}': {exc}") from exc


def build_stylesheet_url(query: str, subsets: Sequence[str] | None = None) -> str:
    """Return the CSS2 API URL for a prepared ``family=...`` query."""
    subset_param = f"&subset={','.join(subsets)}" if subsets else ""
    return f"{GOOGLE_FONTS_CSS_API}?{query}{subset_param}&display=swap"


def fetch_metadata(*, timeout: float | None = DEFAULT_TIMEOUT) -> str:
    """Download the raw family metadata table."""
    return _read(FONT_METADATA_URL, headers=METADATA_HEADERS, timeout=timeout).decode("utf-8")


def fetch_stylesheet(
    query: str,
    subsets: Sequence[str] | None = None,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> str:
    """Download the style sheet describing the faces selected by ``query``."""
    url = build_stylesheet_url(query, subsets)
    return _read(url, headers=STYLESHEET_HEADERS, timeout=timeout).decode("utf-8")


def fetch_binary(url: str, *, timeout: float | None = DEFAULT_TIMEOUT) -> bytes:
    """Download a font file."""
    return _read(url, headers={"User-Agent": BROWSER_USER_AGENT}, timeout=timeout)


__all__ = [
    "DEFAULT_TIMEOUT",
    "FONT_METADATA_URL",
    "GOOGLE_FONTS_CSS_API",
    "TLSCertificateError",
    "build_stylesheet_url",
    "fetch_binary",
    "fetch_metadata",
    "fetch_stylesheet",
    "open_url",
]
