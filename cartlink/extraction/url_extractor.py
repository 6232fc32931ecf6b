"""
Product URL Extractor

Takes whatever the user pasted into the "product link" field (share-sheet
title and marketing lines, redirect wrappers, several links) and returns
a single ExtractedUrlInfo.

Classification order for the first URL found:
    SHEIN redirect -> direct SHEIN product -> known platforms -> generic

All functions are pure and total: they never raise for any string input,
so they are safe to call on every keystroke.
"""

import logging
import re
from typing import Optional
from urllib.parse import SplitResult, quote, unquote, urlsplit

from ..common.constants import (
    ERROR_INVALID_URL_FORMAT,
    ERROR_NO_URL_FOUND,
    PLATFORM_OTHER,
    PLATFORM_UNKNOWN,
    SHEIN_REDIRECT_MARKER,
)
from ..common.text_utils import find_urls
from ..models import ExtractedUrlInfo
from .platforms import PlatformClassifier
from .shein import extract_shein_url

logger = logging.getLogger(__name__)

# Schemes whose URLs always have an authority and a path starting with "/"
_HIERARCHICAL_SCHEMES = frozenset({'http', 'https', 'ftp', 'ws', 'wss'})

# Browsers accept any run of slashes (or backslashes) after these schemes
_SCHEME_SLASHES = re.compile(r'^(https?|wss?|ftp):[/\\]*', re.IGNORECASE)

# Forbidden domain code points: C0 controls, space, DEL and URL delimiters
_FORBIDDEN_HOST_CHARS = re.compile(r'[\x00-\x20#%/:<>?@\[\\\]^|\x7f]')

# Characters left as-is when percent-encoding a display path
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"


def split_url(url: str) -> SplitResult:
    """
    Split a URL the way a browser reads its authority.

    Extra slashes after a hierarchical scheme are collapsed, so
    "https:///www.example.com/x" splits with host "www.example.com".

    Raises:
        ValueError: On a broken IPv6 literal or non-numeric port
    """
    url = _SCHEME_SLASHES.sub(lambda m: f"{m.group(1)}://", url, count=1)
    parts = urlsplit(url)
    _ = parts.port  # validates the port section
    return parts


def ascii_hostname(parts: SplitResult) -> str:
    """
    Return the host in lower-case ASCII (IDNA-encoded), or "" if absent.

    Raises:
        ValueError: If the host holds a forbidden code point or fails IDNA
    """
    hostname = parts.hostname
    if not hostname:
        return ""

    # Bracketed IPv6 literal, already checked by urlsplit
    if '[' in parts.netloc.rpartition('@')[2]:
        return hostname

    host = unquote(hostname)
    if _FORBIDDEN_HOST_CHARS.search(host):
        raise ValueError(f"Forbidden character in host {host!r}")
    return host.encode('idna').decode('ascii').lower()


def is_absolute_http_url(url: str) -> bool:
    """Return True if url parses as an http(s) URL with a valid host."""
    try:
        parts = split_url(url)
        host = ascii_hostname(parts)
    except ValueError:
        return False

    return parts.scheme in ('http', 'https') and bool(host)


class UrlExtractor:
    """
    Extracts canonical product URLs from free-form text.

    Usage:
        extractor = UrlExtractor()
        info = extractor.extract("Look at this https://www.zara.com/us/en/p1.html")
        # info.platform == "zara", info.is_valid is True
    """

    def __init__(self, classifier: Optional[PlatformClassifier] = None):
        """
        Initialize the extractor.

        Args:
            classifier: Platform classifier to use. If None, uses the
                built-in marker table.
        """
        self.classifier = classifier or PlatformClassifier()

    def extract(self, text: str) -> ExtractedUrlInfo:
        """
        Extract the product URL from pasted text.

        Only the first URL in the text is considered.

        Args:
            text: Raw input (may be empty, multi-line, or contain no URL)

        Returns:
            ExtractedUrlInfo describing the canonical URL or the failure
        """
        raw = text or ""
        urls = find_urls(raw)

        if not urls:
            return ExtractedUrlInfo.failure(raw, PLATFORM_UNKNOWN, ERROR_NO_URL_FOUND)

        original_url = urls[0]
        if len(urls) > 1:
            logger.debug("Found %d URLs, using the first: %s", len(urls), original_url)

        if SHEIN_REDIRECT_MARKER in original_url:
            return extract_shein_url(original_url)

        platform = self.classifier.classify(original_url)
        if platform is not None:
            logger.debug("Classified %s as %s", original_url, platform)
            return ExtractedUrlInfo.success(original_url, original_url, platform)

        if is_absolute_http_url(original_url):
            return ExtractedUrlInfo.success(original_url, original_url, PLATFORM_OTHER)

        logger.debug("Rejected malformed URL %s", original_url)
        return ExtractedUrlInfo.failure(original_url, PLATFORM_UNKNOWN, ERROR_INVALID_URL_FORMAT)


_default_extractor = UrlExtractor()


def extract_product_url(text: str) -> ExtractedUrlInfo:
    """Extract the product URL from pasted text using the built-in platform table."""
    return _default_extractor.extract(text)


def validate_product_url(url: str) -> bool:
    """Return True if the input yields a usable product URL."""
    return extract_product_url(url).is_valid


def get_platform_name(url: str) -> str:
    """Return the platform tag for the input ("unknown" if no URL was found)."""
    return extract_product_url(url).platform


def format_url_for_display(url: str) -> str:
    """
    Shorten a URL for display: host plus path, no scheme, query, or fragment.

    The host is IDNA-encoded and the path percent-encoded, as a browser
    shows them. Returns the input unchanged if it doesn't parse as an
    absolute URL.

    Example:
        >>> format_url_for_display("https://www.shein.com/p/x.html?color=red")
        'www.shein.com/p/x.html'
    """
    if not url:
        return url

    try:
        parts = split_url(url)
        host = ascii_hostname(parts)
    except ValueError:
        return url

    if not parts.scheme:
        return url

    path = parts.path
    if parts.scheme in _HIERARCHICAL_SCHEMES:
        if not host:
            return url
        path = path or "/"

    return f"{host}{quote(path, safe=_PATH_SAFE)}"
