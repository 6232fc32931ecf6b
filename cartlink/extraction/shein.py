"""
SHEIN Share-Link Unwrapping

SHEIN's share sheet produces redirect URLs of the form
    http://api-shein.shein.com/h5/sharejump/appjump?link=<value>&localcountry=JO
where <value> is either a percent-encoded product URL, another
(percent-encoded) share redirect, or an opaque short code.

Resolution tiers, tried in this order:
1. Decoded link is a product URL                -> use it
2. Decoded link is another redirect             -> unwrap one more level
3. Raw link is a bare short code                -> synthesize /p/<code>.html
4. Anything else                                -> unresolvable

Short codes normally need a server round-trip to resolve. Tier 3 builds a
plausible product URL offline instead, so the user is never blocked.
"""

import logging
import re
from typing import Optional
from urllib.parse import parse_qs, unquote, urlsplit

from ..common.constants import (
    ERROR_SHEIN_NO_LINK,
    ERROR_SHEIN_PARSE_FAILURE,
    ERROR_SHEIN_UNRESOLVABLE,
    PLATFORM_SHEIN,
    SHEIN_INVALID_LINK_SENTINEL,
    SHEIN_LINK_PARAM,
    SHEIN_PRODUCT_URL_TEMPLATE,
    SHEIN_REDIRECT_HOST,
)
from ..models import ExtractedUrlInfo
from .platforms import is_shein_product_url

logger = logging.getLogger(__name__)

_SHORT_CODE = re.compile(r'[A-Za-z0-9_-]+')
# '%' not followed by two hex digits
_MALFORMED_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def get_query_param(url: str, name: str) -> Optional[str]:
    """
    Read the first value of a query parameter, form-decoded.

    Raises:
        ValueError: If url is not an absolute URL or its host/port is malformed
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Not an absolute URL: {url[:60]!r}")
    _ = parts.port  # validates the port section
    values = parse_qs(parts.query, keep_blank_values=True).get(name)
    return values[0] if values else None


def decode_component(value: str) -> str:
    """
    Percent-decode a value once, strictly.

    Raises:
        ValueError: On a malformed escape or bytes that are not UTF-8
    """
    if _MALFORMED_ESCAPE.search(value):
        raise ValueError(f"Malformed percent escape in {value[:60]!r}")
    return unquote(value, errors='strict')


def _resolve_link(link: str) -> Optional[str]:
    """Run the resolution tiers on a link value; None if nothing fits."""
    decoded = decode_component(link)
    if is_shein_product_url(decoded):
        logger.debug("SHEIN link decoded to product URL")
        return decoded

    if SHEIN_REDIRECT_HOST in decoded:
        nested = get_query_param(decoded, SHEIN_LINK_PARAM)
        if nested:
            final = decode_component(nested)
            if is_shein_product_url(final):
                logger.debug("SHEIN link unwrapped from nested redirect")
                return final

    if _SHORT_CODE.fullmatch(link) and SHEIN_INVALID_LINK_SENTINEL not in link:
        logger.debug("SHEIN short code %s mapped to product URL", link)
        return SHEIN_PRODUCT_URL_TEMPLATE.format(code=link)

    return None


def extract_shein_url(redirect_url: str) -> ExtractedUrlInfo:
    """
    Unwrap a SHEIN share redirect into a product URL.

    Never raises: parse errors become a failed result.

    Args:
        redirect_url: URL containing the SHEIN sharejump path

    Returns:
        ExtractedUrlInfo with platform "shein", valid or not

    Example:
        >>> extract_shein_url(
        ...     "http://api-shein.shein.com/h5/sharejump/appjump?link=l4EWUh4InsA_8_1"
        ... ).extracted_url
        'https://www.shein.com/p/l4EWUh4InsA_8_1.html'
    """
    try:
        link = get_query_param(redirect_url, SHEIN_LINK_PARAM)
        if not link:
            return ExtractedUrlInfo.failure(redirect_url, PLATFORM_SHEIN, ERROR_SHEIN_NO_LINK)

        product_url = _resolve_link(link)
    except ValueError as e:
        logger.warning("Could not parse SHEIN redirect %s: %s", redirect_url, e)
        return ExtractedUrlInfo.failure(redirect_url, PLATFORM_SHEIN, ERROR_SHEIN_PARSE_FAILURE)

    if product_url is None:
        logger.debug("SHEIN link %r matched no resolution tier", link)
        return ExtractedUrlInfo.failure(redirect_url, PLATFORM_SHEIN, ERROR_SHEIN_UNRESOLVABLE)

    return ExtractedUrlInfo.success(product_url, redirect_url, PLATFORM_SHEIN)
