"""
Product URL extraction.

Modules:
    url_extractor - UrlExtractor and the public query functions
    shein - SHEIN share-link unwrapping
    platforms - PlatformClassifier for known e-commerce sites
"""

from .platforms import PlatformClassifier, is_shein_product_url
from .shein import extract_shein_url
from .url_extractor import (
    UrlExtractor,
    extract_product_url,
    format_url_for_display,
    get_platform_name,
    is_absolute_http_url,
    validate_product_url,
)

__all__ = [
    # Extractor
    'UrlExtractor',
    'extract_product_url',
    # Query helpers
    'validate_product_url',
    'get_platform_name',
    'format_url_for_display',
    'is_absolute_http_url',
    # SHEIN
    'extract_shein_url',
    # Platforms
    'PlatformClassifier',
    'is_shein_product_url',
]
