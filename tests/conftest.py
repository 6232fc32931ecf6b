"""Shared test fixtures."""

from urllib.parse import quote

import pytest

SHEIN_REDIRECT = "http://api-shein.shein.com/h5/sharejump/appjump"


@pytest.fixture
def shein_redirect():
    """Return the SHEIN share redirect base URL."""
    return SHEIN_REDIRECT


@pytest.fixture
def shein_share_text():
    """Share-sheet text as copied from the SHEIN app."""
    return (
        "SHEIN Tween Girls Casual Solid Color Ruched Waist Hem Short Sleeve "
        "T-Shirt Top, Versatile, Spring/Summer\n"
        "I discovered amazing products on SHEIN.com, come check them out!\n"
        f"{SHEIN_REDIRECT}?link=l4EWUh4InsA_8_1&localcountry=JO"
    )


@pytest.fixture
def nested_shein_redirect():
    """
    Redirect whose link decodes to a second redirect (no /p/ yet),
    which in turn wraps the product URL.
    """
    product = "https://www.shein.com/p/nested-product-42.html"
    inner = f"{SHEIN_REDIRECT}?link={quote(product, safe='')}"
    # Encoded twice: once consumed by query parsing, once by the link decode
    return f"{SHEIN_REDIRECT}?link={quote(quote(inner, safe=''), safe='')}", product


@pytest.fixture
def sample_platform_markers():
    """Small marker table for PlatformClassifier tests."""
    return [
        ("etsy", ("etsy.com",)),
        ("amazon", ("amazon.",)),
    ]
