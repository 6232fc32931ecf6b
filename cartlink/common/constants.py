"""
Shared constants for the project.

Platform tags and error messages are part of the public result contract,
so they live here as the single source of truth.
"""

# Platform tags (closed set)
PLATFORM_SHEIN = "shein"
PLATFORM_AMAZON = "amazon"
PLATFORM_ALIEXPRESS = "aliexpress"
PLATFORM_ZARA = "zara"
PLATFORM_HM = "h&m"
PLATFORM_OTHER = "other"
PLATFORM_UNKNOWN = "unknown"

PLATFORM_TAGS = frozenset({
    PLATFORM_SHEIN,
    PLATFORM_AMAZON,
    PLATFORM_ALIEXPRESS,
    PLATFORM_ZARA,
    PLATFORM_HM,
    PLATFORM_OTHER,
    PLATFORM_UNKNOWN,
})

# Pass-through platforms, checked in this order after the SHEIN checks.
# A URL matches a platform when ANY of its markers is a substring.
DEFAULT_PLATFORM_MARKERS = (
    (PLATFORM_AMAZON, ("amazon.com", "amazon.", "amzn.")),
    (PLATFORM_ALIEXPRESS, ("aliexpress.com", "aliexpress.")),
    (PLATFORM_ZARA, ("zara.com", "zara.")),
    (PLATFORM_HM, ("h&m.com", "hm.com")),
)

# SHEIN share links
SHEIN_REDIRECT_MARKER = "api-shein.shein.com/h5/sharejump/appjump"
SHEIN_REDIRECT_HOST = "api-shein.shein.com"
SHEIN_DOMAIN = "shein.com"
SHEIN_PRODUCT_PATH = "/p/"
SHEIN_LINK_PARAM = "link"
SHEIN_PRODUCT_URL_TEMPLATE = "https://www.shein.com/p/{code}.html"
# Known malformed share-link value that must never be treated as a short code
SHEIN_INVALID_LINK_SENTINEL = "not-a-shein-url"

# Error messages
ERROR_NO_URL_FOUND = "No valid URL found in the input"
ERROR_INVALID_URL_FORMAT = "Invalid URL format"
ERROR_SHEIN_NO_LINK = "No product link found in SHEIN redirect URL"
ERROR_SHEIN_UNRESOLVABLE = "Could not extract valid SHEIN product URL"
ERROR_SHEIN_PARSE_FAILURE = "Failed to parse SHEIN redirect URL"
