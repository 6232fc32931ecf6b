"""
Platform Classifier

Tags product URLs with the e-commerce platform they belong to using
plain substring markers:
1. Direct SHEIN product pages (domain AND product path both present)
2. Pass-through platforms in table order (any marker present)

Matching is deliberately loose ("amazon." covers every Amazon TLD), so
table order decides ties. The default table is built in; an equivalent
one can be loaded from config/platforms.yaml.
"""

from typing import Optional, Sequence, Tuple

from ..common.constants import (
    DEFAULT_PLATFORM_MARKERS,
    PLATFORM_SHEIN,
    SHEIN_DOMAIN,
    SHEIN_PRODUCT_PATH,
)


def is_shein_product_url(url: str) -> bool:
    """Return True if url looks like a SHEIN product page."""
    return SHEIN_DOMAIN in url and SHEIN_PRODUCT_PATH in url


class PlatformClassifier:
    """
    Classifies URLs by platform.

    Usage:
        classifier = PlatformClassifier()
        classifier.classify("https://www.amazon.de/dp/B08N5WRWNW")
        # Returns: "amazon"
    """

    def __init__(self, markers: Optional[Sequence[Tuple[str, Sequence[str]]]] = None):
        """
        Initialize the classifier.

        Args:
            markers: Ordered (platform, markers) pairs. If None, uses the
                built-in table.
        """
        if markers is None:
            markers = DEFAULT_PLATFORM_MARKERS

        self.markers = tuple((name, tuple(subs)) for name, subs in markers)

    def classify(self, url: str) -> Optional[str]:
        """
        Find the platform for a URL.

        Direct SHEIN product pages are checked before the marker table.

        Args:
            url: Candidate product URL

        Returns:
            Platform tag, or None if no known platform matches

        Example:
            >>> PlatformClassifier().classify("https://www2.hm.com/en_us/productpage.1.html")
            'h&m'
            >>> PlatformClassifier().classify("https://www.example.com/product") is None
            True
        """
        if is_shein_product_url(url):
            return PLATFORM_SHEIN

        for platform, substrings in self.markers:
            if any(s in url for s in substrings):
                return platform

        return None

    @property
    def platforms(self) -> Tuple[str, ...]:
        """Platform tags this classifier can return, in priority order."""
        return (PLATFORM_SHEIN,) + tuple(name for name, _ in self.markers)
