"""
Text Utilities

Helper functions for scanning pasted text for URLs.
"""

import re
from typing import List

# Greedy: everything up to the next whitespace belongs to the URL,
# including trailing punctuation glued to it.
URL_PATTERN = re.compile(r'https?://\S+')


def normalize_whitespace(text: str) -> str:
    """
    Collapse all whitespace runs (including newlines) to single spaces.

    Args:
        text: Raw pasted text, possibly multi-line

    Returns:
        Single-line text with leading/trailing whitespace removed
    """
    if not text:
        return ""

    return re.sub(r'\s+', ' ', text).strip()


def find_urls(text: str) -> List[str]:
    """
    Find all http(s) URL substrings in text, in order of appearance.

    Args:
        text: Text that may contain URLs

    Returns:
        List of matched URL substrings (empty if none)

    Example:
        >>> find_urls("Check this: https://a.com/x and https://b.com/y")
        ['https://a.com/x', 'https://b.com/y']
    """
    return URL_PATTERN.findall(normalize_whitespace(text))
