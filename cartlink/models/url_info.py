"""
URL extraction result model.

Pure data class describing the outcome of one extraction call.
No extraction logic - only the structure and its consistency rules.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ExtractedUrlInfo:
    """
    Result of extracting a product URL from pasted text.

    A valid result carries a canonical URL and no error; an invalid result
    carries an empty URL and a human-readable error. The platform tag may be
    set on invalid results too (e.g. "shein" for an unresolvable share link).
    """

    is_valid: bool
    extracted_url: str
    original_url: str       # First URL substring found, or the raw input
    platform: str           # One of constants.PLATFORM_TAGS
    error: Optional[str] = None

    def __post_init__(self):
        """Enforce the validity/error duality."""
        if self.is_valid:
            if not self.extracted_url:
                raise ValueError("Valid result requires an extracted URL")
            if self.error is not None:
                raise ValueError("Valid result must not carry an error")
        elif not self.error:
            raise ValueError("Invalid result requires an error message")

    @classmethod
    def success(cls, extracted_url: str, original_url: str, platform: str) -> "ExtractedUrlInfo":
        return cls(True, extracted_url, original_url, platform)

    @classmethod
    def failure(cls, original_url: str, platform: str, error: str) -> "ExtractedUrlInfo":
        return cls(False, "", original_url, platform, error)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize with the camelCase keys used by the mobile front end.

        The 'error' key is omitted on valid results.
        """
        data = {
            "isValid": self.is_valid,
            "extractedUrl": self.extracted_url,
            "originalUrl": self.original_url,
            "platform": self.platform,
        }
        if self.error is not None:
            data["error"] = self.error
        return data
