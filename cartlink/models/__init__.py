"""
Data models for URL extraction.

This module contains pure data classes with no extraction logic.
"""

from .url_info import ExtractedUrlInfo

__all__ = ['ExtractedUrlInfo']
