"""
Product Link Extractor

Turns pasted share-sheet text into a canonical, platform-tagged product URL.

Modules:
    models      - Data models (ExtractedUrlInfo)
    common      - Shared utilities (constants, text scanning, config loader, logging)
    extraction  - URL extraction, SHEIN redirect unwrapping, platform classification
"""
