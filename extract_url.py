#!/usr/bin/env python3
"""
Product URL Extraction

Extracts the canonical product URL from pasted share text and prints a
short report. Text comes from --text, --file, or stdin.

Usage:
    python3 extract_url.py --text "https://www.amazon.com/dp/B08N5WRWNW"
    python3 extract_url.py --file shared.txt --json
    pbpaste | python3 extract_url.py --verbose

Exit codes:
    0 = a valid product URL was extracted
    1 = no usable URL (see the reported error)
"""

import argparse
import json
import logging
import sys

from cartlink.common.config_loader import load_platform_markers
from cartlink.common.log_config import setup_logging
from cartlink.extraction import PlatformClassifier, UrlExtractor, format_url_for_display
from cartlink.models import ExtractedUrlInfo

logger = logging.getLogger(__name__)


def read_input(args: argparse.Namespace) -> str:
    """Return the text to scan from the chosen source."""
    if args.text is not None:
        return args.text
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read()
    return sys.stdin.read()


def build_extractor(use_config: bool) -> UrlExtractor:
    """Build an extractor from the built-in table or config/platforms.yaml."""
    if not use_config:
        return UrlExtractor()

    markers = load_platform_markers()
    logger.debug("Loaded %d platforms from config", len(markers))
    return UrlExtractor(PlatformClassifier(markers))


def print_report(info: ExtractedUrlInfo):
    """Print a human-readable extraction report."""
    print("=" * 60)
    print("URL EXTRACTION")
    print("=" * 60)

    status = "VALID" if info.is_valid else "INVALID"
    print(f"  Status:        {status}")
    print(f"  Platform:      {info.platform}")
    print(f"  Original URL:  {info.original_url or '(empty input)'}")

    if info.is_valid:
        print(f"  Product URL:   {info.extracted_url}")
        print(f"  Display:       {format_url_for_display(info.extracted_url)}")
    else:
        print(f"  Error:         {info.error}")

    print("=" * 60)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Extract a canonical product URL from pasted text"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--text",
        help="Text to scan (default: read stdin)"
    )
    source.add_argument(
        "--file",
        help="Read text to scan from this file"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a report"
    )
    parser.add_argument(
        "--platforms-config",
        action="store_true",
        help="Load the platform table from config/platforms.yaml (found in "
             "$CARTLINK_CONFIG_DIR, a source checkout, or ./config; not "
             "installed with the package)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging (shows classification decisions)"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        text = read_input(args)
        extractor = build_extractor(args.platforms_config)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    info = extractor.extract(text)

    if args.json:
        data = info.to_dict()
        if info.is_valid:
            data["display"] = format_url_for_display(info.extracted_url)
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print_report(info)

    return 0 if info.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
