"""
Configuration Loader

Loads YAML configuration files from a config/ directory. Currently holds
the platform marker table (config/platforms.yaml).

config/ is not installed with the package: it is found via the
CARTLINK_CONFIG_DIR environment variable, next to the package in a
checkout (or editable install), or in the current working directory.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

PlatformMarkers = List[Tuple[str, Tuple[str, ...]]]

CONFIG_DIR_ENV = "CARTLINK_CONFIG_DIR"


def _get_config_dir() -> Path:
    """Return the first existing config directory among the candidates."""
    candidates = []
    if os.environ.get(CONFIG_DIR_ENV):
        candidates.append(Path(os.environ[CONFIG_DIR_ENV]))
    candidates.append(Path(__file__).resolve().parent.parent.parent / 'config')
    candidates.append(Path.cwd() / 'config')

    for candidate in candidates:
        if candidate.is_dir():
            return candidate

    tried = ', '.join(str(c) for c in candidates)
    raise FileNotFoundError(f"Config directory not found. Tried: {tried}")


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'platforms.yaml')

    Returns:
        Parsed YAML content as dictionary (empty if the file is empty)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def parse_platform_markers(entries: List[Dict[str, Any]]) -> PlatformMarkers:
    """
    Convert raw `platforms:` entries into an ordered marker table.

    Args:
        entries: List of {'name': str, 'markers': [str, ...]} mappings

    Returns:
        List of (platform, markers) tuples, in file order

    Raises:
        ValueError: If an entry has no name or no markers
    """
    table = []
    for entry in entries:
        name = entry.get('name')
        markers = entry.get('markers') or []
        if not name or not markers:
            raise ValueError(f"Platform entry needs a name and markers: {entry!r}")
        table.append((str(name), tuple(str(m) for m in markers)))
    return table


def load_platform_markers() -> PlatformMarkers:
    """
    Load the pass-through platform marker table.

    Returns:
        Ordered list of (platform, markers) tuples

    Example:
        [
            ('amazon', ('amazon.com', 'amazon.', 'amzn.')),
            ('aliexpress', ('aliexpress.com', 'aliexpress.')),
            ...
        ]
    """
    config = load_config('platforms.yaml')
    return parse_platform_markers(config.get('platforms', []))
