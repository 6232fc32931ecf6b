# Common utilities
from .config_loader import load_config, load_platform_markers, parse_platform_markers
from .log_config import setup_logging
from .text_utils import find_urls, normalize_whitespace
