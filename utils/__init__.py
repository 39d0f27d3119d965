# Utility modules for the recipe measurement app
from .logger import setup_logging, get_logger
from .sanitizer import normalize_whitespace, sanitize_item_name
