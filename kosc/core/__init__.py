"""Core utilities package"""

from .config import Settings, get_settings
from .errors import KoscError, ParseError
from .logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "KoscError",
    "ParseError",
]
