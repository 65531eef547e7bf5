"""
Utils Module - Shared Utilities

Organized by category:
- logging/: Logging configuration, formatters, and filters
- renderers: orjson-backed DRF renderer
"""
from .logging import setup_logging, get_logger

__all__ = [
    'setup_logging',
    'get_logger',
]
