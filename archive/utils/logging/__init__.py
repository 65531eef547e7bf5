"""
Logging Utilities - Logging Configuration and Formatters

Centralized logging setup, formatters, and filters.
"""
from .config import setup_logging, get_logger, get_logging_config
from .formatters import ColoredFormatter, DetailedFormatter, JSONFormatter, SafeFormatter
from .filters import SensitiveDataFilter, ThrottleFilter

__all__ = [
    # Config
    'setup_logging',
    'get_logger',
    'get_logging_config',

    # Formatters
    'ColoredFormatter',
    'DetailedFormatter',
    'JSONFormatter',
    'SafeFormatter',

    # Filters
    'SensitiveDataFilter',
    'ThrottleFilter',
]
