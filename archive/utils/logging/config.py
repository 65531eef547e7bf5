"""
Logging configuration module.
Centralized logging setup for the entire application.
"""
import logging
import logging.config
from pathlib import Path

from django.conf import settings

from .formatters import ColoredFormatter, DetailedFormatter, JSONFormatter, SafeFormatter
from .filters import SensitiveDataFilter, ThrottleFilter


def get_log_level():
    """Get log level from settings."""
    level_name = getattr(settings, 'ARCHIVE_LOG_LEVEL', 'INFO')
    return getattr(logging, str(level_name).upper(), logging.INFO)


def get_log_dir() -> Path:
    """Get log directory from settings."""
    return Path(getattr(settings, 'ARCHIVE_LOG_DIR', Path(settings.BASE_DIR) / 'storage' / 'logs'))


def _rotating_file(filename, level, formatter, filters=('sensitive_data',)):
    return {
        'class': 'logging.handlers.TimedRotatingFileHandler',
        'level': level,
        'formatter': formatter,
        'filters': list(filters),
        'filename': str(filename),
        'when': 'midnight',
        'interval': 1,
        'backupCount': 10,
        'encoding': 'utf-8',
    }


def get_logging_config():
    """
    Get logging configuration dictionary.

    Returns:
        dict: Logging configuration
    """
    log_level = get_log_level()
    log_dir = get_log_dir()
    debug_mode = getattr(settings, 'DEBUG', True)

    log_dir.mkdir(parents=True, exist_ok=True)

    def handlers_for(file_handler):
        names = [file_handler, 'error_file']
        return ['console'] + names if debug_mode else names

    config = {
        'version': 1,
        'disable_existing_loggers': False,

        'formatters': {
            'colored': {
                '()': ColoredFormatter,
                'format': '%(levelname)s [%(name)s] %(message)s'
            },
            'detailed': {
                '()': DetailedFormatter,
                'format': '%(timestamp)s [%(levelname)s] %(module_path)s:%(lineno)d - %(message)s'
            },
            'json': {
                '()': JSONFormatter,
            },
            'standard': {
                '()': SafeFormatter,
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
        },

        'filters': {
            'sensitive_data': {
                '()': SensitiveDataFilter,
            },
            'throttle': {
                '()': ThrottleFilter,
                'rate_limit': 100,
                'time_window': 60,
            },
        },

        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': log_level,
                'formatter': 'colored',
                'filters': ['sensitive_data'],
                'stream': 'ext://sys.stdout',
            },
            'main_file': _rotating_file(log_dir / 'main.log', logging.DEBUG, 'detailed'),
            'error_file': _rotating_file(log_dir / 'error.log', logging.ERROR, 'detailed'),
            'dicom_file': _rotating_file(
                log_dir / 'dicom.log', logging.INFO, 'detailed', ('throttle', 'sensitive_data')
            ),
            'api_file': _rotating_file(log_dir / 'api.log', logging.INFO, 'json'),
            'django_file': _rotating_file(log_dir / 'django.log', logging.INFO, 'standard', ()),
        },

        'loggers': {
            'archive.ingest': {
                'level': log_level,
                'handlers': handlers_for('dicom_file'),
                'propagate': False,
            },
            'archive.query': {
                'level': log_level,
                'handlers': handlers_for('dicom_file'),
                'propagate': False,
            },
            'archive.retrieve': {
                'level': log_level,
                'handlers': handlers_for('dicom_file'),
                'propagate': False,
            },
            'pydicom': {
                'level': logging.WARNING,
                'handlers': ['dicom_file'],
                'propagate': False,
            },

            'archive.views': {
                'level': log_level,
                'handlers': handlers_for('api_file'),
                'propagate': False,
            },

            'archive.commands': {
                'level': log_level,
                'handlers': handlers_for('main_file'),
                'propagate': False,
            },

            'django': {
                'level': logging.INFO,
                'handlers': ['console', 'django_file'] if debug_mode else ['django_file'],
                'propagate': False,
            },
            'django.request': {
                'level': logging.WARNING,
                'handlers': ['console', 'django_file', 'error_file'] if debug_mode else ['django_file', 'error_file'],
                'propagate': False,
            },

            'archive': {
                'level': log_level,
                'handlers': handlers_for('main_file'),
                'propagate': False,
            },
        },

        'root': {
            'level': log_level,
            'handlers': ['console', 'main_file'] if debug_mode else ['main_file'],
        },
    }

    return config


def setup_logging():
    """Setup logging for the entire application."""
    config = get_logging_config()
    logging.config.dictConfig(config)

    logger = logging.getLogger('archive')
    debug_mode = getattr(settings, 'DEBUG', True)

    logger.info("=" * 60)
    logger.info("Logging system initialized")
    logger.info(f"Log level: {logging.getLevelName(get_log_level())}")
    logger.info(f"Log directory: {get_log_dir()}")
    logger.info(f"Console logging: {'Enabled' if debug_mode else 'Disabled (DEBUG=False)'}")
    logger.info("Log rotation: Daily at midnight, 10 backups")
    logger.info("=" * 60)


def get_logger(name):
    """
    Get a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        logging.Logger: Configured logger
    """
    return logging.getLogger(name)
