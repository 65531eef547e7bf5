"""
Logging formatters for console, file and JSON output.

Records can carry DICOM identifiers, either through ``extra=`` on the logging
call or through an ArchiveError in ``exc_info``. The detailed and JSON
formatters print them next to the message.
"""
import logging
from datetime import datetime

import orjson

from archive.exceptions import ArchiveError

ARCHIVE_FIELDS = ('study_instance_uid', 'sop_instance_uid', 'source', 'reason', 'outcome')


def archive_fields(record):
    """Collect the DICOM identifiers attached to ``record``."""
    fields = {name: getattr(record, name) for name in ARCHIVE_FIELDS if getattr(record, name, None)}

    error = record.exc_info[1] if record.exc_info else None
    if isinstance(error, ArchiveError):
        fields['error'] = type(error).__name__
        for name in ARCHIVE_FIELDS:
            value = getattr(error, name, None)
            if value:
                fields.setdefault(name, value)

    return fields


class ColoredFormatter(logging.Formatter):
    """Console formatter with the level name colored."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class DetailedFormatter(logging.Formatter):
    """File formatter with call site and DICOM identifiers."""

    def format(self, record):
        record.timestamp = datetime.now().isoformat()
        record.module_path = f"{record.module}.{record.funcName}"

        line = super().format(record)
        fields = archive_fields(record)
        if fields:
            context = ' '.join(f"{name}={value}" for name, value in fields.items())
            first, sep, rest = line.partition('\n')
            line = f"{first} [{context}]{sep}{rest}"
        return line


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for the API log."""

    def format(self, record):
        log_data = {
            'timestamp': datetime.now().isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'function': record.funcName,
            'line': record.lineno,
            'message': record.getMessage(),
        }

        fields = archive_fields(record)
        if fields:
            log_data['dicom'] = fields

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return orjson.dumps(log_data, default=str).decode('utf-8')


class SafeFormatter(logging.Formatter):
    """Plain formatter that survives records whose args do not match the message."""

    def format(self, record):
        try:
            return super().format(record)
        except (TypeError, ValueError):
            return f"{self.formatTime(record)} [{record.levelname}] {record.name}: {record.msg}"
