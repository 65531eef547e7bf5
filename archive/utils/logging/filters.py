"""
Custom logging filters for fine-grained control.
"""
import logging
import re
import threading
import time


class SensitiveDataFilter(logging.Filter):
    """Filter or redact sensitive data from logs."""

    SENSITIVE_PATTERNS = [
        (re.compile(r'password["\']?\s*[:=]\s*["\']?([^"\'\s]+)', re.IGNORECASE), 'password=***'),
        (re.compile(r'token["\']?\s*[:=]\s*["\']?([^"\'\s]+)', re.IGNORECASE), 'token=***'),
        (re.compile(r'(PatientName|PatientID|PatientBirthDate)["\']?\s*[:=]\s*["\']?([^"\'\s,;&]+)'), r'\1=***'),
        (re.compile(r'\b\d{3}-\d{2}-\d{4}\b'), '***-**-****'),
    ]

    def filter(self, record):
        message = record.getMessage()

        for pattern, replacement in self.SENSITIVE_PATTERNS:
            message = pattern.sub(replacement, message)

        record.msg = message
        record.args = ()
        return True

class ThrottleFilter(logging.Filter):
    """
    Throttle repeated log messages.

    Counts are kept per (logger, level, message) for ``time_window`` seconds.
    Expired keys are swept once per window, and at most ``max_keys`` are
    tracked; past that the oldest key is dropped.
    """

    def __init__(self, rate_limit=10, time_window=60, max_keys=1000):
        super().__init__()
        self.rate_limit = rate_limit
        self.time_window = time_window
        self.max_keys = max_keys
        self.message_counts = {}
        self.last_reset = {}
        self._last_sweep = time.monotonic()
        self._lock = threading.Lock()

    def filter(self, record):
        message_key = f"{record.name}:{record.levelno}:{record.getMessage()}"
        current_time = time.monotonic()

        with self._lock:
            if current_time - self._last_sweep > self.time_window:
                self._sweep(current_time)

            started = self.last_reset.get(message_key)
            if started is None or current_time - started > self.time_window:
                self.last_reset.pop(message_key, None)
                self.last_reset[message_key] = current_time
                self.message_counts[message_key] = 0
                if len(self.last_reset) > self.max_keys:
                    oldest = next(iter(self.last_reset))
                    del self.last_reset[oldest]
                    del self.message_counts[oldest]

            self.message_counts[message_key] += 1
            count = self.message_counts[message_key]

        if count <= self.rate_limit:
            return True
        elif count == self.rate_limit + 1:
            record.msg = f"{record.getMessage()} (throttled - max {self.rate_limit} in {self.time_window}s)"
            record.args = ()
            return True

        return False

    def _sweep(self, current_time):
        expired = [key for key, started in self.last_reset.items() if current_time - started > self.time_window]
        for key in expired:
            del self.last_reset[key]
            del self.message_counts[key]
        self._last_sweep = current_time
