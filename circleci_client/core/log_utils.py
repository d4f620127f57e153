"""
Log Redaction

httpx logs every request URL at INFO level, and CircleCI URLs carry the API
token as a query parameter. The filter here masks those values before any
handler sees the record.
"""

import logging
import re
from typing import Iterable, List, Pattern

from circleci_client.core.constants import TOKEN_QUERY_PARAM

REDACTED = "[REDACTED]"

# Loggers that may print full request URLs
URL_LOGGERS = ("httpx",)


class SensitiveLogFilter(logging.Filter):
    """Masks the value of sensitive query parameters in log messages."""

    def __init__(self, params: Iterable[str] = (TOKEN_QUERY_PARAM,)):
        super().__init__()
        self.compiled_patterns: List[Pattern[str]] = [
            re.compile(rf"({re.escape(param)}=)[^&\s\"'#]+") for param in params
        ]

    def mask_string(self, string: str) -> str:
        masked_string = string
        for pattern in self.compiled_patterns:
            masked_string = pattern.sub(rf"\g<1>{REDACTED}", masked_string)
        return masked_string

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = self.mask_string(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


sensitive_log_filter = SensitiveLogFilter()


def install_sensitive_log_filter(logger_names: Iterable[str] = URL_LOGGERS) -> None:
    """Attach the shared filter to each logger once."""
    for name in logger_names:
        target = logging.getLogger(name)
        if sensitive_log_filter not in target.filters:
            target.addFilter(sensitive_log_filter)
