"""
Logging redaction helpers.
Masks client personal data and credentials that leak into log messages.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable


_PATTERNS: Iterable[tuple[re.Pattern, str]] = (
    # E-mail addresses
    (re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"), "[EMAIL]"),
    # Brazilian CPF: 123.456.789-09 or 12345678909
    (re.compile(r"\b\d{3}\.?\d{3}\.?\d{3}-?\d{2}\b"), "[CPF]"),
    # Phone numbers: +55 (11) 91234-5678, (11) 1234-5678
    (re.compile(r"(\+\d{1,3}\s?)?\(?\d{2}\)?\s?9?\d{4}-\d{4}"), "[PHONE]"),
    # Authorization: Bearer <token>
    (re.compile(r"(Bearer\s+)([A-Za-z0-9\-\._]+)"), r"\1[REDACTED]"),
    # Generic access token / api key key-value pairs
    (re.compile(r"(?i)(access_token|token|api[_-]?key)\s*[:=]\s*([A-Za-z0-9\-\._]+)"), r"\1=[REDACTED]"),
)


def redact_message(message: str) -> str:
    redacted = message
    for pattern, replacement in _PATTERNS:
        redacted = pattern.sub(replacement, redacted)
    return redacted


class RedactingFilter(logging.Filter):
    """Filter that redacts sensitive data from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
            record.msg = redact_message(message)
            record.args = ()
        except Exception:
            # If redaction fails, allow log through unmodified
            pass
        return True


def install_redaction_filter() -> None:
    """
    Attach the filter to the root logger and its handlers.

    Records propagated from child loggers only pass through handler
    filters, so the handlers need their own instance.
    """
    root = logging.getLogger()
    targets = [root, *root.handlers]
    for target in targets:
        # Avoid duplicate filters
        if any(isinstance(existing, RedactingFilter) for existing in target.filters):
            continue
        target.addFilter(RedactingFilter())
