# shiftlog/logging_filters.py
import logging
import re
from typing import Any, Mapping

MASK = "****"

# Credentials, identity fields and the free-text parts of a shift entry
REDACTED_FIELDS = frozenset(
    {
        "password", "token", "authorization",
        "email", "username", "first_name", "last_name",
        "foreman", "notes",
    }
)

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@([A-Za-z0-9.-]+\.[A-Za-z]{2,})")
TOKEN_PATTERN = re.compile(r"(?:Token|Bearer)\s+[A-Za-z0-9\-_]{20,}|\b[a-f0-9]{40}\b")


def mask_text(value: Any) -> Any:
    """Mask e-mail local parts and API tokens inside a single value."""
    if value is None or isinstance(value, (bool, int, float)):
        return value
    text = EMAIL_PATTERN.sub(r"***@\1", str(value))
    return TOKEN_PATTERN.sub(MASK, text)


def mask_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        masked = {}
        for key, item in value.items():
            if isinstance(key, str) and key.lower() in REDACTED_FIELDS:
                masked[key] = MASK
            else:
                masked[key] = mask_value(item)
        return masked
    if isinstance(value, (list, tuple, set)):
        return type(value)(mask_value(item) for item in value)
    return mask_text(value)


class PIIRedactorFilter(logging.Filter):
    """Redact e-mails, auth tokens and free-text shift fields in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = mask_text(record.msg)

        if isinstance(record.args, Mapping):
            record.args = mask_value(record.args)
        elif record.args:
            record.args = tuple(mask_value(arg) for arg in record.args)
        return True
