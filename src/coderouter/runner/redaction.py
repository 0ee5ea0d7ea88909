"""Redaction of secret-looking environment values for display."""

from __future__ import annotations

import re

_SENSITIVE_NAME_RE = re.compile(r"token|key|secret|password|credential|bearer", re.IGNORECASE)

REDACTED = "***"


def is_sensitive(name: str) -> bool:
    return _SENSITIVE_NAME_RE.search(name) is not None


def redact(name: str, value: str) -> str:
    """Mask ``value`` when ``name`` looks like it holds a secret.

    Long values keep their first and last four characters.
    """
    if not is_sensitive(name):
        return value
    if len(value) <= 8:
        return REDACTED
    return f"{value[:4]}...{value[-4:]}"
