"""Credential lookup by target prefix."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from coderouter.config import WILDCARD, ConfigDocument, load_config

logger = logging.getLogger(__name__)


def matches(candidate: str, pattern: str) -> bool:
    """Return True if ``candidate`` matches an auth pattern.

    A pattern ending in ``*`` matches every candidate starting with the rest
    of the pattern. Any other pattern only matches itself.
    """
    if pattern.endswith(WILDCARD):
        return candidate.startswith(pattern[: -len(WILDCARD)])
    return candidate == pattern


def find_credentials(
    target: str, auth: Mapping[str, Mapping[str, str]]
) -> dict[str, str]:
    """Find the most specific credential record for ``target``.

    The target is cut into dotted prefixes (``claude.aws.sonnet``,
    ``claude.aws``, ``claude``) and tried longest first. A pattern is tried at
    the shortest prefix it matches, so ``claude.aws*`` is preferred over
    ``claude*`` for ``claude.aws.sonnet`` whatever their storage order.
    Patterns tried at the same prefix are taken in storage order.

    Returns:
        A copy of the matched record, or an empty dict when nothing matches.
    """
    parts = target.split(".")
    prefixes = [".".join(parts[:i]) for i in range(1, len(parts) + 1)]

    for depth in range(len(prefixes), 0, -1):
        prefix = prefixes[depth - 1]
        shorter = prefixes[depth - 2] if depth > 1 else None
        for pattern, record in auth.items():
            if not matches(prefix, pattern):
                continue
            if shorter is not None and matches(shorter, pattern):
                continue
            logger.debug("Credentials for %s matched pattern %r", target, pattern)
            return dict(record)

    return {}


def get_credentials(target: str, *, config: ConfigDocument | None = None) -> dict[str, str]:
    """Return saved credentials for a full target id. Never raises."""
    if config is None:
        config = load_config()
    return find_credentials(target, config.auth)
