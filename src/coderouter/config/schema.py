"""Schema of the persisted config document.

Two legacy shapes are still read:

- a flat ``secrets`` mapping of ``"target:ENV_VAR" -> value``;
- ``variants`` nested by family (``{"claude": {"aws": {"name": "aws", ...}}}``).

Both are rewritten into the current shape during validation, so no caller
ever sees them. The file on disk keeps the legacy shape until the next save.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from coderouter.models import VariantOverride

logger = logging.getLogger(__name__)

# Trailing marker on an auth pattern: "this prefix and everything beneath it"
WILDCARD = "*"

_LEGACY_PRESET_FIELDS = ("description", "env", "defaultArgs", "requiredEnvVars")
_OVERRIDE_FIELDS = frozenset({"extends", *_LEGACY_PRESET_FIELDS})


def credential_pattern(target: str) -> str:
    """Return the auth pattern under which credentials for ``target`` are saved."""
    return f"{target}{WILDCARD}"


def _migrate_secrets(secrets: Any, auth: dict[str, dict[str, Any]]) -> None:
    if not isinstance(secrets, Mapping):
        return

    for key, value in secrets.items():
        target, sep, env_var = str(key).partition(":")
        if not sep or not target or not env_var:
            logger.debug("Dropping legacy secret with malformed key %r", key)
            continue
        auth.setdefault(credential_pattern(target), {})[env_var] = value


def _is_legacy_family_block(key: str, value: Any) -> bool:
    if "." in key or not isinstance(value, Mapping) or not value:
        return False
    if _OVERRIDE_FIELDS.intersection(value):
        return False
    return all(
        isinstance(preset, Mapping) and isinstance(preset.get("name"), str)
        for preset in value.values()
    )


def _migrate_variants(variants: Mapping[str, Any]) -> dict[str, Any]:
    migrated: dict[str, Any] = {}
    for key, value in variants.items():
        if not _is_legacy_family_block(key, value):
            migrated[key] = value
            continue

        for name, preset in value.items():
            migrated[f"{key}.{name}"] = {
                field: preset[field] for field in _LEGACY_PRESET_FIELDS if field in preset
            }
    return migrated


def migrate_legacy_document(data: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite legacy config shapes into the current one.

    Pure and idempotent: the input is not modified, and a document that is
    already current comes back equal to itself.
    """
    migrated = dict(data)

    if "secrets" in migrated:
        raw_auth = migrated.get("auth")
        auth: dict[str, dict[str, Any]] = {}
        if isinstance(raw_auth, Mapping):
            auth = {
                pattern: dict(record) if isinstance(record, Mapping) else {}
                for pattern, record in raw_auth.items()
            }
        _migrate_secrets(migrated.pop("secrets"), auth)
        migrated["auth"] = auth
        logger.debug("Migrated legacy 'secrets' into %d auth patterns", len(auth))

    variants = migrated.get("variants")
    if isinstance(variants, Mapping):
        flattened = _migrate_variants(variants)
        if list(flattened) != list(variants):
            logger.debug("Flattened legacy nested variants into %d entries", len(flattened))
        migrated["variants"] = flattened

    return migrated


class ConfigDocument(BaseModel):
    """User overrides and saved credentials.

    ``variants`` maps a full target id (``claude.aws.sonnet``) to an override.
    ``auth`` maps a pattern (``claude.glm*``) to ``{ENV_VAR: secret}``.
    Mapping order is storage order and is significant for credential lookup.
    """

    model_config = ConfigDict(extra="allow")

    variants: dict[str, VariantOverride] = Field(default_factory=dict)
    auth: dict[str, dict[str, str]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _migrate_legacy_shapes(cls, data: object) -> object:
        if not isinstance(data, Mapping):
            return data
        migrated = migrate_legacy_document(data)
        for key in ("variants", "auth"):
            if key in migrated and migrated[key] is None:
                del migrated[key]
        return migrated

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
