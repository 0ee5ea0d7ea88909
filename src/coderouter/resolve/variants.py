"""Variant resolution: user overrides layered over built-in presets."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from coderouter.config import ConfigDocument, load_config
from coderouter.models import Family, Preset, VariantOverride, parse_family
from coderouter.presets import get_preset, list_presets

logger = logging.getLogger(__name__)


def merge_env(base: Mapping[str, str], override: Mapping[str, str] | None) -> dict[str, str]:
    """Return ``base`` with ``override`` laid on top; override keys win."""
    return {**base, **(override or {})}


def merge_variant(name: str, base: Preset, override: VariantOverride) -> Preset:
    """Layer an extending override on top of the preset it extends.

    Fields set on the override win; unset fields come from ``base``. The
    preset itself is never modified.
    """
    return Preset(
        name=name,
        description=override.description or base.description,
        env=merge_env(base.env, override.env),
        default_args=(
            override.default_args if override.default_args is not None else base.default_args
        ),
        required_env_vars=(
            override.required_env_vars
            if override.required_env_vars is not None
            else base.required_env_vars
        ),
        xdg_config_subdir=base.xdg_config_subdir,
        plugins=base.plugins,
    )


def standalone_variant(name: str, full_id: str, override: VariantOverride) -> Preset:
    """Build a variant from an override alone, inheriting nothing."""
    return Preset(
        name=name,
        description=override.description or full_id,
        env=dict(override.env or {}),
        default_args=list(override.default_args or []),
        required_env_vars=list(override.required_env_vars or []),
    )


def _extended_preset(extends: str) -> Preset | None:
    family_name, _, variant_path = extends.partition(".")
    family = parse_family(family_name)
    if family is None or not variant_path:
        return None
    return get_preset(family, variant_path)


def resolve_variant(
    family: Family | str, variant_name: str, *, config: ConfigDocument | None = None
) -> Preset | None:
    """Resolve ``family.variant_name`` to a fully merged variant.

    Args:
        family: Target family. Unknown families resolve to None.
        variant_name: Variant path after the family, may contain dots.
        config: Already-loaded config document. Loaded from disk when omitted.

    Returns:
        The override merged with its ``extends`` preset, the override on its
        own, or the built-in preset when no override exists. None when
        nothing matches.
    """
    resolved_family = family if isinstance(family, Family) else parse_family(family)
    if resolved_family is None:
        return None

    if config is None:
        config = load_config()

    full_id = f"{resolved_family.value}.{variant_name}"
    override = config.variants.get(full_id)
    if override is None:
        return get_preset(resolved_family, variant_name)

    if override.extends:
        base = _extended_preset(override.extends)
        if base is not None:
            return merge_variant(variant_name, base, override)
        logger.debug(
            "Override %s extends unknown preset %r; using it standalone", full_id, override.extends
        )

    return standalone_variant(variant_name, full_id, override)


def list_variants(
    family: Family | str, *, config: ConfigDocument | None = None
) -> dict[str, Preset]:
    """Return built-in and user variants of a family, fully resolved.

    A user variant with the same name as a built-in replaces it.
    """
    resolved_family = family if isinstance(family, Family) else parse_family(family)
    if resolved_family is None:
        return {}

    if config is None:
        config = load_config()

    variants = list_presets(resolved_family)
    prefix = f"{resolved_family.value}."
    for full_id in config.variants:
        if not full_id.startswith(prefix):
            continue
        name = full_id[len(prefix) :]
        resolved = resolve_variant(resolved_family, name, config=config)
        if resolved is not None:
            variants[name] = resolved
    return variants
