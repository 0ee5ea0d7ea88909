"""Turn a parsed target id into a runnable target."""

from __future__ import annotations

import logging
from pathlib import Path

from coderouter.config import ConfigDocument, ensure_opencode_config, load_config
from coderouter.config.opencode import VANILLA_SUBDIR
from coderouter.models import Family, ResolvedTarget, TargetId
from coderouter.presets import get_family_info
from coderouter.resolve.variants import resolve_variant

logger = logging.getLogger(__name__)


def resolve_target(
    target: TargetId,
    *,
    config: ConfigDocument | None = None,
    config_dir: Path | None = None,
) -> ResolvedTarget | None:
    """Resolve a target id for launch.

    Args:
        target: Parsed target id.
        config: Already-loaded config document. Loaded from disk when omitted.
        config_dir: Override for the directory holding opencode configs.

    Returns:
        The resolved target, or None when the variant is unknown. A bare
        family resolves to its command with no injected environment.
    """
    if config is None:
        config = load_config()

    variant = None
    if target.variant:
        variant = resolve_variant(target.family, target.variant, config=config)
        if variant is None:
            logger.debug("Unknown variant %s", target.full_id)
            return None

    env = dict(variant.env) if variant else {}

    if target.family is Family.opencode:
        subdir = (variant.xdg_config_subdir if variant else None) or VANILLA_SUBDIR
        plugins = variant.plugins if variant else []
        xdg_dir = ensure_opencode_config(subdir, plugins=plugins, config_dir=config_dir)
        env["XDG_CONFIG_HOME"] = str(xdg_dir)

    return ResolvedTarget(
        family=target.family,
        variant=target.variant,
        command=get_family_info(target.family).command,
        env=env,
        default_args=list(variant.default_args) if variant else [],
        required_env_vars=list(variant.required_env_vars) if variant else [],
    )
