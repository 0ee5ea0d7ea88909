"""Isolated opencode config directories.

opencode reads its config from ``$XDG_CONFIG_HOME/opencode``, so each
opencode variant gets its own directory under the coderouter config dir and
the child process is pointed at it.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path

from coderouter.config.loader import get_config_dir

logger = logging.getLogger(__name__)

OPENCODE_SCHEMA_URL = "https://opencode.ai/config.json"
VANILLA_SUBDIR = "opencode-vanilla"


def _user_opencode_dir() -> Path:
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "opencode"
    return Path.home() / ".config" / "opencode"


def ensure_opencode_config(
    subdir: str = VANILLA_SUBDIR,
    *,
    plugins: Sequence[str] = (),
    config_dir: Path | None = None,
    user_opencode_dir: Path | None = None,
) -> Path:
    """Create the opencode config directory for a variant on first use.

    Args:
        subdir: Directory name under the coderouter config dir.
        plugins: opencode plugins to enable in the generated config.
        config_dir: Override for the coderouter config dir.
        user_opencode_dir: Override for the user's own opencode config dir,
            whose ``node_modules`` are copied when plugins are requested.

    Returns:
        The directory to use as ``XDG_CONFIG_HOME`` for opencode. An existing
        directory is returned untouched.
    """
    root = (config_dir or get_config_dir()) / subdir
    opencode_dir = root / "opencode"
    if opencode_dir.exists():
        return root

    opencode_dir.mkdir(parents=True, exist_ok=True)
    config = {
        "$schema": OPENCODE_SCHEMA_URL,
        "theme": "opencode",
        "plugin": list(plugins),
        "autoupdate": False,
    }
    (opencode_dir / "opencode.json").write_text(json.dumps(config, indent=2), encoding="utf-8")
    logger.info("Created opencode config in %s", opencode_dir)

    if plugins:
        user_modules = (user_opencode_dir or _user_opencode_dir()) / "node_modules"
        if user_modules.is_dir():
            shutil.copytree(user_modules, opencode_dir / "node_modules")
        else:
            logger.warning(
                "No node_modules in %s; install the plugins (%s) before running",
                user_modules.parent,
                ", ".join(plugins),
            )

    return root
