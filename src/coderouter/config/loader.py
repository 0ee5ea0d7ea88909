"""Load and save the coderouter config file.

Search order: $CODEROUTER_CONFIG -> $XDG_CONFIG_HOME/coderouter/config.json
-> ~/.config/coderouter/config.json

Saves rewrite the whole document (read-modify-write). There is no locking:
two concurrent writers race and the last write wins.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from coderouter.config.schema import ConfigDocument, credential_pattern
from coderouter.models import VariantOverride

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV_VAR = "CODEROUTER_CONFIG"
CONFIG_FILENAME = "config.json"


def get_config_path() -> Path:
    """Return the config file path for the current user."""
    explicit = os.environ.get(CONFIG_PATH_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "coderouter" / CONFIG_FILENAME
    return Path.home() / ".config" / "coderouter" / CONFIG_FILENAME


def get_config_dir() -> Path:
    return get_config_path().parent


def load_config(config_path: Path | None = None) -> ConfigDocument:
    """Load the config document, migrating legacy shapes.

    A missing file, unreadable file or invalid document yields an empty
    document; this never raises. Built-in presets keep working either way.
    """
    path = config_path or get_config_path()
    if not path.exists():
        logger.debug("No config file at %s", path)
        return ConfigDocument()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return ConfigDocument.model_validate(data)
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", path, exc)
        return ConfigDocument()


def save_config(config: ConfigDocument, config_path: Path | None = None) -> None:
    """Overwrite the config file with the full document."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_json_dict(), indent=2), encoding="utf-8")
    logger.debug("Saved config to %s", path)


def save_override(
    full_id: str, override: VariantOverride, *, config_path: Path | None = None
) -> None:
    """Store ``override`` under ``full_id``, replacing any previous one."""
    config = load_config(config_path)
    config.variants[full_id] = override
    save_config(config, config_path)


def delete_override(full_id: str, *, config_path: Path | None = None) -> bool:
    """Remove the override at ``full_id``.

    Returns:
        True if an override was removed. False if none existed, in which
        case the file is not written.
    """
    config = load_config(config_path)
    if full_id not in config.variants:
        return False
    del config.variants[full_id]
    save_config(config, config_path)
    return True


def save_credential(
    full_id: str, env_var: str, value: str, *, config_path: Path | None = None
) -> None:
    """Save one secret under the ``<full_id>*`` pattern."""
    config = load_config(config_path)
    config.auth.setdefault(credential_pattern(full_id), {})[env_var] = value
    save_config(config, config_path)
