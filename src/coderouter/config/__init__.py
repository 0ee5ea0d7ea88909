from coderouter.config.loader import (
    delete_override,
    get_config_dir,
    get_config_path,
    load_config,
    save_config,
    save_credential,
    save_override,
)
from coderouter.config.opencode import ensure_opencode_config
from coderouter.config.schema import (
    WILDCARD,
    ConfigDocument,
    credential_pattern,
    migrate_legacy_document,
)

__all__ = [
    "WILDCARD",
    "ConfigDocument",
    "credential_pattern",
    "delete_override",
    "ensure_opencode_config",
    "get_config_dir",
    "get_config_path",
    "load_config",
    "migrate_legacy_document",
    "save_config",
    "save_credential",
    "save_override",
]
