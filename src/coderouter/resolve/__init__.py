from coderouter.resolve.credentials import find_credentials, get_credentials, matches
from coderouter.resolve.targets import resolve_target
from coderouter.resolve.variants import (
    list_variants,
    merge_env,
    merge_variant,
    resolve_variant,
    standalone_variant,
)

__all__ = [
    "find_credentials",
    "get_credentials",
    "list_variants",
    "matches",
    "merge_env",
    "merge_variant",
    "resolve_target",
    "resolve_variant",
    "standalone_variant",
]
