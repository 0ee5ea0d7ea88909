from coderouter.runner.assemble import Invocation, assemble_invocation
from coderouter.runner.redaction import is_sensitive, redact
from coderouter.runner.requirements import (
    ENV_VAR_HINTS,
    MissingEnvVar,
    env_var_hint,
    find_missing_env_vars,
)
from coderouter.runner.spawn import SpawnError, spawn

__all__ = [
    "ENV_VAR_HINTS",
    "Invocation",
    "MissingEnvVar",
    "SpawnError",
    "assemble_invocation",
    "env_var_hint",
    "find_missing_env_vars",
    "is_sensitive",
    "redact",
    "spawn",
]
