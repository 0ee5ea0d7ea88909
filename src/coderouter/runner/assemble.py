"""Build the final command line and environment for a resolved target."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from coderouter.models import ResolvedTarget
from coderouter.resolve import merge_env


@dataclass(frozen=True)
class Invocation:
    command: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)


def assemble_invocation(
    target: ResolvedTarget,
    args: Sequence[str],
    *,
    environ: Mapping[str, str],
    credentials: Mapping[str, str],
) -> Invocation:
    """Combine a resolved target with the caller's args and environment.

    Env precedence, lowest to highest: ``environ``, ``credentials``,
    ``target.env``. Args are the target's default args followed by ``args``,
    with no reordering or deduplication.
    """
    env = merge_env(merge_env(environ, credentials), target.env)
    return Invocation(
        command=target.command,
        args=[*target.default_args, *args],
        env=env,
    )
