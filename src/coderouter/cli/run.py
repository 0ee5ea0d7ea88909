from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from coderouter.config import load_config
from coderouter.models import Family, ResolvedTarget, parse_target
from coderouter.presets import get_family_info
from coderouter.resolve import find_credentials, resolve_target
from coderouter.runner import (
    SpawnError,
    assemble_invocation,
    find_missing_env_vars,
    spawn,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedTarget:
    target: ResolvedTarget
    credentials: dict[str, str]


def configure_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    # add_help=False so `-h` after the target reaches the wrapped CLI
    parser = subparsers.add_parser(
        "run",
        help="Run a target (implied when the first argument is a target)",
        add_help=False,
    )
    parser.set_defaults(func=run_target)
    parser.add_argument("target", help="family[.variant], e.g. claude.aws")
    parser.add_argument(
        "args", nargs=argparse.REMAINDER, help="Arguments passed to the target verbatim"
    )


def prepare_target(value: str) -> PreparedTarget | None:
    """Resolve a target string and its saved credentials, reporting failures."""
    from coderouter.cli.ui import print_error

    target_id = parse_target(value)
    if target_id is None:
        families = ", ".join(family.value for family in Family)
        print_error(
            "Unknown family",
            value,
            tip=f"Available families: {families}. Run `cr --help` for usage.",
        )
        return None

    config = load_config()
    target = resolve_target(target_id, config=config)
    if target is None:
        print_error(
            "Unknown variant",
            target_id.full_id,
            tip="Run `cr list` to see available variants or `cr setup` to add one.",
        )
        return None

    credentials = find_credentials(target.full_id, config.auth)
    return PreparedTarget(target=target, credentials=credentials)


def passthrough_env(target: ResolvedTarget, environ: Mapping[str, str]) -> dict[str, str]:
    """Ambient variables the wrapped CLI is known to read, excluding injected ones."""
    return {
        key: environ[key]
        for key in get_family_info(target.family).passthrough_vars
        if environ.get(key) and key not in target.env
    }


def run_target(args: argparse.Namespace) -> int:
    from coderouter.cli.ui import print_env_summary, print_error, print_missing_env_vars

    prepared = prepare_target(args.target)
    if prepared is None:
        return 1
    target, credentials = prepared.target, prepared.credentials

    environ = dict(os.environ)
    missing = find_missing_env_vars(target, environ=environ, credentials=credentials)
    if missing:
        print_missing_env_vars(target.full_id, missing)
        return 1

    invocation = assemble_invocation(
        target, args.args, environ=environ, credentials=credentials
    )
    passthrough = {
        key: value
        for key, value in passthrough_env(target, environ).items()
        if key not in credentials
    }
    print_env_summary(target.env, credentials, passthrough)

    try:
        return spawn(invocation)
    except SpawnError as exc:
        logger.debug("Spawn failed", exc_info=True)
        print_error("Failed to execute", str(exc), tip=f"Is `{exc.command}` installed and on PATH?")
        return 1
