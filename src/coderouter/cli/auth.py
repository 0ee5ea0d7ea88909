from __future__ import annotations

import argparse
import os

from coderouter.config import load_config, save_credential
from coderouter.models import Family, parse_target
from coderouter.resolve import find_credentials, list_variants, resolve_variant
from coderouter.runner import env_var_hint

_USAGE_TIP = "usage: cr auth <family>.<variant>  (example: cr auth claude.glm)"


def configure_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("auth", help="Save API keys for a variant")
    parser.set_defaults(func=run_auth)
    parser.add_argument(
        "target",
        nargs="?",
        help="family.variant to save credentials for; omit to list targets",
    )


def show_auth_targets() -> int:
    """List every variant with required variables and whether they are satisfied."""
    from coderouter.cli.ui import console

    config = load_config()
    console.print("[heading]Auth targets:[/heading]")
    console.print()

    for family in Family:
        for name, variant in list_variants(family, config=config).items():
            if not variant.required_env_vars:
                continue
            full_id = f"{family.value}.{name}"
            credentials = find_credentials(full_id, config.auth)
            satisfied = all(
                os.environ.get(key) or credentials.get(key) for key in variant.required_env_vars
            )
            status = "[success]✓[/success]" if satisfied else "[muted]○[/muted]"
            console.print(f"  {status} [target]{full_id}[/target]", highlight=False)

    console.print()
    console.print("usage: cr auth <target>")
    return 0


def _prompt_secret(env_var: str) -> str:
    from rich.prompt import Prompt

    from coderouter.cli.ui import console

    while True:
        value = Prompt.ask(f"[target]{env_var}[/target]", password=True, console=console)
        if value.strip():
            return value.strip()
        console.print("[error]API key is required[/error]")


def run_auth(args: argparse.Namespace) -> int:
    from coderouter.cli.ui import console, print_error, print_success

    if not args.target:
        return show_auth_targets()

    target_id = parse_target(args.target)
    if target_id is None:
        print_error("Unknown target", args.target, tip=_USAGE_TIP)
        return 1
    if not target_id.variant:
        print_error("Variant required", args.target, tip=_USAGE_TIP)
        return 1

    variant = resolve_variant(target_id.family, target_id.variant)
    if variant is None:
        print_error(
            "Unknown variant", target_id.full_id, tip="Run `cr list` to see available variants."
        )
        return 1

    if not variant.required_env_vars:
        console.print(f"[success]{target_id.full_id}[/success] doesn't require any API keys.")
        return 0

    values: dict[str, str] = {}
    console.print()
    try:
        for env_var in variant.required_env_vars:
            hint = env_var_hint(target_id.variant, env_var)
            if hint:
                console.print(f"[muted]{hint}[/muted]", highlight=False)
            values[env_var] = _prompt_secret(env_var)
    except (KeyboardInterrupt, EOFError):
        console.print()
        console.print("[warning]cancelled[/warning]")
        return 0

    for env_var, value in values.items():
        save_credential(target_id.full_id, env_var, value)

    console.print()
    print_success(f"Saved! Run with: [target]cr {target_id.full_id}[/target]")
    return 0
