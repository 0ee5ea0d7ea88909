"""``crd``: show what ``cr`` would execute without running it."""

from __future__ import annotations

import argparse
import os
import shlex

from coderouter.cli.run import passthrough_env, prepare_target
from coderouter.runner import assemble_invocation, redact


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crd",
        description="Debug mode: show what `cr` would execute without running it",
    )
    parser.add_argument("target", help="family[.variant], e.g. claude.aws")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the target")
    return parser


def main(argv: list[str] | None = None) -> int:
    from rich.markup import escape
    from rich.table import Table

    from coderouter.cli.ui import configure_logging, console

    configure_logging()
    args = build_parser().parse_args(argv)

    prepared = prepare_target(args.target)
    if prepared is None:
        return 1
    target, credentials = prepared.target, prepared.credentials
    environ = dict(os.environ)

    console.print("[heading]\\[debug mode - not executing][/heading]")
    console.print()

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("Key", style="cyan")
    summary.add_column("Value")
    summary.add_row("family", target.family.value)
    summary.add_row("variant", target.variant or "(none)")
    summary.add_row("command", target.command)
    console.print(summary)
    console.print()

    if target.required_env_vars:
        console.print("[target]required:[/target]")
        for key in target.required_env_vars:
            if environ.get(key):
                shown = escape(redact(key, environ[key]))
                console.print(f"  [success]✓[/success] {key}={shown} [muted](env)[/muted]")
            elif credentials.get(key):
                shown = escape(redact(key, credentials[key]))
                console.print(f"  [success]✓[/success] {key}={shown} [muted](saved)[/muted]")
            else:
                console.print(f"  [error]✗[/error] {key} (not set)")
        console.print()

    passthrough = passthrough_env(target, environ)
    if target.env or passthrough:
        console.print("[target]env:[/target]")
        for key, value in target.env.items():
            console.print(f"  {key}={escape(value)}", highlight=False)
        for key, value in passthrough.items():
            shown = escape(redact(key, value))
            console.print(f"  [muted]{key}={shown} (from env)[/muted]", highlight=False)
        console.print()

    invocation = assemble_invocation(target, args.args, environ=environ, credentials=credentials)
    if invocation.args:
        console.print(f"[target]args:[/target] {escape(shlex.join(invocation.args))}")
        console.print()

    env_prefix = " ".join(f"{key}={shlex.quote(value)}" for key, value in target.env.items())
    command_line = shlex.join([invocation.command, *invocation.args])
    console.print("[target]full command:[/target]")
    console.print(
        f"  {escape(env_prefix + ' ' if env_prefix else '')}{escape(command_line)}",
        highlight=False,
    )
    return 0
