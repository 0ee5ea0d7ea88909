from __future__ import annotations

import argparse

from coderouter.config import load_config
from coderouter.models import Family
from coderouter.presets import get_family_info, list_presets
from coderouter.resolve import list_variants


def configure_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "list", aliases=["ls"], help="List available families and variants"
    )
    parser.set_defaults(func=run_list)


def run_list(args: argparse.Namespace) -> int:
    from rich.markup import escape
    from rich.table import Table

    from coderouter.cli.ui import console

    config = load_config()

    table = Table(title="Available families and variants", title_justify="left", box=None)
    table.add_column("Target", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Source", style="dim")

    for family in Family:
        info = get_family_info(family)
        table.add_row(f"[bold]{family.value}[/bold]", info.description, "")

        builtins = list_presets(family)
        for name, variant in list_variants(family, config=config).items():
            source = "custom" if f"{family.value}.{name}" in config.variants else "builtin"
            if source == "custom" and name in builtins:
                source = "custom (overrides builtin)"
            table.add_row(f"  {family.value}.{escape(name)}", escape(variant.description), source)

    console.print(table)
    return 0
