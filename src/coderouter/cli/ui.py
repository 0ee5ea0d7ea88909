"""Shared UI components for the coderouter CLI."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from coderouter.runner import MissingEnvVar, redact

theme = Theme(
    {
        "info": "dim cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "tip": "blue",
        "heading": "bold",
        "target": "cyan",
        "muted": "bright_black",
    }
)

console = Console(theme=theme)
# The wrapped CLI owns stdout once launched; router chatter goes to stderr
error_console = Console(theme=theme, stderr=True)


def configure_logging(verbose: bool = False) -> None:
    from rich.logging import RichHandler

    rich_handler = RichHandler(console=error_console, rich_tracebacks=False, show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )


def print_error(title: str, message: str, tip: str | None = None) -> None:
    """Print a styled error message with an optional actionable tip."""
    content = Text()
    content.append(f"{message}\n", style="white")

    if tip:
        content.append("\nTip: ", style="bold blue")
        content.append(tip, style="blue")

    error_console.print(
        Panel(
            content,
            title=f"[bold red]Error: {title}[/bold red]",
            border_style="red",
            padding=(1, 1),
        )
    )


def print_success(message: str) -> None:
    console.print(f"[success]✓[/success] {message}")


def print_note(message: str, title: str | None = None) -> None:
    console.print(Panel(message, title=title, border_style="dim white", padding=(0, 1)))


def print_missing_env_vars(full_id: str, missing: Sequence[MissingEnvVar]) -> None:
    """Explain every missing credential and how to save it."""
    error_console.print("[error]missing required credentials[/error]")
    error_console.print()
    for item in missing:
        error_console.print(f"  [warning]{item.name}[/warning]")
        if item.hint:
            error_console.print(f"  {item.hint}")
        error_console.print()

    error_console.print("[heading]To fix, run:[/heading]")
    error_console.print()
    error_console.print(f"  cr auth {full_id}", highlight=False)


def print_env_summary(
    injected: Mapping[str, str],
    credentials: Mapping[str, str],
    passthrough: Mapping[str, str],
) -> None:
    """Show what the router sets for the child, with secrets redacted."""
    if not injected and not credentials and not passthrough:
        return

    error_console.print("[muted]\\[cr][/muted]")
    for key, value in injected.items():
        shown = escape(redact(key, value))
        error_console.print(f"  [target]{key}[/target]={shown}", highlight=False)
    for key, value in credentials.items():
        if key in injected:
            continue
        shown = escape(redact(key, value))
        error_console.print(f"  [target]{key}[/target]={shown} [muted](saved)[/muted]", highlight=False)
    for key, value in passthrough.items():
        shown = escape(redact(key, value))
        error_console.print(f"  [muted]{key}={shown} (from env)[/muted]", highlight=False)
    error_console.print()
