from __future__ import annotations

import argparse
import os
import sys

from coderouter.cli.auth import configure_parser as configure_auth
from coderouter.cli.listing import configure_parser as configure_list
from coderouter.cli.run import configure_parser as configure_run
from coderouter.cli.setup import configure_parser as configure_setup

COMMANDS = frozenset({"run", "list", "ls", "auth", "setup"})
GLOBAL_FLAGS = frozenset({"--trace", "--verbose"})

EPILOG = """\
examples:
  cr claude.aws --dangerously-skip-permissions
  cr claude.vertex "fix the tests"
  cr claude.glm
  cr opencode.omoc --resume
  cr codex
  cr gemini.pro

families:
  claude      Claude Code CLI
  opencode    OpenCode CLI
  codex       OpenAI Codex CLI
  gemini      Google Gemini CLI

Run `cr list` for every variant. Config file: $CODEROUTER_CONFIG or
~/.config/coderouter/config.json
"""


def build_parser() -> argparse.ArgumentParser:
    from coderouter import __version__

    parser = argparse.ArgumentParser(
        prog="cr",
        description="coderouter - run AI coding assistants with different configs",
        usage="cr <family>[.variant] [args...]\n       cr {list,auth,setup} ...",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"coderouter v{__version__}",
        help="Print version and exit",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print full traceback on errors (or set CODEROUTER_TRACE=1)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    configure_run(subparsers)
    configure_list(subparsers)
    configure_auth(subparsers)
    configure_setup(subparsers)

    return parser


def route_argv(argv: list[str]) -> list[str]:
    """Insert the implicit ``run`` command before a leading target.

    ``cr claude.aws -p hi`` becomes ``cr run claude.aws -p hi``. Global flags
    in front of the target are left where they are.
    """
    index = 0
    while index < len(argv) and argv[index] in GLOBAL_FLAGS:
        index += 1
    if index >= len(argv):
        return argv

    first = argv[index]
    if first.startswith("-") or first in COMMANDS:
        return argv
    return [*argv[:index], "run", *argv[index:]]


def main(argv: list[str] | None = None) -> int:
    from coderouter.cli.ui import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(route_argv(argv))
    configure_logging(verbose=args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    want_trace = bool(args.trace) or os.environ.get("CODEROUTER_TRACE") in {
        "1",
        "true",
        "TRUE",
        "yes",
        "YES",
    }
    try:
        return int(args.func(args))
    except KeyboardInterrupt:
        # Keep Ctrl-C quiet by default.
        return 130
    except Exception as exc:
        if want_trace:
            from coderouter.cli.ui import error_console

            error_console.print_exception()
        else:
            from coderouter.cli.ui import print_error

            print_error(
                type(exc).__name__, str(exc), tip="re-run with --trace to see the full traceback."
            )
        return 1
