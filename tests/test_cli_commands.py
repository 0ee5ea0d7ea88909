"""Tests for CLI command parsing and the run/list/auth/setup commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from coderouter.cli import debug, run
from coderouter.cli.auth import run_auth
from coderouter.cli.listing import run_list
from coderouter.cli.main import build_parser, main, route_argv
from coderouter.cli.run import run_target
from coderouter.cli.setup import (
    SetupResult,
    build_claude_variant,
    build_gemini_variant,
    persist_setup,
    run_setup,
)
from coderouter.config import load_config, save_override
from coderouter.models import VariantOverride
from coderouter.runner import Invocation, SpawnError


@pytest.fixture
def spawned(monkeypatch: pytest.MonkeyPatch) -> list[Invocation]:
    """Capture invocations instead of launching anything."""
    calls: list[Invocation] = []

    def fake_spawn(invocation: Invocation) -> int:
        calls.append(invocation)
        return 0

    monkeypatch.setattr(run, "spawn", fake_spawn)
    return calls


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["claude.aws", "-p", "hi"], ["run", "claude.aws", "-p", "hi"]),
        (["--trace", "codex", "--help"], ["--trace", "run", "codex", "--help"]),
        (["list"], ["list"]),
        (["ls"], ["ls"]),
        (["run", "codex"], ["run", "codex"]),
        (["--version"], ["--version"]),
        ([], []),
    ],
)
def test_route_argv(argv: list[str], expected: list[str]) -> None:
    assert route_argv(argv) == expected


def test_run_command_parsing_keeps_target_args_verbatim() -> None:
    parser = build_parser()
    args = parser.parse_args(route_argv(["claude.glm", "--help", "-p", "fix it"]))

    assert args.command == "run"
    assert args.target == "claude.glm"
    assert args.args == ["--help", "-p", "fix it"]
    assert args.func is run_target


def test_list_alias_routing() -> None:
    parser = build_parser()
    assert parser.parse_args(["list"]).func is run_list
    assert parser.parse_args(["ls"]).func is run_list


def test_auth_and_setup_routing() -> None:
    parser = build_parser()

    auth_args = parser.parse_args(["auth", "claude.glm"])
    assert auth_args.func is run_auth
    assert auth_args.target == "claude.glm"

    setup_args = parser.parse_args(["setup", "--remove", "claude.mine"])
    assert setup_args.func is run_setup
    assert setup_args.remove == "claude.mine"
    assert setup_args.target is None


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("coderouter v")


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage: cr" in capsys.readouterr().out


def test_run_injects_variant_env_and_args(
    spawned: list[Invocation], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME_MARKER", "kept")
    monkeypatch.delenv("GEMINI_MODEL", raising=False)

    assert main(["gemini.pro", "-p", "hello"]) == 0

    [invocation] = spawned
    assert invocation.command == "gemini"
    assert invocation.args == ["-p", "hello"]
    assert invocation.env["GEMINI_MODEL"] == "gemini-2.5-pro"
    assert invocation.env["HOME_MARKER"] == "kept"


def test_run_uses_saved_credentials(
    spawned: list[Invocation],
    monkeypatch: pytest.MonkeyPatch,
    write_config: Callable[[dict[str, Any]], Path],
) -> None:
    monkeypatch.delenv("ANTHROPIC_AUTH_TOKEN", raising=False)
    write_config({"auth": {"claude.glm*": {"ANTHROPIC_AUTH_TOKEN": "sk-saved-token"}}})

    assert main(["claude.glm"]) == 0

    [invocation] = spawned
    assert invocation.env["ANTHROPIC_AUTH_TOKEN"] == "sk-saved-token"


def test_run_missing_required_var_does_not_spawn(
    spawned: list[Invocation],
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.delenv("ANTHROPIC_AUTH_TOKEN", raising=False)

    assert main(["claude.glm"]) == 1

    assert spawned == []
    assert "ANTHROPIC_AUTH_TOKEN" in capsys.readouterr().err


def test_run_unknown_family_and_variant(
    spawned: list[Invocation], capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["cursor"]) == 1
    assert "Unknown family" in capsys.readouterr().err

    assert main(["claude.nope"]) == 1
    assert "Unknown variant" in capsys.readouterr().err
    assert spawned == []


def test_run_spawn_failure_exits_1(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def failing_spawn(invocation: Invocation) -> int:
        raise SpawnError(invocation.command, "No such file or directory")

    monkeypatch.setattr(run, "spawn", failing_spawn)

    assert main(["codex"]) == 1
    assert "failed to execute codex" in capsys.readouterr().err


def test_run_propagates_child_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(run, "spawn", lambda invocation: 42)
    assert main(["codex"]) == 42


def test_list_shows_builtin_and_custom(capsys: pytest.CaptureFixture[str]) -> None:
    save_override("gemini.mine", VariantOverride(description="Mine"))

    assert main(["list"]) == 0

    out = capsys.readouterr().out
    assert "claude.aws" in out
    assert "opencode.omoc" in out
    assert "gemini.mine" in out
    assert "custom" in out


def test_auth_without_required_vars(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["auth", "gemini.pro"]) == 0
    assert "doesn't require any API keys" in capsys.readouterr().out


def test_auth_requires_variant(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["auth", "claude"]) == 1
    assert "Variant required" in capsys.readouterr().err


def test_auth_lists_targets(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["auth"]) == 0
    out = capsys.readouterr().out
    assert "claude.glm" in out
    assert "claude.aws" not in out


def test_auth_prompts_and_saves(monkeypatch: pytest.MonkeyPatch) -> None:
    from rich.prompt import Prompt

    monkeypatch.setattr(Prompt, "ask", classmethod(lambda cls, *a, **kw: "  sk-typed  "))

    assert main(["auth", "claude.glm"]) == 0

    assert load_config().auth == {"claude.glm*": {"ANTHROPIC_AUTH_TOKEN": "sk-typed"}}


def test_auth_cancel_saves_nothing(monkeypatch: pytest.MonkeyPatch, config_path: Path) -> None:
    from rich.prompt import Prompt

    def interrupt(cls: type, *args: object, **kwargs: object) -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(Prompt, "ask", classmethod(interrupt))

    assert main(["auth", "claude.glm"]) == 0
    assert not config_path.exists()


def test_setup_remove() -> None:
    save_override("claude.mine", VariantOverride(description="Mine"))

    assert main(["setup", "--remove", "claude.mine"]) == 0
    assert "claude.mine" not in load_config().variants

    assert main(["setup", "--remove", "claude.mine"]) == 1


def test_build_claude_variant_routes_secrets_to_credentials() -> None:
    override, credentials = build_claude_variant(
        "openrouter",
        {"OPENROUTER_API_KEY": "sk-or", "ANTHROPIC_MODEL": "anthropic/claude-sonnet-4"},
    )

    assert credentials == {"OPENROUTER_API_KEY": "sk-or"}
    assert override.env == {
        "ANTHROPIC_BASE_URL": "https://openrouter.ai/api/v1",
        "ANTHROPIC_MODEL": "anthropic/claude-sonnet-4",
    }
    assert override.required_env_vars == ["OPENROUTER_API_KEY"]


def test_build_claude_variant_drops_empty_answers() -> None:
    override, credentials = build_claude_variant("aws", {"ANTHROPIC_MODEL": ""})

    assert credentials == {}
    assert override.env == {"CLAUDE_CODE_USE_BEDROCK": "1"}
    assert override.required_env_vars is None


def test_persist_setup_writes_override_and_credentials() -> None:
    override, credentials = build_claude_variant(
        "anthropic", {"ANTHROPIC_API_KEY": "sk-ant", "ANTHROPIC_MODEL": "m"}
    )

    persist_setup(
        SetupResult(full_id="claude.anthropic", override=override, credentials=credentials)
    )

    config = load_config()
    assert config.variants["claude.anthropic"].env == {"ANTHROPIC_MODEL": "m"}
    assert config.auth == {"claude.anthropic*": {"ANTHROPIC_API_KEY": "sk-ant"}}


def test_persist_setup_without_variant_is_noop(config_path: Path) -> None:
    persist_setup(SetupResult(message="run with: cr codex"))
    assert not config_path.exists()


def test_setup_codex_saves_nothing(config_path: Path) -> None:
    assert run_setup(argparse.Namespace(remove=None, target="codex")) == 0
    assert not config_path.exists()


def test_build_gemini_variant() -> None:
    assert build_gemini_variant("flash").env == {"GEMINI_MODEL": "gemini-2.5-flash"}


def test_debug_prints_command_without_running(
    spawned: list[Invocation],
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("ANTHROPIC_AUTH_TOKEN", "sk-abcdefghijkl")

    assert debug.main(["claude.glm", "-p", "hi"]) == 0

    out = capsys.readouterr().out
    assert "debug mode" in out
    assert "sk-a...ijkl" in out
    assert "sk-abcdefghijkl" not in out
    assert spawned == []


def test_debug_prints_full_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert debug.main(["gemini.pro", "-p", "hi"]) == 0

    out = capsys.readouterr().out
    assert "GEMINI_MODEL=gemini-2.5-pro gemini -p hi" in out


def test_debug_unknown_target() -> None:
    assert debug.main(["cursor"]) == 1
