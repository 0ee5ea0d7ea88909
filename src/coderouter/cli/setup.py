"""Interactive setup wizard.

Answers are collected first and persisted in one pass at the end, so an
interrupted wizard leaves the config file untouched.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from coderouter.config import delete_override, save_credential, save_override
from coderouter.models import Family, TargetId, VariantOverride, parse_target
from coderouter.presets import get_family_info


@dataclass(frozen=True)
class ProviderField:
    key: str
    label: str
    default: str = ""
    secret: bool = False


@dataclass(frozen=True)
class ProviderTemplate:
    name: str
    fields: tuple[ProviderField, ...]
    static_env: dict[str, str] = field(default_factory=dict)


CLAUDE_PROVIDERS: dict[str, ProviderTemplate] = {
    "aws": ProviderTemplate(
        name="AWS Bedrock",
        fields=(
            ProviderField(
                "ANTHROPIC_MODEL", "Model", "us.anthropic.claude-sonnet-4-20250514-v1:0"
            ),
            ProviderField(
                "ANTHROPIC_SMALL_FAST_MODEL",
                "Small/Fast Model",
                "us.anthropic.claude-haiku-4-5-20251001-v1:0",
            ),
        ),
        static_env={"CLAUDE_CODE_USE_BEDROCK": "1"},
    ),
    "vertex": ProviderTemplate(
        name="Google Cloud Vertex AI",
        fields=(
            ProviderField("CLOUD_ML_REGION", "Region", "us-east5"),
            ProviderField("ANTHROPIC_MODEL", "Model", "claude-sonnet-4@20250514"),
            ProviderField(
                "ANTHROPIC_SMALL_FAST_MODEL", "Small/Fast Model", "claude-haiku-4@20250514"
            ),
        ),
        static_env={"CLAUDE_CODE_USE_VERTEX": "1"},
    ),
    "anthropic": ProviderTemplate(
        name="Anthropic Direct",
        fields=(
            ProviderField("ANTHROPIC_API_KEY", "API Key", secret=True),
            ProviderField("ANTHROPIC_MODEL", "Model", "claude-sonnet-4-20250514"),
        ),
    ),
    "glm": ProviderTemplate(
        name="Z.AI (GLM)",
        fields=(
            ProviderField("ANTHROPIC_API_KEY", "API Key", secret=True),
            ProviderField("ANTHROPIC_MODEL", "Model", "glm-4-plus"),
        ),
        static_env={"ANTHROPIC_BASE_URL": "https://open.z.ai/api/v1"},
    ),
    "openrouter": ProviderTemplate(
        name="OpenRouter",
        fields=(
            ProviderField("OPENROUTER_API_KEY", "API Key", secret=True),
            ProviderField("ANTHROPIC_MODEL", "Model", "anthropic/claude-sonnet-4"),
        ),
        static_env={"ANTHROPIC_BASE_URL": "https://openrouter.ai/api/v1"},
    ),
}

GEMINI_MODELS: dict[str, str] = {
    "pro": "gemini-2.5-pro",
    "flash": "gemini-2.5-flash",
}


@dataclass
class SetupResult:
    """What the wizard decided to persist."""

    full_id: str | None = None
    override: VariantOverride | None = None
    credentials: dict[str, str] = field(default_factory=dict)
    message: str = ""


def configure_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("setup", help="Configure a family interactively")
    parser.set_defaults(func=run_setup)
    parser.add_argument(
        "target",
        nargs="?",
        help="family or family.variant to preselect (e.g. claude.vertex)",
    )
    parser.add_argument(
        "--remove",
        metavar="TARGET",
        help="Delete the user-defined variant TARGET instead of running the wizard",
    )


def build_claude_variant(
    provider: str, answers: dict[str, str]
) -> tuple[VariantOverride, dict[str, str]]:
    """Split wizard answers into a stored variant and saved credentials.

    Secret fields become credentials and are listed as required variables;
    everything else becomes variant env. Empty answers are dropped.
    """
    template = CLAUDE_PROVIDERS[provider]
    env = dict(template.static_env)
    credentials: dict[str, str] = {}
    for provider_field in template.fields:
        value = answers.get(provider_field.key, "").strip()
        if not value:
            continue
        if provider_field.secret:
            credentials[provider_field.key] = value
        else:
            env[provider_field.key] = value

    required = [f.key for f in template.fields if f.secret]
    override = VariantOverride(
        description=template.name,
        env=env,
        required_env_vars=required or None,
    )
    return override, credentials


def build_gemini_variant(model: str) -> VariantOverride:
    return VariantOverride(
        description=f"Gemini {model}",
        env={"GEMINI_MODEL": GEMINI_MODELS[model]},
    )


def _setup_claude(suggested: str | None) -> SetupResult:
    from rich.prompt import Prompt

    from coderouter.cli.ui import console

    for key, template in CLAUDE_PROVIDERS.items():
        console.print(f"  [target]{key:<12}[/target] {template.name}", highlight=False)
    provider = Prompt.ask(
        "Select provider",
        choices=list(CLAUDE_PROVIDERS),
        default=suggested if suggested in CLAUDE_PROVIDERS else "aws",
        console=console,
    )

    answers: dict[str, str] = {}
    for provider_field in CLAUDE_PROVIDERS[provider].fields:
        extra = {"default": provider_field.default} if provider_field.default else {}
        answers[provider_field.key] = Prompt.ask(
            provider_field.label,
            password=provider_field.secret,
            console=console,
            **extra,
        )

    override, credentials = build_claude_variant(provider, answers)
    full_id = f"{Family.claude.value}.{provider}"
    return SetupResult(
        full_id=full_id,
        override=override,
        credentials=credentials,
        message=f"saved! run with: cr {full_id}",
    )


def _setup_opencode() -> SetupResult:
    from rich.prompt import Confirm

    from coderouter.cli.ui import console, print_note

    print_note(
        "opencode handles provider switching internally.\n"
        "coderouter manages vanilla vs oh-my-opencode.\n\n"
        "  cr opencode      -> vanilla opencode\n"
        "  cr opencode.omoc -> oh-my-opencode"
    )
    has_omoc = Confirm.ask("Do you have oh-my-opencode installed?", default=False, console=console)
    if not has_omoc:
        print_note("Install oh-my-opencode:\n  bunx oh-my-opencode install")
    return SetupResult(message="run with: cr opencode or cr opencode.omoc")


def _setup_codex() -> SetupResult:
    from coderouter.cli.ui import print_note

    print_note("codex uses your ChatGPT login or OPENAI_API_KEY.\nNo additional setup needed.")
    return SetupResult(message="run with: cr codex")


def _setup_gemini(suggested: str | None) -> SetupResult:
    from rich.prompt import Prompt

    from coderouter.cli.ui import console

    console.print("  [target]default[/target]  uses GEMINI_MODEL or the gemini default")
    for key, model in GEMINI_MODELS.items():
        console.print(f"  [target]{key:<8}[/target] {model}", highlight=False)
    choice = Prompt.ask(
        "Select model",
        choices=["default", *GEMINI_MODELS],
        default=suggested if suggested in GEMINI_MODELS else "default",
        console=console,
    )
    if choice == "default":
        return SetupResult(message="run with: cr gemini")

    full_id = f"{Family.gemini.value}.{choice}"
    return SetupResult(
        full_id=full_id,
        override=build_gemini_variant(choice),
        message=f"saved! run with: cr {full_id}",
    )


def _select_family() -> Family:
    from rich.prompt import Prompt

    from coderouter.cli.ui import console

    for family in Family:
        console.print(
            f"  [target]{family.value:<10}[/target] {get_family_info(family).description}",
            highlight=False,
        )
    return Family(
        Prompt.ask(
            "Select family",
            choices=[family.value for family in Family],
            default=Family.claude.value,
            console=console,
        )
    )


def run_wizard(preselected: TargetId | None = None) -> SetupResult:
    family = preselected.family if preselected else _select_family()
    suggested = preselected.variant if preselected else None

    if family is Family.claude:
        return _setup_claude(suggested)
    if family is Family.opencode:
        return _setup_opencode()
    if family is Family.codex:
        return _setup_codex()
    return _setup_gemini(suggested)


def persist_setup(result: SetupResult) -> None:
    if result.full_id is None or result.override is None:
        return
    save_override(result.full_id, result.override)
    for env_var, value in result.credentials.items():
        save_credential(result.full_id, env_var, value)


def run_setup(args: argparse.Namespace) -> int:
    from coderouter.cli.ui import console, print_error, print_success

    if args.remove:
        if delete_override(args.remove):
            print_success(f"removed [target]{args.remove}[/target]")
            return 0
        print_error(
            "Not found",
            f"No user-defined variant named {args.remove}",
            tip="Built-in variants cannot be removed. Run `cr list` to see custom ones.",
        )
        return 1

    preselected = None
    if args.target:
        preselected = parse_target(args.target)
        if preselected is None:
            print_error("Unknown family", args.target)
            return 1

    console.print("[heading]coderouter setup[/heading]")
    try:
        result = run_wizard(preselected)
    except (KeyboardInterrupt, EOFError):
        console.print()
        console.print("[warning]setup cancelled[/warning]")
        return 0

    persist_setup(result)
    print_success(result.message)
    return 0
