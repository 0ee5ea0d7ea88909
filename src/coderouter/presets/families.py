"""Per-family metadata for the wrapped CLIs."""

from __future__ import annotations

from dataclasses import dataclass, field

from coderouter.models import Family


@dataclass(frozen=True)
class FamilyInfo:
    command: str
    description: str
    # Ambient env vars worth showing before launch when they are set
    passthrough_vars: tuple[str, ...] = field(default_factory=tuple)


FAMILY_INFO: dict[Family, FamilyInfo] = {
    Family.claude: FamilyInfo(
        command="claude",
        description="Claude Code CLI",
        passthrough_vars=(
            "AWS_BEARER_TOKEN_BEDROCK",
            "AWS_ACCESS_KEY_ID",
            "AWS_SECRET_ACCESS_KEY",
            "AWS_SESSION_TOKEN",
            "AWS_PROFILE",
            "ANTHROPIC_API_KEY",
            "ANTHROPIC_AUTH_TOKEN",
            "ANTHROPIC_FOUNDRY_RESOURCE",
            "ANTHROPIC_FOUNDRY_API_KEY",
        ),
    ),
    Family.opencode: FamilyInfo(command="opencode", description="OpenCode CLI"),
    Family.codex: FamilyInfo(
        command="codex",
        description="OpenAI Codex CLI",
        passthrough_vars=("OPENAI_API_KEY",),
    ),
    Family.gemini: FamilyInfo(
        command="gemini",
        description="Google Gemini CLI",
        passthrough_vars=("GEMINI_API_KEY",),
    ),
}


def get_family_info(family: Family) -> FamilyInfo:
    return FAMILY_INFO[family]
