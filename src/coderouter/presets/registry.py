"""Built-in presets, keyed by family and variant name.

Presets are compiled in and never change at runtime. User overrides are
layered on top of them by the resolver, never written into this table.
"""

from __future__ import annotations

from coderouter.models import Family, Preset, parse_family

_PRESETS: dict[Family, dict[str, Preset]] = {
    Family.claude: {
        # AWS SDK handles auth via ~/.aws/credentials, env vars or IAM roles
        "aws": Preset(
            name="aws",
            description="AWS Bedrock with Opus",
            env={
                "CLAUDE_CODE_USE_BEDROCK": "1",
                "AWS_REGION": "us-west-1",
                "ANTHROPIC_MODEL": "global.anthropic.claude-opus-4-5-20251101-v1:0",
                "ANTHROPIC_SMALL_FAST_MODEL": "us.anthropic.claude-haiku-4-5-20251001-v1:0",
            },
        ),
        "vertex": Preset(
            name="vertex",
            description="Google Cloud Vertex AI (Opus)",
            env={
                "CLAUDE_CODE_USE_VERTEX": "1",
                "CLOUD_ML_REGION": "global",
                "ANTHROPIC_MODEL": "claude-opus-4-5@20251101",
                "ANTHROPIC_SMALL_FAST_MODEL": "claude-haiku-4-5@20251001",
            },
            required_env_vars=["ANTHROPIC_VERTEX_PROJECT_ID"],
        ),
        "glm": Preset(
            name="glm",
            description="Z.AI GLM models (GLM-4.7)",
            env={
                "ANTHROPIC_BASE_URL": "https://api.z.ai/api/anthropic",
                "ANTHROPIC_DEFAULT_OPUS_MODEL": "glm-4.7",
                "ANTHROPIC_DEFAULT_SONNET_MODEL": "glm-4.7",
                "ANTHROPIC_DEFAULT_HAIKU_MODEL": "glm-4.5-air",
            },
            required_env_vars=["ANTHROPIC_AUTH_TOKEN"],
        ),
        "minimax": Preset(
            name="minimax",
            description="MiniMax M2.1",
            env={
                "ANTHROPIC_BASE_URL": "https://api.minimax.io/anthropic",
                "ANTHROPIC_MODEL": "MiniMax-M2.1",
                "ANTHROPIC_SMALL_FAST_MODEL": "MiniMax-M2.1",
                "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC": "1",
                "API_TIMEOUT_MS": "3000000",
            },
            required_env_vars=["ANTHROPIC_AUTH_TOKEN"],
        ),
        "openrouter": Preset(
            name="openrouter",
            description="OpenRouter API",
            env={"ANTHROPIC_BASE_URL": "https://openrouter.ai/api/v1"},
            required_env_vars=["ANTHROPIC_API_KEY"],
        ),
        # Auth via ANTHROPIC_FOUNDRY_API_KEY or `az login`
        "azure": Preset(
            name="azure",
            description="Microsoft Azure Foundry",
            env={"CLAUDE_CODE_USE_FOUNDRY": "1"},
            required_env_vars=["ANTHROPIC_FOUNDRY_RESOURCE"],
        ),
        "kimi": Preset(
            name="kimi",
            description="Moonshot Kimi K2",
            env={
                "ANTHROPIC_BASE_URL": "https://api.moonshot.ai/anthropic",
                "ANTHROPIC_MODEL": "kimi-k2-thinking-turbo",
                "ANTHROPIC_DEFAULT_OPUS_MODEL": "kimi-k2-thinking-turbo",
                "ANTHROPIC_DEFAULT_SONNET_MODEL": "kimi-k2-thinking-turbo",
                "ANTHROPIC_DEFAULT_HAIKU_MODEL": "kimi-k2-thinking-turbo",
                "CLAUDE_CODE_SUBAGENT_MODEL": "kimi-k2-thinking-turbo",
            },
            required_env_vars=["ANTHROPIC_AUTH_TOKEN"],
        ),
    },
    Family.opencode: {
        "omoc": Preset(
            name="omoc",
            description="oh-my-opencode",
            xdg_config_subdir="opencode-omoc",
            plugins=["oh-my-opencode"],
        ),
    },
    Family.codex: {},
    Family.gemini: {
        "pro": Preset(
            name="pro",
            description="Gemini Pro model",
            env={"GEMINI_MODEL": "gemini-2.5-pro"},
        ),
        "flash": Preset(
            name="flash",
            description="Gemini Flash model",
            env={"GEMINI_MODEL": "gemini-2.5-flash"},
        ),
    },
}


def _as_family(family: Family | str) -> Family | None:
    if isinstance(family, Family):
        return family
    return parse_family(family)


def get_preset(family: Family | str, variant_name: str) -> Preset | None:
    """Look up a built-in preset.

    Args:
        family: Family enum member or its name. Unknown names are not an error.
        variant_name: Variant name within the family.

    Returns:
        The compiled-in preset, or None if there is no such preset.
    """
    resolved_family = _as_family(family)
    if resolved_family is None:
        return None
    return _PRESETS.get(resolved_family, {}).get(variant_name)


def list_presets(family: Family | str) -> dict[str, Preset]:
    """Return the built-in presets of a family, in declaration order."""
    resolved_family = _as_family(family)
    if resolved_family is None:
        return {}
    return dict(_PRESETS.get(resolved_family, {}))
