"""Required environment variable checks and their user-facing hints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from coderouter.models import ResolvedTarget

# Keyed by "variant:ENV_VAR" for variant-specific hints, or "ENV_VAR"
ENV_VAR_HINTS: dict[str, str] = {
    "glm:ANTHROPIC_AUTH_TOKEN": "Get from https://z.ai/manage-apikey/apikey-list",
    "minimax:ANTHROPIC_AUTH_TOKEN": (
        "Get from https://platform.minimax.io/user-center/basic-information/interface-key"
    ),
    "kimi:ANTHROPIC_AUTH_TOKEN": "Get from https://platform.moonshot.cn/console/api-keys",
    "openrouter:ANTHROPIC_AUTH_TOKEN": "Get from https://openrouter.ai/settings/keys",
    "vertex:ANTHROPIC_VERTEX_PROJECT_ID": (
        "Your GCP project ID (run: gcloud config get-value project)"
    ),
    "ANTHROPIC_AUTH_TOKEN": "Get from your provider's API key dashboard",
    "ANTHROPIC_API_KEY": "Get from https://console.anthropic.com/settings/keys",
    "ANTHROPIC_FOUNDRY_RESOURCE": "Your resource name from the Azure AI Foundry portal",
    "ANTHROPIC_VERTEX_PROJECT_ID": "Your GCP project ID",
}


@dataclass(frozen=True)
class MissingEnvVar:
    name: str
    hint: str | None = None


def env_var_hint(variant: str | None, env_var: str) -> str | None:
    if variant:
        specific = ENV_VAR_HINTS.get(f"{variant}:{env_var}")
        if specific:
            return specific
    return ENV_VAR_HINTS.get(env_var)


def find_missing_env_vars(
    target: ResolvedTarget,
    *,
    environ: Mapping[str, str],
    credentials: Mapping[str, str],
) -> list[MissingEnvVar]:
    """List required variables set neither in ``environ`` nor in ``credentials``.

    ``target.env`` is not consulted: required variables name
    secrets supplied from outside the variant. Empty values count as unset.
    """
    return [
        MissingEnvVar(name=key, hint=env_var_hint(target.variant, key))
        for key in target.required_env_vars
        if not environ.get(key) and not credentials.get(key)
    ]
