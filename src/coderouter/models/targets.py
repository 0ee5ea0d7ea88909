"""Target, preset and variant models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Family(str, Enum):
    """Wrapped assistant CLIs. The value doubles as the executable name."""

    claude = "claude"
    opencode = "opencode"
    codex = "codex"
    gemini = "gemini"


class TargetId(BaseModel):
    """A parsed ``family[.variant[.sub...]]`` identifier."""

    model_config = ConfigDict(frozen=True)

    family: Family
    variant: str | None = None

    @property
    def full_id(self) -> str:
        if self.variant:
            return f"{self.family.value}.{self.variant}"
        return self.family.value

    def __str__(self) -> str:
        return self.full_id


def parse_family(value: str) -> Family | None:
    try:
        return Family(value)
    except ValueError:
        return None


def parse_target(value: str) -> TargetId | None:
    """Split a target identifier on its first dot.

    Returns None when the family is not supported. Everything after the
    first dot is the variant path and may itself contain dots.
    """
    family_name, _, variant = value.partition(".")
    family = parse_family(family_name)
    if family is None:
        return None
    return TargetId(family=family, variant=variant or None)


class Preset(BaseModel):
    """A variant definition: compiled-in, or the result of resolving an override."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    env: dict[str, str] = Field(default_factory=dict)
    default_args: list[str] = Field(default_factory=list, alias="defaultArgs")
    required_env_vars: list[str] = Field(default_factory=list, alias="requiredEnvVars")
    # opencode only: config directory name under the coderouter config dir
    xdg_config_subdir: str | None = Field(default=None, alias="xdgConfigSubdir")
    plugins: list[str] = Field(default_factory=list)


class VariantOverride(BaseModel):
    """A user-defined variant persisted in the config file.

    With ``extends`` set to a built-in preset id (e.g. ``claude.aws``) the
    override is layered on top of that preset; without it the override
    stands alone.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    extends: str | None = None
    description: str | None = None
    env: dict[str, str] | None = None
    default_args: list[str] | None = Field(default=None, alias="defaultArgs")
    required_env_vars: list[str] | None = Field(default=None, alias="requiredEnvVars")


class ResolvedTarget(BaseModel):
    """Everything needed to launch a target. Never persisted."""

    family: Family
    variant: str | None = None
    command: str
    env: dict[str, str] = Field(default_factory=dict)
    default_args: list[str] = Field(default_factory=list)
    required_env_vars: list[str] = Field(default_factory=list)

    @property
    def full_id(self) -> str:
        return TargetId(family=self.family, variant=self.variant).full_id
