"""Tests for the built-in preset table."""

from __future__ import annotations

from coderouter.models import Family
from coderouter.presets import FAMILY_INFO, get_preset, list_presets


def test_get_preset_by_enum_and_name() -> None:
    preset = get_preset(Family.claude, "vertex")
    assert preset is not None
    assert preset.env["CLAUDE_CODE_USE_VERTEX"] == "1"
    assert preset.required_env_vars == ["ANTHROPIC_VERTEX_PROJECT_ID"]

    assert get_preset("claude", "vertex") == preset


def test_get_preset_missing_returns_none() -> None:
    assert get_preset(Family.claude, "does-not-exist") is None
    assert get_preset(Family.codex, "anything") is None


def test_get_preset_unknown_family_returns_none() -> None:
    assert get_preset("cursor", "aws") is None
    assert list_presets("cursor") == {}


def test_list_presets_is_a_copy() -> None:
    presets = list_presets(Family.gemini)
    assert list(presets) == ["pro", "flash"]

    presets.pop("pro")
    assert get_preset(Family.gemini, "pro") is not None


def test_opencode_omoc_carries_config_subdir() -> None:
    preset = get_preset(Family.opencode, "omoc")
    assert preset is not None
    assert preset.xdg_config_subdir == "opencode-omoc"
    assert preset.plugins == ["oh-my-opencode"]


def test_every_family_has_a_command() -> None:
    for family in Family:
        assert FAMILY_INFO[family].command == family.value
