from coderouter.models.targets import (
    Family,
    Preset,
    ResolvedTarget,
    TargetId,
    VariantOverride,
    parse_family,
    parse_target,
)

__all__ = [
    "Family",
    "Preset",
    "ResolvedTarget",
    "TargetId",
    "VariantOverride",
    "parse_family",
    "parse_target",
]
