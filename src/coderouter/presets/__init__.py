from coderouter.presets.families import FAMILY_INFO, FamilyInfo, get_family_info
from coderouter.presets.registry import get_preset, list_presets

__all__ = [
    "FAMILY_INFO",
    "FamilyInfo",
    "get_family_info",
    "get_preset",
    "list_presets",
]
