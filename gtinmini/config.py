from __future__ import annotations

from typing import Any

DEFAULT_CFG: dict[str, Any] = {
    "strip_separators": False,
    "auto_fix_gtin": False,
}


def resolve_cfg(overrides: dict[str, Any] | None, defaults: dict[str, Any] = DEFAULT_CFG) -> dict[str, Any]:
    """Merge known keys from `overrides` over a copy of `defaults`; unknown keys are ignored."""
    merged = defaults.copy()
    if overrides:
        merged.update({k: overrides[k] for k in overrides if k in defaults})
    return merged
