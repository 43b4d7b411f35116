"""Logic for layering a user configuration over the defaults."""

from collections.abc import Collection
from typing import Any

# Lists under these keys accumulate instead of replacing the defaults.
ADDITIVE_KEYS = frozenset({"exclude_imports"})


def _merge_value(key: str, old: Any, new: Any, additive: Collection[str]) -> Any:
    if isinstance(old, dict) and isinstance(new, dict):
        return deep_merge(old, new, additive)
    if key in additive and isinstance(old, list) and isinstance(new, list):
        return sorted({*old, *new})
    return new


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    additive: Collection[str] = ADDITIVE_KEYS,
) -> dict[str, Any]:
    """Return base with update layered on top, leaving both untouched.

    Nested mappings merge key by key. Scalars and lists from update win,
    except lists under an additive key, which become the sorted union.
    """
    merged = dict(base)
    for key, value in update.items():
        if key in merged:
            merged[key] = _merge_value(key, merged[key], value, additive)
        else:
            merged[key] = value
    return merged
