"""Deep merge used for layering configuration files.

- Dictionaries merge recursively
- Lists are replaced by the override list
- An override list whose first element is "+" is appended to the base list
"""
from __future__ import annotations

from typing import Any, Dict, List


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Example:
        >>> deep_merge({"site": {"url": "a", "languages": ["en"]}}, {"site": {"url": "b"}})
        {'site': {'url': 'b', 'languages': ['en']}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = merge_arrays(current, value)
        else:
            result[key] = value
    return result


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Replace ``base`` with ``override`` unless ``override`` starts with "+".

    Example:
        >>> merge_arrays(["en"], ["de"])
        ['de']
        >>> merge_arrays(["en"], ["+", "de"])
        ['en', 'de']
    """
    if override and override[0] == "+":
        return [*base, *override[1:]]
    return list(override)


__all__ = ["deep_merge", "merge_arrays"]
