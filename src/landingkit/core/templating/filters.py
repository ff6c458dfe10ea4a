"""Marker filters: ``{{ path | json }}``.

Filters run left to right on the resolved value. Only ``json`` ships by
default; extra filters can be registered on a ``FilterRegistry``:

    registry = default_filters()

    @registry.register("upper")
    def upper(value):
        return str(value).upper()
"""
from __future__ import annotations

import json
import math
from typing import Any, Callable, Dict, List, Optional

FilterType = Callable[[Any], Any]


def _plain_numbers(value: Any) -> Any:
    """Integral floats become ints, at any depth (``1.0`` is written ``1``)."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _plain_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain_numbers(item) for item in value]
    return value


def to_json(value: Any) -> str:
    """Serialize ``value`` to compact JSON (non-ASCII kept as-is)."""
    return json.dumps(_plain_numbers(value), ensure_ascii=False, separators=(",", ":"))


def to_text(value: Any) -> str:
    """Render a resolved value as it appears in the output page.

    Scalars use their JSON spelling (``true``, ``null``, ``3``), strings are
    inserted raw, and containers are written as compact JSON.
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, bool):
        return to_json(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, (dict, list, tuple)):
        return to_json(value)
    return str(value)


class FilterRegistry:
    """Registry of named filters."""

    def __init__(self) -> None:
        self._filters: Dict[str, FilterType] = {}

    def register(self, name: str) -> Callable[[FilterType], FilterType]:
        """Decorator to register a filter under ``name``."""
        def decorator(func: FilterType) -> FilterType:
            self._filters[name] = func
            return func
        return decorator

    def add(self, name: str, func: FilterType) -> None:
        self._filters[name] = func

    def get(self, name: str) -> Optional[FilterType]:
        return self._filters.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._filters

    def list_filters(self) -> List[str]:
        return list(self._filters.keys())


def default_filters() -> FilterRegistry:
    """Return a fresh registry holding the built-in filters."""
    registry = FilterRegistry()
    registry.add("json", to_json)
    return registry


__all__ = ["FilterRegistry", "FilterType", "default_filters", "to_json", "to_text"]
