"""Dotted-path lookup against a render context.

Two resolvers are layered:

- ``resolve_path`` walks a path segment by segment and misses as soon as a
  segment cannot be followed. It never returns a partial result.
- ``resolve_in_scope`` tries the full path first, then treats the first
  segment as a variable bound in the current scope (an outer ``{{#each}}``
  binding) and resolves the remainder against its value.

A miss is signalled with the ``NOT_FOUND`` sentinel so that a stored ``None``
(JSON ``null``) stays distinguishable from an absent key.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final


class _NotFound:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND: Final = _NotFound()


def is_sequence(value: Any) -> bool:
    """True for list-like JSON values (strings are scalars, not sequences)."""
    return isinstance(value, (list, tuple))


def is_indexable(value: Any) -> bool:
    """True for values a path segment can step into."""
    return isinstance(value, Mapping) or is_sequence(value)


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current[segment] if segment in current else NOT_FOUND
    if is_sequence(current):
        # Only canonical non-negative integers address list items ("01" and "-1" do not).
        if not (segment.isascii() and segment.isdigit()) or str(int(segment)) != segment:
            return NOT_FOUND
        index = int(segment)
        return current[index] if index < len(current) else NOT_FOUND
    return NOT_FOUND


def resolve_path(context: Any, path: str) -> Any:
    """Resolve ``path`` against ``context``.

    Example:
        >>> resolve_path({"meta": {"tags": ["a", "b"]}}, "meta.tags.1")
        'b'
        >>> resolve_path({"meta": {}}, "meta.title")
        NOT_FOUND
    """
    current = context
    for segment in path.split("."):
        if not segment:
            return NOT_FOUND
        current = _step(current, segment)
        if current is NOT_FOUND:
            return NOT_FOUND
    return current


def resolve_in_scope(context: Mapping[str, Any], path: str) -> Any:
    """Resolve ``path`` preferring the full context, then the local binding.

    Example:
        >>> scope = {"sections": [], "section": {"items": ["x"]}}
        >>> resolve_in_scope(scope, "section.items")
        ['x']
        >>> resolve_in_scope(scope, "section.")
        {'items': ['x']}
    """
    value = resolve_path(context, path)
    if value is not NOT_FOUND:
        return value

    if "." not in path:
        return NOT_FOUND

    head, tail = path.split(".", 1)
    if head not in context or not is_indexable(context[head]):
        return NOT_FOUND

    bound = context[head]
    if not tail:
        return bound
    return resolve_path(bound, tail)


__all__ = ["NOT_FOUND", "is_sequence", "is_indexable", "resolve_path", "resolve_in_scope"]
