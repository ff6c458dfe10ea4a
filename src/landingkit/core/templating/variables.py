"""Marker substitution: ``{{path.to.value}}`` and ``{{path | json}}``.

Block tags (``{{#each ...}}`` and ``{{/each}}``) are left for the
LoopExpander. Every other marker is resolved against the current scope:

- resolved: filters are applied in order and the value is inserted
- unresolved: the marker text is kept verbatim

Example:
    Context: {"hero": {"title": "Louder"}, "links": ["a", "b"]}
    Template: <h1>{{hero.title}}</h1><script>var l = {{ links | json }};</script>
    Output:   <h1>Louder</h1><script>var l = ["a","b"];</script>
"""
from __future__ import annotations

import re
from typing import Any, List

from .base import ContentTransformer, RenderContext
from .diagnostics import DiagnosticKind
from .filters import to_text
from .resolver import NOT_FOUND, resolve_in_scope
from .scanner import TAG_PATTERN, is_block_tag


def split_marker(inner: str) -> List[str]:
    """Split marker text into ``[path, *filters]``, dropping empty tokens."""
    return [token.strip() for token in inner.split("|") if token.strip()]


class VariableTransformer(ContentTransformer):
    """Substitute all markers in one left-to-right pass."""

    def transform(self, content: str, context: RenderContext) -> str:
        def replacer(match: re.Match[str]) -> str:
            inner = match.group(1)
            if is_block_tag(inner):
                return match.group(0)

            tokens = split_marker(inner)
            if not tokens:
                return match.group(0)
            path, filters = tokens[0], tokens[1:]

            value = resolve_in_scope(context.variables, path)
            if value is NOT_FOUND:
                context.record_variable(path, resolved=False)
                if not context.is_quiet(path):
                    context.warn(
                        DiagnosticKind.UNRESOLVED_VARIABLE,
                        f"Variable {path} not found in data",
                        path=path,
                    )
                return match.group(0)

            context.record_variable(path, resolved=True)
            return to_text(self._apply_filters(value, filters, inner, context))

        return TAG_PATTERN.sub(replacer, content)

    def _apply_filters(self, value: Any, filters: List[str], inner: str, context: RenderContext) -> Any:
        for name in filters:
            func = context.filters.get(name)
            if func is None:
                context.warn(
                    DiagnosticKind.UNKNOWN_FILTER,
                    f'Unknown filter "{name}" in {inner.strip()}',
                    path=split_marker(inner)[0],
                    filter_name=name,
                )
                continue
            value = func(value)
        return value


def substitute(template: str, context: RenderContext) -> str:
    """Run one substitution pass over ``template``."""
    return VariableTransformer().transform(template, context)


__all__ = ["VariableTransformer", "split_marker", "substitute"]
