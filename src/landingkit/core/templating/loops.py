"""Loop transformer: ``{{#each path as |var|}}...{{/each}}``.

For every element of the sequence at ``path`` the body is rendered in a
scope where ``var`` is bound to the element (shadowing any outer key of the
same name). Nested blocks inside the body are expanded first, with the
element's scope, then the body's markers are substituted.

Example:
    Context: {"sections": [{"items": ["x", "y"]}, {"items": ["z"]}]}
    Template: {{#each sections as |section|}}{{#each section.items as |item|}}{{item}}{{/each}}{{/each}}
    Output:   xyz

A path that resolves to something other than a sequence renders the block
as empty text.
"""
from __future__ import annotations

from typing import Any, List

from .base import ContentTransformer, RenderContext
from .cleanup import strip_trailing_separators
from .diagnostics import DiagnosticKind
from .resolver import NOT_FOUND, is_sequence, resolve_in_scope
from .scanner import Block, find_first_block
from .variables import substitute


class LoopExpander(ContentTransformer):
    """Expand every top-level block, recursing into nested ones."""

    def transform(self, content: str, context: RenderContext) -> str:
        return expand_blocks(content, context)


def expand_blocks(template: str, context: RenderContext) -> str:
    """Replace each top-level block in ``template`` with its expansion.

    Scanning resumes after the inserted expansion, so text produced by data
    values is never picked up as a new block.
    """
    result = template
    pos = 0
    while True:
        block = find_first_block(result, pos)
        if block is None:
            break
        expanded = _expand_block(block, context)
        result = result[:block.start] + expanded + result[block.end:]
        pos = block.start + len(expanded)
    return result


def _expand_block(block: Block, context: RenderContext) -> str:
    collection = resolve_in_scope(context.variables, block.path)

    if not is_sequence(collection):
        _report_bad_collection(block.path, collection, context)
        return ""

    parts: List[str] = []
    for element in collection:
        scope = context.scoped(block.var, element)
        body = expand_blocks(block.body, scope)
        parts.append(substitute(body, scope))

    context.record_loop(len(collection))
    return strip_trailing_separators("".join(parts))


def _report_bad_collection(path: str, value: Any, context: RenderContext) -> None:
    if value is not NOT_FOUND and value is not None:
        context.warn(
            DiagnosticKind.NOT_A_SEQUENCE,
            f"{path} is not an array (got {_type_name(value)})",
            path=path,
        )
    elif "." not in path:
        # Dotted paths often point into optional nested sections; only bare names are reported.
        context.warn(
            DiagnosticKind.BLOCK_PATH_MISSING,
            f"{path} is not an array or not found",
            path=path,
        )


def _type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


__all__ = ["LoopExpander", "expand_blocks"]
