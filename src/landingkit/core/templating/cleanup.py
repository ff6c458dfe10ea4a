"""Trailing-separator cleanup.

Each element of an ``{{#each}}`` block expands independently, so a body like
``{...},`` leaves a dangling comma after the last element of a JSON-LD list:

    "step": [
        {"name": "a"},
        {"name": "b"},
    ]

Two rules apply, in order. A comma followed by a line break before the
closing ``]`` is dropped and the whitespace is kept, so the bracket stays on
its own line. A comma with only spaces or tabs before ``]`` on the same line
is dropped together with those spaces.
"""
from __future__ import annotations

import re

from .base import ContentTransformer, RenderContext

MULTILINE_SEPARATOR_PATTERN = re.compile(r",(\s*\n\s*\])")
SAME_LINE_SEPARATOR_PATTERN = re.compile(r",[ \t]*\]")


def strip_trailing_separators(text: str) -> str:
    """Drop commas that immediately precede a closing bracket.

    Example:
        >>> strip_trailing_separators("[a,b, ]")
        '[a,b]'
    """
    text = MULTILINE_SEPARATOR_PATTERN.sub(r"\1", text)
    return SAME_LINE_SEPARATOR_PATTERN.sub("]", text)


class TrailingSeparatorCleaner(ContentTransformer):
    """Final pipeline step applying ``strip_trailing_separators`` globally."""

    def transform(self, content: str, context: RenderContext) -> str:
        return strip_trailing_separators(content)


__all__ = [
    "MULTILINE_SEPARATOR_PATTERN",
    "SAME_LINE_SEPARATOR_PATTERN",
    "TrailingSeparatorCleaner",
    "strip_trailing_separators",
]
