"""Template engine for landingkit.

- resolver: dotted-path lookup with scope fallback
- scanner: tag grammar and block matching
- variables: {{marker | filter}} substitution
- loops: {{#each path as |var|}} expansion
- cleanup: trailing-separator removal
- engine: the pipeline tying them together
"""
from __future__ import annotations

from .base import ContentTransformer, RenderContext, TransformerPipeline
from .cleanup import TrailingSeparatorCleaner, strip_trailing_separators
from .diagnostics import Diagnostic, DiagnosticKind
from .engine import TemplateEngine, render
from .filters import FilterRegistry, default_filters, to_json, to_text
from .loops import LoopExpander, expand_blocks
from .report import RenderReport
from .resolver import NOT_FOUND, resolve_in_scope, resolve_path
from .variables import VariableTransformer, substitute

__all__ = [
    "ContentTransformer",
    "RenderContext",
    "TransformerPipeline",
    "TrailingSeparatorCleaner",
    "strip_trailing_separators",
    "Diagnostic",
    "DiagnosticKind",
    "TemplateEngine",
    "render",
    "FilterRegistry",
    "default_filters",
    "to_json",
    "to_text",
    "LoopExpander",
    "expand_blocks",
    "RenderReport",
    "NOT_FOUND",
    "resolve_in_scope",
    "resolve_path",
    "VariableTransformer",
    "substitute",
]
