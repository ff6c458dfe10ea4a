"""Template engine for landing pages.

Renders an HTML template against a JSON-like context through a three-step
pipeline:

1. BLOCKS   - {{#each path as |var|}}...{{/each}}, outermost first, nested
              blocks expanded recursively with their element's scope
2. MARKERS  - remaining top-level {{path | filter}} markers
3. CLEANUP  - trailing commas before a closing ``]``

Rendering is a pure function of (template, context). Problems in the data
never raise; they are returned as diagnostics in the ``RenderReport``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from .base import DEFAULT_QUIET_PREFIXES, DEFAULT_QUIET_VARIABLES, RenderContext, TransformerPipeline
from .cleanup import TrailingSeparatorCleaner
from .filters import FilterRegistry, default_filters
from .loops import LoopExpander
from .report import RenderReport
from .variables import VariableTransformer


class TemplateEngine:
    """Three-step template transformation engine.

    Usage:
        engine = TemplateEngine()
        html, report = engine.render(template, data, name="en")
        for diagnostic in report.diagnostics:
            print(diagnostic.kind, diagnostic.message)
    """

    def __init__(
        self,
        *,
        quiet_variables: Optional[Iterable[str]] = None,
        quiet_prefixes: Optional[Iterable[str]] = None,
        filters: Optional[FilterRegistry] = None,
    ) -> None:
        """Initialize the template engine.

        Args:
            quiet_variables: Paths whose misses are not reported
                (default: item, feature, section)
            quiet_prefixes: Path prefixes whose misses are not reported
                (default: seo.structured_data.)
            filters: Filter registry (default: built-in ``json`` only)
        """
        self.quiet_variables = tuple(DEFAULT_QUIET_VARIABLES if quiet_variables is None else quiet_variables)
        self.quiet_prefixes = tuple(DEFAULT_QUIET_PREFIXES if quiet_prefixes is None else quiet_prefixes)
        self.filters = filters or default_filters()
        self.pipeline = self._build_pipeline()

    def _build_pipeline(self) -> TransformerPipeline:
        return TransformerPipeline([
            LoopExpander(),
            VariableTransformer(),
            TrailingSeparatorCleaner(),
        ])

    def render(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        name: str = "template",
        template_path: Optional[Path] = None,
    ) -> tuple[str, RenderReport]:
        """Render ``template`` against ``context``.

        Args:
            template: Template text
            context: Already-parsed JSON object; never mutated
            name: Label used in the report (e.g. the language code)
            template_path: Source file, recorded in the report

        Returns:
            Tuple of (rendered text, report)
        """
        render_context = RenderContext(
            variables=dict(context),
            quiet_variables=self.quiet_variables,
            quiet_prefixes=self.quiet_prefixes,
            filters=self.filters,
        )

        result = self.pipeline.execute(template, render_context)

        report = RenderReport(
            name=name,
            template_path=template_path,
            variables_substituted=render_context.variables_substituted,
            variables_missing=render_context.variables_missing,
            blocks_expanded=render_context.loop_stats["blocks"],
            items_rendered=render_context.loop_stats["items"],
            diagnostics=list(render_context.diagnostics),
        )
        return result, report


def render(template: str, context: Mapping[str, Any]) -> str:
    """Render with default settings and return only the text."""
    text, _ = TemplateEngine().render(template, context)
    return text


__all__ = ["TemplateEngine", "render"]
