"""Base class for content transformers in the TemplateEngine.

The TemplateEngine runs a pipeline of transformers over the template text.
Each transformer handles one category of template processing:

1. BLOCKS   - {{#each path as |var|}}...{{/each}}
2. MARKERS  - {{path.to.value}}, {{path | json}}
3. CLEANUP  - trailing separators before a closing ``]``
"""
from __future__ import annotations

import dataclasses
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Set

from .diagnostics import Diagnostic, DiagnosticKind
from .filters import FilterRegistry, default_filters

logger = logging.getLogger("landingkit.core.templating")

DEFAULT_QUIET_VARIABLES = ("item", "feature", "section")
DEFAULT_QUIET_PREFIXES = ("seo.structured_data.",)


@dataclass
class RenderContext:
    """Context provided to transformers during processing.

    Contains:
    - The variables in scope (the JSON context, plus loop bindings)
    - Which unresolved paths stay quiet
    - The filter registry
    - A diagnostics sink and counters for reporting

    ``scoped()`` derives a child context for one loop element. The child gets
    its own variables but shares the sink and counters with its parent.
    """

    variables: Dict[str, Any] = field(default_factory=dict)
    quiet_variables: Sequence[str] = DEFAULT_QUIET_VARIABLES
    quiet_prefixes: Sequence[str] = DEFAULT_QUIET_PREFIXES
    filters: FilterRegistry = field(default_factory=default_filters)

    # Tracking for reports
    diagnostics: List[Diagnostic] = field(default_factory=list)
    variables_substituted: Set[str] = field(default_factory=set)
    variables_missing: Set[str] = field(default_factory=set)
    loop_stats: Dict[str, int] = field(default_factory=lambda: {"blocks": 0, "items": 0})

    def scoped(self, name: str, value: Any) -> "RenderContext":
        """Return a child context with ``name`` bound to ``value`` (shadowing)."""
        return dataclasses.replace(self, variables={**self.variables, name: value})

    def is_quiet(self, path: str) -> bool:
        """Whether a miss on ``path`` is expected and should not be reported."""
        if path in self.quiet_variables:
            return True
        return any(path.startswith(prefix) for prefix in self.quiet_prefixes)

    def warn(
        self,
        kind: DiagnosticKind,
        message: str,
        *,
        path: str = "",
        filter_name: Optional[str] = None,
    ) -> None:
        """Record a diagnostic and log it.

        A marker left unresolved inside a block is seen again by the final
        pass over the whole page; identical diagnostics are recorded once.
        """
        diagnostic = Diagnostic(kind=kind, message=message, path=path, filter=filter_name)
        if diagnostic in self.diagnostics:
            return
        self.diagnostics.append(diagnostic)
        logger.warning("%s", message)

    def record_variable(self, name: str, resolved: bool) -> None:
        """Record variable resolution result."""
        if resolved:
            self.variables_substituted.add(name)
        else:
            self.variables_missing.add(name)

    def record_loop(self, items: int) -> None:
        """Record that a block was expanded over ``items`` elements."""
        self.loop_stats["blocks"] += 1
        self.loop_stats["items"] += items


class ContentTransformer(ABC):
    """Abstract base class for content transformers.

    Transformers are stateless and receive context through ``transform()``.
    """

    @abstractmethod
    def transform(self, content: str, context: RenderContext) -> str:
        """Transform content using this transformer's rules."""
        ...

    def get_name(self) -> str:
        """Get transformer name for logging/debugging."""
        return self.__class__.__name__


class TransformerPipeline:
    """Execute a sequence of transformers on content.

    Example:
        pipeline = TransformerPipeline([LoopExpander(), VariableTransformer()])
        result = pipeline.execute(content, context)
    """

    def __init__(self, transformers: List[ContentTransformer]) -> None:
        self.transformers = transformers

    def execute(self, content: str, context: RenderContext) -> str:
        result = content
        for transformer in self.transformers:
            logger.debug("Running %s", transformer.get_name())
            result = transformer.transform(result, context)
        return result


__all__ = [
    "DEFAULT_QUIET_PREFIXES",
    "DEFAULT_QUIET_VARIABLES",
    "ContentTransformer",
    "RenderContext",
    "TransformerPipeline",
]
