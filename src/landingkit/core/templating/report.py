"""Render reporting dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from .diagnostics import Diagnostic, DiagnosticKind


@dataclass
class RenderReport:
    """Report from one template render.

    Contains what was resolved, what was left unresolved, how many blocks
    were expanded, and every diagnostic emitted along the way.
    """

    name: str
    timestamp: datetime = field(default_factory=datetime.now)
    template_path: Optional[Path] = None

    variables_substituted: Set[str] = field(default_factory=set)
    variables_missing: Set[str] = field(default_factory=set)
    blocks_expanded: int = 0
    items_rendered: int = 0

    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """Check if any diagnostic was emitted."""
        return bool(self.diagnostics)

    @property
    def warnings(self) -> List[str]:
        """Diagnostic messages, deduplicated, in first-seen order."""
        return list(dict.fromkeys(d.message for d in self.diagnostics))

    def by_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is kind]

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "name": self.name,
            "timestamp": self.timestamp.isoformat(),
            "template_path": str(self.template_path) if self.template_path else None,
            "variables_substituted": sorted(self.variables_substituted),
            "variables_missing": sorted(self.variables_missing),
            "blocks_expanded": self.blocks_expanded,
            "items_rendered": self.items_rendered,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


__all__ = ["RenderReport"]
