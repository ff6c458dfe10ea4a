"""Structured warnings emitted while rendering a template.

Rendering never fails on bad data. Misses, type mismatches and unknown
filters become ``Diagnostic`` records instead; callers decide whether any of
them should fail a build.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class DiagnosticKind(str, Enum):
    UNKNOWN_FILTER = "unknown-filter"
    UNRESOLVED_VARIABLE = "unresolved-variable"
    NOT_A_SEQUENCE = "not-a-sequence"
    BLOCK_PATH_MISSING = "block-path-missing"


@dataclass(frozen=True)
class Diagnostic:
    """One advisory message from the engine.

    Attributes:
        kind: Diagnostic category
        message: Human-readable message
        path: Path expression involved (marker path or block collection path)
        filter: Filter name for ``UNKNOWN_FILTER``
    """

    kind: DiagnosticKind
    message: str
    path: str = ""
    filter: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind.value, "message": self.message, "path": self.path}
        if self.filter is not None:
            data["filter"] = self.filter
        return data

    def __str__(self) -> str:
        return self.message


__all__ = ["Diagnostic", "DiagnosticKind"]
