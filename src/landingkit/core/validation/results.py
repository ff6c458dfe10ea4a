"""Validator result dataclasses."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationIssue:
    """One problem found in a built page.

    Attributes:
        message: Human-readable description
        file: Page (or asset) the issue belongs to
        lang: Language of the page
        block: 1-based JSON-LD block number
        position: Character offset of a JSON parse error inside the block
        excerpt: Text around ``position``
    """

    message: str
    file: Optional[str] = None
    lang: Optional[str] = None
    block: Optional[int] = None
    position: Optional[int] = None
    excerpt: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if v is not None}

    def __str__(self) -> str:
        where = " ".join(part for part in (
            f"{self.lang}:" if self.lang else "",
            self.file or "",
            f"block #{self.block}" if self.block else "",
        ) if part)
        return f"{where}: {self.message}" if where else self.message


@dataclass
class ValidatorResult:
    """Outcome of one validator over every built page."""

    name: str
    issues: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def add_issue(self, message: str, **where: Any) -> ValidationIssue:
        issue = ValidationIssue(message=message, **where)
        self.issues.append(issue)
        return issue

    def add_warning(self, message: str, **where: Any) -> ValidationIssue:
        warning = ValidationIssue(message=message, **where)
        self.warnings.append(warning)
        return warning

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "ok": self.ok,
            "issues": [i.to_dict() for i in self.issues],
            "warnings": [w.to_dict() for w in self.warnings],
            "notes": list(self.notes),
        }


__all__ = ["ValidationIssue", "ValidatorResult"]
