"""Validators for built pages (JSON-LD and Open Graph)."""
from __future__ import annotations

from .jsonld import validate_jsonld
from .opengraph import validate_opengraph
from .results import ValidationIssue, ValidatorResult
from .runner import ValidationSummary, run_validators

__all__ = [
    "validate_jsonld",
    "validate_opengraph",
    "ValidationIssue",
    "ValidatorResult",
    "ValidationSummary",
    "run_validators",
]
