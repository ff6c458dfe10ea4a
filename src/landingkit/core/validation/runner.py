"""Run every validator in order."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Sequence, Tuple

from landingkit.core.config import SiteConfig

from .jsonld import validate_jsonld
from .opengraph import validate_opengraph
from .results import ValidatorResult

Validator = Callable[[SiteConfig], ValidatorResult]

VALIDATORS: Tuple[Validator, ...] = (validate_jsonld, validate_opengraph)


@dataclass
class ValidationSummary:
    results: List[ValidatorResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> List[ValidatorResult]:
        return [r for r in self.results if not r.ok]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "passed": self.passed,
            "total": len(self.results),
            "results": [r.to_dict() for r in self.results],
        }


def run_validators(config: SiteConfig, validators: Sequence[Validator] = VALIDATORS) -> ValidationSummary:
    """Run ``validators`` against the built pages and collect their results."""
    return ValidationSummary(results=[validator(config) for validator in validators])


__all__ = ["VALIDATORS", "ValidationSummary", "run_validators"]
