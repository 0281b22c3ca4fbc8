"""Validation result data structures.

These classes capture the output of validation rules and aggregate
them into reports for CLI display and JSON export.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ssvv_cli.models import SemanticModel


class Severity(Enum):
    """Severity level for validation results.

    ERROR: Stops validation at the first failure
    WARNING: Advisory; collected and reported alongside a successful result
    """

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationResult:
    """Result from a single validation rule.

    Attributes:
        rule_name: Identifier for the rule that produced this result.
        passed: Whether the validation passed.
        severity: How serious a failure is (ERROR blocks, WARNING doesn't).
        message: Human-readable description of the result.
        fix_hint: Optional suggestion for fixing the issue.
    """

    rule_name: str
    passed: bool
    severity: Severity
    message: str
    fix_hint: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        d: dict[str, Any] = {
            "rule_name": self.rule_name,
            "passed": self.passed,
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.fix_hint is not None:
            d["fix_hint"] = self.fix_hint
        return d


@dataclass(frozen=True)
class ValidationWarning:
    """Advisory finding that does not block a successful validation.

    Attributes:
        message: What was found.
        suggestion: Optional rewrite or remediation text.
    """

    message: str
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        d: dict[str, Any] = {"message": self.message}
        if self.suggestion is not None:
            d["suggestion"] = self.suggestion
        return d


@dataclass
class ValidationReport:
    """Outcome of a successful validation.

    Attributes:
        model: The validated semantic model.
        results: Results from every rule that ran, in rule order.
    """

    model: SemanticModel
    results: list[ValidationResult] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationWarning]:
        """Failed WARNING-severity results as warnings, in rule order."""
        return [
            ValidationWarning(message=r.message, suggestion=r.fix_hint)
            for r in self.results
            if not r.passed and r.severity == Severity.WARNING
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict for --format json output."""
        return {
            "model": self.model.to_dict(),
            "warning_count": len(self.warnings),
            "warnings": [w.to_dict() for w in self.warnings],
            "results": [r.to_dict() for r in self.results],
        }
