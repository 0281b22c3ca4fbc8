"""Validation runner that executes rules against a semantic model."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ssvv_cli.errors import RuleViolationError
from ssvv_cli.models import SemanticModel
from ssvv_cli.validation.results import Severity, ValidationReport, ValidationResult
from ssvv_cli.validation.rules import (
    LegacyInstructionsRule,
    ModelNameRule,
    ModuleInstructionsRule,
    TablesPresentRule,
    TableStructureRule,
    ValidationRule,
)

logger = logging.getLogger(__name__)

# Evaluation order is part of the contract: the first ERROR failure wins
DEFAULT_RULES: tuple[ValidationRule, ...] = (
    ModelNameRule(),
    TablesPresentRule(),
    TableStructureRule(),
    LegacyInstructionsRule(),
    ModuleInstructionsRule(),
)


def validate(
    model: SemanticModel,
    *,
    rules: Sequence[ValidationRule] | None = None,
) -> ValidationReport:
    """Run validation rules against a model, stopping at the first error.

    Args:
        model: Parsed semantic model.
        rules: Optional sequence of rules to run. Defaults to DEFAULT_RULES.

    Returns:
        ValidationReport with the model and results from every rule.

    Raises:
        RuleViolationError: If an ERROR-severity rule fails.
    """
    if rules is None:
        rules = DEFAULT_RULES

    results: list[ValidationResult] = []

    for rule in rules:
        result = rule.check(model)
        logger.debug("Rule %s: passed=%s (%s)", rule.name, result.passed, result.message)
        if not result.passed and result.severity == Severity.ERROR:
            raise RuleViolationError(result.message, rule_name=rule.name)
        results.append(result)

    report = ValidationReport(model=model, results=results)
    logger.debug("Validated model %r with %d warning(s)", model.name, len(report.warnings))
    return report
