"""Validation framework for semantic models.

This module provides the public API for validating models:
- validate(): Run validation rules against a parsed model
- ValidationReport: The validated model plus advisory warnings
- ValidationRule: Base class for custom rules
"""

from ssvv_cli.validation.results import (
    Severity,
    ValidationReport,
    ValidationResult,
    ValidationWarning,
)
from ssvv_cli.validation.rules import ValidationRule, migration_suggestion
from ssvv_cli.validation.runner import DEFAULT_RULES, validate

__all__ = [
    "DEFAULT_RULES",
    "Severity",
    "ValidationReport",
    "ValidationResult",
    "ValidationRule",
    "ValidationWarning",
    "migration_suggestion",
    "validate",
]
