"""Validation rule base class and built-in rules.

Each rule checks one structural aspect of a semantic model. Rules are
designed to be unit-testable in isolation and composable into an ordered
validation pipeline (see runner.DEFAULT_RULES). New rules can be inserted
anywhere in that sequence without touching the others.

Rules never inspect SQL expressions or resolve references between tables.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ssvv_cli.models import SemanticModel
from ssvv_cli.text import indent_block
from ssvv_cli.validation.results import Severity, ValidationResult


class ValidationRule(ABC):
    """Base class for all validation rules.

    Subclasses must define:
        name: Unique identifier for the rule
        severity: ERROR (blocking) or WARNING (non-blocking)
        description: Human-readable explanation for --verbose

    Subclasses must implement:
        check(): Run the validation and return a result
    """

    name: str
    severity: Severity
    description: str

    @abstractmethod
    def check(self, model: SemanticModel) -> ValidationResult:
        """Run this validation rule against a model.

        Args:
            model: Parsed semantic model.

        Returns:
            ValidationResult indicating pass/fail with message.
        """
        ...

    def _pass(self, message: str) -> ValidationResult:
        """Helper to create a passing result."""
        return ValidationResult(
            rule_name=self.name,
            passed=True,
            severity=self.severity,
            message=message,
        )

    def _fail(self, message: str, *, fix_hint: str | None = None) -> ValidationResult:
        """Helper to create a failing result."""
        return ValidationResult(
            rule_name=self.name,
            passed=False,
            severity=self.severity,
            message=message,
            fix_hint=fix_hint,
        )


class ModelNameRule(ValidationRule):
    """Check that the model has a name."""

    name = "model_name"
    severity = Severity.ERROR
    description = "Verify the semantic model has a non-empty name"

    def check(self, model: SemanticModel) -> ValidationResult:
        """Check for a non-empty model name."""
        if not model.name:
            return self._fail("Semantic model must have a non-empty 'name' field")
        return self._pass(f"Semantic model is named '{model.name}'")


class TablesPresentRule(ValidationRule):
    """Check that the model defines at least one table."""

    name = "tables_present"
    severity = Severity.ERROR
    description = "Verify the semantic model defines at least one table"

    def check(self, model: SemanticModel) -> ValidationResult:
        """Check for at least one table."""
        if not model.tables:
            return self._fail("Semantic model must have at least one table")
        return self._pass(f"{len(model.tables)} table(s) defined")


class TableStructureRule(ValidationRule):
    """Check every table for a name and at least one queryable column.

    Tables are checked in document order and the first broken table is
    reported. Indexes in messages are 0-based. Filters alone do not make a
    table queryable.
    """

    name = "table_structure"
    severity = Severity.ERROR
    description = "Verify each table has a name and a dimension, time_dimension, fact, or metric"

    def check(self, model: SemanticModel) -> ValidationResult:
        """Check each table's name and column lists."""
        for index, table in enumerate(model.tables):
            if not table.name:
                return self._fail(f"Table at index {index} must have a non-empty 'name' field")
            if not table.has_columns:
                return self._fail(
                    f"Table '{table.name}' must have at least one dimension, "
                    "time_dimension, fact, or metric"
                )
        return self._pass("All tables are well-formed")


def migration_suggestion(custom_instructions: str) -> str:
    """Rewrite legacy custom_instructions under module_custom_instructions.

    Args:
        custom_instructions: The legacy free-text instructions.

    Returns:
        A before/after YAML snippet showing the migration.
    """
    return (
        "Replace:\n"
        "  custom_instructions: |\n"
        f"{indent_block(custom_instructions, '    ')}\n"
        "\n"
        "With:\n"
        "  module_custom_instructions:\n"
        "    sql_generation: |\n"
        f"{indent_block(custom_instructions, '      ')}"
    )


class LegacyInstructionsRule(ValidationRule):
    """Recommend migrating custom_instructions to module_custom_instructions.

    This is a WARNING-level rule. A model that already defines
    module_custom_instructions is not warned, even if the legacy field is
    still present.
    """

    name = "legacy_instructions"
    severity = Severity.WARNING
    description = "Detect deprecated custom_instructions without module_custom_instructions"

    def check(self, model: SemanticModel) -> ValidationResult:
        """Check for legacy-only custom instructions."""
        if model.custom_instructions is not None and model.module_custom_instructions is None:
            return self._fail(
                "The 'custom_instructions' field is deprecated. "
                "Consider migrating to 'module_custom_instructions'.",
                fix_hint=migration_suggestion(model.custom_instructions),
            )
        return self._pass("No deprecated instruction fields in use")


class ModuleInstructionsRule(ValidationRule):
    """Check that module_custom_instructions, when present, is not empty."""

    name = "module_instructions"
    severity = Severity.ERROR
    description = "Verify module_custom_instructions defines at least one phase"

    def check(self, model: SemanticModel) -> ValidationResult:
        """Check for at least one populated instruction phase."""
        instructions = model.module_custom_instructions
        if instructions is None:
            return self._pass("No module_custom_instructions defined")
        if instructions.is_empty:
            return self._fail(
                "'module_custom_instructions' must have at least one of "
                "'question_categorization' or 'sql_generation' defined"
            )
        return self._pass("module_custom_instructions is populated")
