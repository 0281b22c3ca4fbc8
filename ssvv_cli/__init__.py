"""ssvv - Validate Snowflake semantic model YAML files."""

from ssvv_cli.cli import cli
from ssvv_cli.errors import ValidationError
from ssvv_cli.loader import parse_model, validate_file, validate_source
from ssvv_cli.models import SemanticModel
from ssvv_cli.report import format_error, format_success, format_warnings
from ssvv_cli.validation import ValidationReport, ValidationWarning, validate

__all__ = [
    "SemanticModel",
    "ValidationError",
    "ValidationReport",
    "ValidationWarning",
    "cli",
    "format_error",
    "format_success",
    "format_warnings",
    "parse_model",
    "validate",
    "validate_file",
    "validate_source",
]
