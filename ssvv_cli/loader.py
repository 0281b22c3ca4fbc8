"""Loading semantic model documents from text and files.

Per the CLI/library split, the CLI only calls these functions and renders
what they return or raise:

    from ssvv_cli.loader import validate_file

    try:
        report = validate_file(Path("model.yaml"))
    except ValidationError as err:
        ...  # err.is_parse_error tells parse failures from rule violations
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from ssvv_cli.errors import FileReadError, ParseFailureError
from ssvv_cli.models import SemanticModel
from ssvv_cli.validation import ValidationReport, ValidationRule, validate

logger = logging.getLogger(__name__)

# Implicit tags that survive; everything else (bool, int, float, timestamp)
# stays as the text written in the document
_KEPT_IMPLICIT_TAGS = frozenset(
    {
        "tag:yaml.org,2002:null",
        "tag:yaml.org,2002:merge",
    }
)


class TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that leaves scalars as strings, apart from null.

    Sample values such as ``2024-01-01``, ``yes`` or ``1.50`` keep their
    spelling instead of becoming dates, booleans or floats.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_IMPLICIT_TAGS]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


def parse_model(source: str) -> SemanticModel:
    """Parse YAML text into a SemanticModel.

    Args:
        source: YAML document text.

    Returns:
        The parsed model (not yet validated).

    Raises:
        ParseFailureError: If the text is not valid YAML, is empty, or has
            fields of the wrong shape.
    """
    try:
        data = yaml.load(source, Loader=TextScalarLoader)
    except yaml.YAMLError as e:
        raise ParseFailureError(str(e)) from e

    if data is None:
        raise ParseFailureError("document is empty")

    try:
        model = SemanticModel.from_dict(data)
    except ValueError as e:
        raise ParseFailureError(str(e)) from e

    logger.debug("Parsed model %r with %d table(s)", model.name, len(model.tables))
    return model


def validate_source(
    source: str,
    *,
    rules: Sequence[ValidationRule] | None = None,
) -> ValidationReport:
    """Parse and validate YAML text.

    Args:
        source: YAML document text.
        rules: Optional rule sequence (defaults to the built-in rules).

    Returns:
        ValidationReport with the model and any warnings.

    Raises:
        ParseFailureError: If the text cannot be parsed.
        RuleViolationError: If the parsed model breaks a rule.
    """
    return validate(parse_model(source), rules=rules)


def validate_file(
    path: Path | str,
    *,
    rules: Sequence[ValidationRule] | None = None,
) -> ValidationReport:
    """Read, parse and validate a semantic model file.

    Args:
        path: Path to a UTF-8 YAML file.
        rules: Optional rule sequence (defaults to the built-in rules).

    Returns:
        ValidationReport with the model and any warnings.

    Raises:
        FileReadError: If the file cannot be read or is not UTF-8.
        ParseFailureError: If the content cannot be parsed.
        RuleViolationError: If the parsed model breaks a rule.
    """
    path = Path(path)
    logger.debug("Reading %s", path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(path), str(e)) from e
    return validate_source(source, rules=rules)
