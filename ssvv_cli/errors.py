"""Structured error codes for ssvv.

All errors follow the format SSVV-{category}{number}:
- SSVV-VAL*: Validation rule violations
- SSVV-PRS*: Documents that could not be parsed
- SSVV-IO*: Input files that could not be read
- SSVV-CFG*: Configuration errors
"""

from __future__ import annotations

from typing import Any


class SsvvError(Exception):
    """Base class for all ssvv errors.

    All errors have:
    - code: Structured error code (e.g., SSVV-VAL001)
    - message: Human-readable error message

    Unlike the code, the message is what reports display, so ``str(error)``
    returns the message alone.
    """

    code: str = "SSVV-000"

    # Reserved attribute names that cannot be overwritten by context
    _RESERVED_ATTRS = frozenset({"code", "message", "context", "args"})

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize an ssvv error.

        Args:
            message: Human-readable error message.
            **context: Additional context stored as error attributes.
                Reserved keys (code, message, context, args) are ignored.
        """
        self.message = message
        self.context = context
        for key, value in context.items():
            if key not in self._RESERVED_ATTRS:
                setattr(self, key, value)
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to JSON-serializable dict."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# Validation Errors (SSVV-VAL*, SSVV-PRS*, SSVV-IO*)
class ValidationError(SsvvError):
    """Base class for everything that stops a document from validating.

    Attributes:
        is_parse_error: True when the document could not be parsed at all,
            False when it parsed but broke a structural rule.
    """

    code = "SSVV-VAL000"
    is_parse_error: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert error to JSON-serializable dict, including the parse flag."""
        d = super().to_dict()
        d["is_parse_error"] = self.is_parse_error
        return d


class RuleViolationError(ValidationError):
    """Raised when a parsed semantic model breaks a structural rule.

    Error code: SSVV-VAL001
    """

    code = "SSVV-VAL001"

    def __init__(self, message: str, rule_name: str) -> None:
        super().__init__(message, rule_name=rule_name)


class ParseFailureError(ValidationError):
    """Raised when the input text is not a well-formed semantic model document.

    Error code: SSVV-PRS001

    Covers both YAML syntax errors (the detail carries PyYAML's line and
    column marks) and documents whose fields have the wrong shape.
    """

    code = "SSVV-PRS001"
    is_parse_error = True

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to parse YAML file: {detail}", detail=detail)


class FileReadError(ValidationError):
    """Raised when the input file cannot be read.

    Error code: SSVV-IO001
    """

    code = "SSVV-IO001"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to read file: {reason}", path=path, reason=reason)


# Configuration Errors (SSVV-CFG*)
class ConfigError(SsvvError):
    """Raised when a setting has a value outside its allowed choices.

    Error code: SSVV-CFG001
    """

    code = "SSVV-CFG001"

    def __init__(self, key: str, value: str, choices: tuple[str, ...]) -> None:
        super().__init__(
            f"Invalid value '{value}' for setting '{key}' (expected one of: {', '.join(choices)})",
            key=key,
            value=value,
            choices=list(choices),
        )
