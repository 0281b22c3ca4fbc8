"""JSON output envelope for machine-readable validation results.

Selected with ``ssvv --format json`` (or SSVV_FORMAT=json). The styled
reports are for humans; the envelope is for scripts and CI.

Envelope Structure:
    {
        "success": true|false,
        "command": "validate",
        "data": { ... },
        "errors": [ ... ]  # Only present when success=false
    }

Usage:
    from ssvv_cli.json_output import error_envelope, success_envelope

    envelope = success_envelope("validate", report.to_dict())
    print(envelope.to_json())
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ssvv_cli.errors import SsvvError, ValidationError


@dataclass
class ErrorDetail:
    """Structure for individual entries in the errors array.

    Attributes:
        type: Error class name (e.g., "RuleViolationError")
        message: Human-readable error description
        code: Structured error code (e.g., "SSVV-VAL001"), if any
        is_parse_error: True when the document could not be parsed
    """

    type: str
    message: str
    code: str | None = None
    is_parse_error: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        d: dict[str, Any] = {"type": self.type, "message": self.message}
        if self.code is not None:
            d["code"] = self.code
        d["is_parse_error"] = self.is_parse_error
        return d

    @classmethod
    def from_error(cls, err: SsvvError) -> ErrorDetail:
        """Build an ErrorDetail from an ssvv error."""
        return cls(
            type=type(err).__name__,
            message=err.message,
            code=err.code,
            is_parse_error=isinstance(err, ValidationError) and err.is_parse_error,
        )


@dataclass
class OutputEnvelope:
    """The wrapper structure for JSON command output.

    Attributes:
        success: True if validation succeeded, False otherwise
        command: Name of the operation that produced this output
        data: Operation-specific payload
        errors: Array of error objects; present only when success=False
    """

    success: bool
    command: str
    data: dict[str, Any] | None
    errors: list[ErrorDetail] | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        The errors field is excluded when None (for success cases).
        """
        result: dict[str, Any] = {
            "success": self.success,
            "command": self.command,
            "data": self.data,
        }
        if self.errors is not None:
            result["errors"] = [e.to_dict() for e in self.errors]
        return result

    def to_json(self, *, indent: int | None = 2) -> str:
        """Convert to JSON string.

        Args:
            indent: Indentation level for pretty printing. Use None for compact output.
        """
        return json.dumps(self.to_dict(), indent=indent)


def success_envelope(command: str, data: dict[str, Any]) -> OutputEnvelope:
    """Create a success envelope with the given command and data."""
    return OutputEnvelope(success=True, command=command, data=data)


def error_envelope(
    command: str,
    errors: list[ErrorDetail],
    *,
    data: dict[str, Any] | None = None,
) -> OutputEnvelope:
    """Create an error envelope with the given command and errors.

    Args:
        command: Name of the operation
        errors: List of ErrorDetail objects describing the errors
        data: Optional partial data to include (default: empty dict)
    """
    return OutputEnvelope(
        success=False,
        command=command,
        data=data if data is not None else {},
        errors=errors,
    )
