"""Plain-text helpers shared by validation messages and reports."""

from __future__ import annotations


def indent_block(value: str, prefix: str) -> str:
    """Prefix every line of value with prefix.

    Lines are split on ``\\n`` only, and one trailing newline is dropped.
    Empty text still yields a single prefixed (empty) line.

    >>> indent_block("a\\nb\\n", "  ")
    '  a\\n  b'
    >>> indent_block("", "  ")
    '  '
    """
    if value.endswith("\n"):
        value = value[:-1]
    return "\n".join(prefix + part for part in value.split("\n"))
