#!/usr/bin/env python3
"""Regenerate golden report files for the test fixtures.

Each ``tests/fixtures/<name>.yaml`` that already has a ``<name>.expected``
file is validated and its plain-text report written back to the
``.expected`` file. New fixtures opt in by creating an empty ``.expected``.

Usage:
    python scripts/regenerate_expected.py           # rewrite goldens
    python scripts/regenerate_expected.py --check   # exit 1 if any are stale
"""

from __future__ import annotations

import sys
from pathlib import Path

from ssvv_cli.document import render_plain
from ssvv_cli.errors import ValidationError
from ssvv_cli.loader import validate_file
from ssvv_cli.report import format_error, format_success

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


def render_fixture(path: Path) -> str:
    """Plain report for one fixture, success or error."""
    try:
        report = validate_file(path)
    except ValidationError as err:
        return render_plain(format_error(err))
    return render_plain(format_success(report.model))


def main() -> int:
    """Main entry point."""
    check_mode = "--check" in sys.argv
    stale: list[str] = []

    for expected_path in sorted(FIXTURES_DIR.glob("*.expected")):
        yaml_path = expected_path.with_suffix(".yaml")
        if not yaml_path.exists():
            print(f"Skipping {expected_path.name}: no matching fixture")
            continue

        actual = render_fixture(yaml_path)
        current = expected_path.read_text(encoding="utf-8")
        if actual.strip() == current.strip():
            continue

        stale.append(expected_path.name)
        if not check_mode:
            expected_path.write_text(actual, encoding="utf-8")
            print(f"Updated {expected_path.name}")

    if check_mode and stale:
        print("Golden reports are out of date:")
        for name in stale:
            print(f"  - {name}")
        print()
        print("To update them, run:")
        print("  python scripts/regenerate_expected.py")
        return 1

    if not stale:
        print("Golden reports are up to date")
    return 0


if __name__ == "__main__":
    sys.exit(main())
