"""ssvv CLI - validate Snowflake semantic model YAML files.

The CLI is a thin wrapper around the Python API (see loader.py and
report.py). All validation and formatting logic lives in the library; the
CLI resolves settings, picks the output format and sets the exit code.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import click

from ssvv_cli.config import color_flag, get_setting, list_settings
from ssvv_cli.document import render_styled
from ssvv_cli.errors import ConfigError, ValidationError
from ssvv_cli.json_output import ErrorDetail, error_envelope, success_envelope
from ssvv_cli.loader import validate_file
from ssvv_cli.quality import model_coverage
from ssvv_cli.report import format_error, format_help, format_validation
from ssvv_cli.validation import ValidationReport

logger = logging.getLogger(__name__)

COMMAND = "validate"


def output_json_envelope(envelope: Any) -> None:
    """Output a JSON envelope to stdout.

    Args:
        envelope: OutputEnvelope instance to output.
    """
    click.echo(envelope.to_json())


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _report_data(report: ValidationReport) -> dict[str, Any]:
    """Payload for a successful validation in JSON mode."""
    data = report.to_dict()
    coverage = model_coverage(report.model)
    data["coverage"] = {
        "total": coverage.total,
        "described": coverage.described,
        "aliased": coverage.aliased,
        "described_pct": round(coverage.described_pct, 1),
        "aliased_pct": round(coverage.aliased_pct, 1),
    }
    return data


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="ssvv-cli", prog_name="ssvv")
@click.argument("file", required=False, type=click.Path(path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (json for machine parsing, text for humans). Env: SSVV_FORMAT.",
)
@click.option(
    "--color",
    type=click.Choice(["auto", "always", "never"]),
    default=None,
    help="Colorize text output (auto detects a terminal). Env: SSVV_COLOR.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to stderr.")
def cli(
    file: Path | None,
    output_format: str | None,
    color: str | None,
    verbose: bool,
) -> None:
    """Validate a Snowflake semantic model YAML FILE.

    Prints a summary of the model when it is valid, or an error report
    when it is not. Without FILE, prints usage information.
    """
    _configure_logging(verbose)

    for key, entry in list_settings({"format": output_format, "color": color}).items():
        logger.debug("Setting %s=%s (from %s)", key, entry["value"], entry["source"])

    try:
        output_format = get_setting("format", cli_value=output_format)
        color = get_setting("color", cli_value=color)
    except ConfigError as err:
        raise click.UsageError(err.message) from err

    use_color = color_flag(color)

    if file is None:
        render_styled(format_help(), color=use_color)
        return

    try:
        report = validate_file(file)
    except ValidationError as err:
        logger.debug("Validation of %s failed: [%s] %s", file, err.code, err.message)
        if output_format == "json":
            output_json_envelope(error_envelope(COMMAND, [ErrorDetail.from_error(err)]))
        else:
            render_styled(format_error(err), color=use_color)
        raise SystemExit(1) from err

    if output_format == "json":
        output_json_envelope(success_envelope(COMMAND, _report_data(report)))
    else:
        render_styled(format_validation(report), color=use_color)
