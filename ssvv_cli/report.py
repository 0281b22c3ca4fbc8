"""Report documents for validation outcomes.

Every function here is pure: it takes validated data or an error and
returns a styled Document. Nothing is printed; callers choose whether to
render to a terminal (render_styled) or to a string (render_plain).

Reports:
- format_error: a failed validation (with YAML tips for parse failures)
- format_warnings: advisory warnings, empty when there are none
- format_success: the model summary for a successful validation
- format_help: static usage text
"""

from __future__ import annotations

from collections.abc import Sequence

from ssvv_cli.document import (
    Doc,
    color_style,
    concat,
    dimmed_style,
    empty,
    line,
    styled,
    text,
)
from ssvv_cli.errors import ValidationError
from ssvv_cli.layout import (
    Alignment,
    Column,
    TableLayout,
    heading,
    separator,
    subheading,
)
from ssvv_cli.models import SemanticModel
from ssvv_cli.quality import (
    ALIASED_THRESHOLDS,
    DESCRIBED_THRESHOLDS,
    grade_color,
    model_coverage,
    table_coverage,
)
from ssvv_cli.text import indent_block
from ssvv_cli.validation import ValidationReport, ValidationWarning

ERROR_COLOR = "red"
WARNING_COLOR = "yellow"
SUMMARY_COLOR = "blue"
SECTION_COLOR = "yellow"

YAML_PITFALLS = (
    "Incorrect indentation (use spaces, not tabs)",
    "Missing colons after keys",
    "Unquoted strings containing special characters",
    "Missing required fields",
)

DOCS_URL = (
    "https://docs.snowflake.com/en/user-guide/snowflake-cortex/cortex-analyst/semantic-model-spec"
)


def format_error(error: ValidationError) -> Doc:
    """Build the error report for a failed validation.

    Args:
        error: The validation error. Parse failures get an extra tip block.

    Returns:
        Error report document.
    """
    doc = (
        heading("VALIDATION ERROR", ERROR_COLOR)
        .append(line())
        .append(styled(f"* {error.message}", color_style(ERROR_COLOR, bold=True)))
        .append(line())
        .append(line())
    )
    if error.is_parse_error:
        doc = doc.append(_yaml_tips())
    return doc.append(separator("=", ERROR_COLOR))


def _yaml_tips() -> Doc:
    parts: list[Doc] = [
        styled("TIP:", color_style("yellow", bold=True)),
        line(),
        text("  Check the YAML syntax at the indicated line and column."),
        line(),
        text("  Common issues include:"),
        line(),
    ]
    for pitfall in YAML_PITFALLS:
        parts.extend([text(f"    * {pitfall}"), line()])
    parts.append(line())
    return concat(parts)


def format_warnings(warnings: Sequence[ValidationWarning]) -> Doc:
    """Build the warnings block.

    Args:
        warnings: Warnings collected during validation.

    Returns:
        Warnings document, or an empty document when there are no warnings.
    """
    if not warnings:
        return empty()

    doc = heading("WARNINGS", WARNING_COLOR).append(line())
    for warning in warnings:
        doc = (
            doc.append(styled("* ", color_style(WARNING_COLOR, bold=True)))
            .append(styled(warning.message, color_style(WARNING_COLOR)))
            .append(line())
        )
        if warning.suggestion is not None:
            doc = (
                doc.append(line())
                .append(styled("  Suggestion:", color_style("cyan", bold=True)))
                .append(line())
                .append(styled(indent_block(warning.suggestion, "  "), dimmed_style()))
                .append(line())
            )
        doc = doc.append(line())

    return doc.append(separator("-", WARNING_COLOR)).append(line())


def format_validation(report: ValidationReport) -> Doc:
    """Warnings block (if any) followed by the success summary."""
    return concat([format_warnings(report.warnings), format_success(report.model)])


def format_success(model: SemanticModel) -> Doc:
    """Build the summary report for a successfully validated model.

    Args:
        model: The validated semantic model.

    Returns:
        Summary document with tables, relationships, verified queries,
        custom instructions and data quality sections.
    """
    return concat(
        [
            heading("SEMANTIC MODEL VALIDATION SUMMARY", SUMMARY_COLOR),
            line(),
            styled("Name:", color_style("green", bold=True)),
            text(f" {model.name}"),
            line(),
            styled("Description:", color_style("green", bold=True)),
            text(f" {model.description}"),
            line(),
            line(),
            _tables_section(model),
            line(),
            _relationships_section(model),
            line(),
            _verified_queries_section(model),
            line(),
            _instructions_section(model),
            line(),
            _quality_section(model),
            separator("=", SUMMARY_COLOR),
            styled("*", color_style("green", bold=True)),
            text(" "),
            styled("Validation successful!", color_style("green")),
            line(),
            separator("=", SUMMARY_COLOR),
        ]
    )


# =============================================================================
# Summary Sections
# =============================================================================


def _none_defined(what: str) -> Doc:
    return concat([styled(f"  No {what} defined", dimmed_style()), line()])


def _tables_section(model: SemanticModel) -> Doc:
    name_col = Column("Name")
    location_col = Column("Location")
    dims_col = Column("Dimensions", Alignment.RIGHT)
    time_col = Column("Time", Alignment.RIGHT)
    facts_col = Column("Facts", Alignment.RIGHT)
    metrics_col = Column("Metrics", Alignment.RIGHT)
    filters_col = Column("Filters", Alignment.RIGHT)
    described_col = Column("Described", Alignment.RIGHT)
    aliased_col = Column("Aliased", Alignment.RIGHT)

    for table in model.tables:
        coverage = table_coverage(table)
        name_col = name_col.add_cell(table.name)
        location_col = location_col.add_cell(table.location)
        dims_col = dims_col.add_cell(str(len(table.dimensions)))
        time_col = time_col.add_cell(str(len(table.time_dimensions)))
        facts_col = facts_col.add_cell(str(len(table.facts)))
        metrics_col = metrics_col.add_cell(str(len(table.metrics)))
        filters_col = filters_col.add_cell(str(len(table.filters)))
        described_col = described_col.add_cell(f"{coverage.described_pct:.0f}%")
        aliased_col = aliased_col.add_cell(f"{coverage.aliased_pct:.0f}%")

    layout = TableLayout(
        (
            name_col,
            location_col,
            dims_col,
            time_col,
            facts_col,
            metrics_col,
            filters_col,
            described_col,
            aliased_col,
        )
    )
    return concat([subheading(f"TABLES ({len(model.tables)})", SECTION_COLOR), layout.render()])


def _relationships_section(model: SemanticModel) -> Doc:
    title = subheading(f"RELATIONSHIPS ({len(model.relationships)})", SECTION_COLOR)
    if not model.relationships:
        return concat([title, _none_defined("relationships")])

    layout = TableLayout()
    for header, values in (
        ("Name", [r.name for r in model.relationships]),
        ("Join Type", [r.join_type for r in model.relationships]),
        ("Left Table", [r.left_table for r in model.relationships]),
        ("Right Table", [r.right_table for r in model.relationships]),
        ("Type", [r.relationship_type for r in model.relationships]),
        ("Columns", [r.condition for r in model.relationships]),
    ):
        column = Column(header)
        for value in values:
            column = column.add_cell(value)
        layout = layout.add_column(column)
    return concat([title, layout.render()])


def _verified_queries_section(model: SemanticModel) -> Doc:
    title = subheading(f"VERIFIED QUERIES ({len(model.verified_queries)})", SECTION_COLOR)
    if not model.verified_queries:
        return concat([title, _none_defined("verified queries")])

    name_col = Column("Name")
    question_col = Column("Question")
    for query in model.verified_queries:
        name_col = name_col.add_cell(query.name)
        question_col = question_col.add_cell(query.question)
    return concat([title, TableLayout((name_col, question_col)).render()])


def _instructions_section(model: SemanticModel) -> Doc:
    title = subheading("CUSTOM INSTRUCTIONS", SECTION_COLOR)
    legacy = model.custom_instructions
    structured = model.module_custom_instructions
    if legacy is None and structured is None:
        return concat([title, _none_defined("custom instructions")])

    parts: list[Doc] = [title]
    if legacy is not None:
        migrated = color_style("green")
        parts.extend(
            [
                styled("  [DEPRECATED] custom_instructions:", color_style("yellow", bold=True)),
                line(),
                styled(indent_block(legacy, "    "), dimmed_style()),
                line(),
                line(),
                styled("  MIGRATION NEEDED:", color_style("cyan", bold=True)),
                line(),
                styled("  Replace the above with:", color_style("cyan")),
                line(),
                line(),
                styled("  module_custom_instructions:", migrated),
                line(),
                styled("    sql_generation: |", migrated),
                line(),
                styled(indent_block(legacy, "      "), migrated),
                line(),
                line(),
            ]
        )

    if structured is not None:
        parts.extend([styled("  module_custom_instructions:", color_style("cyan", bold=True)), line()])
        if structured.question_categorization is not None:
            parts.extend(
                [
                    styled("    question_categorization:", color_style("white", bold=True)),
                    line(),
                    styled(indent_block(structured.question_categorization, "      "), dimmed_style()),
                    line(),
                    line(),
                ]
            )
        if structured.sql_generation is not None:
            parts.extend(
                [
                    styled("    sql_generation:", color_style("white", bold=True)),
                    line(),
                    styled(indent_block(structured.sql_generation, "      "), dimmed_style()),
                    line(),
                ]
            )
    return concat(parts)


def _quality_section(model: SemanticModel) -> Doc:
    coverage = model_coverage(model)
    described_color = grade_color(coverage.described_pct, DESCRIBED_THRESHOLDS)
    aliased_color = grade_color(coverage.aliased_pct, ALIASED_THRESHOLDS)
    label = color_style("cyan", bold=True)
    tip = color_style("magenta", bold=True)

    return concat(
        [
            subheading("DATA QUALITY METRICS", SECTION_COLOR),
            styled("  Described Columns:", label),
            text(f" {coverage.described} / {coverage.total} "),
            styled(f"({coverage.described_pct:.1f}%)", color_style(described_color, bold=True)),
            line(),
            styled("  Aliased Columns:", label),
            text(f" {coverage.aliased} / {coverage.total} "),
            styled(f"({coverage.aliased_pct:.1f}%)", color_style(aliased_color, bold=True)),
            line(),
            line(),
            styled("  TIP:", tip),
            text(" Descriptions and synonyms help LLMs understand your data model better."),
            line(),
            styled("       ", tip),
            text(
                f"Aim for {DESCRIBED_THRESHOLDS[0]:.0f}%+ described columns and "
                f"{ALIASED_THRESHOLDS[0]:.0f}%+ aliased columns for optimal results."
            ),
            line(),
            line(),
        ]
    )


# =============================================================================
# Help
# =============================================================================


def format_help() -> Doc:
    """Static usage document shown when no file is given."""
    section = color_style("yellow", bold=True)
    return concat(
        [
            styled("Snowflake Semantic View Validator (ssvv)", color_style(SUMMARY_COLOR, bold=True)),
            line(),
            line(),
            text(
                "A tool to validate Snowflake semantic model YAML files "
                "against Snowflake's published format."
            ),
            line(),
            line(),
            styled("USAGE:", section),
            line(),
            text("  ssvv <file.yaml>    Validate a semantic model file"),
            line(),
            text("  ssvv --help         Show all options"),
            line(),
            line(),
            styled("DESCRIPTION:", section),
            line(),
            text("  This tool validates Snowflake semantic model YAML files against the format"),
            line(),
            text("  reference at:"),
            line(),
            text(f"  {DOCS_URL}"),
            line(),
            line(),
            text("  If the file is valid, it displays a comprehensive summary of the model."),
            line(),
            text("  If the file is invalid, it shows detailed error messages with line numbers"),
            line(),
            text("  and helpful advice on how to fix the issues."),
            line(),
            line(),
            styled("EXAMPLES:", section),
            line(),
            text("  ssvv speedrun.yaml"),
            line(),
            text("  ssvv my-semantic-model.yml"),
            line(),
        ]
    )
