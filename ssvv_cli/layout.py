"""Tabular layout and decorative framing for styled documents.

A TableLayout is built column by column. Each Column holds a header, an
alignment fixed at construction time, and an ordered list of Cells. Widths
are computed per column as the widest of the header and the cells, measured
in terminal display columns.

Rendered layout:

    Name   | Dimensions
    -------|-----------
    orders |          3

Every row is padded to the column widths, so ragged columns (fewer cells
than the first column) render blanks instead of failing.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field, replace
from enum import Enum

from ssvv_cli.document import Concat, Doc, Style, concat, dimmed_style, line, styled, text

# Width of headings, subheadings and separators
RULE_WIDTH = 80

CELL_DIVIDER = " | "
SEPARATOR_DIVIDER = "-|-"

HEADER_STYLE = Style(bold=True)


def display_width(value: str) -> int:
    """Number of terminal columns value occupies.

    East Asian wide and fullwidth characters take two columns, combining
    marks take none.
    """
    width = 0
    for char in value:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


class Alignment(Enum):
    """Horizontal alignment of every cell in a column."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Cell:
    """One table cell.

    Attributes:
        text: Cell content.
        style: Optional style for the content (padding is never styled).
    """

    text: str
    style: Style | None = None


@dataclass(frozen=True)
class Column:
    """A named, aligned table column.

    Attributes:
        header: Column heading.
        alignment: Alignment applied to the header and every cell.
        cells: Cells in row order.
    """

    header: str
    alignment: Alignment = Alignment.LEFT
    cells: tuple[Cell, ...] = field(default=())

    def add_cell(self, cell: Cell | str) -> Column:
        """Return a new column with cell appended. Strings become plain cells."""
        if isinstance(cell, str):
            cell = Cell(cell)
        return replace(self, cells=(*self.cells, cell))

    @property
    def width(self) -> int:
        """max(header width, widest cell width)."""
        return max([display_width(self.header), *(display_width(c.text) for c in self.cells)])


@dataclass(frozen=True)
class TableLayout:
    """Columns rendered side by side as a text table."""

    columns: tuple[Column, ...] = field(default=())

    def add_column(self, column: Column) -> TableLayout:
        """Return a new layout with column appended on the right."""
        return replace(self, columns=(*self.columns, column))

    @property
    def row_count(self) -> int:
        """Number of data rows: the length of the first column."""
        if not self.columns:
            return 0
        return len(self.columns[0].cells)

    def render(self, indent: str = "") -> Doc:
        """Render header, separator and data rows, each prefixed with indent.

        Args:
            indent: Text placed at the start of every emitted row.

        Returns:
            Document with one line per row.
        """
        if not self.columns:
            return concat([])

        widths = [column.width for column in self.columns]
        rows: list[Doc] = []

        header = [
            _pad(Cell(column.header, HEADER_STYLE), width, column.alignment)
            for column, width in zip(self.columns, widths)
        ]
        rows.append(_row(header, CELL_DIVIDER, indent))

        rule = SEPARATOR_DIVIDER.join("-" * width for width in widths)
        rows.append(_row([text(rule)], CELL_DIVIDER, indent))

        for index in range(self.row_count):
            cells = []
            for column, width in zip(self.columns, widths):
                cell = column.cells[index] if index < len(column.cells) else Cell("")
                cells.append(_pad(cell, width, column.alignment))
            rows.append(_row(cells, CELL_DIVIDER, indent))

        return concat(rows)


def _pad(cell: Cell, width: int, alignment: Alignment) -> Doc:
    fill = " " * (width - display_width(cell.text))
    if cell.style is None:
        padded = cell.text + fill if alignment is Alignment.LEFT else fill + cell.text
        return text(padded)
    content = styled(cell.text, cell.style)
    if alignment is Alignment.LEFT:
        return concat([content, text(fill)])
    return concat([text(fill), content])


def _row(cells: list[Doc], divider: str, indent: str) -> Concat:
    parts: list[Doc] = [text(indent)] if indent else []
    for i, cell in enumerate(cells):
        if i:
            parts.append(text(divider))
        parts.append(cell)
    parts.append(line())
    return concat(parts)


# =============================================================================
# Framing
# =============================================================================


def separator(char: str, color: str) -> Doc:
    """A full-width rule of char in color, followed by a line break."""
    if len(char) != 1:
        raise ValueError(f"Separator must be a single character, got {char!r}")
    return concat([styled(char * RULE_WIDTH, Style(fg=color)), line()])


def heading(title: str, color: str) -> Doc:
    """A title framed by full-width ``=`` rules."""
    return concat(
        [
            separator("=", color),
            styled(title, Style(fg=color, bold=True)),
            line(),
            separator("=", color),
        ]
    )


def subheading(title: str, color: str) -> Doc:
    """A title followed by a dimmed ``-`` rule."""
    return concat(
        [
            styled(title, Style(fg=color, bold=True)),
            line(),
            styled("-" * RULE_WIDTH, dimmed_style()),
            line(),
        ]
    )
