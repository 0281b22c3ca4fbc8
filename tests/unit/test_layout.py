"""Tests for layout.py - tables, rules and headings."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ssvv_cli.document import Concat, Doc, Style, Text, render_plain
from ssvv_cli.layout import (
    CELL_DIVIDER,
    RULE_WIDTH,
    Alignment,
    Cell,
    Column,
    TableLayout,
    display_width,
    heading,
    separator,
    subheading,
)

cell_text = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789 ._%", max_size=12)


def build_table(shape: list[tuple[str, list[str], Alignment]]) -> TableLayout:
    layout = TableLayout()
    for header, cells, alignment in shape:
        column = Column(header, alignment)
        for value in cells:
            column = column.add_cell(value)
        layout = layout.add_column(column)
    return layout


def _leaves(doc: Doc) -> Iterator[Doc]:
    if isinstance(doc, Concat):
        for part in doc.parts:
            yield from _leaves(part)
    else:
        yield doc


class TestDisplayWidth:
    """Tests for terminal width measurement."""

    @pytest.mark.unit
    def test_ascii(self) -> None:
        assert display_width("orders") == 6

    @pytest.mark.unit
    def test_wide_characters_take_two_columns(self) -> None:
        assert display_width("表") == 2

    @pytest.mark.unit
    def test_combining_marks_take_none(self) -> None:
        assert display_width("e\u0301") == 1


class TestColumn:
    """Tests for Column."""

    @pytest.mark.unit
    def test_width_is_widest_of_header_and_cells(self) -> None:
        column = Column("Name").add_cell("customers").add_cell("o")

        assert column.width == 9

    @pytest.mark.unit
    def test_header_only_width(self) -> None:
        assert Column("Dimensions", Alignment.RIGHT).width == 10

    @pytest.mark.unit
    def test_add_cell_returns_new_column(self) -> None:
        original = Column("Name")
        updated = original.add_cell(Cell("orders", Style(fg="green")))

        assert original.cells == ()
        assert updated.cells == (Cell("orders", Style(fg="green")),)


class TestTableLayout:
    """Tests for TableLayout rendering."""

    @pytest.mark.unit
    def test_renders_header_separator_and_rows(self) -> None:
        layout = build_table(
            [
                ("Name", ["orders"], Alignment.LEFT),
                ("Dimensions", ["3"], Alignment.RIGHT),
            ]
        )

        assert render_plain(layout.render()) == (
            "Name   | Dimensions\n-------|-----------\norders |          3\n"
        )

    @pytest.mark.unit
    def test_indent_prefixes_every_row(self) -> None:
        layout = build_table([("Name", ["a", "b"], Alignment.LEFT)])

        lines = render_plain(layout.render(indent="  ")).splitlines()

        assert len(lines) == 4
        assert all(row.startswith("  ") for row in lines)

    @pytest.mark.unit
    def test_ragged_columns_render_blanks(self) -> None:
        layout = build_table(
            [
                ("A", ["1", "2", "3"], Alignment.LEFT),
                ("B", ["x"], Alignment.RIGHT),
            ]
        )

        lines = render_plain(layout.render()).splitlines()

        assert layout.row_count == 3
        assert lines[2] == "1 | x"
        assert lines[3] == "2 |  "
        assert lines[4] == "3 |  "

    @pytest.mark.unit
    def test_row_count_follows_first_column(self) -> None:
        layout = build_table(
            [
                ("A", ["1"], Alignment.LEFT),
                ("B", ["x", "y", "z"], Alignment.LEFT),
            ]
        )

        assert layout.row_count == 1
        assert len(render_plain(layout.render()).splitlines()) == 3

    @pytest.mark.unit
    def test_empty_layout_renders_nothing(self) -> None:
        assert TableLayout().row_count == 0
        assert render_plain(TableLayout().render()) == ""

    @pytest.mark.unit
    def test_header_is_bold(self) -> None:
        doc = build_table([("Name", ["orders"], Alignment.LEFT)]).render()
        header_row = doc.parts[0]

        assert isinstance(header_row, Concat)
        texts = [part for part in _leaves(header_row) if isinstance(part, Text)]
        assert any(t.text == "Name" and t.style == Style(bold=True) for t in texts)

    @pytest.mark.unit
    def test_padding_is_not_styled(self) -> None:
        column = Column("Described", Alignment.RIGHT).add_cell(Cell("100%", Style(fg="green")))
        doc = TableLayout((column,)).render()

        for leaf in _leaves(doc):
            if isinstance(leaf, Text) and leaf.style is not None:
                assert leaf.text == leaf.text.strip()

    @pytest.mark.unit
    @given(
        shape=st.lists(
            st.tuples(
                cell_text,
                st.lists(cell_text, max_size=4),
                st.sampled_from(list(Alignment)),
            ),
            min_size=1,
            max_size=4,
        )
    )
    @settings(max_examples=100)
    def test_every_cell_is_padded_to_column_width(
        self, shape: list[tuple[str, list[str], Alignment]]
    ) -> None:
        """Each row splits into cells exactly as wide as their column."""
        layout = build_table(shape)
        widths = [column.width for column in layout.columns]
        expected_length = sum(widths) + len(CELL_DIVIDER) * (len(widths) - 1)

        lines = render_plain(layout.render()).split("\n")

        assert lines[-1] == ""
        for row in lines[:-1]:
            assert len(row) == expected_length

        for row in [lines[0], *lines[2:-1]]:
            offset = 0
            for width in widths:
                cell = row[offset : offset + width]
                assert len(cell) == width
                offset += width + len(CELL_DIVIDER)


class TestFraming:
    """Tests for separators and headings."""

    @pytest.mark.unit
    def test_separator_is_full_width(self) -> None:
        assert render_plain(separator("=", "blue")) == "=" * RULE_WIDTH + "\n"

    @pytest.mark.unit
    @pytest.mark.parametrize("char", ["", "==", "ab"])
    def test_separator_rejects_non_single_char(self, char: str) -> None:
        with pytest.raises(ValueError, match="single character"):
            separator(char, "blue")

    @pytest.mark.unit
    def test_heading(self) -> None:
        rule = "=" * RULE_WIDTH

        assert render_plain(heading("SUMMARY", "blue")) == f"{rule}\nSUMMARY\n{rule}\n"

    @pytest.mark.unit
    def test_subheading(self) -> None:
        assert render_plain(subheading("TABLES", "cyan")) == f"TABLES\n{'-' * RULE_WIDTH}\n"
