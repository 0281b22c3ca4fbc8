"""Tests for document.py - the styled document algebra and its interpreters.

These tests verify:
- append never mutates and flattens into an existing Concat
- Plain rendering ignores styles and is deterministic
- Stripping styles does not change the rendered text
- ClickSink emits ANSI codes only when color is enabled
"""

from __future__ import annotations

from io import StringIO

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ssvv_cli.document import (
    ClickSink,
    Concat,
    Doc,
    Line,
    PlainSink,
    Sink,
    Style,
    Text,
    color_style,
    concat,
    dimmed_style,
    empty,
    line,
    render,
    render_plain,
    render_styled,
    strip_styles,
    styled,
    text,
)

# =============================================================================
# Strategies
# =============================================================================

styles = st.builds(
    Style,
    fg=st.sampled_from([None, "red", "green", "yellow", "blue", "cyan", "magenta"]),
    bold=st.booleans(),
    dim=st.booleans(),
)

leaves = st.one_of(
    st.builds(Text, st.text(max_size=20)),
    st.builds(Text, st.text(max_size=20), styles),
    st.just(Line()),
)

documents = st.recursive(
    leaves,
    lambda children: st.lists(children, max_size=5).map(concat),
    max_leaves=30,
)


class TestConstruction:
    """Tests for building documents."""

    @pytest.mark.unit
    def test_append_to_leaf_creates_concat(self) -> None:
        doc = text("a").append(line())

        assert doc == Concat((Text("a"), Line()))

    @pytest.mark.unit
    def test_append_flattens_into_concat(self) -> None:
        doc = text("a").append(text("b")).append(text("c"))

        assert doc == Concat((Text("a"), Text("b"), Text("c")))

    @pytest.mark.unit
    def test_append_does_not_mutate(self) -> None:
        first = text("a").append(text("b"))
        second = first.append(text("c"))

        assert first == Concat((Text("a"), Text("b")))
        assert second is not first

    @pytest.mark.unit
    def test_styled_text_carries_style(self) -> None:
        doc = styled("x", color_style("red", bold=True))

        assert doc.style == Style(fg="red", bold=True)

    @pytest.mark.unit
    def test_dimmed_style(self) -> None:
        assert dimmed_style() == Style(dim=True)

    @pytest.mark.unit
    def test_empty_renders_nothing(self) -> None:
        assert render_plain(empty()) == ""


class TestPlainRendering:
    """Tests for the style-stripping interpreter."""

    @pytest.mark.unit
    def test_render_plain_ignores_styles(self) -> None:
        doc = concat([styled("Name:", color_style("green", bold=True)), text(" m"), line()])

        assert render_plain(doc) == "Name: m\n"

    @pytest.mark.unit
    def test_nested_concat_renders_in_order(self) -> None:
        doc = concat([text("a"), concat([text("b"), concat([text("c")])]), line()])

        assert render_plain(doc) == "abc\n"

    @pytest.mark.unit
    def test_unknown_node_is_rejected(self) -> None:
        class Bogus(Doc):
            pass

        with pytest.raises(TypeError, match="Bogus"):
            render_plain(Bogus())

    @pytest.mark.unit
    @given(doc=documents)
    @settings(max_examples=100)
    def test_render_plain_is_idempotent(self, doc: Doc) -> None:
        """Rendering the same document twice yields identical text."""
        assert render_plain(doc) == render_plain(doc)

    @pytest.mark.unit
    @given(doc=documents)
    @settings(max_examples=100)
    def test_strip_styles_preserves_text(self, doc: Doc) -> None:
        """Removing every style leaves the plain rendering unchanged."""
        assert render_plain(strip_styles(doc)) == render_plain(doc)

    @pytest.mark.unit
    @given(doc=documents)
    @settings(max_examples=50)
    def test_rendering_does_not_change_document(self, doc: Doc) -> None:
        before = repr(doc)
        render_plain(doc)

        assert repr(doc) == before


class RecordingSink:
    """Sink that records every call, for checking the event protocol."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def write(self, value: str) -> None:
        self.events.append(("write", value))

    def newline(self) -> None:
        self.events.append(("newline", None))

    def set_style(self, style: Style) -> None:
        self.events.append(("set_style", style))

    def reset_style(self) -> None:
        self.events.append(("reset_style", None))


class TestSinks:
    """Tests for the sink protocol and implementations."""

    @pytest.mark.unit
    def test_sinks_satisfy_protocol(self) -> None:
        assert isinstance(PlainSink(), Sink)
        assert isinstance(ClickSink(), Sink)
        assert isinstance(RecordingSink(), Sink)

    @pytest.mark.unit
    def test_styled_span_is_wrapped_in_set_and_reset(self) -> None:
        style = color_style("red")
        sink = RecordingSink()

        render(concat([text("a"), styled("b", style), line()]), sink)

        assert sink.events == [
            ("write", "a"),
            ("set_style", style),
            ("write", "b"),
            ("reset_style", None),
            ("newline", None),
        ]

    @pytest.mark.unit
    def test_click_sink_with_color_emits_ansi(self) -> None:
        output = StringIO()

        render_styled(styled("alert", color_style("red", bold=True)), file=output, color=True)

        result = output.getvalue()
        assert "\x1b[" in result
        assert "alert" in result

    @pytest.mark.unit
    def test_click_sink_without_color_matches_plain(self) -> None:
        doc = concat([styled("Name:", color_style("green", bold=True)), text(" m"), line()])
        output = StringIO()

        render_styled(doc, file=output, color=False)

        assert output.getvalue() == render_plain(doc)

    @pytest.mark.unit
    def test_style_apply_omits_unset_attributes(self) -> None:
        """Unset bold/dim must not emit explicit 'off' codes."""
        result = Style(fg="red").apply("x")

        assert "\x1b[1m" not in result
        assert "\x1b[22m" not in result
        assert result.endswith("\x1b[0m")
