"""Styled documents: composable output that renders to a terminal or a string.

Reports are built as data, not printed directly. A document is a tree of
three node kinds:

- Text: a run of text, optionally carrying a Style
- Line: a line break
- Concat: an ordered sequence of sub-documents

Documents are immutable. ``append`` returns a new node and flattens into an
existing Concat so repeated appends do not nest.

Rendering drives a Sink. ClickSink writes through click's styling, so ANSI
codes are emitted only when the stream supports them (or when forced with
``color=True``). PlainSink ignores every style and collects the text.

Usage:
    from ssvv_cli.document import color_style, line, render_plain, render_styled, styled, text

    doc = styled("Name:", color_style("green", bold=True)).append(text(" m")).append(line())
    render_styled(doc)           # to stdout, colored when it is a terminal
    render_plain(doc)            # "Name: m\\n"
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, TextIO, runtime_checkable

import click


@dataclass(frozen=True)
class Style:
    """Opaque style descriptor for a Text node.

    Attributes:
        fg: Foreground color name as understood by click (e.g. "red").
        bold: Render in bold.
        dim: Render dimmed.
    """

    fg: str | None = None
    bold: bool = False
    dim: bool = False

    def apply(self, value: str) -> str:
        """Wrap value in the ANSI codes for this style (reset included)."""
        # click emits an explicit "off" code for False, so pass None instead
        return click.style(
            value,
            fg=self.fg,
            bold=True if self.bold else None,
            dim=True if self.dim else None,
        )


def color_style(fg: str, bold: bool = False) -> Style:
    """Style with a foreground color, optionally bold."""
    return Style(fg=fg, bold=bold)


def dimmed_style() -> Style:
    """Style for de-emphasized text."""
    return Style(dim=True)


class Doc:
    """Base class for document nodes."""

    def append(self, other: Doc) -> Concat:
        """Return a new document with other after this one."""
        return Concat((self, other))


@dataclass(frozen=True)
class Text(Doc):
    """A run of text, styled when style is set."""

    text: str
    style: Style | None = None


@dataclass(frozen=True)
class Line(Doc):
    """A line break."""


@dataclass(frozen=True)
class Concat(Doc):
    """An ordered sequence of documents."""

    parts: tuple[Doc, ...] = field(default=())

    def append(self, other: Doc) -> Concat:
        """Return a new Concat with other added at the end (flat, not nested)."""
        return Concat((*self.parts, other))


def text(value: str) -> Text:
    """Plain text."""
    return Text(value)


def styled(value: str, style: Style) -> Text:
    """Styled text."""
    return Text(value, style)


def line() -> Line:
    """A line break."""
    return Line()


def concat(docs: Iterable[Doc]) -> Concat:
    """Concatenate documents in order."""
    return Concat(tuple(docs))


def empty() -> Concat:
    """A document that renders to nothing."""
    return Concat()


# =============================================================================
# Sinks
# =============================================================================


@runtime_checkable
class Sink(Protocol):
    """Receiver of rendering events.

    Styled spans arrive as ``set_style``, ``write``, ``reset_style``.
    """

    def write(self, value: str) -> None: ...

    def newline(self) -> None: ...

    def set_style(self, style: Style) -> None: ...

    def reset_style(self) -> None: ...


class ClickSink:
    """Sink that writes to a stream through click.

    Args:
        file: Stream to write to (default: stdout).
        color: None to let click detect terminal support, True to force
            ANSI codes, False to strip them.
    """

    def __init__(self, file: TextIO | None = None, color: bool | None = None) -> None:
        self.file = file
        self.color = color
        self._style: Style | None = None

    def write(self, value: str) -> None:
        if self._style is not None:
            value = self._style.apply(value)
        click.echo(value, file=self.file, nl=False, color=self.color)

    def newline(self) -> None:
        click.echo("", file=self.file, color=self.color)

    def set_style(self, style: Style) -> None:
        self._style = style

    def reset_style(self) -> None:
        self._style = None


class PlainSink:
    """Sink that ignores styling and collects text into a string."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, value: str) -> None:
        self._parts.append(value)

    def newline(self) -> None:
        self._parts.append("\n")

    def set_style(self, style: Style) -> None:
        pass

    def reset_style(self) -> None:
        pass

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)


# =============================================================================
# Interpreters
# =============================================================================


def render(doc: Doc, sink: Sink) -> None:
    """Render a document into a sink. The document is not modified."""
    if isinstance(doc, Text):
        if doc.style is None:
            sink.write(doc.text)
        else:
            sink.set_style(doc.style)
            sink.write(doc.text)
            sink.reset_style()
    elif isinstance(doc, Line):
        sink.newline()
    elif isinstance(doc, Concat):
        for part in doc.parts:
            render(part, sink)
    else:
        raise TypeError(f"Unknown document node: {type(doc).__name__}")


def render_plain(doc: Doc) -> str:
    """Render a document to a plain string with all styling ignored."""
    sink = PlainSink()
    render(doc, sink)
    return sink.getvalue()


def render_styled(doc: Doc, *, file: TextIO | None = None, color: bool | None = None) -> None:
    """Render a document to a stream, styled where the stream supports it.

    Args:
        doc: Document to render.
        file: Stream to write to (default: stdout).
        color: Force (True) or strip (False) ANSI codes; None auto-detects.
    """
    render(doc, ClickSink(file=file, color=color))


def strip_styles(doc: Doc) -> Doc:
    """Return an equivalent document with the style removed from every Text."""
    if isinstance(doc, Text):
        return Text(doc.text)
    if isinstance(doc, Concat):
        return Concat(tuple(strip_styles(part) for part in doc.parts))
    return doc
