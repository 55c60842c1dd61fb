"""Styles used to turn help markdown into terminal output."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from rich import box
from rich.box import Box
from rich.console import Console, ConsoleOptions, RenderResult
from rich.markdown import Heading, ListItem, Markdown, TableElement
from rich.segment import Segment
from rich.table import Table
from rich.theme import Theme

from .terminal import background_luma

logger = logging.getLogger(__name__)

LIGHT_LUMA_THRESHOLD = 0.85
DARK_LUMA_THRESHOLD = 0.2

_BASE_STYLES: Dict[str, str] = {
    "markdown.code": "bold cyan",
    "markdown.h1": "bold",
    "markdown.h2": "bold underline",
}

_DARK_STYLES: Dict[str, str] = {
    "markdown.h1": "bold bright_yellow",
    "markdown.h2": "bold bright_yellow",
    "markdown.strong": "bold bright_yellow",
    "markdown.em": "italic bright_white",
    "markdown.code": "bright_cyan",
    "markdown.item.bullet": "bright_yellow",
}

_LIGHT_STYLES: Dict[str, str] = {
    "markdown.h1": "bold dark_orange3",
    "markdown.h2": "bold dark_orange3",
    "markdown.strong": "bold dark_orange3",
    "markdown.em": "italic grey23",
    "markdown.code": "dark_cyan",
    "markdown.item.bullet": "dark_orange3",
}


class _SkinHeading(Heading):
    """Left-aligned heading without the h1 frame, so headings never span the full width."""

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        text = self.text
        text.justify = "left"
        if self.tag == "h2":
            yield Segment.line()
        yield text


class _SkinTable(TableElement):
    """Markdown table drawn with the skin's box, keeping column alignment from the markdown."""

    table_box: Box = box.ROUNDED
    border_style: Optional[str] = None
    header_style: str = "bold"

    @classmethod
    def create(cls, markdown: Markdown, token: Any) -> "_SkinTable":
        element = cls()
        skin = getattr(markdown, "skin", None)
        if skin is not None:
            element.table_box = skin.table_box
            element.border_style = skin.table_border_style
            element.header_style = skin.table_header_style
        return element

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        table = Table(
            box=self.table_box,
            border_style=self.border_style,
            header_style=self.header_style,
            show_edge=True,
        )
        if self.header is not None and self.header.row is not None:
            for column in self.header.row.cells:
                justify = column.justify if column.justify != "default" else "left"
                table.add_column(column.content, justify=justify)
        if self.body is not None:
            for row in self.body.rows:
                table.add_row(*[cell.content for cell in row.cells])
        yield table


class _SkinListItem(ListItem):
    """List item using the skin's bullet character."""

    bullet: str = " • "

    @classmethod
    def create(cls, markdown: Markdown, token: Any) -> "_SkinListItem":
        element = cls()
        skin = getattr(markdown, "skin", None)
        if skin is not None:
            element.bullet = f" {skin.bullet} "
        return element

    def render_bullet(self, console: Console, options: ConsoleOptions) -> RenderResult:
        indent = len(self.bullet)
        render_options = options.update(width=options.max_width - indent)
        lines = console.render_lines(self.elements, render_options, style=self.style)
        bullet_style = console.get_style("markdown.item.bullet", default="none")
        bullet = Segment(self.bullet, bullet_style)
        padding = Segment(" " * indent, bullet_style)
        new_line = Segment.line()
        for index, line in enumerate(lines):
            yield padding if index else bullet
            yield from line
            yield new_line


class HelpMarkdown(Markdown):
    """Markdown renderable whose headings, tables and bullets follow a :class:`HelpSkin`."""

    elements = {
        **Markdown.elements,
        "heading_open": _SkinHeading,
        "table_open": _SkinTable,
        "list_item_open": _SkinListItem,
    }

    def __init__(self, markup: str, skin: "HelpSkin") -> None:
        super().__init__(markup, code_theme=skin.code_theme, justify="left", hyperlinks=False)
        self.skin = skin

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        """
        Render the markdown, dropping blank lines ahead of the first visible line.

        Some rich releases separate a leading list or table from the text before it
        even when there is none, which would double the blank line between sections.

        Parameters:
            console (Console): Console doing the rendering.
            options (ConsoleOptions): Options carrying the width to lay out at.

        Returns:
            RenderResult: Every line from the first non-blank one on, each ended by a line break.
        """
        segments: List[Segment] = []
        for item in super().__rich_console__(console, options):
            if isinstance(item, Segment):
                segments.append(item)
            else:
                segments.extend(console.render(item, options))
        started = False
        new_line = Segment.line()
        for line in Segment.split_lines(segments):
            if not started:
                if not "".join(segment.text for segment in line if not segment.control).strip():
                    continue
                started = True
            yield from line
            yield new_line


@dataclass
class HelpSkin:
    """
    Rich styles and drawing characters for help output.

    ``styles`` maps rich theme names (``markdown.strong``, ``markdown.code``, ...)
    to style definitions and may be edited freely before printing.
    """

    styles: Dict[str, str] = field(default_factory=lambda: dict(_BASE_STYLES))
    table_box: Box = box.ROUNDED
    table_border_style: Optional[str] = None
    table_header_style: str = "bold"
    bullet: str = "•"
    code_theme: str = "monokai"

    @classmethod
    def default(cls) -> "HelpSkin":
        return cls()

    @classmethod
    def dark(cls) -> "HelpSkin":
        return cls(
            styles={**_BASE_STYLES, **_DARK_STYLES},
            table_border_style="grey50",
            table_header_style="bold bright_white",
        )

    @classmethod
    def light(cls) -> "HelpSkin":
        return cls(
            styles={**_BASE_STYLES, **_LIGHT_STYLES},
            table_border_style="grey62",
            table_header_style="bold black",
            code_theme="default",
        )

    @property
    def theme(self) -> Theme:
        return Theme(self.styles)

    def set_style(self, name: str, style: str) -> "HelpSkin":
        self.styles[name] = style
        return self

    def limit_to_ascii(self) -> "HelpSkin":
        """Draw tables and bullets with ASCII characters only."""
        self.table_box = box.ASCII
        self.bullet = "*"
        return self

    def markdown(self, text: str) -> HelpMarkdown:
        return HelpMarkdown(text, self)


def make_skin() -> HelpSkin:
    """Pick a skin for the detected terminal background (light, dark or unknown)."""

    luma = background_luma()
    if luma is not None and luma > LIGHT_LUMA_THRESHOLD:
        logger.debug("Terminal background luma %.2f; using light skin", luma)
        return HelpSkin.light()
    if luma is not None and luma < DARK_LUMA_THRESHOLD:
        logger.debug("Terminal background luma %.2f; using dark skin", luma)
        return HelpSkin.dark()
    logger.debug("Terminal background unknown (luma=%s); using default skin", luma)
    return HelpSkin.default()


__all__ = ["HelpMarkdown", "HelpSkin", "make_skin"]
