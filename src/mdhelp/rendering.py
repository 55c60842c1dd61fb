"""Laid-out help sections with a measurable content width."""
from __future__ import annotations

from typing import List

from rich.cells import cell_len
from rich.console import Console

from .skin import HelpMarkdown, HelpSkin


def _measure_lines(console: Console, renderable: HelpMarkdown, width: int) -> List[str]:
    options = console.options.update_width(width)
    lines = console.render_lines(renderable, options, pad=False)
    return ["".join(segment.text for segment in line if not segment.control) for line in lines]


class FormattedText:
    """
    A markdown section laid out by a skin.

    ``content_width`` is measured once, at the width the text was laid out with:
    it is the widest line with trailing blanks removed, so the text renders at
    that width without any extra wrapping. ``rendering_width`` starts at the
    layout width and can be narrowed before printing.
    """

    def __init__(self, skin: HelpSkin, text: str, width: int, *, console: Console) -> None:
        self.skin = skin
        self.text = text
        self.markdown = skin.markdown(text)
        self.layout_width = width
        self.rendering_width = width
        lines = _measure_lines(console, self.markdown, width)
        self.content_width = max((cell_len(line.rstrip()) for line in lines), default=0)

    def set_rendering_width(self, width: int) -> None:
        self.rendering_width = width

    def print(self, console: Console) -> None:
        console.print(self.markdown, width=self.rendering_width)

    def lines(self, console: Console) -> List[str]:
        """Plain text lines at the current rendering width, trailing blanks removed."""
        return [line.rstrip() for line in _measure_lines(console, self.markdown, self.rendering_width)]

    def __repr__(self) -> str:
        return (
            f"FormattedText(content_width={self.content_width}, "
            f"rendering_width={self.rendering_width})"
        )


__all__ = ["FormattedText"]
