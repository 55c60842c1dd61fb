"""Print a command's help from the registered templates."""
from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Tuple

from rich.console import Console

from .bindings import build_expander
from .expander import TemplateExpander
from .metadata import CommandInfo, read_command
from .rendering import FormattedText
from .skin import HelpSkin, make_skin
from .templates import TemplateRegistry
from .terminal import terminal_width

logger = logging.getLogger(__name__)


class Printer:
    """
    Help printer for one command.

    The command's metadata is read once, here, into the expander. Templates,
    their order and the expander's bindings may then be changed freely before
    calling :meth:`print_help`.

    Parameters:
        command: A ``click.Command``, an ``argparse.ArgumentParser`` or a
            :class:`~mdhelp.metadata.CommandInfo`.
        name: Program name override (defaults to the command's own name).
        author: Author shown by the ``author`` section.
        version: Version shown in the title.
        skin: Styles to render with; picked from the terminal background when omitted.
        console: Rich console to write to; a stdout console when omitted.
    """

    def __init__(
        self,
        command: Any,
        *,
        name: Optional[str] = None,
        author: Optional[str] = None,
        version: Optional[str] = None,
        skin: Optional[HelpSkin] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.info: CommandInfo = read_command(command, name=name, author=author, version=version)
        self._expander = build_expander(self.info)
        self._registry = TemplateRegistry.with_defaults()
        self.skin = skin if skin is not None else make_skin()
        self.console = console if console is not None else Console(highlight=False)
        self.full_width = False
        self.max_width: Optional[int] = None
        self.blank_line_between_sections = True

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def with_skin(self, skin: HelpSkin) -> "Printer":
        """
        Replace the skin used for every later print.

        Parameters:
            skin (HelpSkin): Styles, table box and bullet to render with.

        Returns:
            Printer: This printer, for chaining.
        """
        self.skin = skin
        return self

    def with_max_width(self, width: int) -> "Printer":
        """
        Cap the rendering width so very wide terminals are not filled.

        Long sentences are easier to read on wide terminals with a cap of about
        100 to 150 columns.

        Parameters:
            width (int): Maximum number of columns; the terminal width still applies when smaller.

        Returns:
            Printer: This printer, for chaining.

        Raises:
            ValueError: If *width* is not positive.
        """
        if width <= 0:
            raise ValueError("max width must be positive")
        self.max_width = width
        return self

    def with_full_width(self, full_width: bool = True) -> "Printer":
        """
        Choose between immediate printing and width equalization.

        Parameters:
            full_width (bool): When true, each section is printed at the available width as soon as it is expanded; when false, all sections share the widest section's content width.

        Returns:
            Printer: This printer, for chaining.
        """
        self.full_width = full_width
        return self

    def set_template(self, key: str, template: str) -> None:
        """
        Add or replace the template for *key*.

        A key that is not in :attr:`template_keys` is stored but not printed until
        it is added to the order.

        Raises:
            TemplateError: If *template* is malformed; the previous template is kept.
        """
        self._registry.set(key, template)

    def with_(self, key: str, template: str) -> "Printer":
        """Chaining form of :meth:`set_template`."""
        self.set_template(key, template)
        return self

    def without(self, key: str) -> "Printer":
        """
        Remove the template for *key* so its section is not printed.

        The key keeps its place in :attr:`template_keys`; removing a missing key
        does nothing.

        Returns:
            Printer: This printer, for chaining.
        """
        self._registry.unset(key)
        return self

    def with_introduction(self, template: str) -> "Printer":
        return self.with_("introduction", template)

    def with_bugs(self, template: str) -> "Printer":
        return self.with_("bugs", template)

    @property
    def templates(self) -> TemplateRegistry:
        return self._registry

    @property
    def template_keys(self) -> List[str]:
        """Mutable print order; keys without a template are ignored."""
        return self._registry.order

    @property
    def expander(self) -> TemplateExpander:
        """The bindings templates are filled from; add or override variables here."""
        return self._expander

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def available_width(self) -> int:
        width = terminal_width(self.console)
        if self.max_width is not None:
            width = min(width, self.max_width)
        return width

    def expanded_sections(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(key, markdown)`` for every registered section in print order."""
        for key, template in self._registry.items():
            text = self._expander.expand(template)
            if not text.strip():
                logger.debug("Section %r expanded to nothing; skipping", key)
                continue
            yield key, text

    def print_template(self, template: str) -> None:
        """Expand and print one template at the full available width."""
        text = self._expander.expand(template)
        with self.console.use_theme(self.skin.theme):
            self.console.print(self.skin.markdown(text), width=self.available_width())

    def print_help(self) -> None:
        """Print every section, in order."""
        if self.full_width:
            self._print_help_full_width()
        else:
            self._print_help_content_width()

    def _print_help_full_width(self) -> None:
        width = self.available_width()
        with self.console, self.console.use_theme(self.skin.theme):
            for index, (_, text) in enumerate(self.expanded_sections()):
                if index and self.blank_line_between_sections:
                    self.console.print()
                self.console.print(self.skin.markdown(text), width=width)

    def render_help(self) -> List[FormattedText]:
        """
        Lay out every section and equalize their widths.

        Each section is laid out at the available width, then every section's
        rendering width is set to the widest content width among them.
        """
        width = self.available_width()
        texts = [
            FormattedText(self.skin, text, width, console=self.console)
            for _, text in self.expanded_sections()
        ]
        content_width = max((text.content_width for text in texts), default=0)
        logger.debug(
            "Equalizing %d sections to width %d (available %d)", len(texts), content_width, width
        )
        for text in texts:
            text.set_rendering_width(content_width)
        return texts

    def _print_help_content_width(self) -> None:
        with self.console, self.console.use_theme(self.skin.theme):
            for index, text in enumerate(self.render_help()):
                if index and self.blank_line_between_sections:
                    self.console.print()
                text.print(self.console)


def print_help(command: Any, **kwargs: Any) -> None:
    """Print the default help for *command*; keyword arguments go to :class:`Printer`."""

    Printer(command, **kwargs).print_help()


__all__ = ["Printer", "print_help"]
