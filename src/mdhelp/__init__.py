"""
Readable, width-aware help pages for command line programs.

Disable your framework's own help output, add a help flag, and print with a
:class:`Printer` in its handler::

    import click
    from mdhelp import Printer

    @click.command(add_help_option=False)
    @click.option("--help", "show_help", is_flag=True, help="Print help")
    @click.option("-w", "--width", default=3, help="Width")
    def area(show_help, width):
        if show_help:
            Printer(area, version="1.0").print_help()
            return
        ...

Every section of the help (title, usage, options, ...) is a markdown template
that can be replaced, removed or reordered.
"""
from __future__ import annotations

from .bindings import build_expander
from .config import ConfigError, HelpConfig, load_help_config
from .expander import SubBinding, TemplateError, TemplateExpander
from .metadata import (
    CommandInfo,
    OptionInfo,
    PositionalInfo,
    from_argparse,
    from_click_command,
    read_command,
)
from .printer import Printer, print_help
from .rendering import FormattedText
from .skin import HelpSkin, make_skin
from .templates import (
    DEFAULT_TEMPLATES,
    TEMPLATE_AUTHOR,
    TEMPLATE_KEYS,
    TEMPLATE_OPTIONS,
    TEMPLATE_POSITIONALS,
    TEMPLATE_TITLE,
    TEMPLATE_USAGE,
    TemplateRegistry,
)

__version__ = "0.3.0"

__all__ = [
    "CommandInfo",
    "ConfigError",
    "DEFAULT_TEMPLATES",
    "FormattedText",
    "HelpConfig",
    "HelpSkin",
    "OptionInfo",
    "PositionalInfo",
    "Printer",
    "SubBinding",
    "TEMPLATE_AUTHOR",
    "TEMPLATE_KEYS",
    "TEMPLATE_OPTIONS",
    "TEMPLATE_POSITIONALS",
    "TEMPLATE_TITLE",
    "TEMPLATE_USAGE",
    "TemplateError",
    "TemplateExpander",
    "TemplateRegistry",
    "build_expander",
    "from_argparse",
    "from_click_command",
    "load_help_config",
    "make_skin",
    "print_help",
    "read_command",
]
