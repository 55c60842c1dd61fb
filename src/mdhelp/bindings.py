"""Seed a template expander from command metadata."""
from __future__ import annotations

import logging
from typing import List

from .expander import TemplateExpander
from .metadata import CommandInfo, OptionInfo, PositionalInfo

logger = logging.getLogger(__name__)


def table_cell(text: str) -> str:
    """Make *text* safe inside a markdown table cell."""

    return " ".join(text.split()).replace("|", "\\|")


def format_possible_values(values: List[str]) -> str:
    """
    Format the accepted values of an option for the end of its help cell.

    Parameters:
        values (List[str]): Accepted values, in declaration order.

    Returns:
        str: A fragment such as `` Possible values: [`fast`, `precise`]``, with a leading space so it can follow the help text directly.
    """
    quoted = ", ".join(f"`{value}`" for value in values)
    return f" Possible values: [{quoted}]"


def format_default(value: str) -> str:
    """
    Format an option's default value for the end of its help cell.

    Parameters:
        value (str): The default, already converted to its display form.

    Returns:
        str: A fragment such as `` Default: `fast` `` starting with a space.
    """
    return f" Default: `{value}`"


def _bind_option(expander: TemplateExpander, option: OptionInfo) -> None:
    row = expander.sub("option-lines")
    if option.short:
        row.set("short", f"-{option.short}")
    if option.long:
        row.set("long", f"--{option.long}")
    if option.help:
        row.set_md("help", table_cell(option.help))
    if option.takes_value and option.value_names:
        row.set("value", option.value_names[0])
    if option.possible_values:
        row.set("possible_values", format_possible_values(list(option.possible_values)))
        # Defaults are only shown next to an enumerated set of values.
        if option.default_values:
            row.set("default", format_default(option.default_values[0]))


def positional_fragment(positional: PositionalInfo) -> str:
    """Usage-line fragment for one positional, e.g. `` [ROOT]`` or `` -- LAST``."""

    key = positional.value_names[0]
    fragment = " "
    if not positional.required:
        fragment += "["
    if positional.last:
        fragment += "-- "
    fragment += key
    if not positional.required:
        fragment += "]"
    return fragment


def build_expander(info: CommandInfo) -> TemplateExpander:
    """
    Build the expander the default templates are filled from.

    Sets ``name``, ``author``, ``version`` and ``about`` scalars, one
    ``option-lines`` row per displayable option, one ``positional-lines`` row
    per named positional and the ``positional-args`` usage fragment. Source
    order is kept.
    """
    expander = TemplateExpander()
    expander.set_default("")
    expander.set("name", info.name)
    if info.author:
        expander.set("author", info.author)
    if info.version:
        expander.set("version", info.version)
    if info.about:
        expander.set_md("about", info.about)

    for option in info.options:
        if not option.short and not option.long:
            logger.debug("Skipping option without short or long form: %r", option)
            continue
        _bind_option(expander, option)

    positional_args = ""
    for positional in info.positionals:
        if not positional.value_names:
            logger.debug("Skipping positional without a value name: %r", positional)
            continue
        positional_args += positional_fragment(positional)
        row = expander.sub("positional-lines")
        row.set("key", positional.value_names[0])
        if positional.help:
            row.set("help", positional.help)
    expander.set("positional-args", positional_args)
    return expander


__all__ = [
    "build_expander",
    "format_default",
    "format_possible_values",
    "positional_fragment",
    "table_cell",
]
