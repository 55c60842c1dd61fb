"""Read command metadata from click commands and argparse parsers."""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

import click

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionInfo:
    """A flag or option as shown in the options table."""

    short: Optional[str] = None
    long: Optional[str] = None
    help: Optional[str] = None
    value_names: Tuple[str, ...] = ()
    possible_values: Tuple[str, ...] = ()
    default_values: Tuple[str, ...] = ()
    takes_value: bool = False


@dataclass(frozen=True)
class PositionalInfo:
    """A positional argument."""

    value_names: Tuple[str, ...] = ()
    required: bool = False
    last: bool = False
    help: Optional[str] = None


@dataclass(frozen=True)
class CommandInfo:
    """Everything the help templates know about a command."""

    name: str
    author: Optional[str] = None
    version: Optional[str] = None
    about: Optional[str] = None
    options: Tuple[OptionInfo, ...] = field(default_factory=tuple)
    positionals: Tuple[PositionalInfo, ...] = field(default_factory=tuple)


def _display_value(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name.lower()
    return str(value)


def _default_values(default: Any) -> Tuple[str, ...]:
    if default is None or callable(default):
        return ()
    if isinstance(default, (list, tuple)):
        return tuple(_display_value(item) for item in default)
    return (_display_value(default),)


def _click_option(param: click.Option) -> OptionInfo:
    short: Optional[str] = None
    long: Optional[str] = None
    for opt in param.opts:
        if opt.startswith("--"):
            if long is None:
                long = opt[2:]
        elif len(opt) == 2 and opt[0] in "-+":
            if short is None:
                short = opt[1]
    takes_value = not param.is_flag and not param.count
    value_names: Tuple[str, ...] = ()
    if takes_value:
        value_names = (param.metavar or (param.name or "value").upper(),)
    possible_values: Tuple[str, ...] = ()
    if isinstance(param.type, click.Choice):
        possible_values = tuple(_display_value(choice) for choice in param.type.choices)
    default = param.default
    # newer click releases mark "no default" with an enum sentinel
    if isinstance(default, Enum) and type(default).__module__.startswith("click"):
        default = None
    return OptionInfo(
        short=short,
        long=long,
        help=param.help,
        value_names=value_names,
        possible_values=possible_values,
        default_values=_default_values(default),
        takes_value=takes_value,
    )


def _click_argument(param: click.Argument) -> PositionalInfo:
    value_name = param.metavar or (param.name or "").upper()
    return PositionalInfo(
        value_names=(value_name,) if value_name else (),
        required=param.required,
        help=getattr(param, "help", None),
    )


def from_click_command(
    command: click.Command,
    *,
    name: Optional[str] = None,
    author: Optional[str] = None,
    version: Optional[str] = None,
) -> CommandInfo:
    """
    Collect help metadata from a click command.

    Click does not record a version or author on the command itself, so both can
    be supplied here. The command's help option is included; hidden options are
    not. The command is not modified.
    """
    prog = name or command.name or "command"
    ctx = click.Context(command, info_name=prog)
    options: List[OptionInfo] = []
    positionals: List[PositionalInfo] = []
    for param in command.get_params(ctx):
        if isinstance(param, click.Option):
            if param.hidden:
                logger.debug("Skipping hidden option %s", param.name)
                continue
            options.append(_click_option(param))
        elif isinstance(param, click.Argument):
            positionals.append(_click_argument(param))
    about = command.short_help or command.help
    return CommandInfo(
        name=prog,
        author=author,
        version=version,
        about=about.strip() if about else None,
        options=tuple(options),
        positionals=tuple(positionals),
    )


def _argparse_value_names(action: argparse.Action) -> Tuple[str, ...]:
    metavar = action.metavar
    if isinstance(metavar, tuple):
        return tuple(str(item) for item in metavar)
    if metavar:
        return (str(metavar),)
    if action.dest and action.dest != argparse.SUPPRESS:
        if action.option_strings:
            return (action.dest.upper(),)
        return (action.dest,)
    return ()


def _argparse_default(action: argparse.Action) -> Tuple[str, ...]:
    if action.default is argparse.SUPPRESS:
        return ()
    return _default_values(action.default)


def from_argparse(
    parser: argparse.ArgumentParser,
    *,
    name: Optional[str] = None,
    author: Optional[str] = None,
    version: Optional[str] = None,
) -> CommandInfo:
    """
    Collect help metadata from an argparse parser.

    The version is taken from a ``version`` action when the parser has one and no
    explicit *version* is given. Actions whose help is ``argparse.SUPPRESS`` are
    left out.
    """
    options: List[OptionInfo] = []
    positionals: List[PositionalInfo] = []
    for action in parser._actions:
        if isinstance(action, argparse._VersionAction) and version is None:
            version = action.version
        if action.help == argparse.SUPPRESS:
            logger.debug("Skipping suppressed argument %s", action.dest)
            continue
        if action.option_strings:
            short: Optional[str] = None
            long: Optional[str] = None
            for opt in action.option_strings:
                if opt.startswith("--"):
                    long = long or opt[2:]
                elif len(opt) == 2:
                    short = short or opt[1]
            takes_value = action.nargs != 0
            options.append(
                OptionInfo(
                    short=short,
                    long=long,
                    help=action.help,
                    value_names=_argparse_value_names(action) if takes_value else (),
                    possible_values=tuple(_display_value(c) for c in action.choices or ()),
                    default_values=_argparse_default(action) if takes_value else (),
                    takes_value=takes_value,
                )
            )
        else:
            positionals.append(
                PositionalInfo(
                    value_names=_argparse_value_names(action),
                    required=action.nargs not in ("?", "*", argparse.REMAINDER),
                    last=action.nargs == argparse.REMAINDER,
                    help=action.help,
                )
            )
    return CommandInfo(
        name=name or parser.prog,
        author=author,
        version=version,
        about=parser.description,
        options=tuple(options),
        positionals=tuple(positionals),
    )


def read_command(
    command: Any,
    *,
    name: Optional[str] = None,
    author: Optional[str] = None,
    version: Optional[str] = None,
) -> CommandInfo:
    """Dispatch to the reader matching *command*'s type."""

    if isinstance(command, CommandInfo):
        return command
    if isinstance(command, click.Command):
        return from_click_command(command, name=name, author=author, version=version)
    if isinstance(command, argparse.ArgumentParser):
        return from_argparse(command, name=name, author=author, version=version)
    raise TypeError(
        "expected a click.Command, an argparse.ArgumentParser or a CommandInfo, "
        f"got {type(command).__name__}"
    )


__all__ = [
    "CommandInfo",
    "OptionInfo",
    "PositionalInfo",
    "from_argparse",
    "from_click_command",
    "read_command",
]
