from __future__ import annotations

import io
from collections.abc import Callable

import click
import pytest
from rich.console import Console

from mdhelp.metadata import CommandInfo, OptionInfo, PositionalInfo
from mdhelp.skin import HelpSkin


@pytest.fixture
def make_console() -> Callable[[int], Console]:
    """Build colourless consoles of a fixed width that write into a buffer."""

    def _make(width: int = 80) -> Console:
        return Console(
            file=io.StringIO(),
            width=width,
            force_terminal=False,
            color_system=None,
            highlight=False,
            legacy_windows=False,
        )

    return _make


@pytest.fixture
def plain_skin() -> HelpSkin:
    return HelpSkin.default()


@pytest.fixture
def area_info() -> CommandInfo:
    """The two-option ``area`` command, described directly as metadata."""

    return CommandInfo(
        name="area",
        options=(
            OptionInfo(short="h", long="height", help="Height", value_names=("HEIGHT",),
                       default_values=("9",), takes_value=True),
            OptionInfo(short="w", long="width", help="Width", value_names=("WIDTH",),
                       default_values=("3",), takes_value=True),
        ),
    )


@pytest.fixture
def strategy_info() -> CommandInfo:
    return CommandInfo(
        name="area",
        version="1.0.0",
        options=(
            OptionInfo(short="h", long="height", help="Height", value_names=("HEIGHT",),
                       default_values=("9",), takes_value=True),
            OptionInfo(short="s", long="strategy", help="Computation strategy",
                       value_names=("STRATEGY",), possible_values=("fast", "precise"),
                       default_values=("fast",), takes_value=True),
        ),
        positionals=(PositionalInfo(value_names=("ROOT",), help="Root directory"),),
    )


@pytest.fixture
def area_command() -> click.Command:
    @click.command(name="area", help="Compute height x width.")
    @click.option("-h", "--height", default=9, help="Height, that is the distance between bottom and top")
    @click.option("-w", "--width", default=3, help="Width, from there, to there")
    @click.option(
        "-s",
        "--strategy",
        type=click.Choice(["fast", "precise"]),
        default="fast",
        help="Computation strategy",
    )
    @click.option("--verbose", is_flag=True, help="Talk more")
    @click.option("--secret", hidden=True)
    @click.argument("root", required=False)
    def area(height: int, width: int, strategy: str, verbose: bool, secret: str, root: str) -> None:
        pass  # pragma: no cover

    return area
