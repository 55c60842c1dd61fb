"""Tests for reading command metadata from click and argparse."""

from __future__ import annotations

import argparse

import click
import pytest

from mdhelp.metadata import (
    CommandInfo,
    OptionInfo,
    PositionalInfo,
    from_argparse,
    from_click_command,
    read_command,
)


class TestClick:
    def test_options_keep_declaration_order(self, area_command: click.Command) -> None:
        info = from_click_command(area_command)
        assert [(o.short, o.long) for o in info.options] == [
            ("h", "height"),
            ("w", "width"),
            ("s", "strategy"),
            (None, "verbose"),
            (None, "help"),
        ]

    def test_value_options(self, area_command: click.Command) -> None:
        height = from_click_command(area_command).options[0]
        assert height.takes_value
        assert height.value_names == ("HEIGHT",)
        assert height.default_values == ("9",)
        assert height.possible_values == ()
        assert height.help == "Height, that is the distance between bottom and top"

    def test_choice_options_list_possible_values(self, area_command: click.Command) -> None:
        strategy = from_click_command(area_command).options[2]
        assert strategy.possible_values == ("fast", "precise")
        assert strategy.default_values == ("fast",)

    def test_flags_take_no_value(self, area_command: click.Command) -> None:
        verbose = from_click_command(area_command).options[3]
        assert not verbose.takes_value
        assert verbose.value_names == ()

    def test_hidden_options_are_left_out(self, area_command: click.Command) -> None:
        assert all(o.long != "secret" for o in from_click_command(area_command).options)

    def test_arguments(self, area_command: click.Command) -> None:
        info = from_click_command(area_command)
        assert info.positionals == (PositionalInfo(value_names=("ROOT",), required=False),)

    def test_names_and_overrides(self, area_command: click.Command) -> None:
        info = from_click_command(area_command, name="area-cli", author="Ann", version="2.0")
        assert info.name == "area-cli"
        assert info.author == "Ann"
        assert info.version == "2.0"
        assert info.about == "Compute height x width."

    def test_explicit_metavar(self) -> None:
        @click.command(add_help_option=False)
        @click.option("-s", "--separator", metavar="SEP")
        @click.argument("paths", nargs=-1, metavar="PATHS")
        def cmd(separator: str, paths: tuple) -> None:
            pass  # pragma: no cover

        info = from_click_command(cmd)
        assert info.options == (
            OptionInfo(short="s", long="separator", value_names=("SEP",), takes_value=True),
        )
        assert info.positionals[0].value_names == ("PATHS",)

    def test_command_is_not_modified(self, area_command: click.Command) -> None:
        before = [param.name for param in area_command.params]
        from_click_command(area_command)
        assert [param.name for param in area_command.params] == before


class TestArgparse:
    @pytest.fixture
    def parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog="tool", description="Does things")
        parser.add_argument("path", help="Input path")
        parser.add_argument("-v", "--verbose", action="store_true", help="Talk more")
        parser.add_argument("--mode", choices=["a", "b"], default="a", help="Mode")
        parser.add_argument("--level", type=int, default=2, metavar="N")
        parser.add_argument("--internal", help=argparse.SUPPRESS)
        parser.add_argument("--version", action="version", version="2.1")
        parser.add_argument("rest", nargs=argparse.REMAINDER, help="Passed through")
        return parser

    def test_command_facts(self, parser: argparse.ArgumentParser) -> None:
        info = from_argparse(parser)
        assert info.name == "tool"
        assert info.about == "Does things"
        assert info.version == "2.1"

    def test_options(self, parser: argparse.ArgumentParser) -> None:
        options = {o.long: o for o in from_argparse(parser).options}
        assert list(options) == ["help", "verbose", "mode", "level", "version"]
        assert options["help"].short == "h"
        assert not options["verbose"].takes_value
        assert options["verbose"].default_values == ()
        assert options["mode"].possible_values == ("a", "b")
        assert options["mode"].default_values == ("a",)
        assert options["mode"].value_names == ("MODE",)
        assert options["level"].value_names == ("N",)
        assert options["level"].default_values == ("2",)

    def test_positionals(self, parser: argparse.ArgumentParser) -> None:
        path, rest = from_argparse(parser).positionals
        assert path == PositionalInfo(value_names=("path",), required=True, help="Input path")
        assert rest.last
        assert not rest.required


def test_read_command_dispatch(area_command: click.Command) -> None:
    info = CommandInfo(name="x")
    assert read_command(info) is info
    assert read_command(area_command).name == "area"
    assert read_command(argparse.ArgumentParser(prog="p")).name == "p"
    with pytest.raises(TypeError, match="click.Command"):
        read_command(object())
