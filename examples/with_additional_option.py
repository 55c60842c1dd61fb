"""Add a row to the options table by hand: ``python examples/with_additional_option.py --help``."""
from __future__ import annotations

import click

from mdhelp import Printer


@click.command(name="wao", add_help_option=False)
@click.option("--help", "show_help", is_flag=True, help="Print help")
@click.option("-h", "--height", default=9, help="Height, that is the distance between bottom and top")
@click.option("-w", "--width", default=3, help="Width, from there, to there, eg `4` or `5`")
@click.argument("root", required=False)
def wao(show_help: bool, height: int, width: int, root: str | None) -> None:
    if show_help:
        print_help()
        return
    click.echo(f"{width} x {height} = {width * height}")


def print_help() -> None:
    printer = Printer(wao).without("author")
    (
        printer.expander.sub("option-lines")
        .set("short", "-z")
        .set("long", "--zeta")
        .set("value", "ZETA")
        .set("help", "Set the index of the last letter of the greek alphabet")
    )
    printer.print_help()


if __name__ == "__main__":
    wao()
