"""Default help for a small click program: ``python examples/area.py --help``."""
from __future__ import annotations

import click

from mdhelp import Printer

INTRO = """
Compute `height x width`
*You can do it either precisely (enough) or fast (I mean not too slow)*.
"""


@click.command(name="area", add_help_option=False)
@click.option("--help", "show_help", is_flag=True, help="Print help")
@click.option("-h", "--height", default=9, help="Height, that is the distance between bottom and top")
@click.option("-w", "--width", default=3, help="Width, from there, to there")
@click.option(
    "-s",
    "--strategy",
    type=click.Choice(["fast", "precise"]),
    default="fast",
    help="Computation strategy",
)
@click.argument("root", required=False)
def area(show_help: bool, height: int, width: int, strategy: str, root: str | None) -> None:
    if show_help:
        Printer(area, version="1.0.0", author="The area authors").with_introduction(INTRO).print_help()
        return
    click.echo(f"Computation strategy: {strategy}")
    click.echo(f"{width} x {height} = {width * height}")


if __name__ == "__main__":
    area()
