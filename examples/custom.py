"""Restyled help with a custom options table: ``python examples/custom.py --help``."""
from __future__ import annotations

import click
from rich import box

from mdhelp import Printer

INTRO = """
Compute `height x width`
More info at *https://example.org*
"""

TEMPLATE_OPTIONS = """
**Options:**

|short|long|what it does|
|:-:|:-|:-|
${option-lines
|*${short}*|*${long}*|${help}${possible_values}${default}|
}
"""


@click.command(name="custom", add_help_option=False)
@click.option("--help", "show_help", is_flag=True, help="Print help")
@click.option("-h", "--height", default=9, help="Height, that is the distance between bottom and top")
@click.option("-w", "--width", default=3, help="Width, from there, to there, eg `4` or `5`")
@click.option("-k", "--kill-birds", is_flag=True, help="Kill all birds to improve computation")
@click.option("--strategy", type=click.Choice(["fast", "precise"]), default="fast", help="Computation strategy")
@click.option("-s", "--separator", metavar="SEP", help="Bird separator")
@click.argument("root", required=False)
def custom(
    show_help: bool,
    height: int,
    width: int,
    kill_birds: bool,
    strategy: str,
    separator: str | None,
    root: str | None,
) -> None:
    if show_help:
        printer = (
            Printer(custom, version="1.0.0")
            .without("author")
            .with_("introduction", INTRO)
            .with_("options", TEMPLATE_OPTIONS)
        )
        skin = printer.skin
        skin.set_style("markdown.h1", "bold color(202)")
        skin.set_style("markdown.strong", "bold color(202)")
        skin.set_style("markdown.em", "color(45)")
        skin.set_style("markdown.code", "color(223)")
        skin.table_box = box.ROUNDED
        printer.print_help()
        return
    click.echo(f"Computation strategy: {strategy}")
    click.echo(f"{width} x {height} = {width * height}")


if __name__ == "__main__":
    custom()
