"""An extra "examples" section with its own repeated block: ``python examples/with_examples.py --help``."""
from __future__ import annotations

from dataclasses import dataclass

import click

from mdhelp import Printer

INTRO_TEMPLATE = """
Compute `height x width`
"""

EXAMPLES_TEMPLATE = """
**Examples:**

${examples
**${example-number})** ${example-title}: `${example-cmd}`
${example-comments}

}
"""


@dataclass(frozen=True)
class Example:
    title: str
    cmd: str
    comments: str = ""


EXAMPLES = (
    Example("Default computation on your prefered path", "withex ~"),
    Example(
        "Compute for a height of 37",
        "withex -h 37",
        "This uses the default value (`3`) for the width",
    ),
    Example(
        "Maximum precision",
        "withex -h 37 -w 28 --strategy precise",
        "This may take a while but it's *super* precise",
    ),
)


def print_help(ascii_only: bool = False) -> None:
    printer = Printer(withex).with_("introduction", INTRO_TEMPLATE).without("author")
    if ascii_only:
        printer.skin.limit_to_ascii()
    printer.template_keys.append("examples")
    printer.set_template("examples", EXAMPLES_TEMPLATE)
    for number, example in enumerate(EXAMPLES, start=1):
        (
            printer.expander.sub("examples")
            .set("example-number", number)
            .set("example-title", example.title)
            .set("example-cmd", example.cmd)
            .set_md("example-comments", example.comments)
        )
    printer.print_help()


@click.command(name="withex", add_help_option=False)
@click.option("--help", "show_help", is_flag=True, help="Print help")
@click.option("--ascii", "ascii_only", is_flag=True, help="Only use ASCII characters")
@click.option("-h", "--height", default=9, help="Height, that is the distance between bottom and top")
@click.option("-w", "--width", default=3, help="Width, from there, to there, eg `4` or `5`")
@click.option("--strategy", type=click.Choice(["fast", "precise"]), default="fast", help="Computation strategy")
@click.argument("root", required=False)
def withex(show_help: bool, ascii_only: bool, height: int, width: int, strategy: str, root: str | None) -> None:
    if show_help:
        print_help(ascii_only)
        return
    click.echo(f"Computation strategy: {strategy}")
    click.echo(f"{width} x {height} = {width * height}")


if __name__ == "__main__":
    withex()
