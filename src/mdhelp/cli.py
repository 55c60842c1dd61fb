"""Command line entry point: print the help of another program's command."""
from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler

from .config import ConfigError, load_help_config
from .expander import TemplateError
from .printer import Printer


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def load_target(target: str) -> Any:
    """
    Import ``module:attribute`` and return the click command or argparse parser it names.

    A zero-argument callable that returns one of those is called first.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter("expected the form module:attribute", param_hint="TARGET")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.ClickException(f"Cannot import {module_name}: {exc}") from exc
    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise click.ClickException(f"{module_name} has no attribute {attribute}") from exc
    if not isinstance(obj, (click.Command, argparse.ArgumentParser)) and callable(obj):
        obj = obj()
    if not isinstance(obj, (click.Command, argparse.ArgumentParser)):
        raise click.ClickException(
            f"{target} is a {type(obj).__name__}, not a click command or argparse parser"
        )
    return obj


def _parse_template_option(raw: str) -> Tuple[str, str]:
    key, sep, path = raw.partition("=")
    if not sep or not key or not path:
        raise click.BadParameter("expected KEY=PATH", param_hint="--template")
    try:
        return key, Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise click.BadParameter(f"cannot read {path}: {exc}", param_hint="--template") from exc


@click.command(name="mdhelp")
@click.argument("target")
@click.option("--name", "prog_name", default=None, help="Program name shown in the help.")
@click.option("--version", "prog_version", default=None, help="Version shown in the title.")
@click.option("--author", default=None, help="Author shown under the title.")
@click.option("--full-width", is_flag=True, help="Let every section use the whole terminal width.")
@click.option("--max-width", type=click.IntRange(min=1), default=None, help="Never render wider than this.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with [printer] settings and [templates].",
)
@click.option(
    "--template",
    "template_options",
    multiple=True,
    help="Add or replace a section template read from a file, as KEY=PATH. Repeatable.",
)
@click.option("--without", "without_keys", multiple=True, help="Drop a section. Repeatable.")
@click.option("--introduction", default=None, help="Markdown shown after the title.")
@click.option("--ascii", "ascii_only", is_flag=True, help="Only draw ASCII characters.")
@click.option(
    "--app-dir",
    default=".",
    show_default=True,
    help="Directory added to the import path before importing TARGET.",
)
@click.option("--verbose", is_flag=True, help="Log diagnostic output to stderr.")
def cli(
    target: str,
    prog_name: Optional[str],
    prog_version: Optional[str],
    author: Optional[str],
    full_width: bool,
    max_width: Optional[int],
    config_path: Optional[Path],
    template_options: Tuple[str, ...],
    without_keys: Tuple[str, ...],
    introduction: Optional[str],
    ascii_only: bool,
    app_dir: str,
    verbose: bool,
) -> None:
    """Print the help of TARGET, a click command or argparse parser given as module:attribute."""

    _configure_logging(verbose)
    if app_dir not in sys.path:
        sys.path.insert(0, app_dir)
    command = load_target(target)
    printer = Printer(command, name=prog_name, version=prog_version, author=author)
    try:
        if config_path is not None:
            load_help_config(config_path).apply(printer)
        if introduction:
            printer.with_introduction(introduction)
        for raw in template_options:
            key, template = _parse_template_option(raw)
            printer.set_template(key, template)
            if key not in printer.template_keys:
                printer.template_keys.append(key)
    except (ConfigError, TemplateError) as exc:
        raise click.ClickException(str(exc)) from exc
    for key in without_keys:
        printer.without(key)
    if full_width:
        printer.full_width = True
    if max_width is not None:
        printer.with_max_width(max_width)
    if ascii_only:
        printer.skin.limit_to_ascii()
    printer.print_help()


def main() -> None:
    cli()


__all__ = ["cli", "load_target", "main"]
