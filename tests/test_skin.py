from __future__ import annotations

import os
from collections.abc import Callable

import pytest
from rich import box
from rich.console import Console
from rich.style import Style

from mdhelp import terminal
from mdhelp.skin import HelpSkin, make_skin
from mdhelp.terminal import MIN_WIDTH, THEME_ENV_VAR, background_luma, terminal_width


@pytest.fixture(autouse=True)
def _clean_theme_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COLORFGBG", raising=False)
    monkeypatch.delenv(THEME_ENV_VAR, raising=False)


@pytest.mark.parametrize(
    "colorfgbg, expected",
    [
        ("15;0", 0.0),
        ("0;15", 1.0),
        ("0;default;15", 1.0),
        ("7;8", 0.5),
        ("garbage", None),
        ("", None),
    ],
)
def test_background_luma_from_colorfgbg(monkeypatch: pytest.MonkeyPatch, colorfgbg: str, expected: float | None) -> None:
    monkeypatch.setenv("COLORFGBG", colorfgbg)
    assert background_luma() == expected


def test_theme_env_var_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLORFGBG", "15;0")
    monkeypatch.setenv(THEME_ENV_VAR, "light")
    assert background_luma() == 1.0


def test_make_skin_follows_background(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLORFGBG", "15;0")
    assert make_skin() == HelpSkin.dark()
    monkeypatch.setenv("COLORFGBG", "0;15")
    assert make_skin() == HelpSkin.light()
    monkeypatch.setenv("COLORFGBG", "7;8")
    assert make_skin() == HelpSkin.default()
    monkeypatch.delenv("COLORFGBG")
    assert make_skin() == HelpSkin.default()


def test_limit_to_ascii() -> None:
    skin = HelpSkin.dark().limit_to_ascii()
    assert skin.table_box is box.ASCII
    assert skin.bullet == "*"


def test_set_style_reaches_the_theme() -> None:
    skin = HelpSkin().set_style("markdown.strong", "bold red")
    assert skin.theme.styles["markdown.strong"] == Style.parse("bold red")


def test_skins_do_not_share_styles() -> None:
    first = HelpSkin()
    first.set_style("markdown.em", "red")
    assert "markdown.em" not in HelpSkin().styles


def test_ascii_bullets(make_console: Callable[[int], Console]) -> None:
    console = make_console(40)
    console.print(HelpSkin().limit_to_ascii().markdown("* one\n* two\n"))
    lines = console.file.getvalue().splitlines()  # type: ignore[attr-defined]
    assert [line.rstrip() for line in lines] == [" * one", " * two"]


def test_terminal_width_uses_console(make_console: Callable[[int], Console]) -> None:
    assert terminal_width(make_console(123)) == 123
    assert terminal_width(make_console(5)) == MIN_WIDTH


def test_terminal_width_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(terminal.shutil, "get_terminal_size", lambda fallback: os.terminal_size((91, 30)))
    assert terminal_width() == 91
