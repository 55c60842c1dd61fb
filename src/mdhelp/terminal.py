"""Terminal width and background detection."""
from __future__ import annotations

import logging
import os
import shutil
from typing import Dict, Optional

from rich.console import Console

logger = logging.getLogger(__name__)

MIN_WIDTH = 20
FALLBACK_SIZE = (80, 24)

THEME_ENV_VAR = "MDHELP_THEME"

# Approximate relative luminance of the 16 standard xterm colours, indexed by
# the colour number found in COLORFGBG.
_ANSI_LUMA: Dict[int, float] = {
    0: 0.0,
    1: 0.16,
    2: 0.45,
    3: 0.5,
    4: 0.06,
    5: 0.21,
    6: 0.51,
    7: 0.9,
    8: 0.5,
    9: 0.3,
    10: 0.72,
    11: 0.93,
    12: 0.27,
    13: 0.42,
    14: 0.79,
    15: 1.0,
}


def terminal_width(console: Optional[Console] = None) -> int:
    """
    Return the number of columns available for help output.

    Uses the console's width when it reports one, then the system terminal size
    with an 80 column fallback for non-interactive output. Never returns less
    than ``MIN_WIDTH``.
    """
    if console is not None:
        width = getattr(console, "width", None)
        if isinstance(width, int) and width > 0:
            return max(width, MIN_WIDTH)
        size = getattr(console, "size", None)
        width = getattr(size, "width", None)
        if isinstance(width, int) and width > 0:
            return max(width, MIN_WIDTH)
    terminal = shutil.get_terminal_size(fallback=FALLBACK_SIZE)
    logger.debug("Console did not report a width; using terminal size %s", terminal.columns)
    return max(terminal.columns, MIN_WIDTH)


def background_luma() -> Optional[float]:
    """
    Estimate the terminal background luminance from the environment.

    ``MDHELP_THEME`` (``light``/``dark``) wins when set; otherwise the background
    colour index of ``COLORFGBG`` is looked up. Returns ``None`` when nothing
    usable is found.
    """
    forced = os.environ.get(THEME_ENV_VAR, "").strip().lower()
    if forced == "light":
        return 1.0
    if forced == "dark":
        return 0.0
    raw = os.environ.get("COLORFGBG", "").strip()
    if not raw:
        return None
    background = raw.split(";")[-1].strip()
    if not background.isdigit():
        return None
    return _ANSI_LUMA.get(int(background))


__all__ = ["FALLBACK_SIZE", "MIN_WIDTH", "THEME_ENV_VAR", "background_luma", "terminal_width"]
