from __future__ import annotations

from typing import List, Optional

from rich.color import Color, ColorParseError

# Rich color names; one per process slot, cycling after eight.
PROCESS_COLORS: List[str] = [
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "bright_red",
    "bright_green",
]

IDLE_COLOR = "grey37"


def process_color(index: int) -> str:
    return PROCESS_COLORS[index % len(PROCESS_COLORS)]


def terminal_color(color: Optional[str], default: str = "white") -> str:
    """
    Return ``color`` if Rich can render it, else ``default``.

    Workload files may carry colors meant for another display.
    """
    if not color:
        return default
    try:
        Color.parse(color)
    except ColorParseError:
        return default
    return color
