#
# PPColor ANSI Colors
#

# Standard library -----------------------------------------------------------------------------------------------------
import re
from enum import StrEnum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Color(StrEnum):
    """
    Terminal colors supported by the pretty printers.

    Members are str subclasses holding the ANSI SGR escape, so they can be
    concatenated or interpolated directly. RESET closes every colored segment.
    """
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"


_ANSI_SGR = re.compile(r"\x1b\[[0-9;]*m")


# Methods --------------------------------------------------------------------------------------------------------------

def as_color(color: Any) -> Color:
    """
    Normalize a Color member or a color name like "red" to a Color.

    Raises:
        TypeError: If color is neither a Color nor a str.
        ValueError: If color is a str naming no known color.
    """
    if isinstance(color, Color):
        return color
    if not isinstance(color, str):
        raise TypeError(f"expected Color or color name, got <{class_name(color)}>")

    try:
        return Color[color.strip().upper()]
    except KeyError:
        pass
    try:
        # Raw escape sequence such as "\033[31m"
        return Color(color)
    except ValueError:
        names = ", ".join(c.name.lower() for c in Color)
        raise ValueError(f"unknown color {color!r}, expected one of: {names}") from None


def wrap(text: Any, color: Color | str) -> str:
    """Wrap text with the color escape and a trailing reset.

    Examples:
        >>> wrap("int", Color.RED)
        '\\x1b[31mint\\x1b[0m'
    """
    return f"{as_color(color)}{text}{Color.RESET}"


def strip_ansi(text: str) -> str:
    """Remove all ANSI SGR escapes, leaving the plain text."""
    return _ANSI_SGR.sub("", text)
