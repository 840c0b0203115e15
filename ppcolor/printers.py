#
# PPColor Print Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .colors import Color
from .formatters import PPOptions, pformat
from .kinds import Mode


# Methods --------------------------------------------------------------------------------------------------------------

def pprint(value: Any, color: Color | str = Color.BLUE, *, opts: PPOptions | None = None) -> None:
    """
    Print the block rendering of a value to stdout.

    Output is written in one call with ANSI escapes and no trailing newline beyond
    the rendering's own blank line. Terminal capability is not checked.

    Args:
        value: Any Python object.
        color: Color of headers, indices, keys and field names.
        opts: Rendering options, PPOptions() if None.
    """
    print(pformat(value, color, Mode.BLOCK, opts=opts), end="")


def print_red(value: Any) -> None:
    """Print a value in red."""
    pprint(value, Color.RED)


def print_green(value: Any) -> None:
    """Print a value in green."""
    pprint(value, Color.GREEN)


def print_yellow(value: Any) -> None:
    """Print a value in yellow."""
    pprint(value, Color.YELLOW)


def print_blue(value: Any) -> None:
    """Print a value in blue."""
    pprint(value, Color.BLUE)
