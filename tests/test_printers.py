#
# PPColor - Printers Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from ppcolor.colors import Color, strip_ansi
from ppcolor.formatters import PPOptions, pformat
from ppcolor.printers import pprint, print_blue, print_green, print_red, print_yellow


# Local Classes & Methods ----------------------------------------------------------------------------------------------

@dataclass
class Job:
    name: str
    retries: int


# Tests ----------------------------------------------------------------------------------------------------------------

class TestPrinters:
    @pytest.mark.parametrize(
        "printer, color",
        [
            pytest.param(print_red, Color.RED, id="red"),
            pytest.param(print_green, Color.GREEN, id="green"),
            pytest.param(print_yellow, Color.YELLOW, id="yellow"),
            pytest.param(print_blue, Color.BLUE, id="blue"),
        ],
    )
    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(42, id="scalar"),
            pytest.param([1, 2, 3], id="list"),
            pytest.param({"a": 1}, id="dict"),
            pytest.param({}, id="dict-empty"),
            pytest.param(Job("build", 3), id="record"),
        ],
    )
    def test_color_printers(self, capsys, printer, color, value):
        """Each printer writes the block rendering in its color and returns None."""
        assert printer(value) is None
        out = capsys.readouterr().out
        assert out == pformat(value, color)
        assert color.value in out

    def test_output_exact(self, capsys):
        print_green([1, 2, 3])
        out = capsys.readouterr().out
        assert strip_ansi(out) == "Slice with 3 elements of type int:\n\n[0] 1\n[1] 2\n[2] 3\n\n"

    def test_pprint_opts(self, capsys):
        pprint({"b": 1, "a": 2}, "yellow", opts=PPOptions(sort_keys=True))
        out = strip_ansi(capsys.readouterr().out)
        assert out == "Map: 2 elements, key type str, value type int:\n\n['a'] 2\n['b'] 1\n\n"

    def test_pprint_invalid_color(self, capsys):
        """Invalid arguments raise before anything is written."""
        with pytest.raises(ValueError):
            pprint(1, "purple")
        assert capsys.readouterr().out == ""
