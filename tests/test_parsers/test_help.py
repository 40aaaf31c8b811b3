import pytest

from typedargs.parser import ArgumentAction, ArgumentParser, ValueType


@pytest.fixture
def parser() -> ArgumentParser:
    parser = ArgumentParser("shipyard", "Create new space ship(s)")
    parser.add_argument("class", "class", "Ship class").set_accept_set("frigate,cruiser")
    parser.add_argument("quantity", "quantity", "Number of ships", ValueType.INT)
    speed = parser.add_argument(
        "speed", "-s", "Ship speed (m/s)", ValueType.FLOAT, alt_switches=["--speed"]
    )
    speed.set_accept_set(">0<299792458")
    speed.set_default_val(1000.0)
    parser.add_argument(
        "cloak", "-c", "Enable invisibility cloak", ValueType.BOOL,
        ArgumentAction.STORE_TRUE, alt_switches=["--cloak"],
    )
    parser.add_argument(
        "shields", "-n", "Lower shields", ValueType.BOOL, ArgumentAction.STORE_FALSE
    )
    parser.add_argument(
        "alliCorp", "--alliance-corp", "Assign to alliance and corporation", nargs=2
    )
    return parser


def lines_of(text: str) -> list[str]:
    return [line.rstrip() for line in text.splitlines()]


def test_usage_line(parser):
    assert parser.get_usage() == (
        "Usage: shipyard [-s speed] [-c] [-n] "
        "[--alliance-corp alliCorp1 alliCorp2] class quantity"
    )


def test_help_sections(parser):
    text = parser.get_help_string(console_width=120)
    lines = lines_of(text)
    assert lines[0].startswith("Usage: shipyard")
    assert "Create new space ship(s)" in lines
    assert "Positional arguments:" in lines
    assert "Optional arguments:" in lines
    assert lines.index("Positional arguments:") < lines.index("Optional arguments:")


def test_help_columns(parser):
    lines = lines_of(parser.get_help_string(console_width=100, left_width=24))
    speed_line = next(line for line in lines if line.startswith("  -s speed (--speed)"))
    assert speed_line.index("[float] Ship speed (m/s)") == 24
    class_line = next(line for line in lines if line.startswith("  class"))
    assert class_line.index("[string] Ship class") == 24


def test_help_ranges_and_defaults(parser):
    text = parser.get_help_string(console_width=100)
    assert "Range:" in text
    assert "class: frigate,cruiser" in text
    assert "speed: >0<299792458" in text
    assert "Default:" in text
    assert "speed = 1000.0" in text
    assert "[integer] Number of ships" in text


def test_help_binary_defaults(parser):
    text = parser.get_help_string(console_width=100)
    assert "[Boolean] Enable invisibility cloak (Default: FALSE)" in text
    assert "[Boolean] Lower shields (Default: TRUE)" in text


def test_help_vector_tag(parser):
    text = parser.get_help_string(console_width=100)
    assert "[string x 2] Assign to alliance and corporation" in text
    assert "--alliance-corp alliCorp1 alliCorp2" in text


@pytest.mark.parametrize("console_width", [60, 80, 100])
def test_help_respects_console_width(parser, console_width):
    for line in lines_of(parser.get_help_string(console_width=console_width)):
        assert len(line) <= console_width


def test_help_has_no_ansi_codes(parser):
    assert "\x1b[" not in parser.get_help_string()


@pytest.mark.parametrize(
    "console_width, left_width",
    [(80, 0), (80, 80), (80, 100), (0, 10), (-5, -10)],
)
def test_help_invalid_widths(parser, console_width, left_width):
    with pytest.raises(ValueError):
        parser.get_help_string(console_width=console_width, left_width=left_width)


def test_help_without_arguments():
    text = ArgumentParser("bare").get_help_string()
    assert lines_of(text)[0] == "Usage: bare"
    assert "Positional arguments:" not in text
    assert "Optional arguments:" not in text


def test_render_help(parser, capsys):
    parser.render_help()
    captured = capsys.readouterr()
    assert "Usage: shipyard" in captured.out
    assert "Optional arguments:" in captured.out
