import logging
from dataclasses import dataclass

import pytest

from termcodes.color import (
    COLOR_NAMES,
    RGB,
    Color,
    Indexed,
    Named,
    Opaque,
    Reset,
    UnsupportedColorSpecError,
    background,
    color,
    encode,
    foreground,
    parse_color_spec,
)
from termcodes.sgr import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND


@dataclass
class Channels:
    red: int
    green: int
    blue: int


def test_color_reset():
    assert foreground() == DEFAULT_FOREGROUND == "\x1b[39m"
    assert background() == DEFAULT_BACKGROUND == "\x1b[49m"
    assert foreground(None) == DEFAULT_FOREGROUND
    assert foreground(False) == DEFAULT_FOREGROUND
    assert background(False) == DEFAULT_BACKGROUND
    assert foreground(0) == "\x1b[38;5;0m"


def test_color_named():
    assert foreground("red") == "\x1b[31m"
    assert background("red") == "\x1b[41m"

    for offset, name in enumerate(
        ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
    ):
        assert COLOR_NAMES[name] == offset
        assert foreground(name) == f"\x1b[3{offset}m"
        assert background(name) == f"\x1b[4{offset}m"

    assert foreground("CYAN") == foreground("cyan")


def test_color_indexed():
    assert foreground(200) == "\x1b[38;5;200m"
    assert background(0) == "\x1b[48;5;0m"


def test_color_rgb():
    assert background(10, 20, 30) == "\x1b[48;2;10;20;30m"
    assert foreground(255, 0, 128) == "\x1b[38;2;255;0;128m"


def test_color_opaque():
    assert foreground(Color((10, 20, 30))) == foreground(10, 20, 30)
    assert background(color("#ff8000")) == "\x1b[48;2;255;128;0m"
    assert foreground(Channels(1, 2, 3)) == "\x1b[38;2;1;2;3m"


def test_color_parse_color_spec():
    assert parse_color_spec() == Reset()
    assert parse_color_spec("Blue") == Named("blue")
    assert parse_color_spec(141) == Indexed(141)
    assert parse_color_spec(1, 2, 3) == RGB(1, 2, 3)

    value = Color((1, 2, 3))
    assert parse_color_spec(value) == Opaque(value)


@pytest.mark.parametrize(
    "args",
    [
        ("orange",),
        ("",),
        (True,),
        (1.5,),
        (1, 2),
        (1, 2, 3, 4),
        (1, 2, "3"),
        (object(),),
        ((1, 2, 3),),
        ("red", "blue"),
    ],
)
def test_color_unsupported(args):
    with pytest.raises(UnsupportedColorSpecError):
        foreground(*args)

    with pytest.raises(UnsupportedColorSpecError):
        background(*args)


def test_color_encode_rejects_broken_opaque():
    with pytest.raises(UnsupportedColorSpecError):
        encode(Opaque(object()))


def test_color_named_rejects_unknown_keys():
    with pytest.raises(UnsupportedColorSpecError):
        Named("orange")

    with pytest.raises(UnsupportedColorSpecError):
        encode(Named("RED"))


def test_color_opaque_logs_decomposition(caplog):
    with caplog.at_level(logging.DEBUG, logger="termcodes.color"):
        foreground(Color((4, 5, 6)))

    assert "(4, 5, 6)" in caplog.text


def test_color_class():
    value = Color.from_hex("#0A14FF")

    assert value.rgb == (10, 20, 255)
    assert (value.red, value.green, value.blue) == (10, 20, 255)
    assert value.hex == "#0A14FF"
    assert value == color("#0a14ff") == color((10, 20, 255))
    assert repr(value) == "Color(rgb=(10, 20, 255))"


def test_color_invalid():
    with pytest.raises(ValueError):
        Color((True, 0, 0))

    with pytest.raises(ValueError):
        Color((1.0, 2, 3))

    with pytest.raises(ValueError):
        Color((0, -1, 234))

    with pytest.raises(ValueError):
        Color((0, 256, 0))

    with pytest.raises(ValueError):
        Color.from_hex("#fff")

    with pytest.raises(ValueError):
        color("red")
