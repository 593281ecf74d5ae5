"""Foreground & background color sequences, and the Color class.

`foreground` and `background` accept a few different call shapes:

- nothing (or `None` / `False`): reset to the terminal's default color
- one of the 8 standard color names, like `"red"`
- a single integer: an index into the 256 color palette
- three integers: a 24-bit RGB color
- any object with an `rgb` triplet, or `red`, `green` & `blue` attributes

Each call is first turned into one of the `ColorSpec` variants, then encoded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Union

from .core import _is_int
from .sgr import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, select_graphic_rendition

__all__ = [
    "Color",
    "color",
    "ColorSpec",
    "Reset",
    "Named",
    "Indexed",
    "RGB",
    "Opaque",
    "UnsupportedColorSpecError",
    "COLOR_NAMES",
    "parse_color_spec",
    "encode",
    "foreground",
    "background",
]

logger = logging.getLogger(__name__)

COLOR_NAMES = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}
"""The standard color names, mapped to their offset from 30 (or 40)."""


class UnsupportedColorSpecError(TypeError):
    """Raised when a color call doesn't match any of the supported shapes."""


@dataclass(frozen=True)
class Color:
    """A class that represents an RGB value."""

    rgb: tuple[int, int, int]
    hex: str = field(init=False)

    def __post_init__(self) -> None:
        if len(self.rgb) != 3 or any(
            not _is_int(val) or not 0 <= val < 256 for val in self.rgb
        ):
            raise ValueError(
                f"Color RGB values must be 3 integers between 0 and 256, got {self.rgb!r}."
            )

        object.__setattr__(self, "hex", "#" + "".join(f"{i:02X}" for i in self.rgb))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rgb={self.rgb})"

    @property
    def red(self) -> int:
        """Returns the red channel."""

        return self.rgb[0]

    @property
    def green(self) -> int:
        """Returns the green channel."""

        return self.rgb[1]

    @property
    def blue(self) -> int:
        """Returns the blue channel."""

        return self.rgb[2]

    @classmethod
    def from_hex(cls, hexstring: str) -> Color:
        """Generates a Color instance from a hex string, with or without the `#`."""

        hexstring = hexstring.lstrip("#")

        if len(hexstring) != 6:
            raise ValueError(f"Expected a 6 digit hex color, got {hexstring!r}.")

        return cls(
            (
                int(hexstring[:2], base=16),
                int(hexstring[2:4], base=16),
                int(hexstring[4:], base=16),
            )
        )


def color(description: str | tuple[int, int, int]) -> Color:
    """Creates a color from the given description.

    This calls either the Color constructor or `Color.from_hex`, depending on the
    given value.
    """

    if isinstance(description, tuple):
        return Color(description)

    if isinstance(description, str) and description.startswith("#"):
        return Color.from_hex(description)

    raise ValueError(f"unknown descriptor {description!r}")


@dataclass(frozen=True)
class Reset:
    """Resets to the terminal's default color."""


@dataclass(frozen=True)
class Named:
    """One of the 8 standard colors, by name."""

    key: str

    def __post_init__(self) -> None:
        if self.key not in COLOR_NAMES:
            raise UnsupportedColorSpecError(
                f"Expected one of {', '.join(COLOR_NAMES)}, got {self.key!r}."
            )


@dataclass(frozen=True)
class Indexed:
    """A color from the 256 color palette."""

    index: int


@dataclass(frozen=True)
class RGB:
    """A 24-bit color."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Opaque:
    """Some color object that can be split into red, green & blue channels."""

    value: Any


ColorSpec = Union[Reset, Named, Indexed, RGB, Opaque]


def _channels(value: Any) -> tuple[int, int, int] | None:
    """Gets the RGB channels of a color object.

    Returns:
        The (red, green, blue) triplet, or None if the object doesn't expose one.
    """

    rgb = getattr(value, "rgb", None)

    if isinstance(rgb, tuple) and len(rgb) == 3 and all(map(_is_int, rgb)):
        return rgb

    channels = tuple(getattr(value, name, None) for name in ("red", "green", "blue"))

    if all(map(_is_int, channels)):
        return channels  # type: ignore

    return None


def parse_color_spec(*args: Any) -> ColorSpec:
    """Works out which color variant the given arguments describe.

    Raises:
        UnsupportedColorSpecError: The arguments don't match any variant.
    """

    # `0 == False`, so these compare by identity.
    if not args or (len(args) == 1 and (args[0] is None or args[0] is False)):
        return Reset()

    if len(args) == 3 and all(map(_is_int, args)):
        return RGB(*args)

    if len(args) == 1:
        (value,) = args

        if isinstance(value, str) and value.lower() in COLOR_NAMES:
            return Named(value.lower())

        if _is_int(value):
            return Indexed(value)

        if not isinstance(value, (str, bool)) and _channels(value) is not None:
            return Opaque(value)

    logger.debug("rejected color arguments %r", args)

    raise UnsupportedColorSpecError(
        "Expected nothing, a color name, a palette index, 3 RGB integers"
        + f" or a color object, got {args!r}."
    )


def encode(spec: ColorSpec, background: bool = False) -> str:
    """Encodes a color variant as an SGR sequence.

    Args:
        spec: The color to encode.
        background: If set, the background variant (40-47, 48, 49) is produced
            instead of the foreground one (30-37, 38, 39).
    """

    lead = 38 + 10 * background

    if isinstance(spec, Reset):
        return DEFAULT_BACKGROUND if background else DEFAULT_FOREGROUND

    if isinstance(spec, Named):
        return select_graphic_rendition(lead - 8 + COLOR_NAMES[spec.key])

    if isinstance(spec, Indexed):
        return select_graphic_rendition(f"{lead};5;{spec.index}")

    if isinstance(spec, RGB):
        return select_graphic_rendition(
            f"{lead};2;{spec.red};{spec.green};{spec.blue}"
        )

    if isinstance(spec, Opaque):
        channels = _channels(spec.value)

        if channels is None:
            raise UnsupportedColorSpecError(
                f"Can't get RGB channels from {spec.value!r}."
            )

        logger.debug("decomposed %r into %r", spec.value, channels)

        return encode(RGB(*channels), background=background)

    raise UnsupportedColorSpecError(f"Unknown color variant {spec!r}.")


def foreground(*args: Any) -> str:
    """Sets the foreground color.

    >>> foreground("red")
    '\\x1b[31m'
    >>> foreground(141)
    '\\x1b[38;5;141m'
    >>> foreground(10, 20, 30)
    '\\x1b[38;2;10;20;30m'
    """

    return encode(parse_color_spec(*args))


def background(*args: Any) -> str:
    """Sets the background color.

    See `foreground` for the accepted arguments.
    """

    return encode(parse_color_spec(*args), background=True)
