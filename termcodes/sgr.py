"""Select Graphic Rendition: the `ESC [ ... m` sequences that style text."""

from __future__ import annotations

from .core import _is_int, control_sequence_introducer

__all__ = [
    "InvalidArgumentError",
    "STYLES",
    "ALIASES",
    "select_graphic_rendition",
    "style",
    "font",
    "RESET",
    "NORMAL",
    "BOLD",
    "FAINT",
    "ITALIC",
    "UNDERLINED",
    "BLINK",
    "FAST_BLINK",
    "INVERSE",
    "CONCEAL",
    "CROSSED_OUT",
    "STRIKETHROUGH",
    "FRAKTUR",
    "NOT_BOLD",
    "NOT_FAINT",
    "NOT_ITALIC",
    "NOT_UNDERLINED",
    "NOT_BLINK",
    "NOT_INVERSE",
    "REVEAL",
    "NOT_CONCEAL",
    "NOT_CROSSED_OUT",
    "NOT_STRIKETHROUGH",
    "FRAMED",
    "ENCIRCLED",
    "OVERLINED",
    "NOT_FRAMED_OR_ENCIRCLED",
    "NOT_OVERLINED",
    "PRIMARY_FONT",
    "DEFAULT_FOREGROUND",
    "DEFAULT_BACKGROUND",
]


class InvalidArgumentError(ValueError):
    """Raised when an SGR producer is given a value it can't encode."""


STYLES: dict[str, int | str] = {
    "reset": 0,
    "bold": 1,
    "faint": 2,
    "italic": 3,
    "underlined": 4,
    "blink": 5,
    "fast_blink": 6,
    "inverse": 7,
    "conceal": 8,
    "crossed_out": 9,
    "primary_font": 10,
    "fraktur": 20,
    # Turns off both bold and faint.
    "not_bold": "21;22",
    "not_faint": 22,
    "not_italic": 23,
    "not_underlined": 24,
    "not_blink": 25,
    "not_inverse": 27,
    "reveal": 28,
    "not_crossed_out": 29,
    "default_foreground": 39,
    "default_background": 49,
    "framed": 51,
    "encircled": 52,
    "overlined": 53,
    "not_framed_or_encircled": 54,
    "not_overlined": 55,
}

ALIASES = {
    "normal": "reset",
    "strikethrough": "crossed_out",
    "not_conceal": "reveal",
    "not_strikethrough": "not_crossed_out",
}


def select_graphic_rendition(*codes: int | str) -> str:
    """Builds an SGR sequence from the given codes.

    Args:
        *codes: The parameters, in the order they should be applied. These can be
            integers or already-joined compound tokens like `"21;22"`; both are
            inserted as-is. Without any codes, `0` (reset) is used.

    Returns:
        A single `ESC [ {codes} m` sequence.
    """

    if not codes:
        return control_sequence_introducer("0m")

    return control_sequence_introducer(";".join(map(str, codes)) + "m")


def _canonical_name(name: str) -> str:
    """Resolves aliases and CLI-style spellings (`fast-blink`) to a `STYLES` key."""

    key = name.strip().lower().replace("-", "_")

    return ALIASES.get(key, key)


def style(*names: str) -> str:
    """Combines the named styles into one SGR sequence.

    >>> style("bold", "underlined")
    '\\x1b[1;4m'

    Raises:
        InvalidArgumentError: One of the names is not a known style.
    """

    codes = []

    for name in names:
        key = _canonical_name(name)

        if key not in STYLES:
            raise InvalidArgumentError(f"Unknown style {name!r}.")

        codes.append(STYLES[key])

    return select_graphic_rendition(*codes)


def font(index: int) -> str:
    """Selects a font.

    Args:
        index: 0 for the primary font, 1-9 for the matching alternate font.

    Raises:
        InvalidArgumentError: The index is not an integer in 0-9. Nothing is encoded
            in that case, as an out of range code would end up meaning something else.
    """

    if not _is_int(index) or not 0 <= index <= 9:
        raise InvalidArgumentError(
            f"Font index must be between 0 and 9 inclusively, got {index!r}."
        )

    return select_graphic_rendition(10 + index)


def _named(name: str) -> str:
    return select_graphic_rendition(STYLES[name])


RESET = _named("reset")
NORMAL = RESET

BOLD = _named("bold")
FAINT = _named("faint")
ITALIC = _named("italic")
UNDERLINED = _named("underlined")
BLINK = _named("blink")
FAST_BLINK = _named("fast_blink")
INVERSE = _named("inverse")
CONCEAL = _named("conceal")
CROSSED_OUT = _named("crossed_out")
STRIKETHROUGH = CROSSED_OUT

FRAKTUR = _named("fraktur")

NOT_BOLD = _named("not_bold")
NOT_FAINT = _named("not_faint")
NOT_ITALIC = _named("not_italic")
NOT_UNDERLINED = _named("not_underlined")
NOT_BLINK = _named("not_blink")
NOT_INVERSE = _named("not_inverse")
REVEAL = _named("reveal")
NOT_CONCEAL = REVEAL
NOT_CROSSED_OUT = _named("not_crossed_out")
NOT_STRIKETHROUGH = NOT_CROSSED_OUT

FRAMED = _named("framed")
ENCIRCLED = _named("encircled")
OVERLINED = _named("overlined")
NOT_FRAMED_OR_ENCIRCLED = _named("not_framed_or_encircled")
NOT_OVERLINED = _named("not_overlined")

PRIMARY_FONT = _named("primary_font")

DEFAULT_FOREGROUND = _named("default_foreground")
DEFAULT_BACKGROUND = _named("default_background")
