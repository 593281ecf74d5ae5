from __future__ import annotations

import logging
import os
from argparse import ArgumentParser
from typing import Any, Callable

from . import (
    STYLES,
    ALIASES,
    Color,
    UnsupportedColorSpecError,
    background,
    cursor_back,
    cursor_down,
    cursor_forward,
    cursor_horizontal_absolute,
    cursor_next_line,
    cursor_previous_line,
    cursor_up,
    font,
    foreground,
    select_graphic_rendition,
    style,
)
from .__about__ import __version__

FALSY_VALUES = ("", "0", "false", "no", "off")

CURSOR_COMMANDS: dict[str, Callable[[int | None], str]] = {
    "up": cursor_up,
    "down": cursor_down,
    "forward": cursor_forward,
    "back": cursor_back,
    "next-line": cursor_next_line,
    "previous-line": cursor_previous_line,
    "column": cursor_horizontal_absolute,
}


def _env_flag(name: str) -> bool:
    """Reads a boolean environment variable, treating `FALSY_VALUES` as off."""

    return os.getenv(name, "").strip().lower() not in FALSY_VALUES


def _parse_color_arg(arg: str) -> Any:
    """Converts a command line token into something `foreground` understands."""

    if arg.lstrip("-").isdigit():
        return int(arg)

    if arg.startswith("#"):
        return Color.from_hex(arg)

    return arg


def _show(sequence: str, raw: bool) -> None:
    print(repr(sequence) if raw else sequence, end="\n" if raw else "")


def run_style(names: list[str], raw: bool) -> None:
    _show(style(*names), raw)


def run_fg(args: list[str], raw: bool) -> None:
    _show(foreground(*map(_parse_color_arg, args)), raw)


def run_bg(args: list[str], raw: bool) -> None:
    _show(background(*map(_parse_color_arg, args)), raw)


def run_font(index: int, raw: bool) -> None:
    _show(font(index), raw)


def run_cursor(direction: str, count: int | None, raw: bool) -> None:
    _show(CURSOR_COMMANDS[direction](count), raw)


def run_list(raw: bool) -> None:
    rows = [(name, str(code)) for name, code in STYLES.items()]
    rows += [(alias, f"-> {target}") for alias, target in ALIASES.items()]

    max_left = max(len(row[0]) for row in rows) + 3
    max_right = max(len(row[1]) for row in rows) + 3

    show_preview = os.getenv("NO_COLOR") is None and not raw

    buff = ""

    for name, code in rows:
        buff += f"{name:<{max_left}}{code:>{max_right}}"

        if show_preview and not code.startswith("->"):
            buff += "   " + select_graphic_rendition(code) + "Sample" + style("reset")

        buff += "\n"

    print(buff, end="")


def main(argv: list[str] | None = None) -> None:
    """The main entrypoint."""

    parser = ArgumentParser("termcodes", description="Print ANSI escape sequences.")
    parser.add_argument("-v", "--version", action="version", version=__version__)
    parser.add_argument(
        "--raw",
        action="store_true",
        default=_env_flag("TERMCODES_RAW"),
        help="print the Python repr of sequences instead of the sequences",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")

    subs = parser.add_subparsers(required=True)

    style_command = subs.add_parser("style", help="combine named styles")
    style_command.set_defaults(func=run_style)
    style_command.add_argument("names", nargs="+")

    for name, func in [("fg", run_fg), ("bg", run_bg)]:
        color_command = subs.add_parser(name, help="set the color of text")
        color_command.set_defaults(func=func)
        color_command.add_argument(
            "args",
            nargs="*",
            help="a color name, a palette index, 3 RGB values or a #rrggbb hex",
        )

    font_command = subs.add_parser("font", help="select a font")
    font_command.set_defaults(func=run_font)
    font_command.add_argument("index", type=int)

    cursor_command = subs.add_parser("cursor", help="move the cursor")
    cursor_command.set_defaults(func=run_cursor)
    cursor_command.add_argument("direction", choices=CURSOR_COMMANDS)
    cursor_command.add_argument("count", type=int, nargs="?")

    subs.add_parser("list", help="list all named styles").set_defaults(func=run_list)

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    command = args.func

    opts = vars(args)
    del opts["func"]
    del opts["debug"]

    try:
        command(**opts)

    except (ValueError, UnsupportedColorSpecError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
