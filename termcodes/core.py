"""Escape sequence envelopes and the plain cursor, erase & scroll commands.

Everything in here is a pure function of its arguments (or a constant built from
one), so the results can be written to any stream, stored or compared freely.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ESCAPE",
    "STRING_TERMINATOR",
    "SINGLE_SHIFT_TWO",
    "SINGLE_SHIFT_THREE",
    "RESET_TO_INITIAL_STATE",
    "CommandClass",
    "escaped",
    "wrap",
    "control_sequence_introducer",
    "operating_system_command",
    "device_control_string",
    "start_of_string",
    "privacy_message",
    "application_program_command",
    "cursor_up",
    "cursor_down",
    "cursor_forward",
    "cursor_back",
    "cursor_next_line",
    "cursor_previous_line",
    "cursor_horizontal_absolute",
    "cursor_position",
    "DEVICE_STATUS_REPORT",
    "SAVE_CURSOR_POSITION",
    "RESTORE_CURSOR_POSITION",
    "erase_in_display",
    "erase_in_line",
    "CLEAR_SCREEN",
    "CLEAR_LINE",
    "CLEAR_LINE_LEFT",
    "CLEAR_LINE_RIGHT",
    "scroll_up",
    "scroll_down",
    "AUX_PORT_ON",
    "AUX_PORT_OFF",
]

ESCAPE = "\x1b"


def _is_int(value: object) -> bool:
    """Determines whether the value is an integer, not counting booleans."""

    return isinstance(value, int) and not isinstance(value, bool)


def escaped(payload: str) -> str:
    """Prefixes the payload with the escape character.

    The payload is not validated in any way, it is up to the caller to give
    something a terminal will understand.
    """

    return ESCAPE + payload


STRING_TERMINATOR = escaped("\\")

SINGLE_SHIFT_TWO = escaped("N")
SINGLE_SHIFT_THREE = escaped("O")

RESET_TO_INITIAL_STATE = escaped("c")


class CommandClass(Enum):
    """The top-level ANSI command classes.

    Each value is the character that follows the escape character to introduce
    the class.
    """

    CONTROL_SEQUENCE_INTRODUCER = "["
    OPERATING_SYSTEM_COMMAND = "]"
    DEVICE_CONTROL_STRING = "P"
    START_OF_STRING = "X"
    PRIVACY_MESSAGE = "^"
    APPLICATION_PROGRAM_COMMAND = "_"
    SINGLE_SHIFT_TWO = "N"
    SINGLE_SHIFT_THREE = "O"

    @property
    def introducer(self) -> str:
        """Returns the escape character followed by this class' prefix."""

        return escaped(self.value)

    @property
    def is_string(self) -> bool:
        """Returns whether sequences of this class end with `STRING_TERMINATOR`."""

        return self in _STRING_CLASSES


_STRING_CLASSES = frozenset(
    {
        CommandClass.OPERATING_SYSTEM_COMMAND,
        CommandClass.DEVICE_CONTROL_STRING,
        CommandClass.START_OF_STRING,
        CommandClass.PRIVACY_MESSAGE,
        CommandClass.APPLICATION_PROGRAM_COMMAND,
    }
)


def wrap(command_class: CommandClass, payload: str = "") -> str:
    """Wraps a payload in the framing of the given command class.

    Args:
        command_class: The class to use. String classes (OSC, DCS, SOS, PM & APC)
            get a trailing string terminator, the rest don't.
        payload: The body of the sequence.

    Returns:
        The introducer, the payload and (for string classes) the terminator.
    """

    if command_class.is_string:
        return command_class.introducer + payload + STRING_TERMINATOR

    return command_class.introducer + payload


def control_sequence_introducer(cmd: str) -> str:
    """Builds a CSI sequence, `ESC [ {cmd}`."""

    return wrap(CommandClass.CONTROL_SEQUENCE_INTRODUCER, cmd)


def operating_system_command(cmd: str) -> str:
    """Builds an OSC sequence, `ESC ] {cmd} ESC \\`."""

    return wrap(CommandClass.OPERATING_SYSTEM_COMMAND, cmd)


def device_control_string(cmd: str) -> str:
    """Builds a DCS sequence, `ESC P {cmd} ESC \\`."""

    return wrap(CommandClass.DEVICE_CONTROL_STRING, cmd)


def start_of_string(text: str) -> str:
    """Builds an SOS sequence, `ESC X {text} ESC \\`."""

    return wrap(CommandClass.START_OF_STRING, text)


def privacy_message(text: str) -> str:
    """Builds a PM sequence, `ESC ^ {text} ESC \\`."""

    return wrap(CommandClass.PRIVACY_MESSAGE, text)


def application_program_command(text: str) -> str:
    """Builds an APC sequence, `ESC _ {text} ESC \\`."""

    return wrap(CommandClass.APPLICATION_PROGRAM_COMMAND, text)


def _csi_command(letter: str, count: int | None, default: int) -> str:
    """Formats `{count}{letter}` as a CSI sequence, falling back to `default`."""

    if count is None:
        count = default

    return control_sequence_introducer(f"{count}{letter}")


# Cursor movement


def cursor_up(count: int | None = None) -> str:
    """Moves the cursor `count` cells up.

    If the cursor is already at the edge of the screen, this has no effect.
    """

    return _csi_command("A", count, default=1)


def cursor_down(count: int | None = None) -> str:
    """Moves the cursor `count` cells down.

    If the cursor is already at the edge of the screen, this has no effect.
    """

    return _csi_command("B", count, default=1)


def cursor_forward(count: int | None = None) -> str:
    """Moves the cursor `count` cells right.

    If the cursor is already at the edge of the screen, this has no effect.
    """

    return _csi_command("C", count, default=1)


def cursor_back(count: int | None = None) -> str:
    """Moves the cursor `count` cells left.

    If the cursor is already at the edge of the screen, this has no effect.
    """

    return _csi_command("D", count, default=1)


def cursor_next_line(count: int | None = None) -> str:
    """Moves the cursor to the start of the line `count` lines down."""

    return _csi_command("E", count, default=1)


def cursor_previous_line(count: int | None = None) -> str:
    """Moves the cursor to the start of the line `count` lines up."""

    return _csi_command("F", count, default=1)


def cursor_horizontal_absolute(column: int | None = None) -> str:
    """Moves the cursor to the given column."""

    return _csi_command("G", column, default=1)


def cursor_position(row: int, column: int) -> str:
    """Moves the cursor to the given row and column. Both are 1-indexed."""

    return control_sequence_introducer(f"{row};{column}H")


DEVICE_STATUS_REPORT = control_sequence_introducer("6n")
"""Asks the terminal to report the cursor position as `ESC [ {row} ; {column} R`."""

SAVE_CURSOR_POSITION = control_sequence_introducer("s")
RESTORE_CURSOR_POSITION = control_sequence_introducer("u")


# Erasing


def erase_in_display(mode: int | None = None) -> str:
    """Clears part of the screen.

    Args:
        mode: What to clear:

            - 0: from the cursor to the end of the screen
            - 1: from the cursor to the beginning of the screen
            - 2: the entire screen
            - 3: the entire screen, and the scrollback buffer

            Note that when this is not given, 1 is used instead of the usual ANSI
            default of 0.
    """

    return _csi_command("J", mode, default=1)


def erase_in_line(mode: int | None = None) -> str:
    """Clears part of the current line. The cursor doesn't move.

    Args:
        mode: What to clear:

            - 0: from the cursor to the end of the line
            - 1: from the cursor to the beginning of the line
            - 2: the entire line
    """

    return _csi_command("K", mode, default=0)


CLEAR_SCREEN = erase_in_display(2)
CLEAR_LINE = erase_in_line(2)
CLEAR_LINE_LEFT = erase_in_line(1)
CLEAR_LINE_RIGHT = erase_in_line(0)


# Scrolling


def scroll_up(count: int | None = None) -> str:
    """Scrolls the page up by `count` lines. New lines are added at the bottom."""

    return _csi_command("S", count, default=1)


def scroll_down(count: int | None = None) -> str:
    """Scrolls the page down by `count` lines. New lines are added at the top."""

    return _csi_command("T", count, default=1)


# Usually drives a local serial printer.
AUX_PORT_ON = control_sequence_introducer("5i")
AUX_PORT_OFF = control_sequence_introducer("4i")
