"""Terminal menu helpers and the states of the interactive session."""

from __future__ import annotations

import enum
import re
import sys
from collections.abc import Sequence

HEADER = "----- PACKING OPTIMIZATION -----\n\n"
_CLEAR_SEQUENCE = "\033[2J\033[H"
_INT_PREFIX = re.compile(r"[+-]?\d+")
_C_SPACE = " \t\n\v\f\r"


class BatchState(enum.Enum):
    """The screens of the interactive session."""

    RUN_ALGORITHMS = enum.auto()
    SELECT_DATASET = enum.auto()
    SHOW_DATASET = enum.auto()
    SELECT_TIMEOUT = enum.auto()
    EXIT = enum.auto()


def _read_line(prompt: str = "") -> str:
    """Write ``prompt`` and read one line; end of input reads as empty."""
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    return line.removesuffix("\n")


def _leading_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text.lstrip(_C_SPACE))
    return int(match.group()) if match else None


def clear_terminal() -> None:
    """Clear the screen and print the application header."""
    sys.stdout.write(_CLEAR_SEQUENCE)
    sys.stdout.flush()
    sys.stdout.write(HEADER)


def get_menu_choice(options: Sequence[str], prompt: str) -> int:
    """Show numbered ``options`` and return the 1-based choice, or 0 to exit.

    An empty line exits; anything else that is not a listed number is
    reported and the menu is shown again.
    """
    while True:
        clear_terminal()
        for number, option in enumerate(options, start=1):
            sys.stdout.write(f"{number}: {option}\n")
        sys.stdout.write("\n")
        line = _read_line(prompt)
        if not line:
            return 0
        choice = _leading_int(line)
        if choice is not None and 1 <= choice <= len(options):
            return choice
        print(
            "ERROR: Invalid choice. Please enter a number between 1 and "
            f"{len(options)}.",
            file=sys.stderr,
        )