"""Colour pair numbering and terminal colour setup.

A brick's pair is its kind times ten plus its health, a brick's message
pair is its kind times ten, a ball's pair is its owner times a hundred
and a paddle's pair is the ball's plus one.
"""

from __future__ import annotations

import curses

from .bricks import BrickKind
from .constants import Owner

RED2 = 20
BLUE2 = 21
GREEN2 = 22
YELLOW_BRIGHT = 23
YELLOW_LIGHT = 24
YELLOW_DEEP = 25
PURPLE = 26
BLUE3 = 27


class ColorError(RuntimeError):
    """Raised when the terminal cannot show colours."""


def brick_pair(kind: int, health: int) -> int:
    """Colour pair of a brick of ``kind`` at ``health``."""
    return BrickKind(kind).pair(health)


def message_pair(kind: int) -> int:
    """Colour pair of the message shown when a brick of ``kind`` breaks."""
    return BrickKind(kind).message_pair


def ball_pair(owner: int) -> int:
    """Colour pair of the ball belonging to ``owner``."""
    return int(Owner(owner)) * 100


def paddle_pair(owner: int) -> int:
    """Colour pair of the paddle belonging to ``owner``."""
    return ball_pair(owner) + 1


CUSTOM_COLORS: dict[int, tuple[int, int, int]] = {
    RED2: (500, 0, 0),
    BLUE2: (0, 0, 500),
    GREEN2: (0, 500, 0),
    YELLOW_BRIGHT: (400, 600, 0),
    YELLOW_LIGHT: (250, 350, 0),
    YELLOW_DEEP: (650, 550, 0),
    PURPLE: (600, 600, 0),
    BLUE3: (0, 0, 850),
}

PAIR_COLORS: dict[int, tuple[int, int]] = {
    brick_pair(BrickKind.NORMAL, 3): (YELLOW_DEEP, curses.COLOR_BLACK),
    brick_pair(BrickKind.NORMAL, 2): (curses.COLOR_YELLOW, curses.COLOR_BLACK),
    brick_pair(BrickKind.NORMAL, 1): (YELLOW_LIGHT, curses.COLOR_BLACK),
    brick_pair(BrickKind.PRECIOUS, 2): (curses.COLOR_GREEN, curses.COLOR_BLACK),
    brick_pair(BrickKind.PRECIOUS, 1): (GREEN2, curses.COLOR_BLACK),
    brick_pair(BrickKind.HURT, 2): (curses.COLOR_RED, curses.COLOR_BLACK),
    brick_pair(BrickKind.HURT, 1): (RED2, curses.COLOR_BLACK),
    brick_pair(BrickKind.SPEED, 2): (curses.COLOR_WHITE, curses.COLOR_BLACK),
    brick_pair(BrickKind.SPEED, 1): (curses.COLOR_WHITE, curses.COLOR_BLACK),
    brick_pair(BrickKind.HELP, 2): (curses.COLOR_BLUE, curses.COLOR_BLACK),
    brick_pair(BrickKind.HELP, 1): (BLUE2, curses.COLOR_BLACK),
    message_pair(BrickKind.NORMAL): (curses.COLOR_MAGENTA, curses.COLOR_BLACK),
    message_pair(BrickKind.HURT): (curses.COLOR_MAGENTA, curses.COLOR_BLACK),
    message_pair(BrickKind.HELP): (curses.COLOR_CYAN, curses.COLOR_BLACK),
    message_pair(BrickKind.SPEED): (YELLOW_BRIGHT, curses.COLOR_BLACK),
    paddle_pair(Owner.PLAYER): (curses.COLOR_CYAN, curses.COLOR_BLACK),
    ball_pair(Owner.PLAYER): (YELLOW_BRIGHT, curses.COLOR_BLACK),
    paddle_pair(Owner.COMPUTER): (BLUE3, curses.COLOR_BLACK),
    ball_pair(Owner.COMPUTER): (PURPLE, curses.COLOR_BLACK),
}


def init_colors() -> int:
    """Define the custom colours and colour pairs.

    Definitions the terminal rejects are skipped. Returns the number of
    pairs that were set up.
    """
    if not curses.has_colors():
        raise ColorError("terminal does not support colors")
    curses.start_color()

    for number, (red, green, blue) in CUSTOM_COLORS.items():
        try:
            curses.init_color(number, red, green, blue)
        except (curses.error, ValueError):
            pass

    defined = 0
    for pair, (foreground, background) in PAIR_COLORS.items():
        try:
            curses.init_pair(pair, foreground, background)
        except (curses.error, ValueError):
            continue
        defined += 1
    return defined