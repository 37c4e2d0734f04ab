"""Game modes, paddle owners and key codes shared across the game."""

from enum import IntEnum


class GameMode(IntEnum):
    """Which game is being played."""

    SINGLE = 1
    BATTLE = 2
    MOVIE = 3


class Owner(IntEnum):
    """Who steers a paddle."""

    PLAYER = 1
    COMPUTER = 2


KEY_ESC = 27
KEY_SPACE = 32
KEY_LEFT_CODE = 37
KEY_RIGHT_CODE = 39
KEY_1 = ord("1")
KEY_2 = ord("2")
KEY_3 = ord("3")