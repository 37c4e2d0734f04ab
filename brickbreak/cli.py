"""Command-line entry: title screen, mode menu and starting a game."""

from __future__ import annotations

import argparse
import curses
import locale
import sys
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Sequence

from .colors import ColorError, init_colors
from .constants import KEY_1, KEY_2, KEY_3, KEY_ESC, KEY_SPACE, GameMode
from .game import Game
from .screen import CursesCanvas

TITLE_FILE = "title.txt"
INSTRUCTIONS_FILE = "instructions.txt"
CREDITS_FILE = "credits.txt"
MENU_FILE = "menu.txt"
RESOURCE_FILES = (TITLE_FILE, INSTRUCTIONS_FILE, CREDITS_FILE, MENU_FILE)
DEFAULT_RESOURCE_DIR = Path("res")

INSTRUCTIONS_ROW = 8
CREDITS_ROW = 28
MENU_ROW = 8

_START_KEYS = frozenset({KEY_SPACE, curses.KEY_ENTER, ord("\n")})
_MODE_KEYS = {
    KEY_1: GameMode.SINGLE,
    KEY_2: GameMode.BATTLE,
    KEY_3: GameMode.MOVIE,
}


def read_resource(path: "str | Path") -> str:
    """Return the text of a screen resource file."""
    return Path(path).read_text(encoding="utf-8")


def home_choice(keys: Iterable[int]) -> bool:
    """True once Space or Enter is pressed, False on Esc or when keys run out."""
    for key in keys:
        if key == KEY_ESC:
            return False
        if key in _START_KEYS:
            return True
    return False


def menu_choice(keys: Iterable[int]) -> Optional[GameMode]:
    """The mode picked with 1, 2 or 3; None on Esc or when keys run out."""
    for key in keys:
        if key == KEY_ESC:
            return None
        mode = _MODE_KEYS.get(key)
        if mode is not None:
            return mode
    return None


def _key_stream(window: Any) -> Iterator[int]:
    while True:
        yield window.getch()


def _configure(stdscr: Any) -> None:
    init_colors()
    curses.raw()
    curses.noecho()
    stdscr.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass


def _show(canvas: CursesCanvas, resource_dir: Path, name: str, row: int) -> None:
    canvas.addstr(row, 0, read_resource(resource_dir / name))


def run(stdscr: Any, resource_dir: "str | Path") -> Optional[GameMode]:
    """Show the title and menu, then play the chosen mode; return that mode."""
    resource_dir = Path(resource_dir)
    _configure(stdscr)
    canvas = CursesCanvas(stdscr)

    _show(canvas, resource_dir, TITLE_FILE, 0)
    _show(canvas, resource_dir, INSTRUCTIONS_FILE, INSTRUCTIONS_ROW)
    _show(canvas, resource_dir, CREDITS_FILE, CREDITS_ROW)
    stdscr.refresh()

    keys = _key_stream(stdscr)
    if not home_choice(keys):
        return None

    stdscr.clear()
    _show(canvas, resource_dir, TITLE_FILE, 0)
    _show(canvas, resource_dir, MENU_FILE, MENU_ROW)
    stdscr.refresh()

    mode = menu_choice(keys)
    stdscr.refresh()
    if mode is None:
        return None

    stdscr.clear()
    lines, cols = stdscr.getmaxyx()
    Game(mode, cols, lines).play(stdscr)
    return mode


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="brickbreak", description="Break the bricks in the terminal."
    )
    parser.add_argument(
        "--resources",
        type=Path,
        default=DEFAULT_RESOURCE_DIR,
        help="directory holding the title, instructions, credits and menu screens",
    )
    args = parser.parse_args(argv)

    missing = [name for name in RESOURCE_FILES if not (args.resources / name).is_file()]
    if missing:
        print(
            f"Error opening file: {', '.join(str(args.resources / n) for n in missing)}",
            file=sys.stderr,
        )
        return 1

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    try:
        curses.wrapper(run, args.resources)
    except ColorError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1
    return 0