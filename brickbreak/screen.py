"""Curses drawing surfaces, the status panel and the game-over screen."""

from __future__ import annotations

import curses
from typing import Any, Optional

from .constants import GameMode
from .paddle import Paddle

STATUS_HEIGHT = 5
CONTROLS_TEXT = "Controls: A/D to move, ESC to quit"
STATUS_BLANK = " " * 40

GAME_OVER_ART = (
    "  ____    _    __  __ _____    _____     _______ ____  ",
    " / ___|  / \\  |  \\/  | ____|  / _ \\ \\   / / ____|  _ \\ ",
    "| |  _  / _ \\ | |\\/| |  _|   | | | \\ \\ / /|  _| | |_) |",
    "| |_| |/ ___ \\| |  | | |___  | |_| |\\ V / | |___|  _ < ",
    " \\____/_/   \\_\\_|  |_|_____|  \\___/  \\_/  |_____|_| \\_\\",
)
ART_WIDTH = 56
RATING_WIDTH = 24
SEPARATOR = "━" * 40
SEPARATOR_WIDTH = 40

CONTINUE_TEXT = "Press <Esc> or <Space> to continue..."
THANKS_TEXT = "Thanks for playing! 🎮"
CREDIT_TEXT = "Created by Un1Zer|Summer of 2025 in SCU"


class CursesCanvas:
    """Draws text on a curses window; writes that fall outside are dropped."""

    def __init__(self, window: Any) -> None:
        self.window = window

    def addstr(self, y: int, x: int, text: str, pair: int = 0) -> None:
        if y < 0 or x < 0:
            return
        attr = curses.color_pair(pair) if pair else 0
        try:
            self.window.addstr(y, x, text, attr)
        except curses.error:
            pass


def rating_text(score: int) -> str:
    """The star rating shown for a single-player score."""
    if score >= 50:
        return "Rating: EXCELLENT! ★★★★★"
    if score >= 30:
        return "Rating: GOOD!      ★★★★☆"
    if score >= 15:
        return "Rating: NOT BAD!   ★★★☆☆"
    return "Rating: UGHHHH..   ★☆☆☆☆"


def status_lines(game_mode: int, bottom: Paddle, top: Paddle) -> list[str]:
    """Lines of the status panel, from its first text row down."""
    if game_mode == GameMode.SINGLE:
        return [f"Player Health: {bottom.health} | Score: {bottom.score}"]
    if game_mode == GameMode.BATTLE:
        return [
            f"Player Health: {bottom.health} | Score: {bottom.score}",
            f"Computer Health: {top.health} | Score: {top.score}",
        ]
    if game_mode == GameMode.MOVIE:
        return [
            f"Computer_1 Health: {bottom.health} | Score: {bottom.score}",
            f"Computer_2 Health: {top.health} | Score: {top.score}",
        ]
    return []


def result_lines(
    game_mode: int, bottom: Paddle, top: Paddle, quit: bool
) -> list[tuple[int, str]]:
    """Result texts of the game-over screen with their row offsets."""
    if game_mode == GameMode.SINGLE:
        if bottom.health <= 0:
            result, reason = "Result: GAME OVER", "You ran out of lives!"
        elif quit:
            result, reason = "Result: QUIT", "Thanks for playing!"
        else:
            result, reason = "Result: YOU WIN!", "You've cleared all the bricks!"
        return [
            (0, "SINGLE PLAYER GAME RESULTS"),
            (3, f"Player Health: {bottom.health}"),
            (4, f"Player Score: {bottom.score}"),
            (7, result),
            (8, reason),
        ]

    if game_mode in (GameMode.BATTLE, GameMode.MOVIE):
        battle = game_mode == GameMode.BATTLE
        first = "Player" if battle else "Computer_1"
        second = "Computer" if battle else "Computer_2"
        if bottom.score == top.score:
            result = "Result: DRAW!"
        elif bottom.score < top.score:
            result = f"Result: {second.upper()} WINS!"
        else:
            result = f"Result: {first.upper()} WINS!"
        return [
            (0, "BATTLE MODE GAME RESULTS"),
            (4, f"{first} Health: {bottom.health}    Score: {bottom.score}"),
            (6, f"{second} Health: {top.health}    Score: {top.score}"),
            (8, result),
        ]
    return []


class GameScreen:
    """The playing field above a status panel, and the final results."""

    def __init__(self, stdscr: Any) -> None:
        self.stdscr = stdscr
        self.lines, self.cols = stdscr.getmaxyx()
        self.canvas = CursesCanvas(stdscr)
        self.state_window: Optional[Any] = None
        self._status: Optional[CursesCanvas] = None

    def setup(self) -> None:
        """Shrink the field and open the status panel below it."""
        self.stdscr.resize(self.lines - STATUS_HEIGHT, self.cols)
        self.state_window = curses.newwin(
            STATUS_HEIGHT, self.cols, self.lines - STATUS_HEIGHT, 0
        )
        self._status = CursesCanvas(self.state_window)

        self.stdscr.box()
        self.state_window.box()
        self._status.addstr(3, 2, CONTROLS_TEXT)

        self.stdscr.refresh()
        self.state_window.refresh()

    def update_status(self, game_mode: int, bottom: Paddle, top: Paddle) -> None:
        """Rewrite the health and score lines of the status panel."""
        if self._status is None:
            raise RuntimeError("screen has not been set up")
        self._status.addstr(1, 2, STATUS_BLANK)
        self._status.addstr(2, 2, STATUS_BLANK)
        for row, text in enumerate(status_lines(game_mode, bottom, top), start=1):
            self._status.addstr(row, 2, text)

    def refresh(self) -> None:
        self.stdscr.refresh()
        if self.state_window is not None:
            self.state_window.refresh()

    def _centered(self, y: int, max_x: int, text: str) -> None:
        self.canvas.addstr(y, (max_x - len(text)) // 2, text)

    def show_game_over(
        self, game_mode: int, bottom: Paddle, top: Paddle, quit: bool
    ) -> None:
        """Close the status panel and draw the results over the whole screen."""
        if self.state_window is not None:
            self.state_window.refresh()
            self.state_window = None
            self._status = None
        self.stdscr.clear()
        self.stdscr.resize(self.lines, self.cols)
        self.stdscr.refresh()

        max_y, max_x = self.stdscr.getmaxyx()

        title_y = max_y // 6 - 3
        title_x = (max_x - ART_WIDTH) // 2
        for offset, row in enumerate(GAME_OVER_ART):
            self.canvas.addstr(title_y + offset, title_x, row)

        info_y = title_y + 8
        for offset, text in result_lines(game_mode, bottom, top, quit):
            self._centered(info_y + offset, max_x, text)
        if game_mode == GameMode.SINGLE:
            self.canvas.addstr(
                info_y + 11, (max_x - RATING_WIDTH) // 2, rating_text(bottom.score)
            )

        self._centered(max_y - 7, max_x, CONTINUE_TEXT)
        self._centered(max_y - 5, max_x, THANKS_TEXT)
        self._centered(max_y - 2, max_x, CREDIT_TEXT)

        separator_x = (max_x - SEPARATOR_WIDTH) // 2
        self.canvas.addstr(info_y - 1, separator_x, SEPARATOR)
        self.canvas.addstr(info_y + 10, separator_x, SEPARATOR)

        self.stdscr.refresh()