"""One game from start to results: state, frame updates and the main loop."""

from __future__ import annotations

import random
import time
from typing import Any, Optional

from .ball import Ball, spawn_opponent_ball, spawn_player_ball
from .bricks import BrickWall
from .constants import KEY_ESC, KEY_SPACE, GameMode, Owner
from .keys import KeyBuffer, KeyListener
from .paddle import BOTTOM_PADDLE_Y, TOP_PADDLE_Y, Paddle
from .screen import GameScreen

SINGLE_UPDATE_INTERVAL = 3
BATTLE_UPDATE_INTERVAL = 4
SINGLE_FRAME_DELAY = 0.05
BATTLE_FRAME_DELAY = 0.06
RESULTS_PAUSE = 1.0
LISTENER_JOIN_TIMEOUT = 1.0


class Game:
    """Paddles, balls and bricks of one game in a given mode."""

    def __init__(
        self,
        game_mode: int,
        cols: int,
        lines: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.mode = GameMode(game_mode)
        self.cols = cols
        self.lines = lines
        rng = rng or random.Random()

        bottom_owner = Owner.COMPUTER if self.mode is GameMode.MOVIE else Owner.PLAYER
        self.bottom = Paddle(owner=bottom_owner, y=BOTTOM_PADDLE_Y)
        self.top = Paddle(owner=Owner.COMPUTER, y=TOP_PADDLE_Y)
        self.player_ball = spawn_player_ball(self.bottom, self.mode, cols, lines, rng)
        self.opponent_ball = spawn_opponent_ball(self.top)
        self.bricks = BrickWall(self.mode, rng)

        self.cleared = False
        self.quit = False

    @property
    def two_sided(self) -> bool:
        return self.mode in (GameMode.BATTLE, GameMode.MOVIE)

    @property
    def balls(self) -> tuple[Ball, Ball]:
        return (self.player_ball, self.opponent_ball)

    def running(self) -> bool:
        """Whether both paddles live, bricks remain and nobody quit."""
        return (
            self.bottom.health > 0
            and self.top.health > 0
            and not self.cleared
            and not self.quit
        )

    def _advance(
        self, paddle: Paddle, ball: Ball, key: Optional[int], canvas: Any
    ) -> None:
        paddle.erase(canvas)
        paddle.update(key, self.balls, self.cols)
        paddle.draw(canvas)

        ball.erase(canvas)
        ball.update(self.mode, self.bottom, self.top, self.bricks, self.cols)
        ball.draw(canvas)

    def step(self, key: Optional[int], canvas: Any) -> None:
        """Advance the game by one frame and draw the changes."""
        if key == KEY_ESC:
            self.quit = True

        self._advance(self.bottom, self.player_ball, key, canvas)
        if self.two_sided:
            self._advance(self.top, self.opponent_ball, None, canvas)

        self.bricks.clear(canvas)
        if self.bricks.draw(canvas) == 0:
            self.cleared = True

    def play(self, stdscr: Any) -> None:
        """Run the game on a curses screen until it ends, then show the results."""
        screen = GameScreen(stdscr)
        screen.setup()

        buffer = KeyBuffer()
        listener = KeyListener(stdscr, buffer, self.running)
        listener.start()

        if self.mode is GameMode.SINGLE:
            interval, delay = SINGLE_UPDATE_INTERVAL, SINGLE_FRAME_DELAY
        else:
            interval, delay = BATTLE_UPDATE_INTERVAL, BATTLE_FRAME_DELAY

        frame = 1
        while self.running():
            if listener.quit_requested:
                self.quit = True
                break
            if frame % interval == 0:
                self.step(buffer.take(), screen.canvas)
                screen.update_status(self.mode, self.bottom, self.top)
                screen.refresh()
                frame = 1
            frame += 1
            time.sleep(delay)

        if listener.thread is not None:
            listener.thread.join(timeout=LISTENER_JOIN_TIMEOUT)

        screen.show_game_over(self.mode, self.bottom, self.top, self.quit)
        time.sleep(RESULTS_PAUSE)

        stdscr.nodelay(False)
        while stdscr.getch() not in (KEY_ESC, KEY_SPACE):
            pass
        stdscr.clear()