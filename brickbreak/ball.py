"""Balls: spawning, drawing, movement and collisions."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Protocol

from .bricks import BrickWall, Effect
from .constants import GameMode
from .paddle import PADDLE_LEN, Paddle

BALL_STR = "◉"
BALL_CLEANER = " "

SPAWN_MARGIN = 10
SPAWN_SPREAD = 20


class _Canvas(Protocol):
    def addstr(self, y: int, x: int, text: str, pair: int) -> None: ...


_OUT_OF_BOUNDS = Effect(0, 0, -1)


@dataclass
class Ball:
    """A ball and the paddle whose score and health it affects."""

    x: int
    y: int
    dx: int
    dy: int
    paddle: Paddle

    @property
    def pair(self) -> int:
        return int(self.paddle.owner) * 100

    def draw(self, canvas: _Canvas) -> None:
        canvas.addstr(self.y, self.x, BALL_STR, self.pair)

    def erase(self, canvas: _Canvas) -> None:
        canvas.addstr(self.y, self.x, BALL_CLEANER, 0)

    def apply_effect(self, effect: Effect) -> None:
        """Apply a brick's effect to the paddle this ball belongs to."""
        self.paddle.score += effect.score_change
        self.paddle.health += effect.health_change
        self.paddle.speed += effect.speed_change

    def _bounce_single(self, cols: int) -> bool:
        paddle = self.paddle
        if self.y >= paddle.y:
            self.apply_effect(_OUT_OF_BOUNDS)
            return True
        if self.x <= 2 or self.x >= cols - 2:
            self.dx = -self.dx
            if self.y <= 1:
                self.dy = -self.dy
                return True
        if self.y <= 1:
            self.dy = -self.dy
            return True
        if paddle.x - 1 <= self.x <= paddle.x + PADDLE_LEN + 1:
            if self.dy > 0 and self.y < paddle.y and self.y + self.dy >= paddle.y - 1:
                self.dy = -self.dy
                if self.x in (paddle.x - 1, paddle.x + PADDLE_LEN):
                    self.dx = -self.dx
                return True
        return False

    def _bounce_battle(self, bottom: Paddle, top: Paddle, cols: int) -> bool:
        if self.y >= bottom.y or self.y <= top.y:
            self.apply_effect(_OUT_OF_BOUNDS)
            return True
        if self.x <= 2 or self.x >= cols - 2:
            self.dx = -self.dx
            return True

        edges = (-1, PADDLE_LEN + 1)
        if bottom.x - 1 <= self.x <= bottom.x + PADDLE_LEN + 1:
            if self.dy > 0 and self.y < bottom.y and self.y + self.dy >= bottom.y - 1:
                self.dy = -self.dy
                if self.x - bottom.x in edges:
                    self.dx = -self.dx
                return True
        if top.x - 1 <= self.x <= top.x + PADDLE_LEN + 1:
            if self.dy < 0 and self.y > top.y and self.y + self.dy <= top.y + 1:
                self.dy = -self.dy
                if self.x - top.x in edges:
                    self.dx = -self.dx
                return True
        return False

    def collide(
        self,
        game_mode: int,
        bottom: Paddle,
        top: Paddle,
        bricks: BrickWall,
        cols: int,
    ) -> None:
        """Handle walls, paddles, falling out and bricks for the current position."""
        if game_mode == GameMode.SINGLE:
            if self._bounce_single(cols):
                return
        elif game_mode in (GameMode.BATTLE, GameMode.MOVIE):
            if self._bounce_battle(bottom, top, cols):
                return

        outcome = bricks.check(self.x, self.y, self.dx, self.dy)
        self.dx *= outcome.ddx
        self.dy *= outcome.ddy
        for effect in outcome.effects:
            self.apply_effect(effect)

    def update(
        self,
        game_mode: int,
        bottom: Paddle,
        top: Paddle,
        bricks: BrickWall,
        cols: int,
    ) -> None:
        """Advance one step and resolve collisions."""
        self.x += self.dx
        self.y += self.dy
        self.collide(game_mode, bottom, top, bricks, cols)


def _rand_below(rng: random.Random, bound: int) -> int:
    """A random value in [0, |bound|), as a remainder of a random number would give."""
    if bound == 0:
        raise ValueError("empty spawn range")
    return rng.randrange(abs(bound))


def spawn_player_ball(
    paddle: Paddle,
    game_mode: int,
    cols: int,
    lines: int,
    rng: Optional[random.Random] = None,
) -> Ball:
    """Create the bottom paddle's ball at a random position heading upwards."""
    rng = rng or random.Random()
    if game_mode == GameMode.SINGLE:
        left, right = SPAWN_MARGIN, cols - SPAWN_MARGIN
        top, bottom = lines // 2 + 5, paddle.y - 5
        x = left + _rand_below(rng, right - left)
        y = top + _rand_below(rng, bottom - top)
    else:
        center = paddle.x + PADDLE_LEN // 2
        x = center - SPAWN_SPREAD // 2 + rng.randrange(SPAWN_SPREAD)
        y = paddle.y - 3 - rng.randrange(3)
        x = max(3, min(x, cols - 3))
    dx = 1 if rng.randrange(2) == 0 else -1
    return Ball(x=x, y=y, dx=dx, dy=-1, paddle=paddle)


def spawn_opponent_ball(paddle: Paddle) -> Ball:
    """Create the top paddle's ball just below it, heading down and right."""
    return Ball(x=paddle.x, y=paddle.y + 4, dx=1, dy=1, paddle=paddle)