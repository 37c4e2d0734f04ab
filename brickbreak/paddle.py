"""Paddles: drawing, player steering and the computer opponent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from .constants import Owner

if TYPE_CHECKING:
    from .ball import Ball

PADDLE_LEN = 10
PADDLE_STR = "=" * PADDLE_LEN
PADDLE_CLEANER = " " * PADDLE_LEN

PADDLE_START_X = 65
BOTTOM_PADDLE_Y = 23
TOP_PADDLE_Y = 1

PREDICTION_STEPS = 50
DETECTION_RANGE = 2
TOP_PADDLE_LIMIT = 5
GIVE_UP_DISTANCE = 15
NO_THREAT_STEPS = 1000

_LEFT_KEYS = frozenset(map(ord, "aA"))
_RIGHT_KEYS = frozenset(map(ord, "dD"))


class _Canvas(Protocol):
    def addstr(self, y: int, x: int, text: str, pair: int) -> None: ...


@dataclass(frozen=True)
class BallPrediction:
    """Where a ball is expected to reach a paddle's zone, and how soon."""

    future_x: int = 0
    future_y: int = 0
    steps_to_paddle: int = NO_THREAT_STEPS
    is_dangerous: bool = False


def predict_ball_position(
    ball: Optional["Ball"], paddle: Optional["Paddle"], cols: int
) -> BallPrediction:
    """Simulate a ball for up to fifty steps towards a paddle."""
    if ball is None or paddle is None:
        return BallPrediction()

    x, y, dx, dy = ball.x, ball.y, ball.dx, ball.dy
    paddle_on_top = paddle.y <= TOP_PADDLE_LIMIT
    heading = dy * (ball.y - paddle.y)

    for steps in range(1, PREDICTION_STEPS + 1):
        x += dx
        y += dy
        if x <= 2 or x >= cols - 3:
            dx = -dx

        if paddle_on_top:
            in_zone = y <= paddle.y + DETECTION_RANGE
        else:
            in_zone = y >= paddle.y - DETECTION_RANGE
        if in_zone:
            return BallPrediction(x, y, steps, heading < 0)

        if paddle_on_top:
            too_far = y > ball.y + GIVE_UP_DISTANCE and dy > 0
        else:
            too_far = y < ball.y - GIVE_UP_DISTANCE and dy < 0
        if heading > 0 and too_far:
            break

    return BallPrediction()


@dataclass
class Paddle:
    """A paddle steered either by the player or by the computer."""

    owner: Owner
    y: int
    x: int = PADDLE_START_X
    health: int = 3
    score: int = 0
    speed: float = 3.0

    @property
    def pair(self) -> int:
        return int(self.owner) * 100 + 1

    def draw(self, canvas: _Canvas) -> None:
        canvas.addstr(self.y, self.x, PADDLE_STR, self.pair)

    def erase(self, canvas: _Canvas) -> None:
        canvas.addstr(self.y, self.x, PADDLE_CLEANER, 0)

    def clamp(self, cols: int) -> None:
        """Keep the paddle inside the playing field."""
        if self.x < 1:
            self.x = 1
        elif self.x + PADDLE_LEN > cols - 1:
            self.x = cols - 1 - PADDLE_LEN

    def _shift(self, amount: float) -> None:
        self.x = int(self.x + amount)

    def move_player(self, key: Optional[int], cols: int) -> None:
        """Move left on A, right on D; any other key leaves the paddle."""
        if key in _LEFT_KEYS:
            self._shift(-self.speed)
        elif key in _RIGHT_KEYS:
            self._shift(self.speed)
        else:
            return
        self.clamp(cols)

    def move_computer(self, balls: Sequence["Ball"], cols: int) -> None:
        """Chase the most threatening ball, or the nearest one if none threatens."""
        predictions = [predict_ball_position(ball, self, cols) for ball in balls]
        dangerous = [p for p in predictions if p.is_dangerous]

        target_x: Optional[int] = None
        if dangerous:
            target_x = min(reversed(dangerous), key=lambda p: p.steps_to_paddle).future_x
        elif balls:
            nearest = min(
                reversed(balls),
                key=lambda b: abs(b.x - self.x) + 2 * abs(b.y - self.y),
            )
            target_x = nearest.x

        if target_x is not None:
            center = self.x + PADDLE_LEN // 2
            if center < target_x:
                self._shift(self.speed)
            elif center > target_x:
                self._shift(-self.speed)

        self.clamp(cols)

    def update(self, key: Optional[int], balls: Sequence["Ball"], cols: int) -> None:
        """Move the paddle according to who steers it."""
        if self.owner == Owner.PLAYER:
            self.move_player(key, cols)
        elif self.owner == Owner.COMPUTER:
            self.move_computer(balls, cols)