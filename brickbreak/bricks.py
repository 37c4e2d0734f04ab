"""The wall of bricks: layout, drawing, clearing and collision checks."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional, Protocol

from .constants import GameMode

BRICK_WIDTH = 5
BRICK_HEIGHT = 1
ALL_BRICKS_HEIGHT = 10
ALL_BRICKS_WIDTH = 115
BRICKS_COL = ALL_BRICKS_WIDTH // BRICK_WIDTH
BRICKS_ROW = ALL_BRICKS_HEIGHT // BRICK_HEIGHT

START_Y_SINGLE = 1
START_Y_BATTLE = 7
START_X = 2

BRICK_CLEANER = " " * BRICK_WIDTH
SPEED_BRICK_COUNT = 2


class _Canvas(Protocol):
    def addstr(self, y: int, x: int, text: str, pair: int) -> None: ...


@dataclass(frozen=True)
class Effect:
    """Changes applied to a paddle when its ball breaks a brick."""

    score_change: int = 0
    speed_change: int = 0
    health_change: int = 0


class BrickKind(IntEnum):
    """The kinds of brick; the value also seeds the colour pair numbers."""

    NORMAL = 1
    PRECIOUS = 2
    HURT = 3
    SPEED = 4
    HELP = 5

    @property
    def initial_health(self) -> int:
        return 3 if self is BrickKind.NORMAL else 2

    @property
    def effect(self) -> Effect:
        return _EFFECTS[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    @property
    def appearances(self) -> tuple[str, ...]:
        """Looks indexed by health minus one."""
        return _APPEARANCES[self]

    @property
    def message_pair(self) -> int:
        return int(self) * 10

    def pair(self, health: int) -> int:
        return int(self) * 10 + health


_EFFECTS = {
    BrickKind.NORMAL: Effect(1, 0, 0),
    BrickKind.PRECIOUS: Effect(2, 0, 0),
    BrickKind.HURT: Effect(0, 0, -1),
    BrickKind.SPEED: Effect(0, 1, 0),
    BrickKind.HELP: Effect(0, 0, 1),
}

_MESSAGES = {
    BrickKind.NORMAL: "BOOM!",
    BrickKind.PRECIOUS: "YEAH!",
    BrickKind.HURT: "OOPS!",
    BrickKind.SPEED: "DASH!",
    BrickKind.HELP: "HELP!",
}

_APPEARANCES = {
    BrickKind.NORMAL: ("[░░░]", "[▓▓▓]", "[███]"),
    BrickKind.PRECIOUS: ("[SSS]", "[$$$]"),
    BrickKind.HURT: ("[|||]", "[XXX]"),
    BrickKind.SPEED: ("[---]", "[+++]"),
    BrickKind.HELP: ("[III]", "[HHH]"),
}


@dataclass
class Brick:
    """One brick of the wall.

    A brick whose health reaches zero first shows its message (``announced``)
    and is then wiped from the screen (``gone``).
    """

    x: int
    y: int
    kind: BrickKind
    health: int
    announced: bool = False
    gone: bool = False

    @property
    def standing(self) -> bool:
        return not self.gone and not self.announced and self.health > 0

    def appearance(self) -> str:
        """The text drawn for the brick at its current health."""
        if self.health <= 0:
            raise ValueError("a broken brick has no appearance")
        return self.kind.appearances[self.health - 1]


@dataclass
class CollisionEffect:
    """Outcome of a ball meeting the wall: effects and velocity multipliers."""

    effects: tuple[Effect, Effect] = field(default_factory=lambda: (Effect(), Effect()))
    ddx: int = 1
    ddy: int = 1


def generate_brick_kinds(
    rows: int, cols: int, rng: Optional[random.Random] = None
) -> list[list[BrickKind]]:
    """Lay out brick kinds at random in fixed proportions.

    Two speed bricks; of the rest about 60% normal, 20% precious,
    10% hurt and the remainder help bricks.
    """
    n = rows * cols
    if n < SPEED_BRICK_COUNT:
        raise ValueError("num of bricks is less than 2")
    rng = rng or random.Random()

    remaining = n - SPEED_BRICK_COUNT
    counts = {
        BrickKind.NORMAL: int(remaining * 0.6 + 0.5),
        BrickKind.PRECIOUS: int(remaining * 0.2 + 0.5),
        BrickKind.HURT: int(remaining * 0.1 + 0.5),
    }
    counts[BrickKind.HELP] = max(0, remaining - sum(counts.values()))

    order = (BrickKind.NORMAL, BrickKind.PRECIOUS, BrickKind.HURT, BrickKind.HELP)
    while (total := sum(counts.values())) != remaining:
        if total > remaining:
            kind = next(k for k in order if counts[k] > 0)
            counts[kind] -= 1
        else:
            counts[BrickKind.NORMAL] += 1

    flat = [kind for kind in order for _ in range(counts[kind])]
    flat.extend([BrickKind.SPEED] * SPEED_BRICK_COUNT)
    rng.shuffle(flat)

    return [flat[r * cols:(r + 1) * cols] for r in range(rows)]


class BrickWall:
    """All bricks of a game, laid out row by row."""

    def __init__(self, game_mode: int, rng: Optional[random.Random] = None) -> None:
        start_y = (
            START_Y_BATTLE
            if game_mode in (GameMode.BATTLE, GameMode.MOVIE)
            else START_Y_SINGLE
        )
        kinds = generate_brick_kinds(BRICKS_ROW, BRICKS_COL, rng)
        self.grid: list[list[Brick]] = [
            [
                Brick(
                    x=j * BRICK_WIDTH + START_X,
                    y=i * BRICK_HEIGHT + start_y,
                    kind=kind,
                    health=kind.initial_health,
                )
                for j, kind in enumerate(row)
            ]
            for i, row in enumerate(kinds)
        ]

    def __iter__(self) -> Iterator[Brick]:
        for row in self.grid:
            yield from row

    def __len__(self) -> int:
        return sum(len(row) for row in self.grid)

    def check(self, x: int, y: int, dx: int, dy: int) -> CollisionEffect:
        """Test whether a ball at (x, y) moving by (dx, dy) hits a brick.

        A hit brick loses one health; if that breaks it, its effect is returned.
        """
        result = CollisionEffect()
        next_x, next_y = x + dx, y + dy

        for brick in self:
            if not brick.standing:
                continue
            bx, by = brick.x, brick.y
            if not (bx <= next_x < bx + BRICK_WIDTH and by <= next_y < by + BRICK_HEIGHT):
                continue

            horizontal = (x < bx <= next_x) or (
                x >= bx + BRICK_WIDTH > next_x
            )
            vertical = (y < by <= next_y) or (y >= by + BRICK_HEIGHT > next_y)
            if horizontal:
                result.ddx = -1
            if vertical:
                result.ddy = -1

            brick.health -= 1
            if brick.health <= 0:
                result.effects = (brick.kind.effect, result.effects[1])
            return result

        return result

    def clear(self, canvas: _Canvas) -> None:
        """Show messages for freshly broken bricks and wipe announced ones."""
        for brick in self:
            if brick.announced:
                canvas.addstr(brick.y, brick.x, BRICK_CLEANER, 0)
                brick.announced = False
                brick.gone = True
            elif not brick.gone and brick.health <= 0:
                canvas.addstr(brick.y, brick.x, brick.kind.message, brick.kind.message_pair)
                brick.announced = True

    def draw(self, canvas: _Canvas) -> int:
        """Draw every standing brick and return how many were drawn."""
        drawn = 0
        for brick in self:
            if not brick.standing:
                continue
            canvas.addstr(brick.y, brick.x, brick.appearance(), brick.kind.pair(brick.health))
            drawn += 1
        return drawn

    def remaining(self) -> int:
        """Number of bricks still standing."""
        return sum(1 for brick in self if brick.standing)