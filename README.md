# brickbreak

A brick-breaking game that runs in a curses terminal. Knock out a wall of
bricks with a bouncing ball, play against a computer-controlled paddle, or
watch two computer paddles play each other.

## Requirements

- Python 3.10 or later, with the standard `curses` module (POSIX systems)
- A terminal with colour support; without it the game prints
  `terminal does not support colors` and exits with status 1
- A terminal window of about 120 columns by 30 lines

## Installing

```
pip install .
```

## Screen files

The title screen and the mode menu are drawn from four plain-text files:
`title.txt`, `instructions.txt`, `credits.txt` and `menu.txt`. These files
are not included in the package; you supply them yourself. By default they
are looked for in a directory named `res` under the current directory;
another directory can be given with `--resources`:

```
brickbreak --resources path/to/screens
```

If any of the four files is missing, `brickbreak` prints
`Error opening file: ...` listing them and exits with status 1 without
starting the terminal interface.

The title file is drawn at the top of the screen, the instructions from
row 8, the credits from row 28, and the menu from row 8 below the title.

## Playing

```
brickbreak
```

On the title screen press <kbd>Space</kbd> or <kbd>Enter</kbd> to go on to
the menu, or <kbd>Esc</kbd> to leave. On the menu choose a mode:

| Key | Mode   | Description                                                    |
|-----|--------|----------------------------------------------------------------|
| 1   | Single | Clear the wall with your paddle at the bottom                  |
| 2   | Battle | You at the bottom, a computer paddle at the top, one shared wall |
| 3   | Movie  | Two computer paddles play each other while you watch           |

### Controls

- <kbd>A</kbd> / <kbd>D</kbd>: move your paddle left / right
- <kbd>Esc</kbd>: end the current game

A status panel below the playing field shows each side's health and score.
When a game ends a results screen appears (with a star rating in single
mode); press <kbd>Esc</kbd> or <kbd>Space</kbd> to leave it.

### Bricks

| Brick    | Look    | Hits | Effect on the owner of the ball that breaks it |
|----------|---------|------|------------------------------------------------|
| Normal   | `[███]` | 3    | +1 score                                       |
| Precious | `[$$$]` | 2    | +2 score                                       |
| Hurt     | `[XXX]` | 2    | −1 health                                      |
| Speed    | `[+++]` | 2    | +1 paddle speed                                |
| Help     | `[HHH]` | 2    | +1 health                                      |

The wall has exactly two speed bricks; of the rest about 60% are normal,
20% precious, 10% hurt and the remainder help bricks, shuffled at random.
A broken brick briefly shows a message (`BOOM!`, `YEAH!`, `OOPS!`, `DASH!`,
`HELP!`) before it disappears.

### Rules

Each paddle starts with three health. A ball is served once and is not
served again: every frame it spends past its paddle (in battle and movie
modes, past either paddle) costs the ball's owner one health. The game ends
when either paddle's health reaches zero, when the wall is cleared, or when
<kbd>Esc</kbd> is pressed. In single mode clearing the wall wins; in battle
and movie modes the higher score wins and equal scores are a draw.

## Using the pieces

The game logic does not depend on curses for drawing: `Game.step(key, canvas)`
in `brickbreak.game` advances one frame and draws onto any object with an
`addstr(y, x, text, pair)` method. `BrickWall`, `Paddle` and `Ball` live in
`brickbreak.bricks`, `brickbreak.paddle` and `brickbreak.ball`;
`predict_ball_position` in `brickbreak.paddle` is the look-ahead the
computer paddle uses.

## Running the tests

```
pip install ".[test]"
pytest
```