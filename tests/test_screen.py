import curses
from unittest import mock

import pytest

from brickbreak import screen
from brickbreak.constants import GameMode, Owner
from brickbreak.paddle import Paddle


class FakeWindow:
    def __init__(self, lines=30, cols=120):
        self.lines = lines
        self.cols = cols
        self.writes = []
        self.boxed = False
        self.refreshes = 0
        self.cleared = False

    def getmaxyx(self):
        return (self.lines, self.cols)

    def resize(self, lines, cols):
        self.lines, self.cols = lines, cols

    def addstr(self, y, x, text, attr=0):
        if y >= self.lines or x >= self.cols:
            raise curses.error("out of window")
        self.writes.append((y, x, text, attr))

    def box(self):
        self.boxed = True

    def refresh(self):
        self.refreshes += 1

    def clear(self):
        self.cleared = True
        self.writes = []

    def texts(self):
        return [w[2] for w in self.writes]


def paddles(bottom_health=3, bottom_score=0, top_health=3, top_score=0):
    bottom = Paddle(owner=Owner.PLAYER, y=23, health=bottom_health, score=bottom_score)
    top = Paddle(owner=Owner.COMPUTER, y=1, health=top_health, score=top_score)
    return bottom, top


@pytest.mark.parametrize(
    "score, prefix",
    [
        (50, "Rating: EXCELLENT!"),
        (49, "Rating: GOOD!"),
        (30, "Rating: GOOD!"),
        (29, "Rating: NOT BAD!"),
        (15, "Rating: NOT BAD!"),
        (14, "Rating: UGHHHH.."),
        (0, "Rating: UGHHHH.."),
    ],
)
def test_rating_text_thresholds(score, prefix):
    assert screen.rating_text(score).startswith(prefix)


def test_status_lines_single():
    bottom, top = paddles(bottom_health=2, bottom_score=7)
    assert screen.status_lines(GameMode.SINGLE, bottom, top) == [
        "Player Health: 2 | Score: 7"
    ]


def test_status_lines_battle():
    bottom, top = paddles(top_health=1, top_score=4)
    assert screen.status_lines(GameMode.BATTLE, bottom, top) == [
        "Player Health: 3 | Score: 0",
        "Computer Health: 1 | Score: 4",
    ]


def test_status_lines_movie():
    bottom, top = paddles(bottom_score=5)
    lines = screen.status_lines(GameMode.MOVIE, bottom, top)
    assert lines[0] == "Computer_1 Health: 3 | Score: 5"
    assert lines[1] == "Computer_2 Health: 3 | Score: 0"


def test_result_lines_single_out_of_lives():
    bottom, top = paddles(bottom_health=0)
    texts = dict(screen.result_lines(GameMode.SINGLE, bottom, top, False))
    assert texts[7] == "Result: GAME OVER"
    assert texts[8] == "You ran out of lives!"
    assert texts[0] == "SINGLE PLAYER GAME RESULTS"


def test_result_lines_single_quit():
    bottom, top = paddles()
    texts = dict(screen.result_lines(GameMode.SINGLE, bottom, top, True))
    assert texts[7] == "Result: QUIT"


def test_result_lines_single_win():
    bottom, top = paddles(bottom_score=12)
    texts = dict(screen.result_lines(GameMode.SINGLE, bottom, top, False))
    assert texts[7] == "Result: YOU WIN!"
    assert texts[4] == "Player Score: 12"


@pytest.mark.parametrize(
    "mode, bottom_score, top_score, expected",
    [
        (GameMode.BATTLE, 3, 3, "Result: DRAW!"),
        (GameMode.BATTLE, 1, 3, "Result: COMPUTER WINS!"),
        (GameMode.BATTLE, 5, 3, "Result: PLAYER WINS!"),
        (GameMode.MOVIE, 1, 3, "Result: COMPUTER_2 WINS!"),
        (GameMode.MOVIE, 5, 3, "Result: COMPUTER_1 WINS!"),
    ],
)
def test_result_lines_battle(mode, bottom_score, top_score, expected):
    bottom, top = paddles(bottom_score=bottom_score, top_score=top_score)
    texts = dict(screen.result_lines(mode, bottom, top, False))
    assert texts[8] == expected
    assert texts[0] == "BATTLE MODE GAME RESULTS"


def test_result_lines_battle_labels_players():
    bottom, top = paddles(bottom_health=2, bottom_score=9)
    texts = dict(screen.result_lines(GameMode.BATTLE, bottom, top, False))
    assert texts[4] == "Player Health: 2    Score: 9"


def test_canvas_writes_plain_text():
    window = FakeWindow()
    screen.CursesCanvas(window).addstr(4, 6, "abc", 0)
    assert window.writes == [(4, 6, "abc", 0)]


def test_canvas_applies_color_pair():
    window = FakeWindow()
    with mock.patch("curses.color_pair", side_effect=lambda n: n * 256):
        screen.CursesCanvas(window).addstr(1, 2, "hi", 13)
    assert window.writes == [(1, 2, "hi", 13 * 256)]


def test_canvas_drops_writes_outside_window():
    window = FakeWindow(lines=5, cols=10)
    canvas = screen.CursesCanvas(window)
    canvas.addstr(-1, 0, "up", 0)
    canvas.addstr(0, -3, "left", 0)
    canvas.addstr(9, 0, "below", 0)
    assert window.writes == []


def make_screen(lines=30, cols=120):
    stdscr = FakeWindow(lines, cols)
    status = FakeWindow(screen.STATUS_HEIGHT, cols)
    newwin = mock.Mock(return_value=status)
    with mock.patch("curses.newwin", newwin):
        game_screen = screen.GameScreen(stdscr)
        game_screen.setup()
    return game_screen, stdscr, status, newwin


def test_setup_splits_screen():
    game_screen, stdscr, status, newwin = make_screen()
    newwin.assert_called_once_with(
        screen.STATUS_HEIGHT, 120, 30 - screen.STATUS_HEIGHT, 0
    )
    assert stdscr.getmaxyx() == (30 - screen.STATUS_HEIGHT, 120)
    assert (3, 2, screen.CONTROLS_TEXT, 0) in status.writes
    assert stdscr.boxed and status.boxed
    assert game_screen.state_window is status


def test_update_status_writes_lines():
    game_screen, _, status, _ = make_screen()
    bottom, top = paddles(top_score=2)
    game_screen.update_status(GameMode.BATTLE, bottom, top)
    written = {(y, text) for y, _, text, _ in status.writes}
    for row, text in enumerate(screen.status_lines(GameMode.BATTLE, bottom, top), 1):
        assert (row, text) in written


def test_update_status_before_setup_raises():
    game_screen = screen.GameScreen(FakeWindow())
    bottom, top = paddles()
    with pytest.raises(RuntimeError):
        game_screen.update_status(GameMode.SINGLE, bottom, top)


def test_refresh_refreshes_both_windows():
    game_screen, stdscr, status, _ = make_screen()
    before = (stdscr.refreshes, status.refreshes)
    game_screen.refresh()
    assert (stdscr.refreshes, status.refreshes) == (before[0] + 1, before[1] + 1)


def test_show_game_over_single():
    game_screen, stdscr, _, _ = make_screen()
    bottom, top = paddles(bottom_health=0)
    game_screen.show_game_over(GameMode.SINGLE, bottom, top, False)
    texts = stdscr.texts()
    assert game_screen.state_window is None
    assert stdscr.getmaxyx() == (30, 120)
    assert "Result: GAME OVER" in texts
    assert screen.rating_text(0) in texts
    assert screen.CONTINUE_TEXT in texts
    assert screen.CREDIT_TEXT in texts
    assert texts.count(screen.SEPARATOR) == 2


def test_show_game_over_art_is_aligned():
    game_screen, stdscr, _, _ = make_screen()
    bottom, top = paddles()
    game_screen.show_game_over(GameMode.BATTLE, bottom, top, False)
    art = [w for w in stdscr.writes if w[2] in screen.GAME_OVER_ART]
    assert len(art) == len(screen.GAME_OVER_ART)
    assert len({w[1] for w in art}) == 1
    assert [w[0] for w in art] == list(range(art[0][0], art[0][0] + len(art)))
    assert "Result: DRAW!" in stdscr.texts()
    assert screen.rating_text(0) not in stdscr.texts()