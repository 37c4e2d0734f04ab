import threading

from brickbreak.constants import KEY_ESC
from brickbreak.keys import NO_KEY, KeyBuffer, KeyListener


class FakeWindow:
    def __init__(self, keys):
        self.keys = list(keys)
        self.nodelay_calls = []
        self.lock = threading.Lock()

    def getch(self):
        with self.lock:
            if self.keys:
                return self.keys.pop(0)
        return NO_KEY

    def nodelay(self, flag):
        self.nodelay_calls.append(flag)

    def pending(self):
        with self.lock:
            return bool(self.keys)


def test_empty_buffer_gives_none():
    assert KeyBuffer().take() is None


def test_take_returns_key_once():
    buffer = KeyBuffer()
    buffer.push(ord("a"))
    assert buffer.take() == ord("a")
    assert buffer.take() is None


def test_latest_push_wins():
    buffer = KeyBuffer()
    buffer.push(ord("a"))
    buffer.push(ord("d"))
    assert buffer.take() == ord("d")


def test_concurrent_pushes_keep_one_of_them():
    buffer = KeyBuffer()
    keys = list(range(100, 120))
    threads = [threading.Thread(target=buffer.push, args=(k,)) for k in keys]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert buffer.take() in keys


def test_poll_without_key():
    buffer = KeyBuffer()
    listener = KeyListener(FakeWindow([]), buffer, lambda: True)
    assert listener.poll() is None
    assert buffer.take() is None
    assert listener.quit_requested is False


def test_poll_stores_key():
    buffer = KeyBuffer()
    listener = KeyListener(FakeWindow([ord("d")]), buffer, lambda: True)
    assert listener.poll() == ord("d")
    assert buffer.take() == ord("d")
    assert listener.quit_requested is False


def test_escape_requests_quit():
    buffer = KeyBuffer()
    listener = KeyListener(FakeWindow([KEY_ESC]), buffer, lambda: True)
    assert listener.poll() == KEY_ESC
    assert listener.quit_requested is True
    assert buffer.take() == KEY_ESC


def test_start_listens_until_stopped():
    window = FakeWindow([NO_KEY, ord("a"), NO_KEY])
    buffer = KeyBuffer()
    listener = KeyListener(window, buffer, window.pending)
    thread = listener.start()
    thread.join(timeout=2)
    assert not thread.is_alive()
    assert window.nodelay_calls == [True]
    assert listener.thread is thread
    assert buffer.take() == ord("a")