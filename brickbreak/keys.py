"""Keyboard polling in a background thread with a shared last-key buffer."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Optional

from .constants import KEY_ESC

NO_KEY = -1
POLL_INTERVAL = 0.01


class KeyBuffer:
    """Holds the most recent key press; safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._key: Optional[int] = None

    def push(self, key: int) -> None:
        """Record ``key`` as the latest press, replacing any unread one."""
        with self._lock:
            self._key = key

    def take(self) -> Optional[int]:
        """Return the latest unread key and forget it; None if there is none."""
        with self._lock:
            key, self._key = self._key, None
        return key


class KeyListener:
    """Reads keys from a window while ``running()`` holds and stores them."""

    def __init__(
        self, window: Any, buffer: KeyBuffer, running: Callable[[], bool]
    ) -> None:
        self.window = window
        self.buffer = buffer
        self.running = running
        self.thread: Optional[threading.Thread] = None
        self._quit = threading.Event()

    @property
    def quit_requested(self) -> bool:
        """Whether Esc has been pressed."""
        return self._quit.is_set()

    def poll(self) -> Optional[int]:
        """Read one key without blocking; store and return it, or None."""
        key = self.window.getch()
        if key == NO_KEY:
            return None
        self.buffer.push(key)
        if key == KEY_ESC:
            self._quit.set()
        return key

    def _listen(self) -> None:
        while self.running():
            self.poll()
            time.sleep(POLL_INTERVAL)

    def start(self) -> threading.Thread:
        """Switch the window to non-blocking input and start listening."""
        self.window.nodelay(True)
        thread = threading.Thread(target=self._listen, name="key-listener", daemon=True)
        thread.start()
        self.thread = thread
        return thread