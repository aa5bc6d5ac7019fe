"""Input sources that feed key presses to the game loop."""

from __future__ import annotations

import curses
import threading
import time
from collections import deque
from collections.abc import Iterable
from typing import Protocol

_ESC = 27

# Seconds between non-blocking reads when the window is shared with a
# display thread.
_POLL_SLICE = 0.005

# curses key codes mapped to the key names the engine understands.
_KEY_NAMES: dict[int, str] = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    _ESC: "esc",
}


class InputSource(Protocol):
    def poll(self, timeout_ms: int) -> bool: ...
    def read(self) -> str: ...


def key_name(code: int) -> str:
    """Translate a curses ``getch()`` code into a key name."""
    if code in _KEY_NAMES:
        return _KEY_NAMES[code]
    if 0 <= code < 256:
        return chr(code)
    return curses.keyname(code).decode("ascii", "replace").lower()


class CursesInput:
    """Reads keys from a curses window with a per-poll timeout.

    Without a *lock* each poll is one blocking ``getch()``. With a lock the
    window is shared with a drawing thread, so the poll is split into
    non-blocking reads made while holding the lock, which keeps every
    curses call serialized.
    """

    def __init__(
        self, window: curses.window, lock: threading.Lock | None = None,
    ) -> None:
        self.window = window
        self.lock = lock
        self.window.keypad(True)
        self._pending: int | None = None

    def poll(self, timeout_ms: int) -> bool:
        """Wait up to *timeout_ms* for a key; return whether one arrived."""
        if self._pending is not None:
            return True
        if self.lock is None:
            self.window.timeout(max(timeout_ms, 0))
            code = self.window.getch()
        else:
            code = self._poll_shared(max(timeout_ms, 0) / 1000)
        if code == -1:
            return False
        self._pending = code
        return True

    def read(self) -> str:
        while self._pending is None:
            self.poll(100)
        code, self._pending = self._pending, None
        return key_name(code)

    def _poll_shared(self, timeout: float) -> int:
        deadline = time.monotonic() + timeout
        while True:
            with self.lock:
                self.window.timeout(0)
                code = self.window.getch()
            if code != -1 or time.monotonic() >= deadline:
                return code
            time.sleep(_POLL_SLICE)


class ScriptedInput:
    """Replays a fixed key sequence; ``None`` entries simulate a timeout.

    Once the script runs out every poll times out.
    """

    def __init__(self, keys: Iterable[str | None]) -> None:
        self.keys: deque[str | None] = deque(keys)
        self.polls: list[int] = []

    def poll(self, timeout_ms: int) -> bool:
        self.polls.append(timeout_ms)
        if not self.keys:
            return False
        if self.keys[0] is None:
            self.keys.popleft()
            return False
        return True

    def read(self) -> str:
        key = self.keys.popleft()
        assert key is not None
        return key
