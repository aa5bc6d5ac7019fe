"""Renderers that draw game frames."""

from __future__ import annotations

import contextlib
import logging
import queue
import threading
from typing import TYPE_CHECKING, Protocol, TextIO

import numpy as np

from term_snake.errors import TerminalTooSmall
from term_snake.grid import Cell, Frame

if TYPE_CHECKING:
    import curses

logger = logging.getLogger(__name__)

GLYPHS: dict[Cell, str] = {
    Cell.BLANK: "🐾",
    Cell.FOOD: "🍎",
    Cell.BODY: "🚌",
    Cell.HEAD: "👶",
    Cell.WALL: "🧱",
}

# Single-width fallbacks for plain text output.
ASCII_GLYPHS: dict[Cell, str] = {
    Cell.BLANK: ".",
    Cell.FOOD: "*",
    Cell.BODY: "o",
    Cell.HEAD: "@",
    Cell.WALL: "#",
}

# Terminal columns taken by one grid cell.
CELL_WIDTH = 2
# Screen rows above the map: score line plus a blank line.
MAP_TOP = 2


def ensure_fits(window: curses.window, rows: int, cols: int) -> None:
    """Raise :class:`TerminalTooSmall` unless a rows x cols grid fits *window*.

    The last screen line stays free; curses cannot write its final cell.
    """
    lines, columns = window.getmaxyx()
    if MAP_TOP + rows >= lines or cols * CELL_WIDTH > columns:
        raise TerminalTooSmall(rows, cols, lines, columns)


class Renderer(Protocol):
    def render(self, frame: Frame) -> None: ...
    def close(self) -> None: ...


class CursesRenderer:
    """Draws frames into a curses window, touching only changed cells.

    Pass the same *lock* given to the input source when drawing from a
    thread other than the one reading keys; ncurses is not thread-safe.
    """

    def __init__(
        self,
        window: curses.window,
        glyphs: dict[Cell, str] | None = None,
        lock: threading.Lock | None = None,
    ) -> None:
        self.window = window
        self.glyphs = glyphs if glyphs is not None else GLYPHS
        self.lock = lock
        self._last: np.ndarray | None = None

    def render(self, frame: Frame) -> None:
        with self.lock if self.lock is not None else contextlib.nullcontext():
            self._draw(frame)

    def _draw(self, frame: Frame) -> None:
        self.window.addstr(0, 1, f"Score: {frame.score}  Length: {frame.length}")
        self.window.clrtoeol()

        if self._last is None or self._last.shape != frame.cells.shape:
            changed = zip(*np.indices(frame.cells.shape).reshape(2, -1).tolist(), strict=True)
        else:
            rows, cols = np.nonzero(frame.cells != self._last)
            changed = zip(rows.tolist(), cols.tolist(), strict=True)

        for row, col in changed:
            self.window.addstr(
                MAP_TOP + row, col * CELL_WIDTH, self.glyphs[frame.cell(row, col)],
            )
        self._last = frame.cells
        self.window.refresh()

    def close(self) -> None:
        self._last = None


class TextRenderer:
    """Writes each frame as plain text lines to a stream."""

    def __init__(self, stream: TextIO, glyphs: dict[Cell, str] | None = None) -> None:
        self.stream = stream
        self.glyphs = glyphs if glyphs is not None else ASCII_GLYPHS
        self.frames = 0

    def render(self, frame: Frame) -> None:
        lines = [f"Score: {frame.score}"]
        for row in frame.cells.tolist():
            lines.append("".join(self.glyphs[Cell(c)] for c in row))
        self.stream.write("\n".join(lines) + "\n\n")
        self.stream.flush()
        self.frames += 1

    def close(self) -> None:
        self.stream.flush()


class ThreadedRenderer:
    """Runs another renderer on a background thread.

    Frames pass through a single-slot mailbox: an undrawn frame is replaced
    by the newer one, so the display never lags behind the game. Errors
    raised by the wrapped renderer resurface on the next :meth:`render` or
    on :meth:`close`.
    """

    _STOP = object()

    def __init__(self, inner: Renderer) -> None:
        self.inner = inner
        self._mailbox: queue.Queue = queue.Queue(maxsize=1)
        self._error: BaseException | None = None
        self._thread = threading.Thread(
            target=self._drain, name="term-snake-display", daemon=True,
        )
        self._thread.start()

    def render(self, frame: Frame) -> None:
        self._raise_pending()
        self._post(frame)

    def close(self) -> None:
        # Wait for the pending frame to be drawn rather than replacing it.
        while self._thread.is_alive():
            try:
                self._mailbox.put(self._STOP, timeout=0.1)
                break
            except queue.Full:
                continue
        self._thread.join()
        self.inner.close()
        self._raise_pending()

    def _post(self, item: object) -> None:
        while True:
            try:
                self._mailbox.put_nowait(item)
                return
            except queue.Full:
                try:
                    self._mailbox.get_nowait()
                except queue.Empty:
                    pass

    def _drain(self) -> None:
        while True:
            item = self._mailbox.get()
            if item is self._STOP:
                return
            try:
                self.inner.render(item)
            except Exception as exc:
                logger.exception("Display thread failed.")
                self._error = exc
                return

    def _raise_pending(self) -> None:
        if self._error is not None:
            error, self._error = self._error, None
            raise error
