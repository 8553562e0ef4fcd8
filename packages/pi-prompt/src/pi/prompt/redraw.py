"""Redraw engine: checkpointed cursor tracking with scroll compensation.

A terminal has no undo. To erase or rewrite something printed earlier, the
engine remembers absolute cursor positions (checkpoints) and the position it
started at. When a write pushes content past the bottom of the window the
terminal scrolls, and every remembered row moves up with it; the engine
predicts that scroll from the pre-write cursor row and window height and
shifts its stored rows *before* issuing the write, so the positions stay valid
without re-querying the terminal.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from pi.prompt.terminal import Terminal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CursorPosition:
    column: int
    row: int

    def shifted_up(self, amount: int) -> CursorPosition:
        """Return the position after the window scrolled by *amount* rows.

        A position whose line scrolled out of the window collapses to the
        top-left corner.
        """
        row = self.row - amount
        if row < 0:
            return CursorPosition(0, 0)
        return CursorPosition(self.column, row)


class Checkpoint(enum.Enum):
    """Roles a prompt can save a cursor position under."""

    CHOICE = "choice"
    OPTIONS = "options"
    ANSWER = "answer"


class CursorGuard:
    """Hides the cursor until released.

    Usable as a context manager; the cursor is shown again exactly once,
    whether the block returns normally or raises (including
    ``KeyboardInterrupt`` from SIGINT).
    """

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal
        self._released = False
        terminal.set_cursor_visible(False)

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._terminal.set_cursor_visible(True)

    def __enter__(self) -> CursorGuard:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class RedrawEngine:
    """Stateful wrapper around a :class:`Terminal` for one prompt invocation."""

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal
        self._checkpoints: dict[Checkpoint, CursorPosition] = {}
        self._start = self._position()
        self._cursor_guard: CursorGuard | None = None

    # -- state --------------------------------------------------------------

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    @property
    def starting_position(self) -> CursorPosition:
        return self._start

    @property
    def starting_top(self) -> int:
        return self._start.row

    def checkpoint(self, label: Checkpoint) -> CursorPosition | None:
        return self._checkpoints.get(label)

    def add_checkpoint(self, label: Checkpoint) -> None:
        """Record the current cursor position under *label* (last write wins)."""
        self._checkpoints[label] = self._position()

    # -- output -------------------------------------------------------------

    def write_line(self, text: str = "") -> None:
        self._compensate_scroll(text.count("\n") + 1)
        self._terminal.write_line(text)

    def write(self, text: str) -> None:
        self._compensate_scroll(text.count("\n"))
        self._terminal.write(text)

    def write_line_from_checkpoint(
        self,
        label: Checkpoint,
        text: str = "",
        clear_between: bool = False,
    ) -> None:
        """Go back to a checkpoint and write *text* as a line there.

        With *clear_between*, everything from the current row back to the
        checkpoint is erased first.
        """
        position = self._lookup(label)
        if position is None:
            return
        if clear_between:
            self._clear_back_to(position)
        self._terminal.set_cursor_position(position.column, position.row)
        self.write_line(text)

    # -- erasing ------------------------------------------------------------

    def clear_to_checkpoint(self, label: Checkpoint) -> None:
        """Erase back to a checkpoint and leave the cursor on it."""
        position = self._lookup(label)
        if position is None:
            return
        self._clear_back_to(position)

    def clear_lines(self, count: int | None = None) -> None:
        """Blank *count* rows upwards from the cursor.

        Each step blanks the current row, returns to column 0 and moves up one
        row, except on the top row of the window. Without *count*, everything
        written since the engine was created is erased and the cursor returns
        to the starting position.
        """
        if count is None:
            self._clear_back_to(self._start)
            return

        width = self._terminal.columns
        for _ in range(count):
            _, row = self._terminal.get_cursor_position()
            self._terminal.set_cursor_position(0, row)
            self._terminal.write(" " * width)
            if row > 0:
                row -= 1
            self._terminal.set_cursor_position(0, row)

    def clear_chars(self, count: int) -> None:
        """Overwrite *count* columns with spaces, keeping the cursor in place."""
        column, row = self._terminal.get_cursor_position()
        self._terminal.write(" " * count)
        self._terminal.set_cursor_position(column, row)

    def clear_chars_from_checkpoint(self, label: Checkpoint, count: int) -> None:
        position = self._lookup(label)
        if position is None:
            return
        self._terminal.set_cursor_position(position.column, position.row)
        self.clear_chars(count)

    # -- input --------------------------------------------------------------

    def read_line(self) -> str:
        """Read a line; the echoed newline may scroll the window by one row."""
        _, row = self._terminal.get_cursor_position()
        value = self._terminal.read_line()
        if row >= self._terminal.rows - 1:
            self._shift_rows(1)
        return value

    def read_key(self) -> str:
        return self._terminal.read_key()

    # -- cursor visibility --------------------------------------------------

    def disable_cursor(self) -> CursorGuard:
        """Hide the cursor; release the returned guard (or call
        :meth:`enable_cursor`) to show it again."""
        if self._cursor_guard is None or self._cursor_guard.released:
            self._cursor_guard = CursorGuard(self._terminal)
        return self._cursor_guard

    def enable_cursor(self) -> None:
        if self._cursor_guard is not None:
            self._cursor_guard.release()
            self._cursor_guard = None

    # -- private ------------------------------------------------------------

    def _position(self) -> CursorPosition:
        column, row = self._terminal.get_cursor_position()
        return CursorPosition(column, row)

    def _lookup(self, label: Checkpoint) -> CursorPosition | None:
        position = self._checkpoints.get(label)
        if position is None:
            logger.debug("checkpoint %s was never added; ignoring", label.name)
        return position

    def _compensate_scroll(self, lines: int) -> None:
        if lines <= 0:
            return
        _, row = self._terminal.get_cursor_position()
        scroll = row + lines - (self._terminal.rows - 1)
        if scroll > 0:
            self._shift_rows(scroll)

    def _shift_rows(self, amount: int) -> None:
        logger.debug("window scrolls by %d row(s)", amount)
        for label, position in self._checkpoints.items():
            self._checkpoints[label] = position.shifted_up(amount)
        self._start = self._start.shifted_up(amount)

    def _clear_back_to(self, position: CursorPosition) -> None:
        _, row = self._terminal.get_cursor_position()
        if row > position.row:
            self.clear_lines(row - position.row)
        self._terminal.set_cursor_position(position.column, position.row)
        self._terminal.write(" " * max(0, self._terminal.columns - position.column))
        self._terminal.set_cursor_position(position.column, position.row)
