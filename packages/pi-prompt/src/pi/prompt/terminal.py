"""Terminal abstraction for blocking prompt I/O.

Provides a ``Terminal`` protocol with the primitive operations the redraw
engine needs (raw writes, line and key reads, absolute cursor get/set,
dimension queries, cursor visibility) and a concrete ``ProcessTerminal``
backed by ``sys.stdin``/``sys.stdout`` and ANSI escape sequences.

All coordinates are zero-based ``(column, row)`` pairs relative to the
visible window.
"""

from __future__ import annotations

import os
import re
import sys
import termios
import tty
from contextlib import contextmanager
from typing import IO, Iterator, Protocol

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CURSOR_POSITION_QUERY = "\x1b[6n"
_SET_CURSOR_FMT = "\x1b[{};{}H"

_CURSOR_POSITION_RE = re.compile(r"\x1b\[(\d+);(\d+)R")

_READ_KEY_BYTES = 32


class TerminalError(RuntimeError):
    """Raised when a terminal primitive cannot be carried out."""


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal primitives used by the prompts."""

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def write(self, data: str) -> None: ...

    def write_line(self, data: str = "") -> None: ...

    def read_line(self) -> str: ...

    def read_key(self) -> str: ...

    def get_cursor_position(self) -> tuple[int, int]: ...

    def set_cursor_position(self, column: int, row: int) -> None: ...

    def set_cursor_visible(self, visible: bool) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``.

    Line reads use the terminal's cooked mode so the user gets normal line
    editing and echo. Key reads and cursor queries switch the input to cbreak
    mode for the duration of the call only; ``ISIG`` stays enabled, so
    Ctrl+C still raises ``KeyboardInterrupt``.
    """

    def __init__(
        self,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._write_log_path: str = os.environ.get("PI_PROMPT_WRITE_LOG", "")

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        self._stdout.write(data)
        self._stdout.flush()

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                pass

    def write_line(self, data: str = "") -> None:
        self.write(data + "\n")

    # -- input --------------------------------------------------------------

    def read_line(self) -> str:
        """Read one line in cooked mode, without its line terminator.

        Raises ``EOFError`` when stdin is closed, like :func:`input`.
        """
        line = self._stdin.readline()
        if not line:
            raise EOFError("stdin closed while reading a line")
        if self._write_log_path:
            self._log_echo(line)
        return line.rstrip("\r\n")

    def read_key(self) -> str:
        """Block until one keypress arrives and return its raw characters."""
        fd = self._input_fd()
        with _cbreak(fd):
            raw = os.read(fd, _READ_KEY_BYTES)
        return raw.decode("utf-8", errors="replace")

    # -- cursor -------------------------------------------------------------

    def get_cursor_position(self) -> tuple[int, int]:
        """Query the cursor position with a DSR request (``ESC [ 6 n``)."""
        fd = self._input_fd()
        with _cbreak(fd):
            self._stdout.write(_CURSOR_POSITION_QUERY)
            self._stdout.flush()
            reply = ""
            while not reply.endswith("R"):
                chunk = os.read(fd, 1)
                if not chunk:
                    break
                reply += chunk.decode("ascii", errors="replace")

        match = _CURSOR_POSITION_RE.search(reply)
        if match is None:
            raise TerminalError(f"unexpected cursor position reply: {reply!r}")
        row, column = int(match.group(1)), int(match.group(2))
        return column - 1, row - 1

    def set_cursor_position(self, column: int, row: int) -> None:
        if column < 0 or row < 0:
            raise ValueError(
                f"cursor position out of range: column={column}, row={row}"
            )
        self.write(_SET_CURSOR_FMT.format(row + 1, column + 1))

    def set_cursor_visible(self, visible: bool) -> None:
        self.write(_SHOW_CURSOR if visible else _HIDE_CURSOR)

    # -- private ------------------------------------------------------------

    def _input_fd(self) -> int:
        try:
            fd = self._stdin.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalError("stdin has no file descriptor") from e
        if not os.isatty(fd):
            raise TerminalError("stdin is not attached to an interactive terminal")
        return fd

    def _log_echo(self, line: str) -> None:
        try:
            with open(self._write_log_path, "a") as f:
                f.write(line)
        except OSError:
            pass


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@contextmanager
def _cbreak(fd: int) -> Iterator[None]:
    """Put *fd* into cbreak mode and restore its attributes afterwards."""
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
