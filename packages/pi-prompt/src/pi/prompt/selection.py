"""Focus and window state for a scrolling single-choice picker.

Pure state transitions, no I/O: the picker prompt feeds keys in and asks
for the rows to paint.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pi.prompt.utils import visible_width

ELLIPSIS = "..."


class RowKind(enum.Enum):
    OPTION = "option"
    SELECTED = "selected"
    ELLIPSIS = "ellipsis"


@dataclass
class SelectionState:
    """Focus index plus the first option index of the visible window.

    ``window_size`` is fixed for the lifetime of the picker and
    ``0 <= window_start <= option_count - window_size`` always holds.
    """

    option_count: int
    window_size: int
    current_index: int = 0
    window_start: int = 0

    @classmethod
    def create(
        cls,
        option_count: int,
        limit_rows: int | None = None,
        start_at_index: int | None = None,
    ) -> SelectionState:
        if option_count < 1:
            raise ValueError("options must not be empty")
        if limit_rows is not None and limit_rows < 1:
            raise ValueError(f"limit_rows must be at least 1, got {limit_rows}")
        index = start_at_index if start_at_index is not None else 0
        if not 0 <= index < option_count:
            raise ValueError(
                f"start_at_index {index} is outside 0..{option_count - 1}"
            )

        window_size = min(
            limit_rows if limit_rows is not None else option_count, option_count
        )
        window_start = 0
        if window_size < option_count:
            # Keep the option above the focus visible, but never run past the tail
            window_start = min(max(0, index - 1), option_count - window_size)
        return cls(option_count, window_size, index, window_start)

    @property
    def hides_above(self) -> bool:
        return self.window_start != 0

    @property
    def hides_below(self) -> bool:
        return self.window_start != self.option_count - self.window_size

    def move_up(self) -> None:
        if self.current_index == 0:
            self.current_index = self.option_count - 1
            self.window_start = self.option_count - self.window_size
            return
        self.current_index -= 1
        if self.window_start == self.current_index and self.current_index != 0:
            self.window_start -= 1

    def move_down(self) -> None:
        if self.current_index == self.option_count - 1:
            self.current_index = 0
            self.window_start = 0
            return
        self.current_index += 1
        if (
            self.window_start + self.window_size - 1 == self.current_index
            and self.current_index != self.option_count - 1
        ):
            self.window_start += 1

    def visible_rows(self) -> list[tuple[RowKind, int]]:
        """Return ``(kind, option_index)`` for each visible row, top to bottom."""
        rows: list[tuple[RowKind, int]] = []
        for i in range(self.window_size):
            k = self.window_start + i
            if i == 0 and self.hides_above:
                rows.append((RowKind.ELLIPSIS, k))
            elif i == self.window_size - 1 and self.hides_below:
                rows.append((RowKind.ELLIPSIS, k))
            elif k == self.current_index:
                rows.append((RowKind.SELECTED, k))
            else:
                rows.append((RowKind.OPTION, k))
        return rows

    def render(self, options: list[str], selector: str) -> list[str]:
        """Render the visible rows as text lines."""
        padding = " " * visible_width(selector)
        lines: list[str] = []
        for kind, k in self.visible_rows():
            if kind is RowKind.ELLIPSIS:
                lines.append(f"{padding} {ELLIPSIS}")
            elif kind is RowKind.SELECTED:
                lines.append(f"{selector} {options[k]}")
            else:
                lines.append(f"{padding} {options[k]}")
        return lines
