"""Yes/no confirmation."""

from __future__ import annotations

from pi.prompt.redraw import Checkpoint, RedrawEngine
from pi.prompt.terminal import ProcessTerminal, Terminal
from pi.prompt.utils import visible_width

_YES = ("y", "yes")


def confirm(
    label: str | None = None,
    default: bool = True,
    *,
    terminal: Terminal | None = None,
) -> bool:
    """Ask a yes/no question.

    ``y``/``yes`` (any case) confirm, an empty answer falls back to
    *default*, anything else rejects. The typed answer is then replaced in
    place by a single ``y`` or ``n``.
    """
    engine = RedrawEngine(terminal if terminal is not None else ProcessTerminal())

    hint = "Y/n" if default else "y/N"
    engine.write(f"{label} ({hint}): " if label is not None else f"({hint}): ")
    engine.add_checkpoint(Checkpoint.ANSWER)

    typed = engine.read_line()
    answer = typed.lower()
    if answer in _YES:
        result = True
    elif answer == "":
        result = default
    else:
        result = False

    engine.clear_chars_from_checkpoint(Checkpoint.ANSWER, visible_width(typed))
    engine.write_line_from_checkpoint(Checkpoint.ANSWER, "y" if result else "n")
    return result
