"""Free-text entry with validation and retries."""

from __future__ import annotations

import logging
from typing import Callable

from pi.prompt.redraw import RedrawEngine
from pi.prompt.terminal import ProcessTerminal, Terminal

logger = logging.getLogger(__name__)


def enter(
    label: str | None = None,
    validator: Callable[[str], bool] | None = None,
    retry_message: str | None = None,
    maximum_retries: int = -1,
    *,
    terminal: Terminal | None = None,
) -> str:
    """Ask for one line of text.

    When *validator* rejects the input, everything the prompt printed is
    erased and the question is asked again, preceded by *retry_message* and,
    when *maximum_retries* is not negative, the number of attempts left.
    Without a validator any input is accepted, including an empty line.

    Once the retries are used up the last entered value is returned as is;
    callers that care about validity must check it again.
    """
    engine = RedrawEngine(terminal if terminal is not None else ProcessTerminal())
    unbounded = maximum_retries < 0
    retries = 0
    is_valid = True

    while True:
        engine.clear_lines()

        if not is_valid:
            if retry_message is not None:
                engine.write_line(retry_message + "\n")
            if not unbounded:
                attempts = maximum_retries - retries
                retries += 1
                noun = "attempt" if attempts == 1 else "attempts"
                engine.write_line(f"{attempts} {noun} remaining.\n")

        engine.write(f"{label} " if label is not None else " ")
        value = engine.read_line()
        is_valid = validator(value) if validator is not None else True

        if is_valid or not (unbounded or retries < maximum_retries):
            break
        logger.debug("input rejected (retry %d)", retries + 1)

    return value
