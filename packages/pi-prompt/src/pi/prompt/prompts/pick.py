"""Scrollable single-choice picker driven by arrow keys."""

from __future__ import annotations

from typing import Sequence

from pi.prompt.keybindings import PromptKeybindingsManager, get_prompt_keybindings
from pi.prompt.redraw import Checkpoint, RedrawEngine
from pi.prompt.selection import SelectionState
from pi.prompt.terminal import ProcessTerminal, Terminal
from pi.prompt.utils import truncate_to_width

DEFAULT_SELECTOR = " >"


def pick(
    options: Sequence[str],
    label: str | None = None,
    selector: str = DEFAULT_SELECTOR,
    limit_rows: int | None = None,
    start_at_index: int | None = None,
    *,
    terminal: Terminal | None = None,
    keybindings: PromptKeybindingsManager | None = None,
) -> tuple[int, str]:
    """Let the user pick one of *options* and return ``(index, option)``.

    At most *limit_rows* options are shown at a time; ``...`` marks options
    hidden above or below the window. Up/down (or their configured alternates)
    move the focus, wrapping at both ends, and Enter commits. The options
    area then collapses into the chosen option, printed after the label.

    Raises ``ValueError`` for an empty *options* sequence, a *limit_rows*
    below 1, or a *start_at_index* outside the options.
    """
    options = list(options)
    state = SelectionState.create(len(options), limit_rows, start_at_index)
    kb = keybindings if keybindings is not None else get_prompt_keybindings()
    engine = RedrawEngine(terminal if terminal is not None else ProcessTerminal())

    with engine.disable_cursor():
        if label is not None:
            engine.write(label + " ")
        engine.add_checkpoint(Checkpoint.CHOICE)
        engine.write_line()
        engine.add_checkpoint(Checkpoint.OPTIONS)

        _choose(engine, state, options, selector, kb)

        engine.write_line_from_checkpoint(
            Checkpoint.CHOICE, options[state.current_index], clear_between=True
        )

    return state.current_index, options[state.current_index]


def _choose(
    engine: RedrawEngine,
    state: SelectionState,
    options: list[str],
    selector: str,
    kb: PromptKeybindingsManager,
) -> None:
    committed = False
    while not committed:
        _print_selection_area(engine, state, options, selector)
        committed = _handle_input(state, engine.read_key(), kb)


def _print_selection_area(
    engine: RedrawEngine,
    state: SelectionState,
    options: list[str],
    selector: str,
) -> None:
    engine.clear_to_checkpoint(Checkpoint.OPTIONS)
    # One option per terminal row; a wrapped line would throw off the row math
    width = engine.terminal.columns - 1
    for line in state.render(options, selector):
        engine.write_line(truncate_to_width(line, width))


def _handle_input(
    state: SelectionState, data: str, kb: PromptKeybindingsManager
) -> bool:
    """Apply one keypress to *state*; return ``True`` when it commits."""
    if kb.matches(data, "selectUp"):
        state.move_up()
    elif kb.matches(data, "selectDown"):
        state.move_down()
    elif kb.matches(data, "selectConfirm"):
        return True
    return False
