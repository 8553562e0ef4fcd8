"""pi-prompt: interactive terminal prompts with in-place redraw."""

# Keybindings
from pi.prompt.keybindings import (
    DEFAULT_PROMPT_KEYBINDINGS,
    PromptAction,
    PromptKeybindingsManager,
    get_prompt_keybindings,
    set_prompt_keybindings,
)

# Keyboard input handling
from pi.prompt.keys import Key, KeyId, matches_key, parse_key

# Prompts
from pi.prompt.prompts import confirm, enter, pick

# Redraw engine
from pi.prompt.redraw import Checkpoint, CursorGuard, CursorPosition, RedrawEngine

# Selection window state
from pi.prompt.selection import ELLIPSIS, RowKind, SelectionState

# Terminal interface and implementation
from pi.prompt.terminal import ProcessTerminal, Terminal, TerminalError

# Utilities
from pi.prompt.utils import truncate_to_width, visible_width

__all__ = [
    # Keybindings
    "DEFAULT_PROMPT_KEYBINDINGS",
    "PromptAction",
    "PromptKeybindingsManager",
    "get_prompt_keybindings",
    "set_prompt_keybindings",
    # Keys
    "Key",
    "KeyId",
    "matches_key",
    "parse_key",
    # Prompts
    "confirm",
    "enter",
    "pick",
    # Redraw engine
    "Checkpoint",
    "CursorGuard",
    "CursorPosition",
    "RedrawEngine",
    # Selection
    "ELLIPSIS",
    "RowKind",
    "SelectionState",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    "TerminalError",
    # Utilities
    "truncate_to_width",
    "visible_width",
]
