"""Prompt keybindings manager."""

from __future__ import annotations

from typing import Literal

from pi.prompt.keys import KeyId, matches_key

PromptAction = Literal[
    "selectUp",
    "selectDown",
    "selectConfirm",
]

PromptKeybindingsConfig = dict[PromptAction, KeyId | list[KeyId]]

# Each direction has one alternate letter next to the arrow key.
DEFAULT_PROMPT_KEYBINDINGS: dict[PromptAction, KeyId | list[KeyId]] = {
    "selectUp": ["up", "w"],
    "selectDown": ["down", "d"],
    "selectConfirm": "enter",
}


class PromptKeybindingsManager:
    """Maps prompt actions to the keys that trigger them."""

    def __init__(
        self, config: PromptKeybindingsConfig | None = None
    ) -> None:
        self._action_to_keys: dict[PromptAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: PromptKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for action, keys in DEFAULT_PROMPT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: PromptAction) -> bool:
        """Check if input matches a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        for key in keys:
            if matches_key(data, key):
                return True
        return False

    def get_keys(self, action: PromptAction) -> list[KeyId]:
        return self._action_to_keys.get(action, [])

    def set_config(self, config: PromptKeybindingsConfig) -> None:
        self._build_maps(config)


_global_prompt_keybindings: PromptKeybindingsManager | None = None


def get_prompt_keybindings() -> PromptKeybindingsManager:
    global _global_prompt_keybindings
    if _global_prompt_keybindings is None:
        _global_prompt_keybindings = PromptKeybindingsManager()
    return _global_prompt_keybindings


def set_prompt_keybindings(manager: PromptKeybindingsManager) -> None:
    global _global_prompt_keybindings
    _global_prompt_keybindings = manager
