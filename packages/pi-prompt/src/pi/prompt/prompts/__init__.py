"""Interactive prompts."""

from pi.prompt.prompts.confirm import confirm
from pi.prompt.prompts.entry import enter
from pi.prompt.prompts.pick import pick

__all__ = [
    "confirm",
    "enter",
    "pick",
]
