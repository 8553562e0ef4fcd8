"""Keyboard input parsing for blocking prompt reads.

A single ``read_key`` call returns the raw bytes of one keypress (one byte
for printable characters, a short escape sequence for arrows and friends).
``parse_key`` turns that into a key identifier such as ``"up"``, ``"enter"``
or ``"ctrl+c"``, and ``matches_key`` checks it against a configured id.
"""

from __future__ import annotations

KeyId = str


class Key:
    """Named key constants."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# CSI and SS3 forms; terminals in application cursor mode send the latter.
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
}


def parse_key(data: str) -> KeyId | None:
    """Parse raw terminal input and return the key identifier, or ``None``.

    Printable characters are returned as-is (``"w"``, ``"W"``); use
    :func:`matches_key` for case-insensitive letter matching.
    """
    if not data:
        return None

    name = LEGACY_KEY_SEQUENCES.get(data)
    if name is not None:
        return name

    if data == "\x1b":
        return "escape"
    if data in ("\r", "\n", "\r\n"):
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data in ("\x7f", "\x08"):
        return "backspace"

    # Ctrl + letter (0x01 - 0x1a); \t \n \r are handled above
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    if len(data) == 2 and data[0] == "\x1b" and data[1].isprintable():
        return "alt+" + data[1].lower()

    if len(data) == 1 and data.isprintable():
        return data

    return None


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if raw input *data* is the key named by *key_id*.

    Single letters match regardless of case, so ``"w"`` accepts both
    ``w`` and ``W``.
    """
    parsed = parse_key(data)
    if parsed is None:
        return False
    if len(key_id) == 1 and len(parsed) == 1:
        return parsed.lower() == key_id.lower()
    return parsed == key_id
