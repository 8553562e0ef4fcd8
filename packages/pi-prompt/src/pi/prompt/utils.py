"""Display-width helpers for prompt text.

Prompt bookkeeping is done in terminal columns, not code points: a selector
such as ``" ▶"`` or typed input containing CJK characters or emoji must be
padded and erased by the number of cells it actually occupies.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# CSI sequences and OSC 8 hyperlinks
_STRIP_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]|\x1b\]8;;[^\x07]*\x07")

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster."""
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        # VS16, ZWJ sequences, skin tones and regional indicators are emoji
        if cp in (0xFE0F, 0x200D):
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2
    if unicodedata.category(first) in ("Mn", "Me", "Cf"):
        return 0
    return max(_wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Calculate the number of terminal columns *text* occupies.

    ANSI escape sequences are ignored and tabs count as 3 columns.
    """
    if not text:
        return 0

    stripped = _STRIP_RE.sub("", text).replace("\t", "   ")
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def truncate_to_width(text: str, max_width: int, ellipsis: str = "...") -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    When truncation happens *ellipsis* is appended and counts towards the
    width. Text is cut at grapheme boundaries.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    target = max_width - visible_width(ellipsis)
    if target <= 0:
        return _take_columns(ellipsis, max_width)
    return _take_columns(text, target) + ellipsis


def _take_columns(text: str, max_cols: int) -> str:
    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(text):
        w = _grapheme_width(g)
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
    return "".join(result)
