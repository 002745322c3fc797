"""Trailing-token extraction and string-literal detection.

Two delimiter policies:

    last_token  -- narrow, for module and identifier contexts
    last_word   -- wide, for flags and filesystem paths

Both are heuristics over raw text. Neither ever raises.
"""

from __future__ import annotations

import unicodedata
from typing import Callable

_TOKEN_DELIMITERS = frozenset(" :!-\n\t(),{}[]\\'\"`")
_WORD_DELIMITERS = frozenset(" \t\n\"")

# Unicode "Symbol" general categories: math, currency, modifier, other.
_SYMBOL_CATEGORIES = frozenset({"Sm", "Sc", "Sk", "So"})


def is_symbol(char: str) -> bool:
    """True for any character in a Unicode Symbol category (e.g. + = < $ ^ ~)."""
    return unicodedata.category(char) in _SYMBOL_CATEGORIES


def _take_while_end(text: str, keep: Callable[[str], bool]) -> str:
    i = len(text)
    while i > 0 and keep(text[i - 1]):
        i -= 1
    return text[i:]


def last_token(text: str) -> str:
    """Trailing run of characters that are neither separators nor symbols.

    >>> last_token("import Data.Mo")
    'Data.Mo'
    >>> last_token("x <- map (fo")
    'fo'
    """
    return _take_while_end(
        text, lambda c: c not in _TOKEN_DELIMITERS and not is_symbol(c)
    )


def last_word(text: str) -> str:
    """Trailing run of non-whitespace, non-double-quote characters.

    >>> last_word(':load src/Ma')
    'src/Ma'
    """
    return _take_while_end(text, lambda c: c not in _WORD_DELIMITERS)


def inside_string(text: str) -> bool:
    """Whether the end of `text` sits inside an unterminated double-quoted string.

    Every double quote toggles the state unless it directly follows a
    backslash. An escaped quote is skipped without closing the string, so a
    line ending in an escaped quote is still inside.

    >>> inside_string('Hello')
    False
    >>> inside_string('He "llo')
    True
    >>> inside_string('He "ll " o')
    False
    >>> inside_string('He "ll\\\\"')
    True
    """
    inside = False
    pos = 0
    while True:
        idx = text.find('"', pos)
        if idx < 0:
            return inside
        if idx == 0 or text[idx - 1] != "\\":
            inside = not inside
        pos = idx + 1
