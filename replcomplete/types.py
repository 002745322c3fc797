"""Completion value type."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Completion:
    """A single completion result.

    replace_length is how many characters before the cursor the client
    deletes before inserting text.
    """

    replace_length: int
    text: str


def mk_completions(token: str, texts: Iterable[str]) -> list[Completion]:
    """Build completions that all replace `token`."""
    n = len(token)
    return [Completion(n, text) for text in texts]


def by_length(names: Iterable[str]) -> list[str]:
    """Deduplicate and order shortest first, ties broken alphabetically."""
    return sorted(sorted(set(names)), key=len)
