"""Module name and module prefix completion.

A "good" candidate has exactly as many dots as the query, so accepting it
adds no nesting level (``Data.Mo`` -> ``Data.Monoid``). When there are none,
the query is advanced one segment at a time instead (``Dat`` -> ``Data.``).
Full deep names always follow as a lower tier.
"""

from __future__ import annotations

from replcomplete.host import Session
from replcomplete.types import Completion, by_length, mk_completions


def prefix_completion(candidate: str, depth: int) -> str:
    """First `depth` + 1 segments of `candidate`, with a trailing dot.

    >>> prefix_completion("Data.Map.Strict", 0)
    'Data.'
    """
    return ".".join(candidate.split(".")[: depth + 1]) + "."


def rank_modules(name: str, modules: set[str] | list[str]) -> list[str]:
    """Order module candidates for the query `name`."""
    depth = name.count(".")
    candidates = sorted({m for m in modules if m.startswith(name)})
    good = [c for c in candidates if c.count(".") == depth]
    bad = [c for c in candidates if c.count(".") != depth]

    if good:
        top = by_length(good)
    else:
        top = by_length(prefix_completion(c, depth) for c in bad)
    return top + by_length(bad)


def complete_module(session: Session, name: str) -> list[Completion]:
    """Complete a (possibly empty) dotted module name."""
    return mk_completions(name, rank_modules(name, set(session.exposed_modules())))
