"""Completion of `:set` style option flags."""

from __future__ import annotations

from replcomplete.config import CompletionConfig
from replcomplete.host import FlagKind, Session
from replcomplete.tokens import last_word
from replcomplete.types import Completion, mk_completions


def flag_catalog(session: Session, config: CompletionConfig) -> list[str]:
    """Every flag spelling, in catalog order.

    Extension flags first (positive forms, then negated), then the literal
    extras, then boolean flags (positive forms, then negated).
    """
    x_names = list(session.flag_names(FlagKind.EXTENSION))
    f_names = list(session.flag_names(FlagKind.BOOLEAN))
    x_all = ["-X" + n for n in x_names] + ["-XNo" + n for n in x_names]
    f_all = ["-f" + n for n in f_names] + ["-fno" + n for n in f_names]
    return x_all + list(config.extra_flags) + f_all


def complete_flag(
    session: Session, line: str, config: CompletionConfig
) -> list[Completion]:
    """Complete the last word of `line` against the flag catalog."""
    token = last_word(line)
    return mk_completions(
        token, [flag for flag in flag_catalog(session, config) if flag.startswith(token)]
    )
