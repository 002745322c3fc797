"""Identifier completion, global and scoped to one module."""

from __future__ import annotations

import logging

from replcomplete.exceptions import ModuleLookupError
from replcomplete.host import Session
from replcomplete.types import Completion, by_length, mk_completions

logger = logging.getLogger(__name__)


def complete_identifier(session: Session, token: str) -> list[Completion]:
    """Complete identifiers in scope without qualification."""
    names = [n for n in session.global_names() if n.startswith(token)]
    return mk_completions(token, by_length(names))


def complete_identifier_from_module(
    session: Session, name: str, token: str
) -> list[Completion]:
    """Complete identifiers exported by module `name`.

    The module is added to the session's import context only while its
    exports are read; the session restores the previous context on exit.
    A module that is unknown or fails to load yields no completions.
    """
    try:
        with session.temporary_import(name):
            exports = list(session.exports_of(name))
    except ModuleLookupError as e:
        logger.debug("no exports for %r: %s", name, e)
        return []
    return mk_completions(token, by_length(n for n in exports if n.startswith(token)))
