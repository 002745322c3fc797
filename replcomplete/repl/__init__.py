"""Python REPL integration: a live-namespace session and a prompt_toolkit completer."""

from __future__ import annotations

from replcomplete.engine import CompletionEngine
from replcomplete.repl.complete import ContextCompleter
from replcomplete.repl.host import PythonSession


def make_completer(namespace: dict | None = None) -> ContextCompleter:
    """prompt_toolkit completer over `namespace` with default settings."""
    return ContextCompleter(CompletionEngine(PythonSession(namespace)))


__all__ = ["ContextCompleter", "PythonSession", "make_completer"]
