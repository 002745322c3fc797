"""Context-aware tab completer for prompt_toolkit line editors.

Wraps CompletionEngine so any PromptSession can use it as its completer.
"""

from __future__ import annotations

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from replcomplete.engine import CompletionEngine


class ContextCompleter(Completer):
    """Tab completion from the text before the cursor via CompletionEngine."""

    def __init__(self, engine: CompletionEngine) -> None:
        self._engine = engine

    def get_completions(self, document: Document, complete_event: CompleteEvent):
        text = document.text_before_cursor
        if not text:
            return
        for c in self._engine.complete(text):
            meta = "dir" if c.text.endswith("/") else None
            yield Completion(c.text, start_position=-c.replace_length, display_meta=meta)
