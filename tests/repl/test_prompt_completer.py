"""Tests for ContextCompleter, the prompt_toolkit adapter."""

from __future__ import annotations

from unittest.mock import MagicMock

from prompt_toolkit.completion import CompleteEvent, Completer
from prompt_toolkit.document import Document

from replcomplete.engine import CompletionEngine
from replcomplete.repl import ContextCompleter, make_completer
from replcomplete.types import Completion


def completions(completer, text, cursor=None):
    doc = Document(text, cursor_position=len(text) if cursor is None else cursor)
    return list(completer.get_completions(doc, CompleteEvent(completion_requested=True)))


def test_is_a_prompt_toolkit_completer():
    assert isinstance(make_completer({}), Completer)


def test_start_position_from_replace_length():
    engine = MagicMock(spec=CompletionEngine)
    engine.complete.return_value = [Completion(3, "foldr"), Completion(3, "src/")]
    result = completions(ContextCompleter(engine), "fol")
    assert [c.text for c in result] == ["foldr", "src/"]
    assert [c.start_position for c in result] == [-3, -3]
    assert result[1].display_meta_text == "dir"


def test_uses_text_before_cursor():
    engine = MagicMock(spec=CompletionEngine)
    engine.complete.return_value = []
    completions(ContextCompleter(engine), "map fo bar", cursor=6)
    engine.complete.assert_called_once_with("map fo")


def test_empty_text_skips_engine():
    engine = MagicMock(spec=CompletionEngine)
    assert completions(ContextCompleter(engine), "") == []
    engine.complete.assert_not_called()


def test_live_namespace():
    completer = make_completer({"velocity": 1, "volume": 2})
    result = completions(completer, "x = vel")
    assert [c.text for c in result] == ["velocity"]
    assert result[0].start_position == -3
