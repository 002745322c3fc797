"""Tests for :set flag completion."""

from __future__ import annotations

from replcomplete.config import CompletionConfig
from replcomplete.flags import complete_flag, flag_catalog


def test_catalog_order(session):
    assert flag_catalog(session, CompletionConfig()) == [
        "-XOverloadedStrings",
        "-XGADTs",
        "-XNoOverloadedStrings",
        "-XNoGADTs",
        "-package",
        "-Wall",
        "-w",
        "-fprint-evld-with-show",
        "-fnoprint-evld-with-show",
    ]


def test_extension_flag(session):
    result = complete_flag(session, ":set -XOverload", CompletionConfig())
    assert [c.text for c in result] == ["-XOverloadedStrings"]
    assert result[0].replace_length == len("-XOverload")


def test_negated_forms(session):
    result = complete_flag(session, ":s -XNo", CompletionConfig())
    assert [c.text for c in result] == ["-XNoOverloadedStrings", "-XNoGADTs"]


def test_literal_extras_from_config(session):
    cfg = CompletionConfig(extra_flags=("-Werror",))
    assert [c.text for c in complete_flag(session, ":set -W", cfg)] == ["-Werror"]


def test_boolean_flags(session):
    result = complete_flag(session, ":set -fno", CompletionConfig())
    assert [c.text for c in result] == ["-fnoprint-evld-with-show"]


def test_no_match(session):
    assert complete_flag(session, ":set --bogus", CompletionConfig()) == []
