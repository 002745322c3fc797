"""Line classification and routing to the per-context completers.

A line is classified into exactly one context, first match wins:

    :!...            ShellEscape      file names
    :l...            LoadFile         source file names
    :s...            SetFlag          option flags
    inside "...      InString         file names
    import ...       Import           keyword, module names, import-list identifiers
    A.B.c            Qualified        module members + deeper module names
    abc              PlainIdentifier  names in scope

Being inside a string pre-empts import and identifier handling.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

from replcomplete.config import CompletionConfig
from replcomplete.files import complete_file, complete_source_file
from replcomplete.flags import complete_flag
from replcomplete.host import FileSystem, Session
from replcomplete.members import complete_identifier, complete_identifier_from_module
from replcomplete.modules import complete_module
from replcomplete.tokens import inside_string, last_token
from replcomplete.types import Completion, mk_completions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShellEscape:
    pass


@dataclass(frozen=True)
class LoadFile:
    pass


@dataclass(frozen=True)
class SetFlag:
    pass


@dataclass(frozen=True)
class InString:
    pass


@dataclass(frozen=True)
class Import:
    pass


@dataclass(frozen=True)
class Qualified:
    """Dotted token with at least two segments; the last may be empty."""

    segments: tuple[str, ...]

    @property
    def module(self) -> str:
        return ".".join(self.segments[:-1])

    @property
    def identifier(self) -> str:
        return self.segments[-1]


@dataclass(frozen=True)
class PlainIdentifier:
    token: str


Context = Union[ShellEscape, LoadFile, SetFlag, InString, Import, Qualified, PlainIdentifier]

Rule = tuple[Callable[[str, CompletionConfig], bool], Callable[[], Context]]

# Priority order matters: contexts overlap.
_RULES: list[Rule] = [
    (lambda line, cfg: line.startswith(cfg.shell_prefix), ShellEscape),
    (lambda line, cfg: line.startswith(cfg.load_prefix), LoadFile),
    (lambda line, cfg: line.startswith(cfg.set_prefix), SetFlag),
    (lambda line, cfg: inside_string(line), InString),
    (lambda line, cfg: line.startswith(cfg.import_keyword), Import),
]


def classify(line: str, config: CompletionConfig | None = None) -> Context:
    """Classify a single stripped line."""
    cfg = config or CompletionConfig()
    for matches, make in _RULES:
        if matches(line, cfg):
            return make()
    segments = last_token(line).split(".")
    if len(segments) == 1:
        return PlainIdentifier(segments[0])
    return Qualified(tuple(segments))


def complete_line(
    session: Session,
    fs: FileSystem,
    line: str,
    config: CompletionConfig | None = None,
) -> list[Completion]:
    """Completions for a single line, as if the cursor were at its end."""
    cfg = config or CompletionConfig()
    context = classify(line, cfg)
    logger.debug("classified %r as %s", line, context)

    if isinstance(context, (ShellEscape, InString)):
        return complete_file(fs, line)
    if isinstance(context, LoadFile):
        return complete_source_file(fs, line, cfg.source_suffixes)
    if isinstance(context, SetFlag):
        return complete_flag(session, line, cfg)
    if isinstance(context, Import):
        return complete_import(session, line)
    if isinstance(context, Qualified):
        return complete_qualified(session, context)
    return complete_identifier(session, context.token)


def _module_name(text: str) -> str:
    return last_token(text.strip())


def complete_import(session: Session, line: str) -> list[Completion]:
    """Completions on an import line.

    1. keyword:     ``import qu``                 -> ``qualified``
    2. module:      ``import Data.Mo``            -> ``Data.Monoid``
    3. prefix:      ``import Dat``                -> ``Data.``
    4. identifier:  ``import Data.Monoid (me``    -> ``mempty``

    Once the import list is closed there is nothing left to complete.
    """
    token = last_token(line)
    if token.startswith("qu"):
        return mk_completions(token, ["qualified"])

    open_paren = line.find("(")
    if open_paren < 0:
        return complete_module(session, _module_name(line))
    import_list = line[open_paren:]
    if ")" in import_list:
        return []
    return complete_identifier_from_module(
        session, _module_name(line[:open_paren]), last_token(import_list)
    )


def complete_qualified(session: Session, context: Qualified) -> list[Completion]:
    """Members of the qualifying module, then deeper module names.

    ``Data.List.interc`` looks up ``interc`` in ``Data.List`` and also treats
    the whole token as a module name prefix.
    """
    if len(context.segments) < 2:
        return []
    idents = complete_identifier_from_module(session, context.module, context.identifier)
    modules = complete_module(session, ".".join(context.segments))
    return idents + modules
