"""Entry point: completions for the text preceding the cursor."""

from __future__ import annotations

import logging
from pathlib import Path

from replcomplete.config import CompletionConfig
from replcomplete.dispatch import complete_line
from replcomplete.host import FileSystem, OSFileSystem, Session
from replcomplete.types import Completion

_pkg_logger = logging.getLogger("replcomplete")


def last_line(text: str) -> str:
    """The final line of `text`, stripped."""
    lines = text.splitlines()
    return lines[-1].strip() if lines else ""


def complete(
    text: str,
    session: Session,
    fs: FileSystem | None = None,
    config: CompletionConfig | None = None,
) -> list[Completion]:
    """Completions for `text`, all the content before the cursor.

    Only the last line is considered. Empty text gets no completions.
    """
    if text == "":
        return []
    return complete_line(session, fs or OSFileSystem(), last_line(text), config)


class CompletionEngine:
    """Binds a session, filesystem and config for repeated complete() calls.

    Calls must be serialized per session: module lookups temporarily change
    the session's import context.
    """

    def __init__(
        self,
        session: Session,
        fs: FileSystem | None = None,
        config: CompletionConfig | None = None,
    ) -> None:
        self.session = session
        self.fs = fs or OSFileSystem()
        self.config = config or CompletionConfig()

    def complete(self, text: str) -> list[Completion]:
        return complete(text, self.session, self.fs, self.config)

    def __repr__(self) -> str:
        return f"CompletionEngine(session={type(self.session).__name__}, fs={self.fs!r})"


def enable_debug(log_dir: Path | None = None) -> logging.FileHandler:
    """Attach a FileHandler writing completion.log under `log_dir` (default ./.replcomplete)."""
    log_path = (log_dir or Path.cwd() / ".replcomplete") / "completion.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(str(log_path))
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    ))
    _pkg_logger.addHandler(handler)
    _pkg_logger.setLevel(logging.DEBUG)
    return handler


def disable_debug() -> None:
    """Close and remove every handler added by enable_debug()."""
    for handler in list(_pkg_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            _pkg_logger.removeHandler(handler)
            handler.close()
    _pkg_logger.setLevel(logging.NOTSET)
