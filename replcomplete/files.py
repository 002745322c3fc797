"""Directory and file name completion.

Only one level deep: completing inside `a` with `a/b/c` on disk offers `a/b/`,
never `a/b/c`. Directories come before files and hidden entries after
visible ones.
"""

from __future__ import annotations

import logging
from typing import Callable

from replcomplete.host import FileSystem
from replcomplete.tokens import last_word
from replcomplete.types import Completion, mk_completions

logger = logging.getLogger(__name__)

_RELATIVE_PREFIXES = ("./", "../", "/")


def resolve_dir(dir_part: str, home: str | None) -> str:
    """Turn the typed directory part into a path that can be listed.

    A leading ``~/`` becomes $HOME; with no $HOME the tilde is kept literally.
    Anything not already relative or absolute gets a ``./`` prefix.
    """
    if dir_part.startswith("~/"):
        return (home if home is not None else "~") + "/" + dir_part[2:]
    if dir_part.startswith(_RELATIVE_PREFIXES):
        return dir_part
    return "./" + dir_part


def complete_file_with_filter(
    fs: FileSystem, line: str, predicate: Callable[[str], bool]
) -> list[Completion]:
    """Complete the last word of `line` as a path.

    `predicate` filters file names only; directories are always offered and
    carry a trailing ``/``. Suggestions keep the directory text the user
    typed, not the resolved path.
    """
    token = last_word(line)
    cut = token.rfind("/") + 1
    dir_part, prefix = token[:cut], token[cut:]
    toplevel = resolve_dir(dir_part, fs.getenv("HOME"))

    try:
        if not toplevel or not fs.exists(toplevel) or not fs.is_directory(toplevel):
            return []
        entries = sorted(fs.list_directory(toplevel))
        candidates = [e for e in entries if e not in (".", "..") and e.startswith(prefix)]
        directories, files = [], []
        for entry in candidates:
            if fs.is_directory(_join(toplevel, entry)):
                directories.append(entry + "/")
            else:
                files.append(entry)
    except OSError as e:
        logger.debug("cannot list %s: %s", toplevel, e)
        return []

    allowed = [f for f in files if predicate(f)]
    names = sorted(directories + allowed, key=lambda name: name.startswith("."))
    return mk_completions(token, [dir_part + name for name in names])


def complete_file(fs: FileSystem, line: str) -> list[Completion]:
    """Complete any directory or file name."""
    return complete_file_with_filter(fs, line, lambda name: True)


def complete_source_file(
    fs: FileSystem, line: str, suffixes: tuple[str, ...]
) -> list[Completion]:
    """Complete directories and files ending in one of `suffixes`."""
    return complete_file_with_filter(fs, line, lambda name: name.endswith(suffixes))


def _join(directory: str, entry: str) -> str:
    if directory.endswith("/"):
        return directory + entry
    return directory + "/" + entry
