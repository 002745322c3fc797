"""Capabilities the engine borrows from its host environment.

A Session owns the module and symbol catalogs (normally an interpreter
session). A FileSystem covers directory listing and the process environment.
Both are read as a fresh snapshot on every call; nothing is cached here.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from contextlib import AbstractContextManager
from enum import Enum
from typing import Protocol, runtime_checkable


class FlagKind(Enum):
    """Flag families a session declares."""

    BOOLEAN = "boolean"  # -f<name> / -fno<name>
    EXTENSION = "extension"  # -X<name> / -XNo<name>


@runtime_checkable
class Session(Protocol):
    """Module catalog, symbol catalog and import context of a live session."""

    def exposed_modules(self) -> Iterable[str]:
        """Names of all exposed (public) modules."""
        ...

    def exports_of(self, name: str) -> Sequence[str]:
        """Identifiers exported by module `name`.

        Raises ModuleLookupError if the module is unknown or fails to load.
        """
        ...

    def global_names(self) -> Iterable[str]:
        """Identifiers visible without qualification."""
        ...

    def temporary_import(self, name: str) -> AbstractContextManager[None]:
        """Add `name` to the import context for the duration of a with-block.

        The prior context is restored on exit, whatever the outcome.
        """
        ...

    def flag_names(self, kind: FlagKind) -> Sequence[str]:
        """Declared flag names of the given kind, without dashes or prefixes."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Directory access and environment lookup."""

    def list_directory(self, path: str) -> Sequence[str]: ...

    def exists(self, path: str) -> bool: ...

    def is_directory(self, path: str) -> bool: ...

    def getenv(self, name: str) -> str | None: ...


class OSFileSystem:
    """FileSystem backed by the os module."""

    def list_directory(self, path: str) -> list[str]:
        return os.listdir(path)

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def getenv(self, name: str) -> str | None:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "OSFileSystem()"
