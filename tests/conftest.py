"""Shared test doubles: an in-memory session and a filesystem with a fake environment."""

from __future__ import annotations

from contextlib import contextmanager

import pytest

from replcomplete.exceptions import ModuleLookupError
from replcomplete.host import FlagKind, OSFileSystem


class FakeSession:
    """Session over fixed catalogs that records its import context."""

    def __init__(
        self,
        modules: dict[str, list[str]] | None = None,
        globals_: set[str] | None = None,
        flags: dict[FlagKind, list[str]] | None = None,
        broken: dict[str, Exception] | None = None,
    ) -> None:
        self.modules = modules or {}
        self.globals = globals_ or set()
        self.flags = flags or {}
        self.broken = broken or {}
        self.context: list[str] = ["Prelude"]
        self.lookups: list[tuple[str, list[str]]] = []

    def exposed_modules(self):
        return set(self.modules)

    def exports_of(self, name):
        self.lookups.append((name, list(self.context)))
        if name in self.broken:
            raise self.broken[name]
        if name not in self.modules:
            raise ModuleLookupError(f"unknown module {name}", name=name)
        return self.modules[name]

    def global_names(self):
        return set(self.globals)

    @contextmanager
    def temporary_import(self, name):
        saved = list(self.context)
        self.context.append(name)
        try:
            yield
        finally:
            self.context = saved

    def flag_names(self, kind):
        return self.flags.get(kind, [])


class EnvFileSystem(OSFileSystem):
    """Real directory access with a controlled environment."""

    def __init__(self, env: dict[str, str] | None = None) -> None:
        self.env = env or {}

    def getenv(self, name):
        return self.env.get(name)


@pytest.fixture
def session():
    return FakeSession(
        modules={
            "Data.List": ["intercalate", "intersperse", "interact", "map", "foldl'"],
            "Data.Monoid": ["mempty", "mappend", "mconcat", "Sum"],
            "Data.Map.Strict": ["insert", "lookup", "fromList"],
            "Control.Monad": ["forM_", "when", "unless"],
        },
        globals_={"map", "mapM", "mapM_", "maximum", "filter", "foldr"},
        flags={
            FlagKind.EXTENSION: ["OverloadedStrings", "GADTs"],
            FlagKind.BOOLEAN: ["print-evld-with-show"],
        },
    )


@pytest.fixture
def tree(tmp_path):
    """tmp_path with a small mixed directory layout.

    src/  src/nested/deep/  docs/  .git/  main.py  module.pyi  notes.txt  .hidden.py
    """
    (tmp_path / "src" / "nested" / "deep").mkdir(parents=True)
    (tmp_path / "docs").mkdir()
    (tmp_path / ".git").mkdir()
    for name in ("main.py", "module.pyi", "notes.txt", ".hidden.py", "src/app.py"):
        (tmp_path / name).write_text("")
    return tmp_path


@pytest.fixture
def fs():
    return EnvFileSystem()


@pytest.fixture
def make_fs():
    return EnvFileSystem


@pytest.fixture
def make_session():
    return FakeSession
