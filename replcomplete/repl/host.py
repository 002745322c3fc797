"""Session backed by a live Python namespace and the import system.

Module catalog: importable top-level modules, builtin modules, everything
already imported, and the direct submodules of imported packages. Names with
a ``_``-prefixed segment are hidden.
"""

from __future__ import annotations

import builtins
import importlib
import logging
import pkgutil
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from replcomplete.exceptions import ModuleLookupError
from replcomplete.host import FlagKind

logger = logging.getLogger(__name__)

_MISSING = object()

# Interpreter -X options (python -X <name>).
X_OPTIONS = (
    "dev",
    "faulthandler",
    "frozen_modules",
    "importtime",
    "int_max_str_digits",
    "no_debug_ranges",
    "perf",
    "pycache_prefix",
    "tracemalloc",
    "utf8",
    "warn_default_encoding",
)


def _is_exposed(name: str) -> bool:
    return not any(part.startswith("_") for part in name.split("."))


def _sys_flag_names() -> list[str]:
    fields = getattr(type(sys.flags), "_fields", None)
    if fields is None:
        fields = [
            n for n in dir(sys.flags)
            if not n.startswith(("_", "n_")) and n not in ("count", "index")
        ]
    return list(fields)


class PythonSession:
    """Session over a REPL namespace dict.

    session = PythonSession(namespace)
    engine = CompletionEngine(session)
    """

    def __init__(
        self,
        namespace: dict | None = None,
        *,
        boolean_flags: Sequence[str] | None = None,
        extension_flags: Sequence[str] | None = None,
    ) -> None:
        self.namespace = namespace if namespace is not None else {}
        self._flags = {
            FlagKind.BOOLEAN: list(boolean_flags) if boolean_flags is not None else _sys_flag_names(),
            FlagKind.EXTENSION: list(extension_flags) if extension_flags is not None else list(X_OPTIONS),
        }

    def exposed_modules(self) -> set[str]:
        names = set(sys.builtin_module_names)
        names.update(info.name for info in pkgutil.iter_modules())
        for name, module in list(sys.modules.items()):
            names.add(name)
            try:
                path = getattr(module, "__path__", None)
                if path is None:
                    continue
                names.update(info.name for info in pkgutil.iter_modules(path, name + "."))
            except (ImportError, OSError, TypeError) as e:
                logger.debug("cannot scan submodules of %s: %s", name, e)
        return {n for n in names if _is_exposed(n)}

    def _load(self, name: str):
        module = sys.modules.get(name)
        if module is not None:
            return module
        try:
            return importlib.import_module(name)
        except Exception as e:
            # Import runs arbitrary module code; any failure means "cannot load".
            raise ModuleLookupError(f"cannot import {name!r}: {e}", name=name, cause=e)

    def exports_of(self, name: str) -> list[str]:
        module = self._load(name)
        exported = getattr(module, "__all__", None)
        if exported is not None:
            return [str(n) for n in exported]
        return [n for n in dir(module) if not n.startswith("_")]

    def global_names(self) -> set[str]:
        names = set(self.namespace) | set(dir(builtins))
        return {n for n in names if not n.startswith("_")}

    @contextmanager
    def temporary_import(self, name: str) -> Iterator[None]:
        """Bind the top-level package of `name` in the namespace, then restore."""
        top = name.split(".")[0]
        previous = self.namespace.get(top, _MISSING)
        try:
            self.namespace[top] = self._load(top)
            yield
        finally:
            if previous is _MISSING:
                self.namespace.pop(top, None)
            else:
                self.namespace[top] = previous

    def flag_names(self, kind: FlagKind) -> list[str]:
        return list(self._flags[kind])

    def __repr__(self) -> str:
        return f"PythonSession({len(self.namespace)} names)"
