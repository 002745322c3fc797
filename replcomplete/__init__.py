"""replcomplete: context-sensitive completion for line-oriented code shells."""

from replcomplete.config import CompletionConfig, load_config
from replcomplete.dispatch import (
    Context,
    Import,
    InString,
    LoadFile,
    PlainIdentifier,
    Qualified,
    SetFlag,
    ShellEscape,
    classify,
    complete_line,
)
from replcomplete.engine import CompletionEngine, complete, disable_debug, enable_debug
from replcomplete.exceptions import ConfigError, ModuleLookupError, ReplCompleteError
from replcomplete.host import FileSystem, FlagKind, OSFileSystem, Session
from replcomplete.tokens import inside_string, last_token, last_word
from replcomplete.types import Completion

__all__ = [
    # Core
    "Completion",
    "CompletionEngine",
    "complete",
    "complete_line",
    # Contexts
    "Context",
    "ShellEscape",
    "LoadFile",
    "SetFlag",
    "InString",
    "Import",
    "Qualified",
    "PlainIdentifier",
    "classify",
    # Tokens
    "inside_string",
    "last_token",
    "last_word",
    # Host
    "Session",
    "FileSystem",
    "FlagKind",
    "OSFileSystem",
    # Config
    "CompletionConfig",
    "load_config",
    "enable_debug",
    "disable_debug",
    # Exceptions
    "ReplCompleteError",
    "ModuleLookupError",
    "ConfigError",
]
