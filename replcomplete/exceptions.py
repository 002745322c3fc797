"""replcomplete exception hierarchy.

All replcomplete exceptions inherit from ReplCompleteError and support cause chaining.
"""


class ReplCompleteError(Exception):
    """Base exception for all replcomplete errors.

    Wraps original errors as __cause__ for proper exception chaining.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class ModuleLookupError(ReplCompleteError):
    """Raised by a session when a module is unknown or fails to load.

    The engine downgrades this to an empty completion list.
    """

    def __init__(self, message: str, *, name: str = "", cause: Exception | None = None):
        super().__init__(message, cause=cause)
        self.name = name


class ConfigError(ReplCompleteError):
    """Raised when the [tool.replcomplete] table is invalid."""

    pass
