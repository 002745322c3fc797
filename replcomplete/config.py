"""Completion settings from the [tool.replcomplete] table of pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from replcomplete.exceptions import ConfigError


class CompletionConfig(BaseModel):
    """Tunable parts of the engine. Defaults suit a Python shell."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    source_suffixes: tuple[str, ...] = (".py", ".pyi")
    """File suffixes offered after the load command."""

    extra_flags: tuple[str, ...] = ("-package", "-Wall", "-w")
    """Literal flags offered alongside the declared -X and -f flags."""

    shell_prefix: str = ":!"
    load_prefix: str = ":l"
    set_prefix: str = ":s"
    import_keyword: str = "import"


def read_pyproject(project_root: Path) -> dict:
    path = project_root / "pyproject.toml"
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path} is not valid TOML", cause=e)


def load_config(project_root: Path | None = None) -> CompletionConfig:
    """Load settings, falling back to defaults when the table is absent."""
    data = read_pyproject(project_root or Path.cwd())
    table = data.get("tool", {}).get("replcomplete", {})
    try:
        return CompletionConfig.model_validate(table)
    except ValidationError as e:
        raise ConfigError(f"invalid [tool.replcomplete] table: {e}", cause=e)
