"""Read optional inheritree settings from the project being inspected."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Project-level defaults; command-line flags extend them."""

    exclude: list[str] = field(default_factory=list)
    search_paths: list[Path] = field(default_factory=list)


def read_settings(project_dir: Path) -> Settings:
    """Read ``.inheritree.toml`` or ``[tool.inheritree]`` in ``pyproject.toml``."""
    table = _read_table(project_dir)
    if not table:
        return Settings()
    return Settings(
        exclude=list(table.get("exclude", [])),
        search_paths=[project_dir / p for p in table.get("search-paths", [])],
    )


def _read_table(project_dir: Path) -> dict | None:
    # Try .inheritree.toml first
    own_toml = project_dir / ".inheritree.toml"
    if own_toml.exists():
        try:
            with open(own_toml, "rb") as f:
                data = tomllib.load(f)
            return data.get("inheritree", {})
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring unreadable %s: %s", own_toml, e)

    # Fall back to [tool.inheritree] in pyproject.toml
    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("tool", {}).get("inheritree", {})
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring unreadable %s: %s", pyproject, e)

    return None
