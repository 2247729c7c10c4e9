"""List the candidate classes and subfolders of a directory."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inheritree.introspection.base import Introspector

logger = logging.getLogger(__name__)

_SKIP = {"__pycache__", "node_modules"}


def is_python_source(path: Path) -> bool:
    return path.suffix == ".py"


def is_skipped_dir(name: str, exclude: Iterable[str] = ()) -> bool:
    """Return True for hidden folders, caches and names matching an *exclude* glob."""
    if name.startswith(".") or name in _SKIP:
        return True
    return any(fnmatch.fnmatch(name, pattern) for pattern in exclude)


def iter_sources(root: Path, exclude: Iterable[str] = ()) -> Iterator[Path]:
    """Yield every Python source below *root* that a walk would visit, in walk order.

    Symlinked folders are not followed.
    """
    exclude = tuple(exclude)
    children = sorted(root.iterdir())
    for child in children:
        if child.is_file() and is_python_source(child):
            yield child
    for child in children:
        if child.is_symlink():
            continue
        if child.is_dir() and not is_skipped_dir(child.name, exclude):
            yield from iter_sources(child, exclude)


class FileSystemWalker:
    """Yield class-like source files and subfolders, one directory at a time."""

    def __init__(self, introspector: Introspector, *, exclude: Iterable[str] = ()):
        self._introspector = introspector
        self._exclude = tuple(exclude)

    def list_entries(self, folder: Path) -> tuple[list[str], list[Path]]:
        """Return the candidate class identifiers and the subfolders of *folder*."""
        names: list[str] = []
        subfolders: list[Path] = []
        for child in sorted(folder.iterdir()):
            if child.is_dir():
                if child.is_symlink() or is_skipped_dir(child.name, self._exclude):
                    logger.debug("Skipping folder %s", child)
                    continue
                subfolders.append(child)
            elif is_python_source(child):
                names.extend(self._introspector.classes_in_file(child))
        return names, subfolders
