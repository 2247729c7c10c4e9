"""Resolve classes and their bases statically, from Python source via AST."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from inheritree.introspection.python import base_reference, top_level_classes
from inheritree.model import ClassDescriptor
from inheritree.walker import iter_sources

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _IndexedClass:
    descriptor: ClassDescriptor
    bases: tuple[str, ...]


class AstIntrospector:
    """Introspection provider that never imports the code it inspects.

    Classes are indexed by their simple name; when two files define the same
    name the first one indexed wins.  Bases that are not defined in any
    indexed file (``Exception``, ``abc.ABC``…) are reported as external root
    classes under the dotted name used in the source.
    """

    def __init__(self, search_paths: Iterable[Path] = (), *, exclude: Iterable[str] = ()):
        self._search_paths = [Path(p) for p in search_paths]
        self._exclude = tuple(exclude)
        self._index: dict[str, _IndexedClass] = {}
        self._files: dict[Path, list[str]] = {}
        self._scanned = False

    def add_search_path(self, path: Path) -> None:
        """Index the sources below *path* too (immediately if already scanned)."""
        path = Path(path)
        self._search_paths.append(path)
        if self._scanned:
            self._scan(path)

    def resolve_class(self, identifier: Any) -> ClassDescriptor | None:
        if isinstance(identifier, ClassDescriptor):
            identifier = identifier.name
        if not isinstance(identifier, str):
            return None
        self._ensure_scanned()
        entry = self._index.get(identifier.rsplit(".", 1)[-1])
        return entry.descriptor if entry else None

    def direct_superclasses(self, descriptor: ClassDescriptor) -> list[ClassDescriptor]:
        self._ensure_scanned()
        entry = self._index.get(descriptor.name)
        if entry is None:
            return []

        supers: list[ClassDescriptor] = []
        for ref in entry.bases:
            key = ref.rsplit(".", 1)[-1]
            if ref == descriptor.name:
                # class Foo(Foo): shadows an imported Foo we cannot follow
                logger.debug("Ignoring self-named base of %s", descriptor.name)
                continue
            if key != descriptor.name and key in self._index:
                supers.append(self._index[key].descriptor)
            else:
                supers.append(ClassDescriptor(name=ref))
        return supers

    def classes_in_file(self, path: Path) -> list[str]:
        path = path.resolve()
        if path not in self._files:
            self._register(path)
        return list(self._files[path])

    def _ensure_scanned(self) -> None:
        if self._scanned:
            return
        self._scanned = True
        for root in self._search_paths:
            self._scan(root)
        logger.debug("Indexed %d classes from %d files", len(self._index), len(self._files))

    def _scan(self, root: Path) -> None:
        root = root.resolve()
        if root.is_file():
            self.classes_in_file(root)
        elif root.is_dir():
            for py_file in iter_sources(root, self._exclude):
                self.classes_in_file(py_file)
        else:
            logger.warning("Search path %s does not exist", root)

    def _register(self, path: Path) -> None:
        names: list[str] = []
        for node in top_level_classes(path):
            bases = tuple(
                ref
                for ref in (base_reference(b) for b in node.bases)
                if ref is not None and ref not in ("object", "builtins.object")
            )
            existing = self._index.get(node.name)
            if existing is None:
                self._index[node.name] = _IndexedClass(
                    descriptor=ClassDescriptor(name=node.name, path=path),
                    bases=bases,
                )
            elif existing.descriptor.path != path:
                logger.debug(
                    "Duplicate class %s in %s ignored (first defined in %s)",
                    node.name,
                    path,
                    existing.descriptor.path,
                )
            names.append(node.name)
        self._files[path] = names
