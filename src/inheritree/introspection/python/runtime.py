"""Resolve classes by importing them and reading ``__bases__``."""

from __future__ import annotations

import builtins
import importlib
import inspect
import logging
import sys
from pathlib import Path
from typing import Any

from inheritree.introspection.python import top_level_classes
from inheritree.model import ClassDescriptor

logger = logging.getLogger(__name__)


class RuntimeIntrospector:
    """Introspection provider backed by live reflection.

    Identifiers are dotted ``module.QualName`` strings, class objects, or any
    instance (its class is used).  Walked files are mapped to module names
    through ``sys.path``; files outside it yield no candidates.
    """

    def __init__(self) -> None:
        self._classes: dict[str, type] = {}

    def resolve_class(self, identifier: Any) -> ClassDescriptor | None:
        if isinstance(identifier, ClassDescriptor):
            identifier = identifier.name
        if isinstance(identifier, str):
            cls = _import_class(identifier)
        elif isinstance(identifier, type):
            cls = identifier
        else:
            cls = type(identifier)
        return self._describe(cls) if cls is not None else None

    def direct_superclasses(self, descriptor: ClassDescriptor) -> list[ClassDescriptor]:
        cls = self._classes.get(descriptor.name) or _import_class(descriptor.name)
        if cls is None:
            return []
        return [self._describe(base) for base in cls.__bases__ if base is not object]

    def classes_in_file(self, path: Path) -> list[str]:
        module_name = module_name_for(path)
        if module_name is None:
            logger.debug("%s is not importable from sys.path", path)
            return []
        return [f"{module_name}.{node.name}" for node in top_level_classes(path)]

    def _describe(self, cls: type) -> ClassDescriptor:
        name = qualified_name(cls)
        self._classes[name] = cls
        return ClassDescriptor(name=name, path=_source_file(cls))


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def module_name_for(path: Path) -> str | None:
    """Return the dotted module name *path* is importable as, or None."""
    path = path.resolve()
    best: tuple[str, ...] | None = None
    for entry in sys.path:
        try:
            relative = path.relative_to(Path(entry or ".").resolve())
        except (ValueError, OSError):
            continue
        if best is None or len(relative.parts) < len(best):
            best = relative.with_suffix("").parts

    if not best:
        return None
    parts = list(best)
    if parts[-1] == "__init__":
        parts.pop()
    if not parts or not all(part.isidentifier() for part in parts):
        return None
    return ".".join(parts)


def _import_class(dotted: str) -> type | None:
    """Import ``pkg.module.Outer.Inner`` style names, returning None when unresolvable."""
    parts = dotted.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            obj: Any = importlib.import_module(module_name)
        except ImportError:
            continue
        except SyntaxError as e:
            logger.warning("Cannot import %s: %s", module_name, e)
            return None
        for attr in parts[split:]:
            obj = getattr(obj, attr, None)
            if obj is None:
                return None
        return obj if isinstance(obj, type) else None

    obj = getattr(builtins, dotted, None)
    return obj if isinstance(obj, type) else None


def _source_file(cls: type) -> Path | None:
    try:
        source = inspect.getsourcefile(cls)
    except TypeError:
        return None
    return Path(source).resolve() if source else None
