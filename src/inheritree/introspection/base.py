"""Introspection protocol: all class providers conform to this interface."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from inheritree.model import ClassDescriptor


class Introspector(Protocol):
    """Protocol for class-introspection providers."""

    def resolve_class(self, identifier: Any) -> ClassDescriptor | None:
        """Return the descriptor for *identifier*, or None if it is not a class."""
        ...

    def direct_superclasses(self, descriptor: ClassDescriptor) -> list[ClassDescriptor]:
        """Return the direct superclasses of *descriptor* in declaration order."""
        ...

    def classes_in_file(self, path: Path) -> list[str]:
        """Return identifiers of the classes defined in the source file *path*."""
        ...
