"""Value types shared by the tree builder, exporter and providers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ClassDescriptor:
    """Opaque handle on a class, as handed out by an introspection provider."""

    name: str
    path: Path | None = None  # source file defining the class, when known


@dataclass
class ClassNode:
    """One class recorded in a tree."""

    parents: list[str] = field(default_factory=list)  # empty for root classes
    node: int = 1


@dataclass(frozen=True)
class EdgeRecord:
    """A direct subclass → superclass relation between two tree nodes."""

    name: str
    from_node: int
    to_node: int

    def as_dict(self) -> dict:
        return {"name": self.name, "from": self.from_node, "to": self.to_node}
