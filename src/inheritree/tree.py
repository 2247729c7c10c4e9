"""One connected, partially built class hierarchy."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from inheritree.errors import NotFoundError
from inheritree.model import ClassNode


class ClassTree:
    """Ordered mapping of class name to :class:`ClassNode`."""

    def __init__(self) -> None:
        self._nodes: dict[str, ClassNode] = {}

    def insert(self, class_name: str, parents: Iterable[str], node: int) -> None:
        """Record *class_name*, overwriting any previous entry."""
        self._nodes[class_name] = ClassNode(parents=list(parents), node=node)

    def node_of(self, class_name: str) -> int:
        try:
            return self._nodes[class_name].node
        except KeyError:
            raise NotFoundError(class_name) from None

    def parents_of(self, class_name: str) -> list[str]:
        try:
            return list(self._nodes[class_name].parents)
        except KeyError:
            raise NotFoundError(class_name) from None

    def contains_key(self, class_name: str) -> bool:
        return class_name in self._nodes

    __contains__ = contains_key

    def keys(self) -> Iterator[str]:
        yield from self._nodes

    def items(self) -> Iterator[tuple[str, ClassNode]]:
        yield from self._nodes.items()

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v.node}" for k, v in self._nodes.items())
        return f"ClassTree({body})"
