"""Node-number assignment and renumbering for class trees."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inheritree.tree import ClassTree


class NodeNumberer:
    """Depth counter threaded through one ancestry walk.

    All branches of a walk share the same counter, so the direct parents of a
    class receive distinct, increasing node numbers.  Only a branch that keeps
    walking upward claims a number; a branch that ends in a merge leaves the
    counter untouched.
    """

    def __init__(self, start: int = 1) -> None:
        self.current = start

    def peek(self) -> int:
        """Return the number the next discovered ancestor will receive."""
        return self.current + 1

    def claim(self) -> int:
        self.current += 1
        return self.current


def renumbered(
    tree: ClassTree, offset: int, selected: Callable[[int], bool]
) -> Iterator[tuple[str, list[str], int]]:
    """Yield ``(name, parents, node + offset)`` for each selected entry of *tree*.

    The entries are snapshotted first, so callers may write the results back
    into *tree* while consuming the iterator.
    """
    for name, entry in list(tree.items()):
        if selected(entry.node):
            yield name, list(entry.parents), entry.node + offset
