"""Collection of class trees and the merge that unifies them."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from inheritree.numbering import renumbered
from inheritree.tree import ClassTree

logger = logging.getLogger(__name__)


class Forest:
    """Ordered sequence of :class:`ClassTree` built during one traversal.

    Trees are assumed disjoint by construction: lookups report the first tree
    containing a name, in creation order.
    """

    def __init__(self) -> None:
        self._trees: list[ClassTree] = []

    def __len__(self) -> int:
        return len(self._trees)

    def __getitem__(self, index: int) -> ClassTree:
        return self._trees[index]

    def __iter__(self) -> Iterator[ClassTree]:
        return iter(self._trees)

    def is_in_any_tree(
        self, name: str, stop: int | None = None
    ) -> tuple[bool, int | None]:
        """Return ``(True, index)`` of the first tree holding *name*.

        Only trees before *stop* are searched when it is given.
        """
        for index, tree in enumerate(self._trees[:stop]):
            if name in tree:
                return True, index
        return False, None

    def add_tree(self, root_class: str, parent_names: Iterable[str]) -> int:
        """Append a tree seeded with *root_class* at node 1 and return its index."""
        tree = ClassTree()
        tree.insert(root_class, parent_names, 1)
        self._trees.append(tree)
        return len(self._trees) - 1

    def merge_into(self, target_index: int, source: ClassTree, anchor: str) -> None:
        """Merge *source* into the tree at *target_index* at the shared class *anchor*.

        The target's nodes numbered after the anchor move up to leave a
        contiguous block right after it, which is then filled with the
        source's descendants of the anchor.  The anchor's own record in the
        target is kept as is.
        """
        target = self._trees[target_index]
        shift = target.node_of(anchor)
        for name, parents, node in renumbered(
            target, len(source) - 1, lambda n: n > shift
        ):
            target.insert(name, parents, node)

        nodenum = source.node_of(anchor)
        moved = list(renumbered(source, shift, lambda n: n < nodenum))
        for name, parents, node in moved:
            target.insert(name, parents, node)

        logger.debug(
            "Merged %d classes into tree %d at %s (node %d)",
            len(moved),
            target_index,
            anchor,
            shift,
        )

    def discard(self, index: int) -> ClassTree:
        """Remove and return the tree at *index*, typically once absorbed by a merge."""
        return self._trees.pop(index)
