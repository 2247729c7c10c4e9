"""Walk a directory tree and assemble the subclass forest of a root class.

Classes are discovered in whatever order the walker yields them.  Each new
class starts its own tree, which is grown by walking up its superclasses one
level at a time until it meets a class that some earlier tree already holds;
the new tree is then merged into that one at the shared ancestor.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from inheritree.forest import Forest
from inheritree.introspection.base import Introspector
from inheritree.model import ClassDescriptor
from inheritree.numbering import NodeNumberer
from inheritree.walker import FileSystemWalker

logger = logging.getLogger(__name__)


class HierarchyBuilder:
    """Feed the classes found below a folder into a :class:`Forest`.

    Tree 0 is seeded with the root class, so once a build is over it holds
    every discovered subclass of the root; other trees hold hierarchies that
    never reached it.
    """

    def __init__(
        self,
        introspector: Introspector,
        walker: FileSystemWalker | None = None,
        *,
        exclude: Iterable[str] = (),
    ):
        self._introspector = introspector
        self._walker = walker or FileSystemWalker(introspector, exclude=exclude)
        self.forest = Forest()

    def build(self, root: ClassDescriptor, root_path: Path) -> Forest:
        self.forest = Forest()
        self.forest.add_tree(root.name, [])
        self._recurse_folder(Path(root_path))
        logger.debug(
            "Built %d trees; %d classes reach %s",
            len(self.forest),
            len(self.forest[0]),
            root.name,
        )
        return self.forest

    def _recurse_folder(self, folder: Path) -> None:
        names, subfolders = self._walker.list_entries(folder)
        for name in names:
            self.add_class(name)
        for subfolder in subfolders:
            self._recurse_folder(subfolder)

    def add_class(self, identifier: Any) -> bool:
        """Record *identifier* and its ancestry.

        Returns False when the class is skipped: it does not resolve, it has no
        superclass, or some tree already records it.
        """
        descriptor = self._introspector.resolve_class(identifier)
        if descriptor is None:
            logger.debug("Skipping %s: not a recognized class", identifier)
            return False

        supers = self._introspector.direct_superclasses(descriptor)
        if not supers:
            logger.debug("Skipping %s: no superclasses", descriptor.name)
            return False

        found, _ = self.forest.is_in_any_tree(descriptor.name)
        if found:
            logger.debug("Skipping %s: already recorded", descriptor.name)
            return False

        index = self.forest.add_tree(descriptor.name, [s.name for s in supers])
        merged = self.discover_ancestry_chain(descriptor, index, NodeNumberer())
        if merged:
            self.forest.discard(index)
        return True

    def ancestry_chain(
        self, descriptor: ClassDescriptor
    ) -> list[tuple[ClassDescriptor, list[str]]]:
        """Return each direct superclass of *descriptor* with the names of its own parents."""
        return [
            (parent, [p.name for p in self._introspector.direct_superclasses(parent)])
            for parent in self._introspector.direct_superclasses(descriptor)
        ]

    def discover_ancestry_chain(
        self, descriptor: ClassDescriptor, index: int, numberer: NodeNumberer
    ) -> bool:
        """Grow the tree at *index* with the ancestors of *descriptor*.

        Walking stops at root classes and at ancestors already held by an
        earlier tree, which triggers a merge into that tree instead.  A merge
        does not advance *numberer*, so a sibling branch walked afterwards may
        reuse the merged parent's number in the tree at *index*.

        Returns whether the last branch walked ended in a merge.
        """
        tree = self.forest[index]
        merged = False
        for parent, grandparents in self.ancestry_chain(descriptor):
            tree.insert(parent.name, grandparents, numberer.peek())
            found, into = self.forest.is_in_any_tree(parent.name, stop=index)
            if found:
                self.forest.merge_into(into, tree, parent.name)
                merged = True
            else:
                numberer.claim()
                merged = self.discover_ancestry_chain(parent, index, numberer)
        return merged
