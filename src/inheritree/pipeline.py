"""Orchestrator: resolve → walk → export → render."""

from __future__ import annotations

import logging
import numbers
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from rich.console import Console

from inheritree.builder import HierarchyBuilder
from inheritree.errors import UnrecognizedClassError, UnrecognizedPathError
from inheritree.exporter import (
    EDGE_SUFFIXES,
    edge_table_view,
    node_labels,
    to_edge_table,
    write_edges,
)
from inheritree.introspection import AstIntrospector, Introspector, RuntimeIntrospector
from inheritree.model import ClassDescriptor, EdgeRecord
from inheritree.tree import ClassTree

logger = logging.getLogger(__name__)


def validate_root_class(root_class: Any, introspector: Introspector) -> ClassDescriptor:
    """Resolve a class name, class object, instance or descriptor."""
    if isinstance(root_class, ClassDescriptor):
        return root_class
    descriptor = introspector.resolve_class(root_class)
    if descriptor is None:
        raise UnrecognizedClassError(f"Unrecognized class: {root_class!r}")
    return descriptor


def validate_root_path(root_path: Any, root: ClassDescriptor) -> Path:
    """Turn *root_path* into the folder to walk.

    A path is used as given.  A non-positive integer ``-k`` means the folder
    holding the root class's definition, ``k`` levels up.
    """
    if isinstance(root_path, numbers.Real) and not isinstance(root_path, bool):
        if root_path > 0 or not float(root_path).is_integer():
            raise UnrecognizedPathError(f"Unrecognized path: {root_path!r}")
        if root.path is None:
            raise UnrecognizedPathError(
                f"Cannot locate the definition of {root.name}; pass an explicit path"
            )
        folder = root.path.parent
        for _ in range(abs(int(root_path))):
            folder = folder.parent
        return folder

    if isinstance(root_path, (str, os.PathLike)):
        folder = Path(root_path)
        if not folder.is_dir():
            raise UnrecognizedPathError(f"Not a directory: {folder}")
        return folder

    raise UnrecognizedPathError(f"Unrecognized path: {root_path!r}")


def build_tree(
    root_class: Any,
    root_path: Any,
    introspector: Introspector,
    exclude: Iterable[str] = (),
) -> tuple[ClassDescriptor, ClassTree]:
    """Resolve the inputs, walk the folder and return the root class with its tree."""
    root = validate_root_class(root_class, introspector)
    folder = validate_root_path(root_path, root)
    logger.debug("Looking for subclasses of %s in %s", root.name, folder)

    forest = HierarchyBuilder(introspector, exclude=exclude).build(root, folder)
    return root, forest[0]


def get_subclasses(
    root_class: Any,
    root_path: Any = 0,
    *,
    introspector: Introspector | None = None,
    exclude: Iterable[str] = (),
    output: Path | None = None,
    render: bool = False,
) -> list[EdgeRecord]:
    """Return the subclass → superclass edges of every subclass of *root_class*.

    Subclasses are searched for in *root_path* and all of its subfolders.
    Edges are sorted by their source node.  With *render* the graph is drawn
    too, and saved to *output* when given.
    """
    introspector = introspector or RuntimeIntrospector()
    root, tree = build_tree(root_class, root_path, introspector, exclude)
    edges = to_edge_table(tree)
    if render:
        from inheritree.renderer.plot import render_graph

        render_graph(edges, node_labels(tree), output, title=f"Subclasses of {root.name}")
    return edges


def run(
    root_class: str,
    root_path: Any = 0,
    *,
    static: bool = False,
    search_paths: Iterable[Path] = (),
    exclude: Iterable[str] = (),
    output: Path | None = None,
    table: bool = False,
) -> list[EdgeRecord]:
    """Run the full pipeline as the command line does and return the edges."""
    exclude = list(exclude)
    if static:
        paths = list(search_paths) or [Path.cwd()]
        if isinstance(root_path, (str, os.PathLike)):
            paths.append(Path(root_path))
        introspector: Introspector = AstIntrospector(paths, exclude=exclude)
    else:
        for path in reversed(list(search_paths) or [Path.cwd()]):
            if str(path.resolve()) not in sys.path:
                sys.path.insert(0, str(path.resolve()))
        introspector = RuntimeIntrospector()

    root, tree = build_tree(root_class, root_path, introspector, exclude)
    edges = to_edge_table(tree)
    logger.info("Found %d edges below %s", len(edges), root.name)

    if table:
        Console().print(edge_table_view(edges, title=f"Subclasses of {root.name}"))

    if output is not None and output.suffix.lower() in EDGE_SUFFIXES:
        write_edges(edges, output)
        logger.info("Wrote %s", output)
    elif output is not None or not table:
        from inheritree.renderer.plot import render_graph

        render_graph(edges, node_labels(tree), output, title=f"Subclasses of {root.name}")

    return edges
