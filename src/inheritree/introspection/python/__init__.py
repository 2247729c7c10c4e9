"""Python introspection providers: shared source-parsing helpers."""

from __future__ import annotations

import ast
import logging
import warnings
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_source(path: Path) -> ast.Module | None:
    """Parse *path*, returning None when it cannot be read or is not valid Python."""
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", SyntaxWarning)
            return ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    except (OSError, SyntaxError, ValueError) as e:
        logger.debug("Skipping unparseable %s: %s", path, e)
        return None


def top_level_classes(path: Path) -> list[ast.ClassDef]:
    tree = parse_source(path)
    if tree is None:
        return []
    return [node for node in tree.body if isinstance(node, ast.ClassDef)]


def base_reference(expr: ast.expr) -> str | None:
    """Return the dotted name a base-class expression refers to.

    ``Base`` → ``"Base"``, ``mod.Base`` → ``"mod.Base"``, ``Generic[T]`` →
    ``"Generic"``.  Anything else (calls, ``**kwargs`` bases…) gives None.
    """
    if isinstance(expr, ast.Subscript):
        return base_reference(expr.value)
    if isinstance(expr, ast.Name):
        return expr.id
    if isinstance(expr, ast.Attribute):
        owner = base_reference(expr.value)
        return f"{owner}.{expr.attr}" if owner else None
    return None
