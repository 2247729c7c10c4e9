"""Class-introspection providers."""

from __future__ import annotations

from inheritree.introspection.base import Introspector
from inheritree.introspection.python.ast_classes import AstIntrospector
from inheritree.introspection.python.runtime import RuntimeIntrospector

__all__ = [
    "AstIntrospector",
    "Introspector",
    "RuntimeIntrospector",
]
