"""Map the subclasses of a Python class found below a folder."""

from __future__ import annotations

from inheritree.errors import (
    InheritreeError,
    NotFoundError,
    UnrecognizedClassError,
    UnrecognizedPathError,
)
from inheritree.model import ClassDescriptor, EdgeRecord
from inheritree.pipeline import get_subclasses

__all__ = [
    "ClassDescriptor",
    "EdgeRecord",
    "InheritreeError",
    "NotFoundError",
    "UnrecognizedClassError",
    "UnrecognizedPathError",
    "get_subclasses",
]
