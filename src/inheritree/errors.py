"""Exceptions raised by inheritree."""

from __future__ import annotations


class InheritreeError(Exception):
    """Base class for all inheritree errors."""


class UnrecognizedClassError(InheritreeError, ValueError):
    """The root class could not be resolved to a class descriptor."""


class UnrecognizedPathError(InheritreeError, ValueError):
    """The root path is neither a path nor a non-positive integer."""


class NotFoundError(InheritreeError, KeyError):
    """A class name is missing from the tree it was looked up in."""

    def __init__(self, class_name: str) -> None:
        super().__init__(class_name)
        self.class_name = class_name

    def __str__(self) -> str:
        return f"class {self.class_name!r} is not part of this tree"
