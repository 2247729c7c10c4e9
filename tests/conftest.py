import textwrap
from pathlib import Path

import pytest

from inheritree.builder import HierarchyBuilder
from inheritree.model import ClassDescriptor


class MappingIntrospector:
    """Provider backed by a ``{class: [direct parents]}`` mapping."""

    def __init__(self, bases):
        self.bases = bases

    def resolve_class(self, identifier):
        name = identifier.name if isinstance(identifier, ClassDescriptor) else identifier
        return ClassDescriptor(name) if name in self.bases else None

    def direct_superclasses(self, descriptor):
        return [ClassDescriptor(b) for b in self.bases.get(descriptor.name, [])]

    def classes_in_file(self, path):
        return [path.stem]


class ListWalker:
    """Walker yielding a fixed sequence of candidates from one folder."""

    def __init__(self, names):
        self.names = list(names)

    def list_entries(self, folder):
        return list(self.names), []


@pytest.fixture
def make_builder():
    def _make(bases, order=()):
        return HierarchyBuilder(MappingIntrospector(bases), walker=ListWalker(order))

    return _make


@pytest.fixture
def build_forest(make_builder):
    def _build(bases, order, root):
        return make_builder(bases, order).build(ClassDescriptor(root), Path("."))

    return _build


@pytest.fixture
def write_sources(tmp_path):
    """Write ``{relative path: source}`` below tmp_path and return tmp_path."""

    def _write(files):
        for relative, source in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source))
        return tmp_path

    return _write
