import json
import sys

import matplotlib
import pytest

from inheritree import get_subclasses
from inheritree.cli import main
from inheritree.config import read_settings
from inheritree.errors import NotFoundError, UnrecognizedClassError, UnrecognizedPathError
from inheritree.introspection import AstIntrospector, RuntimeIntrospector
from inheritree.model import ClassDescriptor
from inheritree.pipeline import validate_root_class, validate_root_path

matplotlib.use("Agg")

PROJECT = {
    "proj/core/base.py": """
        class Plugin:
            pass
    """,
    "proj/core/loaders.py": """
        from .base import Plugin

        class Loader(Plugin):
            pass

        class CsvLoader(Loader):
            pass
    """,
    "proj/core/sub/deep.py": """
        from ..loaders import CsvLoader

        class DeepLoader(CsvLoader):
            pass
    """,
    "proj/extras/exporters.py": """
        from ..core.base import Plugin

        class Exporter(Plugin):
            pass

        class Registry(dict):
            pass
    """,
}


@pytest.fixture
def proj(write_sources):
    return write_sources(PROJECT) / "proj"


def relations(edges):
    """(class, parent class) pairs recovered from an edge list."""
    names = {}
    for e in edges:
        names[e.from_node] = e.name
    return {(e.name, names.get(e.to_node)) for e in edges}


def test_root_path_defaults_to_the_root_class_folder(proj):
    edges = get_subclasses("Plugin", introspector=AstIntrospector([proj]))

    assert relations(edges) == {
        ("Loader", None),
        ("CsvLoader", "Loader"),
        ("DeepLoader", "CsvLoader"),
    }
    assert [e.from_node for e in edges] == sorted(e.from_node for e in edges)


def test_negative_root_path_walks_up(proj):
    edges = get_subclasses("Plugin", -1, introspector=AstIntrospector([proj]))

    assert {e.name for e in edges} == {"Loader", "CsvLoader", "DeepLoader", "Exporter"}


def test_explicit_root_path(proj):
    edges = get_subclasses("Plugin", proj / "extras", introspector=AstIntrospector([proj]))

    assert [e.name for e in edges] == ["Exporter"]
    assert (edges[0].from_node, edges[0].to_node) == (2, 1)


def test_exclude_skips_folders(proj):
    edges = get_subclasses(
        "Plugin", str(proj), introspector=AstIntrospector([proj]), exclude=["sub"]
    )

    assert {e.name for e in edges} == {"Loader", "CsvLoader", "Exporter"}


def test_root_with_no_subclasses(proj):
    assert get_subclasses("DeepLoader", introspector=AstIntrospector([proj])) == []


def test_get_subclasses_can_render(proj, tmp_path):
    out = tmp_path / "graphs" / "plugin.png"

    edges = get_subclasses(
        "Plugin", -1, introspector=AstIntrospector([proj]), render=True, output=out
    )

    assert {e.name for e in edges} == {"Loader", "CsvLoader", "DeepLoader", "Exporter"}
    assert out.exists()
    assert out.stat().st_size > 0


@pytest.mark.parametrize(
    "bases, ok",
    [("Base, Mixin", False), ("Mixin, Base", True)],
)
def test_base_order_of_a_mixed_in_subclass(write_sources, bases, ok):
    root = write_sources(
        {
            "app/handlers.py": f"""
                class Base:
                    pass

                class Mixin:
                    pass

                class Handler({bases}):
                    pass
            """,
        }
    )
    introspector = AstIntrospector([root])

    if not ok:
        # the mixin is walked after Handler merged, so the root tree never gets it
        with pytest.raises(NotFoundError, match="Mixin"):
            get_subclasses("Base", root / "app", introspector=introspector)
        return

    edges = get_subclasses("Base", root / "app", introspector=introspector)
    assert [(e.name, e.from_node, e.to_node) for e in edges] == [
        ("Handler", 2, 3),
        ("Handler", 2, 1),
    ]


def test_runtime_introspection_end_to_end(write_sources, monkeypatch):
    root = write_sources(
        {
            "plug_rt/__init__.py": "",
            "plug_rt/core/__init__.py": "",
            "plug_rt/core/base.py": "class Plugin:\n    pass\n",
            "plug_rt/core/impl.py": (
                "from plug_rt.core.base import Plugin\n\n"
                "class Impl(Plugin):\n    pass\n\n"
                "class Special(Impl):\n    pass\n"
            ),
        }
    )
    monkeypatch.syspath_prepend(str(root))
    try:
        edges = get_subclasses("plug_rt.core.base.Plugin")
    finally:
        for name in [m for m in sys.modules if m.split(".")[0] == "plug_rt"]:
            del sys.modules[name]

    assert relations(edges) == {
        ("plug_rt.core.impl.Impl", None),
        ("plug_rt.core.impl.Special", "plug_rt.core.impl.Impl"),
    }


def test_validate_root_class(proj):
    introspector = AstIntrospector([proj])
    descriptor = ClassDescriptor("Anything")

    assert validate_root_class(descriptor, introspector) is descriptor
    assert validate_root_class("Loader", introspector).name == "Loader"
    with pytest.raises(UnrecognizedClassError):
        validate_root_class("Nope", introspector)


def test_validate_root_path(proj):
    root = AstIntrospector([proj]).resolve_class("DeepLoader")
    folder = root.path.parent

    assert validate_root_path(0, root) == folder
    assert validate_root_path(-1, root) == folder.parent
    assert validate_root_path(-2.0, root) == folder.parent.parent
    assert validate_root_path(str(proj), root) == proj
    assert validate_root_path(proj, root) == proj


@pytest.mark.parametrize("bad", [1, -0.5, True, None, ["proj"], "does/not/exist"])
def test_invalid_root_paths(proj, bad):
    root = AstIntrospector([proj]).resolve_class("Plugin")
    with pytest.raises(UnrecognizedPathError):
        validate_root_path(bad, root)


def test_relative_path_needs_a_known_location():
    root = RuntimeIntrospector().resolve_class("int")
    assert root.path is None
    with pytest.raises(UnrecognizedPathError, match="explicit path"):
        validate_root_path(-1, root)


def test_cli_writes_json(proj, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = tmp_path / "edges.json"

    main(["Plugin", "-1", "--static", "-s", str(proj), "-o", str(out)])

    data = json.loads(out.read_text())
    assert {row["name"] for row in data} == {"Loader", "CsvLoader", "DeepLoader", "Exporter"}
    assert set(data[0]) == {"name", "from", "to"}


def test_cli_all_digit_folder_is_a_path(write_sources, tmp_path, monkeypatch):
    write_sources(
        {
            "2024/report.py": """
                class Report:
                    pass

                class Yearly(Report):
                    pass
            """,
        }
    )
    monkeypatch.chdir(tmp_path)
    out = tmp_path / "edges.json"

    main(["Report", "2024", "--static", "-s", "2024", "-o", str(out)])

    assert [row["name"] for row in json.loads(out.read_text())] == ["Yearly"]


def test_cli_reads_project_settings(proj, tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text('[tool.inheritree]\nexclude = ["extras"]\n')
    monkeypatch.chdir(tmp_path)
    out = tmp_path / "edges.csv"

    main(["Plugin", str(proj), "--static", "-s", str(proj), "-o", str(out)])

    assert "Exporter" not in out.read_text()
    assert "DeepLoader" in out.read_text()


def test_cli_prints_table(proj, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    main(["Loader", str(proj), "--static", "-s", str(proj), "--table"])

    out = capsys.readouterr().out
    assert "CsvLoader" in out
    assert "DeepLoader" in out


def test_cli_unknown_class_exits(proj, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as info:
        main(["Nope", str(proj), "--static", "-s", str(proj), "--table"])
    assert info.value.code == 1


def test_read_settings_prefers_own_file(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.inheritree]\nexclude = ["a"]\n')
    assert read_settings(tmp_path).exclude == ["a"]

    (tmp_path / ".inheritree.toml").write_text(
        '[inheritree]\nexclude = ["b"]\nsearch-paths = ["src"]\n'
    )
    settings = read_settings(tmp_path)
    assert settings.exclude == ["b"]
    assert settings.search_paths == [tmp_path / "src"]


def test_read_settings_defaults(tmp_path):
    (tmp_path / "pyproject.toml").write_text("not = [valid toml\n")
    assert read_settings(tmp_path).exclude == []
