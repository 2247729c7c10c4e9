"""Flatten a class tree into edge records and write them out."""

from __future__ import annotations

import csv
import json
from collections.abc import Sequence
from pathlib import Path

from rich.table import Table

from inheritree.model import EdgeRecord
from inheritree.tree import ClassTree

EDGE_SUFFIXES = (".json", ".csv")


def to_edge_table(tree: ClassTree) -> list[EdgeRecord]:
    """Return one edge per (class, direct parent) pair, sorted by source node."""
    edges: list[EdgeRecord] = []
    for name, entry in tree.items():
        for parent in entry.parents:
            edges.append(EdgeRecord(name, entry.node, tree.node_of(parent)))
    return sorted(edges, key=lambda e: e.from_node)


def node_labels(tree: ClassTree) -> dict[int, str]:
    """Map node numbers to the class names holding them."""
    return {entry.node: name for name, entry in tree.items()}


def write_edges(edges: Sequence[EdgeRecord], path: Path) -> None:
    """Write *edges* as JSON or CSV, chosen by the suffix of *path*."""
    suffix = path.suffix.lower()
    if suffix not in EDGE_SUFFIXES:
        raise ValueError(f"Unsupported edge table format: {path.suffix!r}")

    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".json":
        path.write_text(json.dumps([e.as_dict() for e in edges], indent=2))
        return

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=["name", "from", "to"])
        writer.writeheader()
        writer.writerows(e.as_dict() for e in edges)


def edge_table_view(edges: Sequence[EdgeRecord], title: str | None = None) -> Table:
    table = Table(title=title)
    table.add_column("name", style="cyan")
    table.add_column("from", justify="right")
    table.add_column("to", justify="right")
    for e in edges:
        table.add_row(e.name, str(e.from_node), str(e.to_node))
    return table
