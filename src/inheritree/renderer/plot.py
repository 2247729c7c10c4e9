"""Draw an edge table as a labelled directed graph."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

import networkx as nx

from inheritree.model import EdgeRecord

logger = logging.getLogger(__name__)


def build_digraph(edges: Sequence[EdgeRecord], labels: Mapping[int, str]) -> nx.DiGraph:
    """Return a subclass → superclass graph whose nodes are tree node numbers."""
    graph = nx.DiGraph()
    for node, name in labels.items():
        graph.add_node(node, label=name)
    for e in edges:
        graph.add_edge(e.from_node, e.to_node, label=e.name)
    return graph


def _layered_positions(graph: nx.DiGraph) -> dict:
    """Place root classes on top and each generation of subclasses below."""
    try:
        generations = list(nx.topological_generations(graph.reverse(copy=True)))
    except nx.NetworkXUnfeasible:
        logger.warning("Inheritance graph has a cycle; using a spring layout")
        return nx.spring_layout(graph, seed=0)

    for layer, nodes in enumerate(generations):
        for node in nodes:
            graph.nodes[node]["layer"] = layer
    pos = nx.multipartite_layout(graph, subset_key="layer", align="horizontal")
    return {node: (x, -y) for node, (x, y) in pos.items()}


def render_graph(
    edges: Sequence[EdgeRecord],
    labels: Mapping[int, str],
    output: Path | None = None,
    *,
    title: str | None = None,
) -> None:
    """Show the graph in a window, or save it to *output* when given."""
    import matplotlib.pyplot as plt

    graph = build_digraph(edges, labels)
    pos = _layered_positions(graph)

    fig, ax = plt.subplots(figsize=(16, 12))
    nx.draw_networkx(
        graph,
        pos,
        ax=ax,
        labels={n: data.get("label", str(n)) for n, data in graph.nodes(data=True)},
        node_color="skyblue",
        node_size=1000,
        font_size=10,
        arrows=True,
        arrowstyle="->",
        arrowsize=20,
        edge_color="black",
    )
    ax.set_title(title or "Class hierarchy")
    ax.axis("off")

    if output is None:
        plt.show()
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved graph to %s", output)
