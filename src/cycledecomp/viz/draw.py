from __future__ import annotations

import matplotlib.pyplot as plt
import networkx as nx

from cycledecomp.config import default_max_draw_nodes
from cycledecomp.decompose.decomposer import Decomposition
from cycledecomp.graph.adjacency import Graph
from cycledecomp.utils.naming import describe_edges
from .layouts import base_layout


def draw_decomposition(
    graph: Graph,
    decomposition: Decomposition,
    *,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 2.0,
    max_nodes_to_draw: int | None = None,
    save_path: str | None = None,
):
    """
    Draw *graph* with each cycle of *decomposition* in its own colour and the
    uncovered edges dashed grey.

    If save_path is set, saves a PNG there and closes the figure; otherwise
    shows it.  max_nodes_to_draw defaults to CYCLEDECOMP_MAX_DRAW_NODES or 600.
    Returns the matplotlib Figure.
    """
    if max_nodes_to_draw is None:
        max_nodes_to_draw = default_max_draw_nodes()

    G = nx.Graph()
    G.add_nodes_from(graph.vertices)
    G.add_edges_from(graph.edges())

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_axis_off()
    n_cycles = len(decomposition.cycles)
    n_left = decomposition.remaining.number_of_edges()
    ax.set_title(
        f"|V|={graph.number_of_vertices()}  |E|={graph.number_of_edges()}  "
        f"cycles={n_cycles}  uncovered={n_left}"
    )

    if G.number_of_nodes() > max_nodes_to_draw:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={G.number_of_nodes()})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )
    else:
        pos = base_layout(G, seed=seed)
        nx.draw_networkx_nodes(G, pos, ax=ax, node_size=node_size, node_color="white", edgecolors="black")
        nx.draw_networkx_labels(G, pos, ax=ax)

        cmap = plt.get_cmap("tab10")
        for i, path in enumerate(decomposition.cycles):
            edges = [(u, v) for u, v in path]
            nx.draw_networkx_edges(
                G,
                pos,
                ax=ax,
                edgelist=edges,
                width=edge_width,
                edge_color=[cmap(i % 10)] * len(edges),
                label=f"{i}: {describe_edges(edges)}",
            )

        uncovered = [(u, v) for u, v in decomposition.uncovered_edges if G.has_edge(u, v)]
        if uncovered:
            nx.draw_networkx_edges(
                G,
                pos,
                ax=ax,
                edgelist=uncovered,
                width=edge_width / 2,
                edge_color="grey",
                style="dashed",
                label="uncovered",
            )
        if n_cycles or uncovered:
            ax.legend(loc="lower right")

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return fig
