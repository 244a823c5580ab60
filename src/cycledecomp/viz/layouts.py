from __future__ import annotations

import networkx as nx


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable layout:
      - planar_layout if the simple underlying graph is planar
      - otherwise spring_layout
    """
    simple = nx.Graph(G)
    is_planar, _ = nx.check_planarity(simple)
    if is_planar:
        return nx.planar_layout(simple)
    return nx.spring_layout(simple, seed=seed, iterations=300)
