from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import networkx as nx

from cycledecomp.exceptions import GraphInputError
from cycledecomp.graph.adjacency import Graph

logger = logging.getLogger(__name__)


def _edge_lines(path: Path) -> List[str]:
    """Non-blank, comment-stripped lines, each holding exactly two tokens."""
    lines: List[str] = []
    with open(path, encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            if len(line.split()) != 2:
                raise GraphInputError(
                    f"{path}:{lineno}: expected two endpoints, got {raw.strip()!r}"
                )
            lines.append(line)
    return lines


def read_edgelist(path: Union[str, Path]) -> Graph:
    """
    Read a whitespace-separated edge list of integer pairs.

    '#' starts a comment; blank lines are ignored.  Any other line must hold
    exactly two integers, else GraphInputError names the offending line.
    Repeated lines become parallel edges.  Vertex order follows first
    appearance in the file.
    """
    path = Path(path)
    lines = _edge_lines(path)
    try:
        G = nx.parse_edgelist(
            lines,
            nodetype=int,
            data=False,
            create_using=nx.MultiGraph,
        )
    except (TypeError, ValueError) as exc:
        raise GraphInputError(f"could not parse edge list {path}: {exc}") from exc

    graph = Graph.from_nx(G)
    logger.info("read %r from %s", graph, path)
    return graph
