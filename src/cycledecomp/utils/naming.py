from __future__ import annotations

from collections import defaultdict
from typing import Sequence, Tuple


def format_path(path: Sequence[Tuple[int, int]]) -> str:
    """Render a cycle given as directed edges, e.g. ``0 -> 1 -> 3 -> 2 -> 0``."""
    if not path:
        return "(none)"
    return " -> ".join([str(path[0][0])] + [str(v) for _, v in path])


def describe_edges(edges: Sequence[Tuple[int, int]]) -> str:
    """Short name for a small edge list.

    Recognizes K2, paths Pn and cycles Cn (including the doubled edge C2);
    anything else is reported as Graph({n}v,{m}e).
    """
    if not edges:
        return "empty"

    m = len(edges)
    deg: dict[int, int] = defaultdict(int)
    for u, v in edges:
        deg[u] += 1
        deg[v] += 1
    n = len(deg)

    if m == 1:
        return "K2"

    if all(d == 2 for d in deg.values()) and m == n and _is_connected(edges):
        return f"C{n}"

    if m == n - 1 and max(deg.values()) <= 2 and _is_connected(edges):
        return f"P{n}"

    return f"Graph({n}v,{m}e)"


def _is_connected(edges: Sequence[Tuple[int, int]]) -> bool:
    adj: dict[int, set[int]] = defaultdict(set)
    for u, v in edges:
        adj[u].add(v)
        adj[v].add(u)

    start = next(iter(adj))
    visited: set[int] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        for nbr in adj[node]:
            if nbr not in visited:
                stack.append(nbr)
    return len(visited) == len(adj)
