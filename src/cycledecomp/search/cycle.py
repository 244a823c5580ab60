from __future__ import annotations

from typing import Dict, Iterator, List, Sequence, Set, Tuple

from cycledecomp.graph.adjacency import Edge, Graph


Path = List[Edge]


def _closes(adj: Dict[int, List[int]], node: int, start: int, length: int) -> bool:
    """
    True if an edge node-start is available to close a walk of length-1 edges.

    For length 2 the walk already used one start-node edge, so a second,
    parallel edge is needed.  Length 1 would need a self-loop.
    """
    if length == 1:
        return start in adj.get(start, ())
    if length == 2:
        return adj.get(node, []).count(start) >= 2
    return start in adj.get(node, ())


def search_from(graph: Graph, start: int, length: int) -> Path:
    """
    Depth-first search for a cycle of exactly ``length`` edges through ``start``.

    Iterative backtracking with an explicit stack of neighbour iterators, so
    the depth is bounded by ``length`` rather than by the interpreter's
    recursion limit.  Neighbours are tried in adjacency-list order and the
    first closing walk is returned as directed edges (start, a), (a, b), ...,
    (z, start).  Returns [] when no such cycle passes through ``start``.
    """
    if length < 1:
        raise ValueError(f"cycle length must be positive, got {length}")
    adj = graph.adj
    if start not in adj:
        return []

    walk: Path = []
    visited: Set[int] = set()  # excludes start
    stack: List[Tuple[int, Iterator[int]]] = [(start, iter(adj[start]))]

    while stack:
        node, nbrs = stack[-1]
        advanced = False

        if len(walk) == length - 1:
            if _closes(adj, node, start, length):
                return walk + [(node, start)]
        else:
            for nbr in nbrs:
                if nbr == start or nbr in visited:
                    continue
                visited.add(nbr)
                walk.append((node, nbr))
                stack.append((nbr, iter(adj[nbr])))
                advanced = True
                break

        if not advanced:
            stack.pop()
            if walk:
                walk.pop()
                visited.discard(node)

    return []


def find_cycle(graph: Graph, length: int) -> Path:
    """
    First cycle of exactly ``length`` edges found by trying each vertex as a
    start, in ``graph.vertices`` order.

    Not finding one is not an error: the result is then [].
    """
    if length < 1:
        raise ValueError(f"cycle length must be positive, got {length}")
    for start in list(graph.vertices):
        path = search_from(graph, start, length)
        if path:
            return path
    return []


def is_cycle(graph: Graph, path: Sequence[Edge]) -> bool:
    """
    Check that *path* is a closed walk in *graph*: consecutive edges chain,
    every edge occurrence exists (parallel edges count separately), the last
    edge returns to the start and no intermediate vertex repeats.
    """
    if not path:
        return False

    start = path[0][0]
    if path[-1][1] != start:
        return False

    used: Dict[Edge, int] = {}
    inner: Set[int] = set()
    prev = start
    for i, (u, v) in enumerate(path):
        if u != prev:
            return False
        key = (u, v) if u < v else (v, u)
        used[key] = used.get(key, 0) + 1
        if used[key] > graph.edge_multiplicity(u, v):
            return False
        if i < len(path) - 1:
            if v == start or v in inner:
                return False
            inner.add(v)
        prev = v
    return True
