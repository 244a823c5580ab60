import argparse

import networkx as nx

from cycledecomp.decompose import decompose
from cycledecomp.exceptions import ScheduleError
from cycledecomp.graph import Graph


def sweep(n_max: int, divisor: int) -> None:
    """Report how often the first-found search covers every edge of the
    complete graphs K3..Kn and the wheel graphs W4..Wn."""
    families = {
        "K": nx.complete_graph,
        "W": nx.wheel_graph,
    }
    for name, make in families.items():
        for n in range(3, n_max + 1):
            G = Graph.from_nx(make(n))
            try:
                res = decompose(G, divisor=divisor)
            except ScheduleError as exc:
                print(f"{name}{n}: {exc}")
                continue
            status = "complete" if res.is_complete else f"{len(res.uncovered_edges)} left"
            print(
                f"{name}{n}: |E|={G.number_of_edges()} cycles={len(res.cycles)} "
                f"skipped={list(res.skipped)} {status}"
            )


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--n-max", type=int, default=8)
    ap.add_argument("--divisor", type=int, default=3)
    args = ap.parse_args()
    sweep(args.n_max, args.divisor)
