"""Command-line interface: decompose a graph into edge-disjoint cycles."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from cycledecomp.config import LOG_LEVELS, default_divisor, default_log_level
from cycledecomp.decompose import decompose
from cycledecomp.exceptions import CycleDecompError
from cycledecomp.graph import Graph, demo_graph
from cycledecomp.io import g6_to_graph, read_edgelist
from cycledecomp.schedule import schedule_cycle_sizes
from cycledecomp.utils.naming import describe_edges, format_path


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cycledecomp",
        description="Decompose an undirected graph into edge-disjoint cycles.",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--g6", help="graph6 string to decompose")
    source.add_argument(
        "--edgelist",
        metavar="PATH",
        help="file with one 'u v' integer pair per line ('#' comments)",
    )

    parser.add_argument(
        "--divisor",
        type=int,
        help="cycle length is |E| // divisor (default: $CYCLEDECOMP_DIVISOR or 3)",
    )
    parser.add_argument(
        "--draw",
        metavar="PATH",
        help="save a PNG of the decomposition to PATH",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="logging level (default: $CYCLEDECOMP_LOG_LEVEL or WARNING)",
    )
    return parser


def load_graph(args: argparse.Namespace) -> Graph:
    if args.g6 is not None:
        return g6_to_graph(args.g6)
    if args.edgelist is not None:
        return read_edgelist(args.edgelist)
    return demo_graph()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for CLI.  Returns 0 if every edge was covered, else 1."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        log_level = args.log_level or default_log_level()
        divisor = args.divisor if args.divisor is not None else default_divisor()
    except CycleDecompError as exc:
        parser.error(str(exc))
    configure_logging(getattr(logging, log_level))

    try:
        graph = load_graph(args)
        sizes = schedule_cycle_sizes(graph.number_of_edges(), divisor)
    except (OSError, CycleDecompError) as exc:
        parser.error(str(exc))

    print("adjacency:")
    print(graph.format_adjacency())
    print(f"schedule: {list(sizes)}")

    result = decompose(graph, sizes)

    for i, path in enumerate(result.cycles):
        print(f"cycle {i} ({describe_edges(path)}): {format_path(path)}")
    if result.skipped:
        print(f"not found: {list(result.skipped)}")

    total = graph.number_of_edges()
    covered = len(result.covered_edges)
    print(f"covered {covered}/{total} edges")

    if args.draw:
        from cycledecomp.viz import draw_decomposition

        try:
            draw_decomposition(graph, result, save_path=args.draw)
        except CycleDecompError as exc:
            parser.error(str(exc))

    return 0 if result.is_complete else 1


if __name__ == "__main__":
    sys.exit(main())
