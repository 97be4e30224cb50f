"""
Command-line front end.

    python -m syngraph --model ER --n 1000 --p 0.01 --seed 42
    python -m syngraph --model BA --n 500 --m 3 --edges-out edges.csv
"""

import argparse
import logging
import sys
from typing import List, Optional

from .analysis import compute_degree_distribution, num_edges, num_nodes
from .ba import generate_barabasi_albert
from .config import DEFAULT_CHUNKS, LOG_FORMAT
from .convert import write_edge_list
from .erdos import generate_erdos_renyi, generate_gnm
from .errors import GraphError, InvalidParameter
from .graph import Graph
from .parallel import generate_erdos_renyi_parallel
from .ws import generate_watts_strogatz

logger = logging.getLogger(__name__)

MODELS = ["ER", "GNM", "BA", "WS"]


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="syngraph",
        description="Generate a random graph (ER, GNM, BA, WS) and print basic statistics",
    )

    parser.add_argument("--model", type=str, required=True, choices=MODELS, help="Graph model to generate")
    parser.add_argument("--n", type=int, required=True, help="Number of vertices")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    # ER
    parser.add_argument("--p", type=float, help="Edge probability for ER")
    parser.add_argument(
        "--chunks",
        type=int,
        default=None,
        help=f"Split ER generation over this many parallel slices (e.g. {DEFAULT_CHUNKS})",
    )

    # GNM / BA
    parser.add_argument("--m", type=int, help="Edge count for GNM, or edges per new vertex for BA")
    parser.add_argument("--m0", type=int, help="Seed vertices for BA (default: m)")

    # WS
    parser.add_argument("--k", type=int, help="Ring lattice degree for WS")
    parser.add_argument("--beta", type=float, help="Rewiring probability for WS")

    parser.add_argument("--edges-out", type=str, help="Path to CSV for exporting the edge list")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging level (default: WARNING)",
    )

    return parser.parse_args(argv)


def _require(args: argparse.Namespace, *names: str) -> None:
    for name in names:
        if getattr(args, name) is None:
            raise InvalidParameter(name, None, f"--{name.replace('_', '-')} is required for model {args.model}")


def generate_graph_from_args(args: argparse.Namespace) -> Graph:
    if args.model == "ER":
        _require(args, "p")
        if args.chunks is not None:
            return generate_erdos_renyi_parallel(args.n, args.p, seed=args.seed, chunks=args.chunks)
        return generate_erdos_renyi(args.n, args.p, seed=args.seed)

    if args.model == "GNM":
        _require(args, "m")
        return generate_gnm(args.n, args.m, seed=args.seed)

    if args.model == "BA":
        _require(args, "m")
        return generate_barabasi_albert(args.n, args.m, args.m0, seed=args.seed)

    _require(args, "k", "beta")
    return generate_watts_strogatz(args.n, args.k, args.beta, seed=args.seed)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        graph = generate_graph_from_args(args)
    except GraphError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print("=== BASIC INFO ===")
    print("Nodes:", num_nodes(graph))
    print("Edges:", num_edges(graph))

    degree_stats = compute_degree_distribution(graph)
    print("\n=== DEGREE DISTRIBUTION ===")
    print("Average degree:", degree_stats["avg_degree"])
    print("Min degree:", degree_stats["min_degree"])
    print("Max degree:", degree_stats["max_degree"])
    print("Variance:", degree_stats["variance"])
    print("Histogram (first 10):", list(degree_stats["degree_histogram"].items())[:10])

    if args.edges_out:
        rows = write_edge_list(graph, args.edges_out)
        logger.info("wrote %d edges to %s", rows, args.edges_out)
        print(f"\nWrote {rows} edges to '{args.edges_out}'.")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
