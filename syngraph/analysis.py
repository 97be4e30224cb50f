"""
Basic structural summaries of a generated graph.

Read-only: everything here goes through the Graph query interface and
never mutates the graph.
"""

from typing import Dict

import numpy as np

from .graph import Graph


# ---------------------------------------------------------------------
# Basic helpers
# ---------------------------------------------------------------------

def num_nodes(graph: Graph) -> int:
    return graph.vertex_count()


def num_edges(graph: Graph) -> int:
    return sum(1 for _ in graph.edges())


# ---------------------------------------------------------------------
# Degree distribution
# ---------------------------------------------------------------------

def compute_degree_distribution(graph: Graph) -> Dict[str, object]:
    """
    Degree statistics taken from Graph.degree, where a self-loop counts 2.

    The mean comes from the handshake identity 2 * edges / n rather than
    from the degree list, so it is exact for any backend.
    """
    n = graph.vertex_count()
    degrees = np.asarray(graph.degrees(), dtype=np.int64)
    if n == 0:
        return {
            "degree_list": [],
            "degree_histogram": {},
            "avg_degree": 0.0,
            "min_degree": 0,
            "max_degree": 0,
            "variance": 0.0,
            "isolated": 0,
        }

    values, counts = np.unique(degrees, return_counts=True)
    avg = 2 * graph.edge_count() / n

    return {
        "degree_list": degrees.tolist(),
        "degree_histogram": {int(d): int(c) for d, c in zip(values, counts)},
        "avg_degree": avg,
        "min_degree": int(values[0]),
        "max_degree": int(values[-1]),
        "variance": float(np.mean((degrees - avg) ** 2)),
        "isolated": int(np.count_nonzero(degrees == 0)),
    }
