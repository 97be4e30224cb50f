"""
Watts–Strogatz small-world graph generator.

Output format:
    - Returns a Graph on vertices 0, 1, ..., n-1.
    - Always n * k / 2 edges: rewiring moves edges, it never adds or drops them.
"""

import logging

from .config import retry_limit
from .errors import RetryLimitExceeded
from .graph import Graph
from .rng import RandomSource, SeedLike, as_source
from .validate import check_watts_strogatz

logger = logging.getLogger(__name__)


def ring_lattice(n: int, k: int) -> Graph:
    """Each vertex joined to its k/2 nearest neighbors on each side."""
    graph = Graph(n, expected_edges=n * k // 2)
    for i in range(n):
        for j in range(1, k // 2 + 1):
            graph.add_edge(i, (i + j) % n)
    return graph


def _find_valid_target(source: RandomSource, graph: Graph, i: int, limit: int) -> int:
    """Pick a vertex != i that is not already connected to i."""
    for _ in range(limit):
        w = source.integers(graph.vertex_count())
        if w != i and not graph.has_edge(i, w):
            return w
    raise RetryLimitExceeded(f"rewiring vertex {i}", limit)


def generate_watts_strogatz(
    n: int,
    k: int,
    beta: float,
    seed: SeedLike = None,
    *,
    frozen: bool = False,
) -> Graph:
    """
    Generate a Watts–Strogatz small-world network.

    Args:
        n: Number of vertices (> k), vertices will be 0..n-1.
        k: Each vertex is initially connected to k/2 neighbors on each side
           in a ring. Must be even and 0 < k < n.
        beta: Rewiring probability in [0, 1]. beta = 0 returns the ring
              lattice unchanged.
        seed: int seed, None for entropy, or a RandomSource.
        frozen: Freeze the graph before returning it.

    Returns:
        Graph with n * k / 2 edges.
    """
    check_watts_strogatz(n, k, beta)
    source = as_source(seed)

    logger.debug("WS(n=%d, k=%d, beta=%s) source=%r", n, k, beta, source)

    # 1. Ring lattice
    graph = ring_lattice(n, k)

    # 2. Rewire edges (only those that were added "forward" to avoid double handling)
    limit = retry_limit(n)
    rewired = 0
    for i in range(n):
        for j in range(1, k // 2 + 1):
            neighbor = (i + j) % n
            # Ensure edge still exists (it might have been rewired before)
            if not graph.has_edge(i, neighbor):
                continue
            if source.random() >= beta:
                continue
            if graph.degree(i) >= n - 1:
                # i already touches every other vertex; nowhere to move to
                continue
            new_vertex = _find_valid_target(source, graph, i, limit)
            graph.remove_edge(i, neighbor)
            graph.add_edge(i, new_vertex)
            rewired += 1

    logger.debug("WS(n=%d, k=%d, beta=%s) done: %d rewired", n, k, beta, rewired)
    return graph.freeze() if frozen else graph
