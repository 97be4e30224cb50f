# erdos.py
"""
Erdős–Rényi random graph generators.

Two flavours:
    1) generate_erdos_renyi(n, p, seed=None)
       - G(n, p): every pair is an edge independently with probability p.
    2) generate_gnm(n, m, seed=None)
       - G(n, m): exactly m edges, uniform over all graphs with m edges.

Both return a Graph on vertices 0, 1, ..., n-1 and draw every random
number from a RandomSource (see rng.py).
"""

import logging
import math
from typing import Dict, List

from .config import GNM_SHUFFLE_FRACTION, retry_limit
from .errors import InvalidParameter, RetryLimitExceeded
from .graph import Graph
from .pairs import index_to_pair, pair_count
from .rng import RandomSource, SeedLike, as_source
from .validate import check_gnm, check_gnp

logger = logging.getLogger(__name__)

METHODS = ("skip", "bernoulli")


# ---------------------------------------------------------------------
# Samplers over the pair enumeration (indices, not pairs)
# ---------------------------------------------------------------------

def skip_sample_indices(source: RandomSource, p: float, start: int, stop: int) -> List[int]:
    """
    Positions in [start, stop) hit by independent Bernoulli(p) trials.

    Instead of one draw per position, draws the geometric gap between hits:
        failures before next hit = floor( log(1-U) / log(1-p) )
    so the cost is proportional to the number of hits, not to stop - start.
    """
    if p <= 0.0 or start >= stop:
        return []
    if p >= 1.0:
        return list(range(start, stop))

    log_q = math.log1p(-p)
    hits: List[int] = []
    position = start - 1
    while True:
        failures = math.log1p(-source.random()) / log_q
        # can be inf for tiny p; the comparison handles it
        if failures >= stop - position - 1:
            break
        position += int(failures) + 1
        hits.append(position)
    return hits


def bernoulli_sample_indices(source: RandomSource, p: float, start: int, stop: int) -> List[int]:
    """One draw per position. O(stop - start); kept as a reference sampler."""
    if p <= 0.0 or start >= stop:
        return []
    if p >= 1.0:
        return list(range(start, stop))
    return [index for index in range(start, stop) if source.random() < p]


def _rejection_indices(source: RandomSource, total: int, m: int, limit: int) -> List[int]:
    chosen: Dict[int, None] = {}  # insertion-ordered set
    misses = 0
    while len(chosen) < m:
        index = source.integers(total)
        if index in chosen:
            misses += 1
            if misses > limit:
                raise RetryLimitExceeded("drawing a new pair", misses)
            continue
        chosen[index] = None
        misses = 0
    return list(chosen)


def _shuffled_indices(source: RandomSource, total: int, m: int) -> List[int]:
    # First m steps of a Fisher-Yates shuffle of range(total); only the
    # displaced slots are stored, so memory is O(m).
    displaced: Dict[int, int] = {}
    picked: List[int] = []
    for i in range(m):
        j = i + source.integers(total - i)
        picked.append(displaced.get(j, j))
        displaced[j] = displaced.get(i, i)
    return picked


def add_pair_indices(graph: Graph, indices: List[int]) -> None:
    for index in indices:
        u, v = index_to_pair(index)
        graph.add_edge(u, v)


# ---------------------------------------------------------------------
# Public generators
# ---------------------------------------------------------------------

def generate_erdos_renyi(
    n: int,
    p: float,
    seed: SeedLike = None,
    *,
    method: str = "skip",
    frozen: bool = False,
) -> Graph:
    """
    Generate an undirected Erdős–Rényi G(n, p) graph.

    Args:
        n: Number of vertices (>= 1), vertices will be 0..n-1.
        p: Edge probability in [0, 1]. p = 0 and p = 1 give the empty and
           complete graph exactly, without drawing.
        seed: int seed, None for entropy, or a RandomSource.
        method: "skip" (geometric gaps, expected O(n + m)) or
                "bernoulli" (one draw per pair, O(n^2)).
        frozen: Freeze the graph before returning it.

    Returns:
        Graph with on average p * n(n-1)/2 edges.
    """
    check_gnp(n, p)
    if method not in METHODS:
        raise InvalidParameter("method", method, f"one of {METHODS}")
    source = as_source(seed)

    total = pair_count(n)
    logger.debug("G(n=%d, p=%s) method=%s source=%r", n, p, method, source)

    sampler = skip_sample_indices if method == "skip" else bernoulli_sample_indices
    indices = sampler(source, p, 0, total)

    graph = Graph(n, expected_edges=round(p * total))
    add_pair_indices(graph, indices)

    logger.debug("G(n=%d, p=%s) done: %d edges", n, p, graph.edge_count())
    return graph.freeze() if frozen else graph


def generate_gnm(
    n: int,
    m: int,
    seed: SeedLike = None,
    *,
    frozen: bool = False,
) -> Graph:
    """
    Generate an undirected G(n, m) graph: m distinct edges chosen uniformly.

    Args:
        n: Number of vertices (>= 1).
        m: Number of edges, 0 <= m <= n(n-1)/2.
        seed: int seed, None for entropy, or a RandomSource.
        frozen: Freeze the graph before returning it.

    Sparse requests (m at most half of all pairs) draw random pairs and
    retry duplicates; denser ones run a partial shuffle over the pair
    enumeration so the number of draws is exactly m.
    """
    check_gnm(n, m)
    source = as_source(seed)

    total = pair_count(n)
    logger.debug("G(n=%d, m=%d) source=%r", n, m, source)

    graph = Graph(n, expected_edges=m)
    if m == total:
        indices: List[int] = list(range(total))
    elif m == 0:
        indices = []
    elif m <= GNM_SHUFFLE_FRACTION * total:
        indices = _rejection_indices(source, total, m, retry_limit(n))
    else:
        indices = _shuffled_indices(source, total, m)
    add_pair_indices(graph, indices)

    logger.debug("G(n=%d, m=%d) done", n, m)
    return graph.freeze() if frozen else graph
