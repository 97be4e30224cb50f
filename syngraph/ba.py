"""
Barabási–Albert scale-free graph generator (preferential attachment).

Output format:
    - Returns a Graph on vertices 0, 1, ..., n-1.
    - Vertices 0..m0-1 form the seed structure; every later vertex arrives
      with exactly m edges to distinct earlier vertices.
"""

import logging
from typing import Dict, List, Optional

from .config import retry_limit
from .errors import InvalidParameter, RetryLimitExceeded
from .graph import Graph
from .rng import RandomSource, SeedLike, as_source
from .validate import check_barabasi_albert

logger = logging.getLogger(__name__)

INITIAL_STRUCTURES = ("cycle", "empty")


def seed_edge_count(m0: int, initial: str = "cycle") -> int:
    if initial == "empty" or m0 < 2:
        return 0
    return 1 if m0 == 2 else m0


def _add_seed_structure(graph: Graph, m0: int, initial: str) -> None:
    if initial == "empty" or m0 < 2:
        return
    if m0 == 2:
        graph.add_edge(0, 1)
        return
    for i in range(m0):
        graph.add_edge(i, (i + 1) % m0)


def _choose_targets(
    source: RandomSource,
    bag: List[int],
    new_vertex: int,
    m: int,
    limit: int,
) -> List[int]:
    """
    Draw m distinct earlier vertices, each with probability proportional to
    its degree. ``bag`` lists every vertex once per incident edge end, so a
    uniform position in it is a degree-weighted draw. An empty bag (no
    edges yet) falls back to a uniform draw over earlier vertices.
    """
    targets: Dict[int, None] = {}
    misses = 0
    while len(targets) < m:
        if bag:
            candidate = bag[source.integers(len(bag))]
        else:
            candidate = source.integers(new_vertex)
        if candidate == new_vertex or candidate in targets:
            misses += 1
            if misses > limit:
                raise RetryLimitExceeded(f"attaching vertex {new_vertex}", misses)
            continue
        targets[candidate] = None
    return list(targets)


def generate_barabasi_albert(
    n: int,
    m: int,
    m0: Optional[int] = None,
    seed: SeedLike = None,
    *,
    initial: str = "cycle",
    frozen: bool = False,
) -> Graph:
    """
    Generate a Barabási–Albert scale-free network.

    Args:
        n: Total number of vertices (>= m0).
        m: Number of edges to attach from each new vertex to existing
           vertices (1 <= m <= m0).
        m0: Number of seed vertices; defaults to m.
        seed: int seed, None for entropy, or a RandomSource.
        initial: Seed structure on 0..m0-1: "cycle" (a ring for m0 >= 3,
                 one edge for m0 == 2) or "empty".
        frozen: Freeze the graph before returning it.

    Returns:
        Graph with seed_edge_count(m0, initial) + (n - m0) * m edges.
    """
    if m0 is None:
        m0 = m
    check_barabasi_albert(n, m, m0)
    if initial not in INITIAL_STRUCTURES:
        raise InvalidParameter("initial", initial, f"one of {INITIAL_STRUCTURES}")
    source = as_source(seed)

    logger.debug("BA(n=%d, m=%d, m0=%d, initial=%s) source=%r", n, m, m0, initial, source)
    graph = Graph(n, expected_edges=seed_edge_count(m0, initial) + (n - m0) * m)

    # 1. Seed structure on the first m0 vertices
    _add_seed_structure(graph, m0, initial)

    # 2. Preferential attachment "bag":
    #    list of vertices where each vertex appears as many times as its degree.
    bag: List[int] = []
    for u, v in graph.edges():
        bag.append(u)
        bag.append(v)

    # 3. Add new vertices one by one. The bag only grows once the new vertex
    #    is fully connected, so all m draws of a step see the same degrees.
    limit = retry_limit(n)
    for new_vertex in range(m0, n):
        targets = _choose_targets(source, bag, new_vertex, m, limit)
        for t in targets:
            graph.add_edge(new_vertex, t)
        bag.extend(targets)
        bag.extend([new_vertex] * m)

    logger.debug("BA(n=%d, m=%d, m0=%d) done: %d edges", n, m, m0, graph.edge_count())
    return graph.freeze() if frozen else graph
