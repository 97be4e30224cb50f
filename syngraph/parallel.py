"""
Partitioned G(n, p) generation.

The pair enumeration [0, n(n-1)/2) is cut into contiguous, disjoint
slices. Each slice is skip-sampled with its own child RandomSource, so
workers share no state. The Graph is assembled only after every slice has
finished, in slice order, which makes the result a function of
(n, p, seed, chunks) regardless of how the executor schedules the work.
"""

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Optional, Tuple

from .config import DEFAULT_CHUNKS
from .erdos import add_pair_indices, skip_sample_indices
from .graph import Graph
from .pairs import pair_count
from .rng import SeedLike, as_source
from .validate import check_chunks, check_gnp

logger = logging.getLogger(__name__)


def partition(total: int, chunks: int) -> List[Tuple[int, int]]:
    """Split [0, total) into ``chunks`` contiguous [start, stop) slices."""
    bounds = [total * i // chunks for i in range(chunks + 1)]
    return list(zip(bounds[:-1], bounds[1:]))


def generate_erdos_renyi_parallel(
    n: int,
    p: float,
    seed: SeedLike = None,
    *,
    chunks: int = DEFAULT_CHUNKS,
    executor: Optional[Executor] = None,
    frozen: bool = False,
) -> Graph:
    """
    G(n, p) with the pair space split across ``chunks`` independent workers.

    Args:
        n, p, seed: as for generate_erdos_renyi.
        chunks: Number of slices (>= 1). Different chunk counts give
                different (equally distributed) graphs for the same seed.
        executor: Any concurrent.futures Executor. Defaults to a
                  ThreadPoolExecutor owned by this call.
        frozen: Freeze the graph before returning it.
    """
    check_gnp(n, p)
    check_chunks(chunks)
    root = as_source(seed)

    total = pair_count(n)
    slices = partition(total, chunks)
    sources = root.spawn(chunks)
    logger.debug("parallel G(n=%d, p=%s) chunks=%d source=%r", n, p, chunks, root)

    own_executor = executor is None
    if own_executor:
        executor = ThreadPoolExecutor(max_workers=chunks)
    try:
        futures = [
            executor.submit(skip_sample_indices, source, p, start, stop)
            for source, (start, stop) in zip(sources, slices)
        ]
        results = [future.result() for future in futures]
    finally:
        if own_executor:
            executor.shutdown()

    graph = Graph(n, expected_edges=round(p * total))
    for indices in results:
        add_pair_indices(graph, indices)

    logger.debug("parallel G(n=%d, p=%s) done: %d edges", n, p, graph.edge_count())
    return graph.freeze() if frozen else graph
