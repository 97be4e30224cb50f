"""
Graph container populated by the generators.

Vertices are the integers 0..n-1 and have no objects of their own; only
the edge index is stored. Two interchangeable backends hold that index:

    - sparse: dict[vertex] -> dict[neighbor, multiplicity], insertion ordered
    - dense:  numpy n x n count matrix, for small graphs that will be
              filled to a large fraction of all possible pairs

The backend is picked from the expected edge count at construction time;
the query contract is the same either way.
"""

from collections import Counter
from numbers import Integral
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .config import DENSE_MAX_VERTICES, DENSE_MIN_DENSITY
from .errors import EdgeRejected, FrozenGraph, InvalidParameter, OutOfRange
from .pairs import pair_count
from .validate import check_vertex_count


Edge = Tuple[int, int]


class _SparseAdjacency:
    """Per-vertex neighbor dicts, created on first touch."""

    kind = "sparse"

    def __init__(self, n: int):
        self._adj: Dict[int, Dict[int, int]] = {}
        self._degree: Dict[int, int] = {}

    def count(self, u: int, v: int) -> int:
        return self._adj.get(u, {}).get(v, 0)

    def add(self, u: int, v: int) -> None:
        row = self._adj.setdefault(u, {})
        row[v] = row.get(v, 0) + 1
        if u != v:
            row = self._adj.setdefault(v, {})
            row[u] = row.get(u, 0) + 1
        self._degree[u] = self._degree.get(u, 0) + 1
        self._degree[v] = self._degree.get(v, 0) + 1

    def _drop(self, a: int, b: int) -> None:
        row = self._adj[a]
        if row[b] == 1:
            del row[b]
        else:
            row[b] -= 1

    def remove(self, u: int, v: int) -> None:
        self._drop(u, v)
        if u != v:
            self._drop(v, u)
        self._degree[u] -= 1
        self._degree[v] -= 1

    def degree(self, v: int) -> int:
        return self._degree.get(v, 0)

    def neighbors(self, v: int) -> Iterator[Tuple[int, int]]:
        return iter(list(self._adj.get(v, {}).items()))

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        for u in sorted(self._adj):
            for v, mult in self._adj[u].items():
                if u <= v:
                    yield u, v, mult


class _DenseAdjacency:
    """Symmetric count matrix; a self-loop is stored once on the diagonal."""

    kind = "dense"

    def __init__(self, n: int):
        self._matrix = np.zeros((n, n), dtype=np.uint32)
        self._degree = np.zeros(n, dtype=np.int64)

    def count(self, u: int, v: int) -> int:
        return int(self._matrix[u, v])

    def add(self, u: int, v: int) -> None:
        self._matrix[u, v] += 1
        if u != v:
            self._matrix[v, u] += 1
        self._degree[u] += 1
        self._degree[v] += 1

    def remove(self, u: int, v: int) -> None:
        self._matrix[u, v] -= 1
        if u != v:
            self._matrix[v, u] -= 1
        self._degree[u] -= 1
        self._degree[v] -= 1

    def degree(self, v: int) -> int:
        return int(self._degree[v])

    def neighbors(self, v: int) -> Iterator[Tuple[int, int]]:
        row = self._matrix[v]
        for w in np.flatnonzero(row):
            yield int(w), int(row[w])

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        n = self._matrix.shape[0]
        for u in range(n):
            row = self._matrix[u, u:]
            for offset in np.flatnonzero(row):
                yield u, u + int(offset), int(row[offset])


def _prefers_dense(n: int, expected_edges: Optional[int]) -> bool:
    if expected_edges is None or n < 2 or n > DENSE_MAX_VERTICES:
        return False
    return expected_edges / pair_count(n) >= DENSE_MIN_DENSITY


class Graph:
    """
    Undirected graph on vertices 0..n-1.

    Defaults to a simple graph. ``multigraph=True`` keeps parallel edges and
    ``self_loops=True`` admits (v, v); both are opt-in. Edges that the flags
    do not admit are skipped by ``add_edge`` (returning False), or raise
    EdgeRejected when ``strict=True``.

    A self-loop adds 2 to the degree of its vertex, so the degree sum is
    always twice the edge count.
    """

    __slots__ = (
        "_n",
        "_backend",
        "_edge_count",
        "_frozen",
        "multigraph",
        "self_loops",
        "strict",
    )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        n: int,
        *,
        expected_edges: Optional[int] = None,
        multigraph: bool = False,
        self_loops: bool = False,
        strict: bool = False,
        dense: Optional[bool] = None,
    ) -> None:
        check_vertex_count(n, minimum=0)
        self._n = int(n)
        if dense is None:
            dense = _prefers_dense(self._n, expected_edges)
        self._backend = _DenseAdjacency(self._n) if dense else _SparseAdjacency(self._n)
        self._edge_count = 0
        self._frozen = False
        self.multigraph = multigraph
        self.self_loops = self_loops
        self.strict = strict

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge], **kwargs) -> "Graph":
        graph = cls(n, **kwargs)
        graph.add_edges_from(edges)
        return graph

    @property
    def backend(self) -> str:
        return self._backend.kind

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    def _check_vertex(self, v: int) -> int:
        # bool is Integral, but True is not a vertex
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise InvalidParameter("vertex", v, "an integer")
        if not (0 <= v < self._n):
            raise OutOfRange(v, self._n)
        return int(v)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenGraph()

    def add_edge(self, u: int, v: int) -> bool:
        """Insert (u, v). Returns False when the edge was not admitted."""
        self._check_mutable()
        u = self._check_vertex(u)
        v = self._check_vertex(v)

        if u == v and not self.self_loops:
            if self.strict:
                raise EdgeRejected(u, v, "self-loops are not allowed")
            return False
        if not self.multigraph and self._backend.count(u, v):
            if self.strict:
                raise EdgeRejected(u, v, "edge already exists")
            return False

        self._backend.add(u, v)
        self._edge_count += 1
        return True

    def add_edges_from(self, edges: Iterable[Edge]) -> int:
        return sum(1 for u, v in edges if self.add_edge(u, v))

    def remove_edge(self, u: int, v: int) -> bool:
        """Remove one copy of (u, v). Returns False if there was none."""
        self._check_mutable()
        u = self._check_vertex(u)
        v = self._check_vertex(v)
        if not self._backend.count(u, v):
            return False
        self._backend.remove(u, v)
        self._edge_count -= 1
        return True

    def freeze(self) -> "Graph":
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def copy(self) -> "Graph":
        """Unfrozen copy with the same flags and backend."""
        other = Graph(
            self._n,
            multigraph=self.multigraph,
            self_loops=self.self_loops,
            strict=self.strict,
            dense=self.backend == "dense",
        )
        for u, v in self.edges():
            other._backend.add(u, v)
        other._edge_count = self._edge_count
        return other

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def vertex_count(self) -> int:
        return self._n

    def edge_count(self) -> int:
        return self._edge_count

    def __len__(self) -> int:
        return self._n

    def has_edge(self, u: int, v: int) -> bool:
        u = self._check_vertex(u)
        v = self._check_vertex(v)
        return self._backend.count(u, v) > 0

    def degree(self, v: int) -> int:
        v = self._check_vertex(v)
        return self._backend.degree(v)

    def degrees(self) -> List[int]:
        return [self._backend.degree(v) for v in range(self._n)]

    def neighbors(self, v: int) -> Iterator[int]:
        """Neighbors of v; a parallel edge repeats its neighbor."""
        v = self._check_vertex(v)
        for w, mult in self._backend.neighbors(v):
            for _ in range(mult):
                yield w

    def edges(self) -> Iterator[Edge]:
        """
        Every edge once as (u, v) with u <= v, ordered by u.

        Each call starts a fresh pass. Do not mutate the graph while a pass
        is in progress.
        """
        for u, v, mult in self._backend.edges():
            for _ in range(mult):
                yield u, v

    def edge_set(self) -> frozenset:
        """Distinct edges as a frozenset of (u, v), u <= v."""
        return frozenset(self.edges())

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._n == other._n
            and self.multigraph == other.multigraph
            and self.self_loops == other.self_loops
            and self._edge_count == other._edge_count
            and Counter(self.edges()) == Counter(other.edges())
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        flags = []
        if self.multigraph:
            flags.append("multigraph")
        if self.self_loops:
            flags.append("self_loops")
        if self._frozen:
            flags.append("frozen")
        extra = f", {', '.join(flags)}" if flags else ""
        return (
            f"Graph(n={self._n}, edges={self._edge_count}, "
            f"backend={self.backend}{extra})"
        )
