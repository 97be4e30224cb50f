from __future__ import annotations

import networkx as nx
import pytest

from syngraph.errors import InvalidParameter
from syngraph.rng import SequenceSource
from syngraph.ws import generate_watts_strogatz, ring_lattice


def test_beta_zero_is_exact_ring_lattice() -> None:
    graph = generate_watts_strogatz(10, 4, 0.0, seed=1)
    assert graph.edge_count() == 20
    for i in range(10):
        expected = {(i + d) % 10 for d in (-2, -1, 1, 2)}
        assert set(graph.neighbors(i)) == expected
    oracle = nx.watts_strogatz_graph(10, 4, 0.0)
    assert graph.edge_set() == {tuple(sorted(e)) for e in oracle.edges()}


def test_ring_lattice_helper() -> None:
    lattice = ring_lattice(7, 2)
    assert lattice.edge_set() == frozenset(
        {(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (0, 6)}
    )


def test_rewiring_path() -> None:
    # 5-cycle, beta = 0.5: only edge (1, 2) flips; target draw 0 is a duplicate, 3 is taken
    source = SequenceSource([0.9, 0.1, 0.0, 0.7, 0.9, 0.9, 0.9])
    graph = generate_watts_strogatz(5, 2, 0.5, seed=source)
    assert graph.edge_set() == frozenset({(0, 1), (1, 3), (2, 3), (3, 4), (0, 4)})
    assert source.consumed == 7


@pytest.mark.parametrize("seed", range(10))
def test_beta_one_keeps_edge_count(seed: int) -> None:
    graph = generate_watts_strogatz(40, 6, 1.0, seed=seed)
    edges = list(graph.edges())
    assert len(edges) == 40 * 6 // 2
    assert all(u < v for u, v in edges)
    assert len(set(edges)) == len(edges)
    assert graph.edge_set() != ring_lattice(40, 6).edge_set()


def test_saturated_vertices_are_not_rewired() -> None:
    # k = n - 1: the lattice is already complete
    graph = generate_watts_strogatz(5, 4, 1.0, seed=3)
    assert graph.edge_count() == 10


def test_reproducible() -> None:
    a = generate_watts_strogatz(100, 4, 0.3, seed=21)
    b = generate_watts_strogatz(100, 4, 0.3, seed=21)
    assert a.edge_set() == b.edge_set()


def test_rejects_odd_k_before_sampling() -> None:
    with pytest.raises(InvalidParameter) as excinfo:
        generate_watts_strogatz(10, 3, 0.2, seed=SequenceSource([]))
    assert excinfo.value.name == "k"
    with pytest.raises(InvalidParameter):
        generate_watts_strogatz(4, 4, 0.2)
    with pytest.raises(InvalidParameter):
        generate_watts_strogatz(10, 4, -0.1)
