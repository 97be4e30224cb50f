from __future__ import annotations

import pytest

from syngraph.erdos import generate_erdos_renyi, generate_gnm, skip_sample_indices
from syngraph.errors import InvalidParameter
from syngraph.pairs import pair_count
from syngraph.rng import NumpySource, SequenceSource


def _assert_simple(graph) -> None:
    edges = list(graph.edges())
    assert all(u < v for u, v in edges)
    assert len(set(edges)) == len(edges) == graph.edge_count()


@pytest.mark.parametrize("method", ["skip", "bernoulli"])
def test_gnp_mean_edge_count(method: str) -> None:
    """Mean over 200 seeds should sit within ~5 standard errors of p * N."""
    n, p, runs = 30, 0.1, 200
    expected = p * pair_count(n)
    counts = []
    for seed in range(runs):
        graph = generate_erdos_renyi(n, p, seed=seed, method=method)
        _assert_simple(graph)
        counts.append(graph.edge_count())
    mean = sum(counts) / runs
    assert abs(mean - expected) < 2.5


def test_gnp_exact_extremes() -> None:
    empty = generate_erdos_renyi(12, 0.0, seed=SequenceSource([]))
    assert empty.edge_count() == 0
    complete = generate_erdos_renyi(12, 1.0, seed=SequenceSource([]))
    assert complete.edge_count() == pair_count(12)
    _assert_simple(complete)


def test_gnp_single_vertex() -> None:
    assert generate_erdos_renyi(1, 0.7, seed=3).edge_count() == 0


def test_skip_sampling_follows_geometric_gaps() -> None:
    # p = 0.5: U = 0.1 -> 0 failures, 0.8 -> 2, 0.6 -> 1, then 0.1 runs off the end
    source = SequenceSource([0.1, 0.8, 0.6, 0.1])
    graph = generate_erdos_renyi(4, 0.5, seed=source)
    assert graph.edge_set() == frozenset({(0, 1), (0, 3), (2, 3)})
    assert source.consumed == 4


def test_skip_sampling_respects_range() -> None:
    source = NumpySource(11)
    hits = skip_sample_indices(source, 0.3, 100, 200)
    assert hits == sorted(set(hits))
    assert all(100 <= h < 200 for h in hits)
    assert skip_sample_indices(source, 1e-300, 0, 10**6) == []


def test_gnp_sparse_large_graph_is_cheap() -> None:
    graph = generate_erdos_renyi(100_000, 2e-5, seed=5)
    assert graph.backend == "sparse"
    # expected ~100k edges over ~5e9 pairs
    assert 97_000 < graph.edge_count() < 103_000


def test_gnp_reproducible() -> None:
    a = generate_erdos_renyi(200, 0.05, seed=42)
    b = generate_erdos_renyi(200, 0.05, seed=42)
    c = generate_erdos_renyi(200, 0.05, seed=43)
    assert a.edge_set() == b.edge_set()
    assert a.edge_set() != c.edge_set()


def test_gnp_rejects_bad_parameters_before_sampling() -> None:
    with pytest.raises(InvalidParameter) as excinfo:
        generate_erdos_renyi(10, 1.5, seed=SequenceSource([]))
    assert excinfo.value.name == "p"
    with pytest.raises(InvalidParameter):
        generate_erdos_renyi(0, 0.5)
    with pytest.raises(InvalidParameter):
        generate_erdos_renyi(10, 0.5, method="fast")


@pytest.mark.parametrize("m", [0, 1, 20, 22, 23, 40, 44, 45])
def test_gnm_exact_edge_count(m: int) -> None:
    graph = generate_gnm(10, m, seed=m)
    assert graph.edge_count() == m
    _assert_simple(graph)


@pytest.mark.parametrize("m", [2, 4])
def test_gnm_pairs_are_uniform(m: int) -> None:
    """Each of the 6 pairs on 4 vertices should appear in m/6 of the samples."""
    runs = 3000
    counts = {}
    for seed in range(runs):
        for edge in generate_gnm(4, m, seed=seed).edges():
            counts[edge] = counts.get(edge, 0) + 1
    assert len(counts) == 6
    expected = runs * m / 6
    for edge, count in counts.items():
        assert abs(count - expected) < 130, (edge, count)


def test_gnm_extremes_draw_nothing() -> None:
    assert generate_gnm(8, 0, seed=SequenceSource([])).edge_count() == 0
    assert generate_gnm(8, 28, seed=SequenceSource([])).edge_count() == 28


def test_gnm_reproducible() -> None:
    assert generate_gnm(50, 300, seed=9).edge_set() == generate_gnm(50, 300, seed=9).edge_set()
    assert generate_gnm(50, 1000, seed=9).edge_set() == generate_gnm(50, 1000, seed=9).edge_set()


def test_gnm_rejects_too_many_edges() -> None:
    with pytest.raises(InvalidParameter) as excinfo:
        generate_gnm(10, 46, seed=SequenceSource([]))
    assert excinfo.value.name == "m"


def test_frozen_result() -> None:
    graph = generate_gnm(10, 5, seed=1, frozen=True)
    assert graph.is_frozen
