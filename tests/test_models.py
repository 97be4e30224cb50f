from __future__ import annotations

import pytest

from syngraph.errors import InvalidParameter
from syngraph.models import BarabasiAlbert, ErdosRenyiGnm, ErdosRenyiGnp, WattsStrogatz
from syngraph.rng import NumpySource


def test_invalid_parameters_fail_at_construction() -> None:
    with pytest.raises(InvalidParameter):
        ErdosRenyiGnp(4, -0.05)
    with pytest.raises(InvalidParameter):
        ErdosRenyiGnp(4, 1.01)
    ErdosRenyiGnm(4, 6)
    with pytest.raises(InvalidParameter):
        ErdosRenyiGnm(4, 7)
    with pytest.raises(InvalidParameter):
        BarabasiAlbert(10, 4, 3)
    with pytest.raises(InvalidParameter):
        WattsStrogatz(10, 5, 0.1)


def test_expected_edges() -> None:
    assert ErdosRenyiGnp(9, 1 / 6).expected_edges == pytest.approx(6.0)
    assert ErdosRenyiGnm(9, 4).expected_edges == 4
    assert BarabasiAlbert(10, 2, 3).expected_edges == 17
    assert BarabasiAlbert(10, 2).m0 == 2
    assert WattsStrogatz(10, 4, 0.5).expected_edges == 20


def test_repeated_sampling_from_one_source() -> None:
    model = ErdosRenyiGnm(20, 30)
    first = [model.sample(NumpySource(5)).edge_set() for _ in range(2)]
    assert first[0] == first[1]

    source = NumpySource(5)
    a = model.sample(source)
    b = model.sample(source)
    assert a.edge_set() == first[0]
    assert b.edge_set() != a.edge_set()


@pytest.mark.parametrize(
    "model",
    [ErdosRenyiGnp(30, 0.2), ErdosRenyiGnm(30, 40), BarabasiAlbert(30, 2, 3), WattsStrogatz(30, 4, 0.3)],
)
def test_sample_returns_graph(model) -> None:
    graph = model.sample(11, frozen=True)
    assert graph.vertex_count() == 30
    assert graph.is_frozen
    if not isinstance(model, ErdosRenyiGnp):
        assert graph.edge_count() == model.expected_edges
