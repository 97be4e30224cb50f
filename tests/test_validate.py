from __future__ import annotations

import math

import pytest

from syngraph import validate
from syngraph.errors import InvalidParameter, InvalidSize
from syngraph.config import MAX_VERTICES


@pytest.mark.parametrize("p", [0.0, 0.05, 0.5, 0.999, 1.0, 1])
def test_probability_accepted(p: float) -> None:
    validate.check_probability(p)


@pytest.mark.parametrize("p", [-0.05, 1.01, 1.5, math.nan, math.inf, "0.5", True])
def test_probability_rejected(p) -> None:
    with pytest.raises(InvalidParameter) as excinfo:
        validate.check_probability(p)
    assert excinfo.value.name == "p"


def test_vertex_count() -> None:
    validate.check_vertex_count(1)
    with pytest.raises(InvalidParameter, match="n >= 1"):
        validate.check_vertex_count(0)
    with pytest.raises(InvalidParameter):
        validate.check_vertex_count(True)
    with pytest.raises(InvalidSize):
        validate.check_vertex_count(MAX_VERTICES + 1)


def test_gnm_bounds() -> None:
    validate.check_gnm(4, 0)
    validate.check_gnm(4, 6)
    with pytest.raises(InvalidParameter) as excinfo:
        validate.check_gnm(4, 7)
    assert excinfo.value.name == "m"
    assert "n(n-1)/2 = 6" in str(excinfo.value)
    with pytest.raises(InvalidParameter):
        validate.check_gnm(4, -1)


def test_barabasi_albert_bounds() -> None:
    validate.check_barabasi_albert(10, 2, 3)
    validate.check_barabasi_albert(3, 3, 3)
    with pytest.raises(InvalidParameter, match="`m` = 0"):
        validate.check_barabasi_albert(10, 0, 3)
    with pytest.raises(InvalidParameter, match="`m0` = 1"):
        validate.check_barabasi_albert(10, 2, 1)
    with pytest.raises(InvalidParameter, match="`m0` = 11"):
        validate.check_barabasi_albert(10, 2, 11)


def test_watts_strogatz_bounds() -> None:
    validate.check_watts_strogatz(10, 4, 0.0)
    validate.check_watts_strogatz(5, 4, 1.0)
    for n, k in [(10, 3), (10, 0), (10, -2), (4, 4), (4, 6)]:
        with pytest.raises(InvalidParameter) as excinfo:
            validate.check_watts_strogatz(n, k, 0.1)
        assert excinfo.value.name == "k"
    with pytest.raises(InvalidParameter) as excinfo:
        validate.check_watts_strogatz(10, 4, 1.5)
    assert excinfo.value.name == "beta"


def test_chunks() -> None:
    validate.check_chunks(1)
    with pytest.raises(InvalidParameter):
        validate.check_chunks(0)
