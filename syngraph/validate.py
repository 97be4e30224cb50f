"""
Parameter checks run before any sampling.

Each ``check_*`` function either returns normally or raises
InvalidParameter naming the argument and the constraint it broke.
Generators call these first, so a bad call never builds a partial graph.
"""

import math
from numbers import Integral, Real
from typing import Any

from .config import MAX_VERTICES
from .errors import InvalidParameter, InvalidSize
from .pairs import pair_count


def _require_int(name: str, value: Any) -> None:
    # bool is an Integral, but True as a vertex count is almost surely a bug
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameter(name, value, "an integer")


def check_vertex_count(n: Any, minimum: int = 1, name: str = "n") -> None:
    _require_int(name, n)
    if n < minimum:
        raise InvalidParameter(name, n, f"{name} >= {minimum}")
    if n > MAX_VERTICES:
        raise InvalidSize(name, n, MAX_VERTICES)


def check_probability(p: Any, name: str = "p") -> None:
    if isinstance(p, bool) or not isinstance(p, Real):
        raise InvalidParameter(name, p, "a real number")
    if not math.isfinite(p) or not (0.0 <= p <= 1.0):
        raise InvalidParameter(name, p, f"0 <= {name} <= 1")


def check_gnp(n: Any, p: Any) -> None:
    check_vertex_count(n)
    check_probability(p)


def check_gnm(n: Any, m: Any) -> None:
    check_vertex_count(n)
    _require_int("m", m)
    total = pair_count(n)
    if not (0 <= m <= total):
        raise InvalidParameter("m", m, f"0 <= m <= n(n-1)/2 = {total}")


def check_barabasi_albert(n: Any, m: Any, m0: Any) -> None:
    check_vertex_count(n)
    _require_int("m", m)
    _require_int("m0", m0)
    if m < 1:
        raise InvalidParameter("m", m, "m >= 1")
    if m0 < m:
        raise InvalidParameter("m0", m0, f"m <= m0 (m = {m})")
    if m0 > n:
        raise InvalidParameter("m0", m0, f"m0 <= n (n = {n})")


def check_watts_strogatz(n: Any, k: Any, beta: Any) -> None:
    check_vertex_count(n)
    _require_int("k", k)
    if k <= 0 or k % 2 != 0:
        raise InvalidParameter("k", k, "k even and k > 0")
    if k >= n:
        raise InvalidParameter("k", k, f"k < n (n = {n})")
    check_probability(beta, name="beta")


def check_chunks(chunks: Any) -> None:
    _require_int("chunks", chunks)
    if chunks < 1:
        raise InvalidParameter("chunks", chunks, "chunks >= 1")
