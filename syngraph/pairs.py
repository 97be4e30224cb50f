"""
Lexicographic enumeration of unordered vertex pairs.

Pairs (u, v) with u < v are numbered column by column:

    (0, 1) -> 0, (0, 2) -> 1, (1, 2) -> 2, (0, 3) -> 3, ...

so the index of (u, v) is v(v-1)/2 + u. Generators sample indices and
decode them here, which keeps every model on one enumeration.
"""

from math import isqrt
from typing import Tuple


def pair_count(n: int) -> int:
    return n * (n - 1) // 2


def pair_index(u: int, v: int) -> int:
    if u > v:
        u, v = v, u
    return v * (v - 1) // 2 + u


def index_to_pair(index: int) -> Tuple[int, int]:
    """Return the (u, v), u < v, at position ``index`` of the enumeration."""
    v = (1 + isqrt(1 + 8 * index)) // 2
    u = index - v * (v - 1) // 2
    return u, v
