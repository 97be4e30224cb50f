"""
Randomness sources.

Generators never touch the ``random`` module or numpy's global state; they
draw only from a RandomSource handed to them. Two implementations:

    - NumpySource: numpy PCG64 stream built from a SeedSequence.
      Same seed + same call sequence gives the same draws.
    - SequenceSource: replays a fixed list of unit floats, for tests that
      need to steer an algorithm through a known path.
"""

import logging
from bisect import bisect_right
from numbers import Integral
from typing import Iterable, List, Optional, Protocol, Sequence, Union, runtime_checkable

import numpy as np

from .config import MAX_DRAW, MAX_SEED
from .errors import InvalidParameter, InvalidSize

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    def integers(self, k: int) -> int:
        """Uniform integer in [0, k)."""
        ...

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def weighted_index(self, cumulative: Sequence[float]) -> int:
        """Index i drawn with probability proportional to cumulative[i] - cumulative[i-1]."""
        ...

    def spawn(self, count: int) -> List["RandomSource"]:
        """Independent child sources, e.g. one per parallel worker."""
        ...


SeedLike = Union[None, int, RandomSource]


def _check_bound(k: int) -> None:
    if isinstance(k, bool) or not isinstance(k, Integral) or k < 1:
        raise InvalidParameter("k", k, "integer k >= 1")
    if k > MAX_DRAW:
        raise InvalidSize("k", k, MAX_DRAW)


def _check_table(cumulative: Sequence[float]) -> float:
    if len(cumulative) == 0:
        raise InvalidParameter("cumulative", cumulative, "a non-empty table")
    total = float(cumulative[-1])
    if not total > 0.0:
        raise InvalidParameter("cumulative", total, "a positive total weight")
    return total


class NumpySource:
    """
    RandomSource backed by ``numpy.random.Generator(PCG64)``.

    Args:
        seed: explicit seed in [0, 2**64), or None to draw one from OS
              entropy. The effective seed is kept in ``self.seed`` so an
              entropy-seeded run can be replayed.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            # fold OS entropy into one 64-bit value so it can be passed back in
            seed = int(np.random.SeedSequence().generate_state(1, np.uint64)[0])
        if isinstance(seed, bool) or not isinstance(seed, Integral):
            raise InvalidParameter("seed", seed, "an integer or None")
        if not (0 <= seed < MAX_SEED):
            raise InvalidParameter("seed", seed, "0 <= seed < 2**64")
        self._init_from_sequence(np.random.SeedSequence(int(seed)))

    @classmethod
    def _from_sequence(cls, sequence: np.random.SeedSequence) -> "NumpySource":
        source = cls.__new__(cls)
        source._init_from_sequence(sequence)
        return source

    def _init_from_sequence(self, sequence: np.random.SeedSequence) -> None:
        self._sequence = sequence
        self.seed = sequence.entropy
        self._generator = np.random.Generator(np.random.PCG64(sequence))

    def integers(self, k: int) -> int:
        _check_bound(k)
        return int(self._generator.integers(k))

    def random(self) -> float:
        return float(self._generator.random())

    def weighted_index(self, cumulative: Sequence[float]) -> int:
        table = np.asarray(cumulative, dtype=float)
        total = _check_table(table)
        x = self.random() * total
        index = int(np.searchsorted(table, x, side="right"))
        if index >= len(table):
            # u * total rounded up to total; take the last positive-weight slot
            index = int(np.searchsorted(table, total, side="left"))
        return index

    def spawn(self, count: int) -> List["NumpySource"]:
        return [NumpySource._from_sequence(child) for child in self._sequence.spawn(count)]

    def __repr__(self) -> str:
        return f"NumpySource(seed={self.seed})"


class SequenceSource:
    """
    Replays a fixed list of floats in [0, 1).

    ``integers(k)`` maps the next value u to floor(u * k), so a test can
    pick integer outcomes by choosing u. Children from ``spawn`` replay
    the same list from the start.
    """

    def __init__(self, values: Iterable[float]):
        self._values = [float(u) for u in values]
        for u in self._values:
            if not (0.0 <= u < 1.0):
                raise InvalidParameter("values", u, "every value in [0, 1)")
        self._position = 0

    @property
    def consumed(self) -> int:
        return self._position

    def random(self) -> float:
        if self._position >= len(self._values):
            raise RuntimeError(f"SequenceSource exhausted after {self._position} draws")
        u = self._values[self._position]
        self._position += 1
        return u

    def integers(self, k: int) -> int:
        _check_bound(k)
        return min(int(self.random() * k), k - 1)

    def weighted_index(self, cumulative: Sequence[float]) -> int:
        total = _check_table(cumulative)
        x = self.random() * total
        return min(bisect_right(list(cumulative), x), len(cumulative) - 1)

    def spawn(self, count: int) -> List["SequenceSource"]:
        return [SequenceSource(self._values) for _ in range(count)]


def as_source(seed: SeedLike = None) -> RandomSource:
    """Accept a seed (int or None) or an existing source."""
    if isinstance(seed, RandomSource):
        return seed
    source = NumpySource(seed)
    if seed is None:
        logger.debug("seeded from entropy: %d", source.seed)
    return source
