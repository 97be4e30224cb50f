"""
Reusable random-graph models.

A model validates its parameters once, at construction, and can then be
sampled any number of times:

    model = ErdosRenyiGnp(1000, 0.01)
    source = NumpySource(7)
    graphs = [model.sample(source) for _ in range(10)]

Sampling repeatedly from one source gives a reproducible series of
independent graphs.
"""

from dataclasses import dataclass
from typing import Optional

from .ba import generate_barabasi_albert, seed_edge_count
from .erdos import generate_erdos_renyi, generate_gnm
from .graph import Graph
from .pairs import pair_count
from .rng import SeedLike
from .validate import check_barabasi_albert, check_gnm, check_gnp, check_watts_strogatz
from .ws import generate_watts_strogatz


@dataclass(frozen=True)
class ErdosRenyiGnp:
    n: int
    p: float

    def __post_init__(self):
        check_gnp(self.n, self.p)

    @property
    def expected_edges(self) -> float:
        return self.p * pair_count(self.n)

    def sample(self, source: SeedLike = None, *, frozen: bool = False) -> Graph:
        return generate_erdos_renyi(self.n, self.p, source, frozen=frozen)


@dataclass(frozen=True)
class ErdosRenyiGnm:
    n: int
    m: int

    def __post_init__(self):
        check_gnm(self.n, self.m)

    @property
    def expected_edges(self) -> int:
        return self.m

    def sample(self, source: SeedLike = None, *, frozen: bool = False) -> Graph:
        return generate_gnm(self.n, self.m, source, frozen=frozen)


@dataclass(frozen=True)
class BarabasiAlbert:
    n: int
    m: int
    m0: Optional[int] = None

    def __post_init__(self):
        if self.m0 is None:
            # frozen dataclass: bypass __setattr__ to fill the default
            object.__setattr__(self, "m0", self.m)
        check_barabasi_albert(self.n, self.m, self.m0)

    @property
    def expected_edges(self) -> int:
        return seed_edge_count(self.m0) + (self.n - self.m0) * self.m

    def sample(self, source: SeedLike = None, *, frozen: bool = False) -> Graph:
        return generate_barabasi_albert(self.n, self.m, self.m0, source, frozen=frozen)


@dataclass(frozen=True)
class WattsStrogatz:
    n: int
    k: int
    beta: float

    def __post_init__(self):
        check_watts_strogatz(self.n, self.k, self.beta)

    @property
    def expected_edges(self) -> int:
        return self.n * self.k // 2

    def sample(self, source: SeedLike = None, *, frozen: bool = False) -> Graph:
        return generate_watts_strogatz(self.n, self.k, self.beta, source, frozen=frozen)
