"""
syngraph
========

Random graph generators on a sparse in-memory graph container.

Public API:

- generate_erdos_renyi          : G(n, p), skip-sampled
- generate_erdos_renyi_parallel : G(n, p) over independent pair-space slices
- generate_gnm                  : G(n, m), exactly m edges
- generate_barabasi_albert      : preferential attachment
- generate_watts_strogatz       : rewired ring lattice
- Graph                         : the container every generator returns
- NumpySource / SequenceSource  : randomness sources

All other modules in this package are considered internal implementation details.
"""

from .ba import generate_barabasi_albert
from .erdos import generate_erdos_renyi, generate_gnm
from .errors import (
    EdgeRejected,
    FrozenGraph,
    GraphError,
    InvalidParameter,
    InvalidSize,
    OutOfRange,
    RetryLimitExceeded,
)
from .graph import Graph
from .models import BarabasiAlbert, ErdosRenyiGnm, ErdosRenyiGnp, WattsStrogatz
from .parallel import generate_erdos_renyi_parallel
from .rng import NumpySource, RandomSource, SequenceSource, as_source
from .ws import generate_watts_strogatz

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "generate_erdos_renyi",
    "generate_erdos_renyi_parallel",
    "generate_gnm",
    "generate_barabasi_albert",
    "generate_watts_strogatz",
    "ErdosRenyiGnp",
    "ErdosRenyiGnm",
    "BarabasiAlbert",
    "WattsStrogatz",
    "RandomSource",
    "NumpySource",
    "SequenceSource",
    "as_source",
    "GraphError",
    "InvalidParameter",
    "OutOfRange",
    "InvalidSize",
    "EdgeRejected",
    "FrozenGraph",
    "RetryLimitExceeded",
]
