"""
Tunables shared by the container and the generators.

Edit here if you want different settings; nothing is read from the
environment.
"""

# ------------------------------------------------------------------
# Index limits
# ------------------------------------------------------------------

MAX_VERTICES = 2**32 - 1     # vertex indices are uint32
MAX_DRAW = 2**63 - 1         # largest exclusive bound for a single integer draw
MAX_SEED = 2**64             # explicit seeds live in [0, 2**64)

# ------------------------------------------------------------------
# Graph backend selection
# ------------------------------------------------------------------

DENSE_MAX_VERTICES = 2048    # never allocate an n x n matrix above this
DENSE_MIN_DENSITY = 0.25     # expected edges / possible pairs

# ------------------------------------------------------------------
# Sampling
# ------------------------------------------------------------------

GNM_SHUFFLE_FRACTION = 0.5   # above this fill ratio G(n, m) shuffles instead of rejecting
RETRY_FACTOR = 64            # rejection loops give up after RETRY_FACTOR * max(n, 16) draws
DEFAULT_CHUNKS = 4           # partitions for parallel G(n, p)

LOG_FORMAT = "%(asctime)-20s %(name)-24s %(levelname)-8s: %(message)s"


def retry_limit(n: int) -> int:
    return RETRY_FACTOR * max(n, 16)
