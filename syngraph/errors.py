"""
Error classes for graph generation.

Every error derives from GraphError and from the closest builtin, so
callers can catch either ``GraphError`` or e.g. ``ValueError``.
"""

from typing import Any


class GraphError(Exception):
    """Base class for all syngraph errors."""
    pass


class InvalidParameter(GraphError, ValueError):
    """A generator or container argument violates its constraint."""

    def __init__(self, name: str, value: Any, constraint: str):
        self.name = name
        self.value = value
        self.constraint = constraint
        super().__init__(f"invalid parameter `{name}` = {value!r}: must satisfy {constraint}")


class OutOfRange(GraphError, IndexError):
    """An edge endpoint lies outside [0, n)."""

    def __init__(self, vertex: int, n: int):
        self.vertex = vertex
        self.n = n
        super().__init__(f"vertex {vertex} out of range [0, {n})")


class InvalidSize(GraphError, OverflowError):
    """A size does not fit the index type."""

    def __init__(self, name: str, value: int, limit: int):
        self.name = name
        self.value = value
        self.limit = limit
        super().__init__(f"`{name}` = {value} exceeds the representable limit {limit}")


class EdgeRejected(GraphError, ValueError):
    """Raised by a strict Graph for a self-loop or duplicate edge."""

    def __init__(self, u: int, v: int, reason: str):
        self.u = u
        self.v = v
        self.reason = reason
        super().__init__(f"edge ({u}, {v}) rejected: {reason}")


class FrozenGraph(GraphError, RuntimeError):
    """Mutation attempted on a frozen Graph."""

    def __init__(self):
        super().__init__("frozen graph can't be modified")


class RetryLimitExceeded(GraphError, RuntimeError):
    """A rejection-sampling loop hit its retry cap."""

    def __init__(self, what: str, attempts: int):
        self.what = what
        self.attempts = attempts
        super().__init__(f"gave up {what} after {attempts} attempts")
