import networkx as nx


class EulerCircuitError(nx.NetworkXException):
    """Base class for errors raised by this package."""


class InvalidGraph(EulerCircuitError, nx.NetworkXError):
    """The adjacency matrix or its textual description is malformed."""


class InvalidPrecondition(EulerCircuitError, nx.NetworkXUnfeasible):
    """An Euler circuit was requested for a graph that has none."""


class InternalInvariantViolation(EulerCircuitError, nx.NetworkXAlgorithmError):
    """The circuit search failed on a graph that satisfies Euler's theorem."""


class CapacityExceeded(EulerCircuitError, nx.NetworkXError):
    """More vertices were appended to a walk than it can hold."""
