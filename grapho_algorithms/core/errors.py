"""
Error types raised by graph stores and algorithms.

Every error derives from GraphError and carries an ErrorKind tag so callers
can tell "bad input" apart from "the graph is cyclic". Callers that prefer
an explicit result value over exceptions can wrap any call with attempt().
"""

from enum import Enum
from typing import Any, Callable, Optional

__all__ = [
    "ErrorKind", "GraphError", "InvalidReferenceError", "PreconditionError",
    "NegativeEdgeError", "NodeOutOfRangeError", "CycleError", "NegativeCycleError",
    "Result", "attempt",
]


class ErrorKind(Enum):
    """Kinds of failure a graph operation can report."""

    INVALID_REFERENCE = "invalid_reference"
    PRECONDITION_VIOLATION = "precondition_violation"
    STRUCTURAL_CYCLE = "structural_cycle"


class GraphError(Exception):
    """Base class for all errors raised by grapho_algorithms."""

    kind = None


class InvalidReferenceError(GraphError, LookupError):
    """A node ID or node is unknown to the store it was used with."""

    kind = ErrorKind.INVALID_REFERENCE


class PreconditionError(GraphError, ValueError):
    """An algorithm or operation was applied to a graph of the wrong shape."""

    kind = ErrorKind.PRECONDITION_VIOLATION


class NegativeEdgeError(PreconditionError):
    """Dijkstra reached an edge with a negative weight."""

    def __init__(self, edge):
        super().__init__(f"Negative edge weight - {edge.weight} on edge ({edge.start}, {edge.end})")
        self.edge = edge


class NodeOutOfRangeError(PreconditionError, IndexError):
    """A node ID does not fit into a preallocated store."""

    def __init__(self, node_id, capacity):
        super().__init__(f"Node ID {node_id} out of range for a store of size {capacity}")
        self.node_id = node_id
        self.capacity = capacity


class CycleError(GraphError):
    """The graph contains a cycle the requested algorithm cannot handle."""

    kind = ErrorKind.STRUCTURAL_CYCLE


class NegativeCycleError(CycleError):
    """The graph contains a negative-weight cycle."""
    pass


class Result:
    """
    Outcome of a graph operation: either a value or a GraphError.

    Parameters
    ----------
    value : object, optional
        Value returned by the operation
    error : GraphError, optional
        Error raised by the operation
    """

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self):
        """Return the value, re-raising the captured error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return f"Result(value={self.value!r})"
        return f"Result(error={self.error!r}, kind={self.kind})"


def attempt(func: Callable[..., Any], *args, **kwargs) -> Result:
    """
    Call func and capture its outcome as a Result.

    Only GraphError is captured; any other exception propagates.

    Parameters
    ----------
    func : callable
        Store method or algorithm function to call
    *args, **kwargs
        Arguments forwarded to func

    Returns
    -------
    Result
        The value on success, otherwise the error and its kind
    """
    try:
        return Result(value=func(*args, **kwargs))
    except GraphError as e:
        return Result(error=e)
