"""
Topological sorting and cycle detection for directed graphs.
"""

import logging
from collections import deque
from typing import List

from ..core.errors import CycleError, PreconditionError
from ..core.graph import GraphStore, NodeState

logger = logging.getLogger(__name__)

__all__ = ["topological_sort", "has_cycle"]


def _kahn(store: GraphStore) -> List[int]:
    store.reset()

    # In-degrees are computed once up front; in_degree scans the whole store.
    degrees = {n.id: store.in_degree(n) for n in store.nodes()}
    queue = deque(store.node(node_id) for node_id, degree in degrees.items() if degree == 0)
    for n in queue:
        n.state = NodeState.PENDING

    seen_edges = set()
    order = []
    while queue:
        current = queue.popleft()
        current.state = NodeState.VISITED
        order.append(current.id)

        for position, edge in enumerate(store.adjacent(current)):
            # Never repeats, since a node is dequeued once; cycles show up as the
            # incomplete order checked after the loop.
            key = (edge.start, position)
            if key in seen_edges:
                raise CycleError("Graph contains cycle.")
            seen_edges.add(key)

            degrees[edge.end] -= 1
            if degrees[edge.end] == 0:
                neighbor = store.node(edge.end)
                neighbor.state = NodeState.PENDING
                queue.append(neighbor)

    if len(order) != len(degrees):
        logger.debug("Ordered %d of %d nodes before running out of sources", len(order), len(degrees))
        raise CycleError("Graph contains cycle.")
    return order


def topological_sort(store: GraphStore) -> List[int]:
    """
    Order the nodes of a directed graph so every edge points forward.

    Uses Kahn's algorithm: nodes without incoming edges are emitted first,
    in ascending ID order, and removing them exposes the next ones.

    Parameters
    ----------
    store : GraphStore
        Directed graph to sort

    Returns
    -------
    list of int
        Node IDs in topological order

    Raises
    ------
    PreconditionError
        If the graph is undirected
    CycleError
        If the graph contains a cycle
    """
    if not store.is_directed():
        raise PreconditionError("Graph must be directed.")
    return _kahn(store)


def has_cycle(store: GraphStore) -> bool:
    """
    Whether the graph, read as directed, contains a cycle.

    An undirected store keeps every edge in both directions, so any edge
    in it forms a cycle.
    """
    try:
        _kahn(store)
    except CycleError:
        return True
    return False
