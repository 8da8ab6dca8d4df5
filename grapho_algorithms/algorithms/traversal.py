"""
Graph traversal algorithms: depth-first and breadth-first search.

Every traversal resets the store first, marks the nodes it reaches as
VISITED and returns the IDs in visitation order. Nodes that cannot be
reached from the source are left NOT_VISITED.
"""

import logging
from collections import deque
from typing import List

from ..core.errors import PreconditionError
from ..core.graph import GraphStore, NodeState
from ..graph_config import GRAPH_CONFIG

logger = logging.getLogger(__name__)

__all__ = ["dfs", "dfs_recursive", "dfs_iterative", "bfs"]


def dfs_recursive(store: GraphStore, source, max_depth: int = None) -> List[int]:
    """
    Depth-first search using recursion.

    Parameters
    ----------
    store : GraphStore
        Graph to traverse
    source : Node or int
        Start node
    max_depth : int, optional
        Deepest recursion allowed; defaults to the configured
        traversal.max_recursion_depth

    Returns
    -------
    list of int
        Node IDs in visitation order

    Raises
    ------
    PreconditionError
        If a path from the source is longer than max_depth
    """
    if max_depth is None:
        max_depth = GRAPH_CONFIG['traversal']['max_recursion_depth']

    store.reset()
    start = store.resolve(source)
    order = []

    def visit(node, depth):
        if depth > max_depth:
            raise PreconditionError(
                f"Recursive DFS exceeded depth {max_depth}; use dfs_iterative for deep graphs")
        node.state = NodeState.VISITED
        order.append(node.id)
        for edge in store.adjacent(node):
            neighbor = store.node(edge.end)
            if neighbor.state == NodeState.NOT_VISITED:
                visit(neighbor, depth + 1)

    visit(start, 0)
    logger.debug("Recursive DFS from %d visited %d nodes", start.id, len(order))
    return order


def dfs_iterative(store: GraphStore, source) -> List[int]:
    """
    Depth-first search using an explicit stack.

    Neighbors are pushed in adjacency order, so the last neighbor pushed is
    the first one visited.

    Parameters
    ----------
    store : GraphStore
        Graph to traverse
    source : Node or int
        Start node

    Returns
    -------
    list of int
        Node IDs in visitation order
    """
    store.reset()
    start = store.resolve(source)
    order = []
    stack = [start]

    while stack:
        top = stack.pop()
        # The stack may hold duplicates; only the first pop counts.
        if top.state != NodeState.NOT_VISITED:
            continue
        top.state = NodeState.VISITED
        order.append(top.id)
        for edge in store.adjacent(top):
            neighbor = store.node(edge.end)
            if neighbor.state == NodeState.NOT_VISITED:
                stack.append(neighbor)

    logger.debug("Iterative DFS from %d visited %d nodes", start.id, len(order))
    return order


def dfs(store: GraphStore, source, recursive: bool = False) -> List[int]:
    """Depth-first search; see dfs_iterative and dfs_recursive."""
    if recursive:
        return dfs_recursive(store, source)
    return dfs_iterative(store, source)


def bfs(store: GraphStore, source) -> List[int]:
    """
    Breadth-first search.

    Nodes turn PENDING when queued and VISITED when dequeued, so no node is
    queued twice.

    Parameters
    ----------
    store : GraphStore
        Graph to traverse
    source : Node or int
        Start node

    Returns
    -------
    list of int
        Node IDs in visitation order
    """
    store.reset()
    start = store.resolve(source)
    order = []
    start.state = NodeState.PENDING
    queue = deque([start])

    while queue:
        front = queue.popleft()
        front.state = NodeState.VISITED
        order.append(front.id)
        for edge in store.adjacent(front):
            neighbor = store.node(edge.end)
            if neighbor.state == NodeState.NOT_VISITED:
                neighbor.state = NodeState.PENDING
                queue.append(neighbor)

    logger.debug("BFS from %d visited %d nodes", start.id, len(order))
    return order
