"""
Shortest-path algorithms: Dijkstra, Bellman-Ford and Floyd-Warshall.

Single-source algorithms leave the tentative weights in the store's nodes
and return the destination's distance, INFINITY when it cannot be reached.
Relaxation accepts equal candidates (``<=``), so among equally short paths
the predecessor discovered last wins.
"""

import heapq
import itertools
import logging
from typing import Dict, List, Optional

import numpy as np

from ..core.errors import CycleError, NegativeCycleError, NegativeEdgeError
from ..core.graph import INFINITY, Edge, GraphStore, NodeState

logger = logging.getLogger(__name__)

__all__ = [
    "dijkstra", "dijkstra_distances", "bellman_ford", "floyd_warshall",
    "has_negative_cycle", "reconstruct_path",
]


def reconstruct_path(predecessors: Dict[int, Optional[int]], source: int, destination: int) -> List[int]:
    """
    Follow predecessor links back from destination to source.

    Parameters
    ----------
    predecessors : dict
        Maps each reached node ID to the ID it was reached from; the source
        maps to None
    source : int
        ID of the source node
    destination : int
        ID of the destination node

    Returns
    -------
    list of int
        IDs from source to destination inclusive, empty if the destination
        was never reached
    """
    if destination not in predecessors:
        return []

    path = [destination]
    current = destination
    while current != source:
        current = predecessors[current]
        if current is None or len(path) > len(predecessors):
            raise CycleError(f"Predecessor chain of node {destination} does not lead back to {source}")
        path.append(current)

    path.reverse()
    return path


def _dijkstra(store: GraphStore, source):
    store.reset()
    start = store.resolve(source)
    start.weight = 0
    predecessors = {start.id: None}

    # Entries are (weight, insertion order, node ID); the counter keeps
    # equal weights in FIFO order and stops heapq from comparing IDs.
    counter = itertools.count()
    heap = [(start.weight, next(counter), start.id)]

    while heap:
        _, _, node_id = heapq.heappop(heap)
        top = store.node(node_id)
        if top.state == NodeState.VISITED:
            continue
        top.state = NodeState.VISITED

        for edge in store.adjacent(top):
            if edge.weight < 0:
                raise NegativeEdgeError(edge)
            neighbor = store.node(edge.end)
            if neighbor.state == NodeState.VISITED:
                continue
            candidate = top.weight + edge.weight
            if candidate <= neighbor.weight:
                neighbor.weight = candidate
                predecessors[neighbor.id] = top.id
                heapq.heappush(heap, (candidate, next(counter), neighbor.id))

    return start, predecessors


def dijkstra(store: GraphStore, source, destination, return_path: bool = False):
    """
    Find the shortest distance between two nodes when no edge is negative.

    Parameters
    ----------
    store : GraphStore
        Graph to search
    source : Node or int
        Start node
    destination : Node or int
        End node
    return_path : bool, optional
        Whether to also return the path

    Returns
    -------
    float or tuple
        The distance (INFINITY if unreachable), or (distance, path) when
        return_path is set

    Raises
    ------
    NegativeEdgeError
        If the search reaches an edge with a negative weight
    """
    start, predecessors = _dijkstra(store, source)
    dest = store.resolve(destination)
    logger.debug("Dijkstra %d -> %d: %s", start.id, dest.id, dest.weight)

    if return_path:
        return dest.weight, reconstruct_path(predecessors, start.id, dest.id)
    return dest.weight


def dijkstra_distances(store: GraphStore, source) -> Dict[int, float]:
    """
    Shortest distances from a source to every node of the store.

    Parameters
    ----------
    store : GraphStore
        Graph to search
    source : Node or int
        Start node

    Returns
    -------
    dict
        Node ID to distance, INFINITY for unreachable nodes
    """
    _dijkstra(store, source)
    return {n.id: n.weight for n in store.nodes()}


def _is_ancestor(predecessors, candidate, node_id):
    # Whether candidate lies on the predecessor chain of node_id.
    current = node_id
    for _ in range(len(predecessors)):
        if current is None:
            return False
        if current == candidate:
            return True
        current = predecessors.get(current)
    return True


def _relax(store: GraphStore, edges: List[Edge], predecessors: Dict[int, Optional[int]]):
    for edge in edges:
        u = store.node(edge.start)
        if not u.reached:
            continue
        v = store.node(edge.end)
        candidate = u.weight + edge.weight
        if candidate < v.weight:
            v.weight = candidate
        elif candidate > v.weight or _is_ancestor(predecessors, v.id, u.id):
            # Ties move the predecessor unless that would close a loop.
            continue
        # Roots (the source, or every node when there is no source) keep None.
        if predecessors.get(v.id, u.id) is not None:
            predecessors[v.id] = u.id


def _improvable_edge(store: GraphStore, edges: List[Edge]) -> Optional[Edge]:
    for edge in edges:
        u = store.node(edge.start)
        if u.reached and u.weight + edge.weight < store.node(edge.end).weight:
            return edge
    return None


def bellman_ford(store: GraphStore, source, destination, return_path: bool = False):
    """
    Find the shortest distance between two nodes, allowing negative edges.

    Runs exactly size() - 1 relaxation passes over every edge, then one
    more pass to detect negative-weight cycles.

    Parameters
    ----------
    store : GraphStore
        Graph to search
    source : Node or int
        Start node
    destination : Node or int
        End node
    return_path : bool, optional
        Whether to also return the path

    Returns
    -------
    float or tuple
        The distance (INFINITY if unreachable), or (distance, path) when
        return_path is set

    Raises
    ------
    NegativeCycleError
        If an edge can still be relaxed after the last pass
    """
    store.reset()
    start = store.resolve(source)
    dest = store.resolve(destination)
    start.weight = 0
    predecessors = {start.id: None}
    edges = list(store.edges())

    for _ in range(store.size() - 1):
        _relax(store, edges, predecessors)
    logger.debug("Bellman-Ford ran %d passes over %d edges", max(store.size() - 1, 0), len(edges))

    edge = _improvable_edge(store, edges)
    if edge is not None:
        raise NegativeCycleError(f"Graph contains negative-weight cycle through edge ({edge.start}, {edge.end})")

    if return_path:
        return dest.weight, reconstruct_path(predecessors, start.id, dest.id)
    return dest.weight


def has_negative_cycle(store: GraphStore) -> bool:
    """
    Whether any negative-weight cycle exists anywhere in the graph.

    Every node starts at distance 0, as if a virtual source were connected
    to all of them, so cycles unreachable from any particular node count too.
    """
    store.reset()
    for n in store.nodes():
        n.weight = 0
    edges = list(store.edges())
    predecessors = {n.id: None for n in store.nodes()}
    for _ in range(len(store)):
        _relax(store, edges, predecessors)
    return _improvable_edge(store, edges) is not None


def floyd_warshall(store: GraphStore) -> np.ndarray:
    """
    All-pairs shortest distances.

    Parameters
    ----------
    store : GraphStore
        Graph to search

    Returns
    -------
    numpy.ndarray
        size() x size() float matrix; entry [i, j] is the distance from i to
        j, INFINITY where no path exists

    Raises
    ------
    NegativeCycleError
        If the graph contains a negative-weight cycle
    """
    store.reset()
    n = store.size()
    ids = store.node_ids()
    dist = np.full((n, n), INFINITY, dtype=float)
    dist[ids, ids] = 0.0

    edges = list(store.edges())
    for edge in edges:
        if edge.weight < dist[edge.start, edge.end]:
            dist[edge.start, edge.end] = edge.weight

    for k in range(n):
        dist = np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :])

    for edge in edges:
        if np.any(dist[:, edge.start] + edge.weight < dist[:, edge.end]):
            raise NegativeCycleError(f"Graph contains negative-weight cycle through edge ({edge.start}, {edge.end})")
    if ids and np.any(dist[ids, ids] < 0):
        raise NegativeCycleError("Graph contains negative-weight cycle")

    return dist
