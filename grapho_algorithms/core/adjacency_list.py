"""
Adjacency-list graph store.

Each known node ID maps to the list of its outgoing edges, kept in
insertion order. The node arena grows on demand, so sparse or large ID
spaces need no pre-sizing.
"""

import logging
from typing import Dict, List

from .graph import Edge, GraphStore, NodeRef, Node

__all__ = ["AdjacencyList"]

logger = logging.getLogger(__name__)


class AdjacencyList(GraphStore):
    """
    Graph store backed by a mapping from node ID to its outgoing edges.
    """

    def __init__(self, directed=True, node_count=0, edges=None):
        """
        Initialize an AdjacencyList.

        Parameters
        ----------
        directed : bool, optional
            Whether the graph is directed
        node_count : int, optional
            Number of node IDs to reserve up front
        edges : iterable of tuple, optional
            (from_id, to_id, weight) triples to load
        """
        super().__init__(directed=directed)
        self._adjacency: Dict[int, List[Edge]] = {}
        self._nodes = [None] * node_count
        if edges is not None:
            self._load(edges)

    def add_node(self, node_id):
        """
        Add a node, growing the arena if the ID is beyond its end.

        Does nothing if the node already exists.

        Parameters
        ----------
        node_id : int
            ID of the node
        """
        self._check_new_id(node_id)
        node_id = int(node_id)
        if node_id >= len(self._nodes):
            self._nodes.extend([None] * (node_id + 1 - len(self._nodes)))
        if self._nodes[node_id] is None:
            self._nodes[node_id] = Node(node_id)
            self._adjacency[node_id] = []

    def add_edge(self, from_id, to_id, weight):
        """
        Connect two existing nodes.

        Parameters
        ----------
        from_id : int
            ID of the start node
        to_id : int
            ID of the end node
        weight : int or float
            Weight of the edge
        """
        from_id = self.node(from_id).id
        to_id = self.node(to_id).id
        self._adjacency[from_id].append(Edge(from_id, to_id, weight))
        if not self._directed and from_id != to_id:
            self._adjacency[to_id].append(Edge(to_id, from_id, weight))

    def remove_edge(self, from_id, to_id):
        if from_id in self._adjacency:
            self._adjacency[from_id] = [e for e in self._adjacency[from_id] if e.end != to_id]
        if not self._directed and to_id in self._adjacency:
            self._adjacency[to_id] = [e for e in self._adjacency[to_id] if e.end != from_id]

    def remove_node(self, node_id):
        """
        Remove a node together with every edge that starts or ends at it.

        Parameters
        ----------
        node_id : int
            ID of the node

        Raises
        ------
        InvalidReferenceError
            If the node does not exist
        """
        node_id = self.node(node_id).id
        if not self._directed:
            for edge in list(self._adjacency[node_id]):
                self.remove_edge(edge.end, node_id)
        else:
            for other_id, edges in self._adjacency.items():
                if other_id != node_id:
                    self._adjacency[other_id] = [e for e in edges if e.end != node_id]
        del self._adjacency[node_id]
        self._nodes[node_id] = None
        logger.debug("Removed node %d", node_id)

    def adjacent(self, node: NodeRef) -> List[Edge]:
        """
        Get the outgoing edges of a node, in insertion order.

        Parameters
        ----------
        node : Node or int
            Node or node ID

        Returns
        -------
        list of Edge
            Outgoing edges

        Raises
        ------
        InvalidReferenceError
            If the node is unknown to this store
        """
        n = self.resolve(node)
        return list(self._adjacency[n.id])

    def has_edge(self, from_id, to_id):
        return any(e.end == to_id for e in self._adjacency.get(from_id, ()))

    def in_degree(self, node: NodeRef):
        n = self.resolve(node)
        return sum(1 for edges in self._adjacency.values() for e in edges if e.end == n.id)

    def out_degree(self, node: NodeRef):
        return len(self._adjacency[self.resolve(node).id])
