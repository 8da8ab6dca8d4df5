"""
Adjacency-matrix graph store.

A fixed V x V pair of numpy arrays holds the edge weights and a presence
mask, so checking for an edge is O(1) and listing the neighbors of a node
is a scan of one row. The node count must be known up front and nodes
cannot be removed.
"""

import numpy as np
from typing import List

from .errors import NodeOutOfRangeError
from .graph import Edge, GraphStore, NodeRef, Node

__all__ = ["AdjacencyMatrix"]


class AdjacencyMatrix(GraphStore):
    """
    Graph store backed by a dense matrix of optional edges.
    """

    def __init__(self, node_count, edges=None, directed=True, dtype=None):
        """
        Initialize an AdjacencyMatrix.

        Parameters
        ----------
        node_count : int
            Number of node IDs the matrix can hold
        edges : iterable of tuple, optional
            (from_id, to_id, weight) triples to load
        directed : bool, optional
            Whether the graph is directed
        dtype : type, optional
            numpy dtype of the weight matrix; by default weights are kept
            as the Python numbers they were added as
        """
        super().__init__(directed=directed)
        self._nodes = [None] * node_count
        self._weights = np.zeros((node_count, node_count), dtype=object if dtype is None else dtype)
        self._present = np.zeros((node_count, node_count), dtype=bool)
        if edges is not None:
            self._load(edges)

    def add_node(self, node_id):
        """
        Add a node; the ID must fit into the preallocated matrix.

        Parameters
        ----------
        node_id : int
            ID of the node

        Raises
        ------
        NodeOutOfRangeError
            If node_id is not smaller than the node count
        """
        self._check_new_id(node_id)
        node_id = int(node_id)
        if node_id >= len(self._nodes):
            raise NodeOutOfRangeError(node_id, len(self._nodes))
        if self._nodes[node_id] is None:
            self._nodes[node_id] = Node(node_id)

    def add_edge(self, from_id, to_id, weight):
        from_id = self.node(from_id).id
        to_id = self.node(to_id).id
        self._weights[from_id, to_id] = weight
        self._present[from_id, to_id] = True
        if not self._directed:
            self._weights[to_id, from_id] = weight
            self._present[to_id, from_id] = True

    def remove_edge(self, from_id, to_id):
        if from_id not in self or to_id not in self:
            return
        self._present[from_id, to_id] = False
        if not self._directed:
            self._present[to_id, from_id] = False

    def _edge(self, i, j):
        weight = self._weights[i, j]
        return Edge(i, j, weight.item() if isinstance(weight, np.generic) else weight)

    def adjacent(self, node: NodeRef) -> List[Edge]:
        """
        Get the outgoing edges of a node, by ascending destination ID.

        Parameters
        ----------
        node : Node or int
            Node or node ID

        Returns
        -------
        list of Edge
            Outgoing edges; empty cells are skipped

        Raises
        ------
        InvalidReferenceError
            If the node is unknown to this store
        """
        i = self.resolve(node).id
        return [self._edge(i, int(j)) for j in np.flatnonzero(self._present[i])]

    def has_edge(self, from_id, to_id):
        if from_id not in self or to_id not in self:
            return False
        return bool(self._present[from_id, to_id])

    def in_degree(self, node: NodeRef):
        return int(np.count_nonzero(self._present[:, self.resolve(node).id]))

    def out_degree(self, node: NodeRef):
        return int(np.count_nonzero(self._present[self.resolve(node).id]))
