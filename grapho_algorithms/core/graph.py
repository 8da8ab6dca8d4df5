"""
Graph data structures shared by every storage representation.

This module provides the node and edge entities and the GraphStore
base class that the adjacency-list and adjacency-matrix stores implement.
Algorithms are written against GraphStore only, so any conforming store
works with any algorithm.
"""

import math
import numbers
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Tuple, Union

from .errors import InvalidReferenceError, PreconditionError

__all__ = ["INFINITY", "NodeState", "Node", "Edge", "GraphStore"]

# Weight of a node no algorithm has reached yet. Being the IEEE infinity it
# can never collide with a finite edge weight or distance.
INFINITY = math.inf


class NodeState(Enum):
    """Traversal state of a node."""

    NOT_VISITED = 0
    PENDING = 1
    VISITED = 2


class Node:
    """
    A vertex of a graph with an integer ID, a tentative weight and a traversal state.
    """

    def __init__(self, node_id):
        """
        Initialize a Node.

        Parameters
        ----------
        node_id : int
            Non-negative identifier of the node, unique within its store
        """
        self.id = node_id
        self.weight = INFINITY
        self.state = NodeState.NOT_VISITED

    @property
    def reached(self):
        return self.weight != INFINITY

    def reset(self):
        self.state = NodeState.NOT_VISITED
        self.weight = INFINITY

    def __repr__(self):
        return f"Node(id={self.id}, weight={self.weight}, state={self.state.name})"


class Edge(NamedTuple):
    """A directed, weighted arc between two node IDs of the same store."""

    start: int
    end: int
    weight: float = 0


EdgeTriple = Tuple[int, int, float]
NodeRef = Union[Node, int]


class GraphStore(ABC):
    """
    Owning container of all nodes and edges of one graph.

    Nodes live in an arena indexed by ID. Edges are value tuples of node IDs,
    checked against the arena whenever they are read or written.
    """

    def __init__(self, directed=True):
        """
        Initialize an empty store.

        Parameters
        ----------
        directed : bool, optional
            Whether edges are one-way; undirected stores keep a mirror edge
            for every edge added
        """
        self._directed = directed
        self._nodes: List[Union[Node, None]] = []

    @classmethod
    def from_edges(cls, node_count, edges: Iterable[EdgeTriple], directed=True):
        """
        Build a store from a node count and (from_id, to_id, weight) triples.

        Parameters
        ----------
        node_count : int
            Number of node IDs to reserve
        edges : iterable of tuple
            Edge triples; every ID mentioned becomes a node
        directed : bool, optional
            Whether the graph is directed

        Returns
        -------
        GraphStore
            A new store of the class this is called on
        """
        return cls(node_count=node_count, edges=edges, directed=directed)

    def _load(self, edges):
        for from_id, to_id, weight in edges:
            self.add_node(from_id)
            self.add_node(to_id)
            self.add_edge(from_id, to_id, weight)

    # -----------------
    # ACCESSORS
    # -----------------

    def size(self):
        """Length of the node ID space (highest usable ID plus one)."""
        return len(self._nodes)

    def is_directed(self):
        return self._directed

    def node(self, node_id) -> Node:
        """
        Get a node by ID.

        Parameters
        ----------
        node_id : int
            ID of the node

        Returns
        -------
        Node
            The node with the given ID

        Raises
        ------
        InvalidReferenceError
            If no node with this ID exists in the store
        """
        if isinstance(node_id, bool) or not isinstance(node_id, numbers.Integral):
            raise InvalidReferenceError(f"Invalid Node ID - {node_id!r}")
        node_id = int(node_id)
        if node_id < 0 or node_id >= len(self._nodes) or self._nodes[node_id] is None:
            raise InvalidReferenceError(f"Invalid Node ID - {node_id}")
        return self._nodes[node_id]

    def nodes(self) -> Iterator[Node]:
        """Iterate over the existing nodes in ascending ID order."""
        return (n for n in self._nodes if n is not None)

    def node_ids(self) -> List[int]:
        return [n.id for n in self.nodes()]

    def edges(self) -> Iterator[Edge]:
        """Iterate over every stored edge, by ascending start ID then adjacency order."""
        for n in self.nodes():
            yield from self.adjacent(n)

    def resolve(self, node: NodeRef) -> Node:
        # Accepts a Node or an ID; a Node must be the one this store owns.
        if isinstance(node, Node):
            owned = self.node(node.id)
            if owned is not node:
                raise InvalidReferenceError(f"Node {node.id} does not belong to this store")
            return owned
        return self.node(node)

    def _check_new_id(self, node_id):
        if isinstance(node_id, bool) or not isinstance(node_id, numbers.Integral):
            raise PreconditionError(f"Node IDs must be integers, got {node_id!r}")
        if node_id < 0:
            raise PreconditionError(f"Node IDs must be non-negative, got {node_id}")

    def __len__(self):
        return sum(1 for _ in self.nodes())

    def __contains__(self, node_id):
        try:
            self.node(node_id)
        except InvalidReferenceError:
            return False
        return True

    def reset(self):
        """Set every node to NOT_VISITED with weight INFINITY."""
        for n in self.nodes():
            n.reset()

    # -----------------
    # MUTATION AND QUERIES
    # -----------------

    @abstractmethod
    def add_node(self, node_id):
        """Create the node if it does not exist yet."""

    @abstractmethod
    def add_edge(self, from_id, to_id, weight):
        """Connect two existing nodes (and mirror the edge if undirected)."""

    @abstractmethod
    def remove_edge(self, from_id, to_id):
        """Remove the edge (and its mirror if undirected); no-op if absent."""

    @abstractmethod
    def adjacent(self, node: NodeRef) -> List[Edge]:
        """Outgoing edges of a node."""

    @abstractmethod
    def has_edge(self, from_id, to_id) -> bool:
        """Whether at least one from_id -> to_id edge exists."""

    @abstractmethod
    def in_degree(self, node: NodeRef) -> int:
        """Number of edges ending at a node."""

    @abstractmethod
    def out_degree(self, node: NodeRef) -> int:
        """Number of edges starting at a node."""

    def format(self, precision=None):
        """
        Render the graph one line per known node ID, ascending.

        Parameters
        ----------
        precision : int, optional
            Number of decimals for edge weights; weights are printed as-is
            when not given

        Returns
        -------
        str
            Lines of the form ``<id>:(<start>, <end>, <weight>)...``
        """
        def fmt(weight):
            return str(weight) if precision is None else f"{weight:.{precision}f}"

        lines = []
        for node_id in self.node_ids():
            edges = "".join(f"({e.start}, {e.end}, {fmt(e.weight)})" for e in self.adjacent(node_id))
            lines.append(f"{node_id}:{edges}")
        return "\n".join(lines)

    def __str__(self):
        return self.format()

    def __repr__(self):
        kind = "directed" if self._directed else "undirected"
        return f"{type(self).__name__}({kind}, nodes={len(self)}, size={self.size()})"
