"""
Functions for loading graphs from edge lists in various formats.
"""

import logging
import os
import sys

import pandas as pd

from ..core.adjacency_list import AdjacencyList
from ..core.adjacency_matrix import AdjacencyMatrix

logger = logging.getLogger(__name__)

__all__ = [
    "REPRESENTATIONS", "create_store", "parse_edge_list", "read_edge_list",
    "load_graph", "graph_from_dataframe", "load_edge_table",
]

REPRESENTATIONS = {
    'list': AdjacencyList,
    'matrix': AdjacencyMatrix,
}


def create_store(representation, node_count, edges, directed=True):
    """
    Build a graph store of the requested representation.

    Parameters
    ----------
    representation : str
        'list' or 'matrix'
    node_count : int
        Number of node IDs to reserve
    edges : iterable of tuple
        (from_id, to_id, weight) triples
    directed : bool, optional
        Whether the graph is directed

    Returns
    -------
    GraphStore
        The populated store
    """
    if representation not in REPRESENTATIONS:
        raise ValueError(f"Unsupported representation: {representation}")
    return REPRESENTATIONS[representation].from_edges(node_count, edges, directed=directed)


def parse_edge_list(text, weight_type=float):
    """
    Parse the whitespace-delimited edge-list format.

    The first two tokens are the node count and the edge count; the edge
    count is informational only. Every following triple is
    ``from to weight``, read until the input runs out. A trailing
    incomplete triple is ignored.

    Parameters
    ----------
    text : str
        Contents of an edge-list file
    weight_type : type, optional
        Numeric type of the weights

    Returns
    -------
    tuple
        (node_count, edge_count, edges) where edges is a list of
        (from_id, to_id, weight) triples
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("Edge list must start with the node count and the edge count")

    try:
        node_count, edge_count = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise ValueError(f"Invalid edge list header: {tokens[0]} {tokens[1]}")

    edges = []
    body = tokens[2:]
    for i in range(0, len(body) - 2, 3):
        try:
            edges.append((int(body[i]), int(body[i + 1]), weight_type(body[i + 2])))
        except ValueError:
            raise ValueError(f"Invalid edge: {' '.join(body[i:i + 3])}")

    if len(body) % 3:
        logger.warning("Ignoring %d trailing token(s) of an incomplete edge", len(body) % 3)
    if edge_count != len(edges):
        logger.info("Header announces %d edges, read %d", edge_count, len(edges))

    return node_count, edge_count, edges


def read_edge_list(stream, weight_type=float):
    """Parse an edge list from an open text stream; see parse_edge_list."""
    return parse_edge_list(stream.read(), weight_type=weight_type)


def load_graph(filepath=None, stream=None, representation='list', directed=True, weight_type=float):
    """
    Load a graph from an edge-list file, a stream or standard input.

    Parameters
    ----------
    filepath : str, optional
        Path to the edge-list file
    stream : file-like, optional
        Open text stream, used when no filepath is given
    representation : str, optional
        'list' or 'matrix'
    directed : bool, optional
        Whether the graph is directed
    weight_type : type, optional
        Numeric type of the weights

    Returns
    -------
    GraphStore
        The loaded graph
    """
    if filepath is not None:
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")
        with open(filepath, 'r') as f:
            node_count, _, edges = read_edge_list(f, weight_type=weight_type)
    else:
        node_count, _, edges = read_edge_list(stream if stream is not None else sys.stdin,
                                              weight_type=weight_type)

    store = create_store(representation, node_count, edges, directed=directed)
    logger.info("Loaded %s graph with %d nodes and %d edges", representation, len(store), len(edges))
    return store


def graph_from_dataframe(frame, node_count=None, representation='list', directed=True,
                         source='source', target='target', weight='weight'):
    """
    Build a graph from a table with one edge per row.

    Parameters
    ----------
    frame : pandas.DataFrame
        Edge table
    node_count : int, optional
        Number of node IDs to reserve (default is the largest ID plus one)
    representation : str, optional
        'list' or 'matrix'
    directed : bool, optional
        Whether the graph is directed
    source, target, weight : str, optional
        Column names

    Returns
    -------
    GraphStore
        The populated store
    """
    for col in (source, target):
        if col not in frame.columns:
            raise ValueError(f"Required column '{col}' not found in DataFrame")

    weights = frame[weight] if weight in frame.columns else pd.Series(0.0, index=frame.index)
    edges = [(int(s), int(t), w.item() if hasattr(w, 'item') else w)
             for s, t, w in zip(frame[source], frame[target], weights)]

    if node_count is None:
        node_count = int(max(frame[source].max(), frame[target].max())) + 1 if len(frame) else 0

    return create_store(representation, node_count, edges, directed=directed)


def load_edge_table(filepath, **kwargs):
    """
    Load a graph from a CSV edge table.

    Parameters
    ----------
    filepath : str
        Path to a CSV file with source, target and weight columns
    **kwargs
        Passed on to graph_from_dataframe

    Returns
    -------
    GraphStore
        The loaded graph
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")
    try:
        frame = pd.read_csv(filepath)
    except Exception as e:
        raise ValueError(f"Error reading CSV file: {e}")
    return graph_from_dataframe(frame, **kwargs)
