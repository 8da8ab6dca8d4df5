"""
Functions for rendering and exporting graphs and algorithm results.
"""

import os

import networkx as nx
import numpy as np
import pandas as pd

__all__ = [
    "format_graph", "format_path", "format_order", "format_distance",
    "to_dataframe", "distance_frame", "to_networkx", "export_edge_list",
]


def format_graph(store, precision=None):
    """
    Render a graph one line per known node ID.

    Parameters
    ----------
    store : GraphStore
        Graph to render
    precision : int, optional
        Number of decimals for edge weights

    Returns
    -------
    str
        Lines of the form ``<id>:(<start>, <end>, <weight>)...``
    """
    return store.format(precision=precision)


def format_path(path):
    """Render a path as ``(<id> -> <id> -> ... -> <id>)``."""
    return "(" + " -> ".join(str(node_id) for node_id in path) + ")"


def format_order(order):
    """Render a visitation or topological order as ``<id>, <id>, ...``."""
    return ", ".join(str(node_id) for node_id in order)


def format_distance(distance, precision=None):
    if precision is None or distance == np.inf:
        return str(distance)
    return f"{distance:.{precision}f}"


def to_dataframe(store):
    """
    Convert the edges of a graph to a table.

    Parameters
    ----------
    store : GraphStore
        Graph to convert

    Returns
    -------
    pandas.DataFrame
        One row per stored edge with source, target and weight columns
        (undirected graphs list both directions)
    """
    edges = list(store.edges())
    return pd.DataFrame({
        "source": [e.start for e in edges],
        "target": [e.end for e in edges],
        "weight": [e.weight for e in edges],
    }, columns=["source", "target", "weight"])


def distance_frame(matrix, labels=None):
    """
    Label an all-pairs distance matrix.

    Parameters
    ----------
    matrix : numpy.ndarray
        Square matrix as returned by floyd_warshall
    labels : list, optional
        Row and column labels (default is 0 .. n-1)

    Returns
    -------
    pandas.DataFrame
        Distance table; rows are sources and columns are destinations
    """
    labels = list(range(matrix.shape[0])) if labels is None else labels
    frame = pd.DataFrame(matrix, index=labels, columns=labels)
    frame.index.name = "source"
    frame.columns.name = "target"
    return frame


def to_networkx(store):
    """
    Convert a graph store to NetworkX.

    Parameters
    ----------
    store : GraphStore
        Graph to convert

    Returns
    -------
    networkx.DiGraph or networkx.Graph
        DiGraph for directed stores, Graph for undirected ones; edge weights
        are kept in the 'weight' attribute
    """
    G = nx.DiGraph() if store.is_directed() else nx.Graph()
    G.add_nodes_from(store.node_ids())
    for edge in store.edges():
        G.add_edge(edge.start, edge.end, weight=edge.weight)
    return G


def export_edge_list(store, filepath):
    """
    Write a graph in the edge-list format load_graph reads.

    Undirected graphs are written with each mirrored pair once.

    Parameters
    ----------
    store : GraphStore
        Graph to export
    filepath : str
        Path to the output file
    """
    edges = list(store.edges())
    if not store.is_directed():
        edges = [e for e in edges if e.start <= e.end]

    # Create directory if it doesn't exist
    os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)

    with open(filepath, 'w') as f:
        f.write(f"{store.size()} {len(edges)}\n")
        for edge in edges:
            f.write(f"{edge.start} {edge.end} {edge.weight}\n")
