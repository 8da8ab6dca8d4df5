"""
Functions for visualizing graph stores and algorithm results.
"""

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np
from matplotlib.cm import ScalarMappable
from matplotlib.colors import Normalize

from ..io.exporters import to_networkx

__all__ = ["plot_graph", "plot_distance_matrix"]


def plot_graph(store, figsize=(10, 8), node_size=300, edge_width=1.0, node_color='lightblue',
               edge_color='gray', path=None, path_color='red', with_labels=True,
               with_weights=False, layout='spring', seed=0, title=None, ax=None):
    """
    Plot a graph store with its nodes, edges and optionally a highlighted path.

    Parameters
    ----------
    store : GraphStore
        Graph to plot
    figsize : tuple, optional
        Figure size (width, height) in inches
    node_size : int or float, optional
        Size of nodes
    edge_width : int or float, optional
        Width of edges
    node_color : str, optional
        Color of nodes
    edge_color : str, optional
        Color of edges
    path : list of int, optional
        Node IDs of a path to highlight, e.g. from dijkstra(..., return_path=True)
    path_color : str, optional
        Color of the highlighted path
    with_labels : bool, optional
        Whether to draw node IDs
    with_weights : bool, optional
        Whether to draw edge weights
    layout : str, optional
        'spring', 'circular' or 'shell'
    seed : int, optional
        Seed of the spring layout
    title : str, optional
        Plot title
    ax : matplotlib.axes.Axes, optional
        Axes to plot on

    Returns
    -------
    matplotlib.axes.Axes
        The axes containing the plot
    """
    G = to_networkx(store)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    if layout == 'spring':
        pos = nx.spring_layout(G, seed=seed)
    elif layout == 'circular':
        pos = nx.circular_layout(G)
    elif layout == 'shell':
        pos = nx.shell_layout(G)
    else:
        raise ValueError(f"Unsupported layout: {layout}")

    nx.draw_networkx_nodes(G, pos, ax=ax, node_size=node_size, node_color=node_color)
    nx.draw_networkx_edges(G, pos, ax=ax, width=edge_width, edge_color=edge_color,
                           arrows=store.is_directed())
    if with_labels:
        nx.draw_networkx_labels(G, pos, ax=ax)
    if with_weights:
        nx.draw_networkx_edge_labels(G, pos, ax=ax, edge_labels=nx.get_edge_attributes(G, 'weight'))

    # Highlight the path on top of the base drawing
    if path:
        path_edges = list(zip(path[:-1], path[1:]))
        nx.draw_networkx_nodes(G, pos, ax=ax, nodelist=path, node_size=node_size, node_color=path_color)
        nx.draw_networkx_edges(G, pos, ax=ax, edgelist=path_edges, width=edge_width * 2.5,
                               edge_color=path_color, arrows=store.is_directed())

    ax.set_title(title if title else f'Graph: {len(store)} nodes')
    ax.set_axis_off()

    return ax


def plot_distance_matrix(matrix, cmap='viridis', title=None, ax=None, figsize=(8, 6)):
    """
    Plot an all-pairs distance matrix as a heatmap.

    Unreachable pairs (infinite distances) are left blank.

    Parameters
    ----------
    matrix : numpy.ndarray
        Square matrix as returned by floyd_warshall
    cmap : str or matplotlib.colors.Colormap, optional
        Colormap for the distances
    title : str, optional
        Plot title
    ax : matplotlib.axes.Axes, optional
        Axes to plot on
    figsize : tuple, optional
        Figure size (width, height) in inches

    Returns
    -------
    matplotlib.axes.Axes
        The axes containing the plot
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    masked = np.ma.masked_invalid(np.where(np.isinf(matrix), np.nan, matrix))
    finite = matrix[np.isfinite(matrix)]
    vmin, vmax = (finite.min(), finite.max()) if finite.size else (0.0, 1.0)
    norm = Normalize(vmin=vmin, vmax=vmax)

    ax.imshow(masked, cmap=cmap, norm=norm)
    sm = ScalarMappable(norm=norm, cmap=cmap)
    sm.set_array([])
    plt.colorbar(sm, ax=ax, shrink=0.8, label='distance')

    ax.set_xlabel('target')
    ax.set_ylabel('source')
    ax.set_title(title if title else 'Shortest distances')

    return ax
