#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Shortest-path walkthrough for Grapho Algorithms

This script loads a weighted edge list, runs every algorithm of the package
on it and saves the plots of the results.

Steps:
1. Load the graph into both representations
2. Traverse it depth-first and breadth-first
3. Compare Dijkstra, Bellman-Ford and Floyd-Warshall
4. Sort it topologically
5. Plot the shortest path and the distance matrix
"""

import os
import argparse
import logging

import matplotlib.pyplot as plt

from grapho_algorithms.algorithms import (bellman_ford, bfs, dfs, dijkstra, floyd_warshall,
                                          has_cycle, topological_sort)
from grapho_algorithms.core import ErrorKind, attempt
from grapho_algorithms.io import distance_frame, format_order, format_path, load_graph
from grapho_algorithms.visualization import plot_distance_matrix, plot_graph

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger('shortest_paths_example')

DEFAULT_GRAPH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data', 'sample_graph.txt')


def parse_arguments():
    """Parse the command line arguments."""
    parser = argparse.ArgumentParser(description='Shortest-path walkthrough for Grapho Algorithms')

    parser.add_argument('--graph', type=str, default=DEFAULT_GRAPH,
                        help='Edge-list file (default: data/sample_graph.txt)')

    parser.add_argument('--output', type=str, default='output',
                        help='Directory for the plots (default: output)')

    parser.add_argument('--source', type=int, default=0, help='Source node (default: 0)')
    parser.add_argument('--target', type=int, default=5, help='Target node (default: 5)')

    return parser.parse_args()


def compare_shortest_paths(store, source, target):
    """
    Run the three shortest-path algorithms and log their results.

    Args:
        store: Graph to search
        source: Source node ID
        target: Target node ID

    Returns:
        Path found by Bellman-Ford
    """
    distance, path = bellman_ford(store, source, target, return_path=True)
    logger.info(f"Bellman-Ford {source} -> {target}: {format_path(path)} => {distance}")

    # Dijkstra refuses negative edges; report instead of failing
    result = attempt(dijkstra, store, source, target)
    if result.ok:
        logger.info(f"Dijkstra {source} -> {target}: {result.value}")
    else:
        logger.warning(f"Dijkstra skipped ({result.kind.value}): {result.error}")

    matrix = floyd_warshall(store)
    logger.info(f"Floyd-Warshall distances:\n{distance_frame(matrix).to_string()}")

    return path


def main():
    """Run the walkthrough."""
    args = parse_arguments()
    os.makedirs(args.output, exist_ok=True)

    logger.info(f"Loading {args.graph}")
    store = load_graph(args.graph)
    matrix_store = load_graph(args.graph, representation='matrix')
    logger.info(f"Adjacency list:\n{store}")

    logger.info(f"DFS: {format_order(dfs(store, args.source))}")
    logger.info(f"BFS: {format_order(bfs(matrix_store, args.source))}")

    path = compare_shortest_paths(store, args.source, args.target)

    if has_cycle(store):
        logger.info("Graph is cyclic, no topological order")
    else:
        logger.info(f"Topological order: {format_order(topological_sort(store))}")

    # Inject a negative cycle to show how structural errors surface
    store.add_edge(args.target, args.source, -100)
    result = attempt(bellman_ford, store, args.source, args.target)
    if result.kind == ErrorKind.STRUCTURAL_CYCLE:
        logger.info(f"After adding ({args.target}, {args.source}, -100): {result.error}")
    store.remove_edge(args.target, args.source)

    ax = plot_graph(store, path=path, with_weights=True, layout='circular',
                    title=f'Shortest path {args.source} -> {args.target}')
    ax.figure.savefig(os.path.join(args.output, 'shortest_path.png'), dpi=150, bbox_inches='tight')

    ax = plot_distance_matrix(floyd_warshall(store))
    ax.figure.savefig(os.path.join(args.output, 'distances.png'), dpi=150, bbox_inches='tight')
    plt.close('all')

    logger.info(f"Plots saved to {args.output}")


if __name__ == "__main__":
    main()
