"""
Command line interface for Grapho Algorithms.

Reads an edge list from a file (-f) or standard input, prints the graph
and runs one algorithm on it. By default this is Bellman-Ford from node 0
to node 5 on a directed adjacency list.

Usage:
    grapho-algorithms [-f FILE] [--representation {list,matrix}] [--undirected]
                      [--algorithm NAME] [--source ID] [--target ID]
                      [--config CONFIG_FILE] [--verbose]
"""

import argparse
import logging
import sys

from .algorithms import (bellman_ford, bfs, dfs_iterative, dfs_recursive, dijkstra,
                         floyd_warshall, has_cycle, topological_sort)
from .core.errors import GraphError
from .graph_config import GraphConfig, setup_logger
from .io.exporters import distance_frame, format_distance, format_order, format_path
from .io.loaders import REPRESENTATIONS, load_graph

logger = logging.getLogger(__name__)

ALGORITHMS = [
    'print', 'dfs', 'dfs-recursive', 'bfs', 'dijkstra', 'bellman-ford',
    'floyd-warshall', 'toposort', 'has-cycle',
]


def build_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='grapho-algorithms',
        description='Run graph algorithms on an edge list read from a file or standard input')

    parser.add_argument('-f', dest='filename', metavar='<filename>',
                        help='Edge-list file (default: standard input)')
    parser.add_argument('--representation', choices=sorted(REPRESENTATIONS),
                        help='Graph store to build (default: list)')
    parser.add_argument('--undirected', action='store_true',
                        help='Treat every edge as two-way')
    parser.add_argument('--algorithm', choices=ALGORITHMS,
                        help='Algorithm to run (default: bellman-ford)')
    parser.add_argument('--source', type=int, help='Source node ID (default: 0)')
    parser.add_argument('--target', type=int, help='Target node ID (default: 5)')
    parser.add_argument('--config', type=str,
                        help='Path to a JSON configuration file (optional)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages')

    return parser


def _configure(args):
    config = GraphConfig(config_file=args.config)
    if args.representation:
        config.set('graph', 'representation', args.representation)
    if args.undirected:
        config.set('graph', 'directed', False)
    if args.algorithm:
        config.set('algorithm', 'name', args.algorithm)
    if args.source is not None:
        config.set('algorithm', 'source', args.source)
    if args.target is not None:
        config.set('algorithm', 'target', args.target)
    return config


def run_algorithm(store, config, out=None):
    """
    Run the configured algorithm and print its result.

    Args:
        store: Graph to run on
        config: GraphConfig naming the algorithm, source and target
        out: Text stream for the result (default: standard output)
    """
    out = out if out is not None else sys.stdout
    name = config.get('algorithm', 'name')
    source = config.get('algorithm', 'source')
    target = config.get('algorithm', 'target')
    precision = config.get('output', 'precision')

    logger.debug("Running %s (source=%s, target=%s)", name, source, target)

    if name == 'print':
        return
    elif name in ('dfs', 'dfs-recursive', 'bfs'):
        traverse, label = {'dfs': (dfs_iterative, 'DFS'),
                           'dfs-recursive': (dfs_recursive, 'DFS (recursive)'),
                           'bfs': (bfs, 'BFS')}[name]
        order = traverse(store, source)
        print(f"{label} from Node {source}: {format_order(order)}", file=out)
    elif name in ('dijkstra', 'bellman-ford'):
        search, label = {'dijkstra': (dijkstra, 'Dijkstra'),
                         'bellman-ford': (bellman_ford, 'Bellman-Ford')}[name]
        distance, path = search(store, source, target, return_path=True)
        route = f"{format_path(path)} => " if path else ""
        print(f"Minimum Distance from Node {source} to {target} ({label}): "
              f"{route}{format_distance(distance, precision)}", file=out)
    elif name == 'floyd-warshall':
        frame = distance_frame(floyd_warshall(store))
        float_format = None if precision is None else (lambda v: f"{v:.{precision}f}")
        print(frame.to_string(float_format=float_format), file=out)
    elif name == 'toposort':
        print(f"Topological order: {format_order(topological_sort(store))}", file=out)
    elif name == 'has-cycle':
        print(f"Graph contains cycle: {has_cycle(store)}", file=out)
    else:
        raise ValueError(f"Unknown algorithm: {name}")


def main(argv=None):
    """Entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _configure(args)
        setup_logger(config, level=logging.DEBUG if args.verbose else None)
        weight_type = config.weight_type
    except (OSError, ValueError, TypeError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        print(parser.format_usage(), end='', file=sys.stderr)
        return 1

    try:
        store = load_graph(filepath=args.filename,
                           representation=config.get('graph', 'representation'),
                           directed=config.get('graph', 'directed'),
                           weight_type=weight_type)
    except OSError:
        print(f"Couldn't open file {args.filename}", file=sys.stderr)
        print(parser.format_usage(), end='', file=sys.stderr)
        return 1
    except (ValueError, GraphError) as e:
        print(f"Invalid graph input: {e}", file=sys.stderr)
        return 1

    print(store.format(precision=config.get('output', 'precision')))
    print()

    try:
        run_algorithm(store, config)
    except GraphError as e:
        logger.debug("Algorithm failed", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
