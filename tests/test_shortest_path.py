"""Tests for Dijkstra, Bellman-Ford and Floyd-Warshall."""

import networkx as nx
import numpy as np
import pytest

from conftest import SCENARIO_NODES, random_edges
from grapho_algorithms.algorithms import (bellman_ford, dijkstra, dijkstra_distances, floyd_warshall,
                                          has_negative_cycle, reconstruct_path)
from grapho_algorithms.core import (INFINITY, CycleError, Edge, ErrorKind, NegativeCycleError,
                                    NegativeEdgeError, PreconditionError)
from grapho_algorithms.io import to_networkx

SCENARIO_PATH = [0, 1, 2, 4, 3, 5]


def _unique_pairs(edges):
    # NetworkX keeps one edge per pair, so parallel edges would disagree.
    return list({(s, e): (s, e, w) for s, e, w in edges}.values())


class TestBellmanFord:
    """Tests for Bellman-Ford."""

    def test_scenario_distance(self, scenario):
        assert bellman_ford(scenario, 0, 5) == 9

    def test_scenario_path(self, scenario):
        distance, path = bellman_ford(scenario, 0, 5, return_path=True)
        assert distance == 9
        assert path == SCENARIO_PATH

    def test_leaves_distances_in_nodes(self, scenario):
        bellman_ford(scenario, 0, 5)
        assert [n.weight for n in scenario.nodes()] == [0, 2, 3, 8, 6, 9]

    def test_negative_cycle_is_structural(self, scenario):
        scenario.add_edge(5, 0, -100)
        with pytest.raises(NegativeCycleError) as excinfo:
            bellman_ford(scenario, 0, 5)
        assert isinstance(excinfo.value, CycleError)
        assert excinfo.value.kind == ErrorKind.STRUCTURAL_CYCLE

    def test_negative_edges_without_cycle(self, make_store):
        store = make_store(3, [(0, 1, 4), (0, 2, 5), (2, 1, -3)])
        assert bellman_ford(store, 0, 1, return_path=True) == (2, [0, 2, 1])

    def test_undirected_negative_edge_is_a_cycle(self, make_store):
        store = make_store(2, [(0, 1, -1)], directed=False)
        with pytest.raises(NegativeCycleError):
            bellman_ford(store, 0, 1)

    def test_unreachable_destination(self, scenario):
        assert bellman_ford(scenario, 5, 0, return_path=True) == (INFINITY, [])

    def test_source_is_destination(self, scenario):
        assert bellman_ford(scenario, 2, 2, return_path=True) == (0, [2])

    def test_zero_weight_cycle_keeps_a_simple_path(self, make_store):
        store = make_store(3, [(0, 1, 0), (1, 2, 0), (2, 1, 0)])
        assert bellman_ford(store, 0, 2, return_path=True) == (0, [0, 1, 2])


class TestDijkstra:
    """Tests for Dijkstra."""

    def test_scenario(self, scenario):
        assert dijkstra(scenario, 0, 5) == 9
        assert dijkstra(scenario, 0, 5, return_path=True) == (9, SCENARIO_PATH)

    def test_distances(self, scenario):
        assert dijkstra_distances(scenario, 0) == {0: 0, 1: 2, 2: 3, 3: 8, 4: 6, 5: 9}

    def test_unreachable_nodes_stay_infinite(self, scenario):
        distances = dijkstra_distances(scenario, 4)
        assert distances[0] == distances[1] == distances[2] == INFINITY
        assert distances[5] == 3

    def test_ties_keep_last_discovered_predecessor(self, make_store):
        store = make_store(3, [(0, 1, 1), (0, 2, 2), (1, 2, 1)])
        assert dijkstra(store, 0, 2, return_path=True) == (2, [0, 1, 2])

    def test_negative_edge(self, make_store):
        store = make_store(3, [(0, 1, 1), (1, 2, -1)])
        with pytest.raises(NegativeEdgeError) as excinfo:
            dijkstra(store, 0, 2)
        assert excinfo.value.edge == Edge(1, 2, -1)
        assert isinstance(excinfo.value, PreconditionError)
        assert excinfo.value.kind == ErrorKind.PRECONDITION_VIOLATION

    def test_unreached_negative_edge_is_ignored(self, make_store):
        store = make_store(3, [(0, 1, 1), (2, 1, -5)])
        assert dijkstra(store, 0, 1) == 1


class TestFloydWarshall:
    """Tests for Floyd-Warshall."""

    def test_scenario(self, scenario):
        dist = floyd_warshall(scenario)
        assert dist.shape == (SCENARIO_NODES, SCENARIO_NODES)
        np.testing.assert_array_equal(dist[0], [0, 2, 3, 8, 6, 9])
        np.testing.assert_array_equal(dist[5], [INFINITY] * 5 + [0])

    def test_negative_edges_without_cycle(self, make_store):
        store = make_store(3, [(0, 1, 4), (0, 2, 5), (2, 1, -3)])
        assert floyd_warshall(store)[0, 1] == 2

    def test_negative_cycle(self, scenario):
        scenario.add_edge(5, 0, -100)
        with pytest.raises(NegativeCycleError):
            floyd_warshall(scenario)

    def test_negative_self_loop(self, make_store):
        store = make_store(2, [(0, 1, 1), (1, 1, -1)])
        with pytest.raises(NegativeCycleError):
            floyd_warshall(store)


class TestNegativeCycleDetection:
    """Tests for has_negative_cycle."""

    def test_scenario_has_none(self, scenario):
        assert not has_negative_cycle(scenario)

    def test_injected_cycle(self, scenario):
        scenario.add_edge(5, 0, -100)
        assert has_negative_cycle(scenario)

    def test_cycle_unreachable_from_source(self, make_store):
        store = make_store(4, [(0, 1, 1), (2, 3, -1), (3, 2, -1)])
        assert has_negative_cycle(store)
        assert bellman_ford(store, 0, 1) == 1


class TestAgreement:
    """The three algorithms agree with each other and with NetworkX."""

    def test_random_non_negative_graphs(self, make_store, rng):
        for _ in range(5):
            edges = _unique_pairs(random_edges(rng, 12, 40, low=0, high=10))
            store = make_store(12, edges)
            G = to_networkx(store)
            dist = floyd_warshall(store)

            for source in store.node_ids():
                expected = nx.single_source_dijkstra_path_length(G, source)
                distances = dijkstra_distances(store, source)
                for target in store.node_ids():
                    want = expected.get(target, INFINITY)
                    assert distances[target] == want
                    assert bellman_ford(store, source, target) == want
                    assert dist[source, target] == want

    def test_paths_are_shortest(self, make_store, rng):
        store = make_store(15, random_edges(rng, 15, 50))
        source = store.node_ids()[0]
        for target in store.node_ids():
            distance, path = dijkstra(store, source, target, return_path=True)
            if distance == INFINITY:
                assert path == []
                continue
            assert path[0] == source and path[-1] == target
            hops = [min(e.weight for e in store.adjacent(a) if e.end == b) for a, b in zip(path, path[1:])]
            assert sum(hops) == distance


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_follows_predecessors(self):
        assert reconstruct_path({0: None, 1: 0, 2: 1}, 0, 2) == [0, 1, 2]

    def test_unreached_destination(self):
        assert reconstruct_path({0: None}, 0, 3) == []

    def test_broken_chain(self):
        with pytest.raises(CycleError):
            reconstruct_path({0: None, 1: 2, 2: 1}, 0, 1)
