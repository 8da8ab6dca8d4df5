"""Tests for topological sorting and cycle detection."""

import networkx as nx
import pytest

from conftest import SCENARIO_EDGES, random_edges
from grapho_algorithms.algorithms import has_cycle, topological_sort
from grapho_algorithms.core import CycleError, ErrorKind, PreconditionError
from grapho_algorithms.io import to_networkx


def _is_topological(order, edges):
    position = {node_id: i for i, node_id in enumerate(order)}
    return all(position[s] < position[e] for s, e, _ in edges)


class TestTopologicalSort:
    """Tests for topological_sort."""

    def test_scenario(self, scenario):
        order = topological_sort(scenario)
        assert order == [0, 1, 2, 4, 3, 5]
        assert _is_topological(order, SCENARIO_EDGES)

    def test_sources_come_in_ascending_id_order(self, make_store):
        store = make_store(4, [(3, 0, 1), (1, 0, 1), (2, 0, 1)])
        assert topological_sort(store) == [1, 2, 3, 0]

    def test_cycle_fails_without_partial_order(self, scenario):
        scenario.add_edge(5, 1, 1)
        with pytest.raises(CycleError) as excinfo:
            topological_sort(scenario)
        assert excinfo.value.kind == ErrorKind.STRUCTURAL_CYCLE

    def test_self_loop_is_a_cycle(self, make_store):
        store = make_store(2, [(0, 1, 1), (1, 1, 1)])
        with pytest.raises(CycleError):
            topological_sort(store)

    def test_undirected_graph_is_rejected(self, make_store):
        store = make_store(2, [(0, 1, 1)], directed=False)
        with pytest.raises(PreconditionError) as excinfo:
            topological_sort(store)
        assert excinfo.value.kind == ErrorKind.PRECONDITION_VIOLATION

    def test_random_dags(self, make_store, rng):
        for _ in range(5):
            edges = [(s, e, w) for s, e, w in random_edges(rng, 20, 60) if s < e]
            store = make_store(20, edges)
            order = topological_sort(store)
            assert sorted(order) == store.node_ids()
            assert _is_topological(order, edges)


class TestHasCycle:
    """Tests for has_cycle."""

    def test_acyclic_scenario(self, scenario):
        assert not has_cycle(scenario)

    def test_back_edge(self, scenario):
        scenario.add_edge(5, 0, 1)
        assert has_cycle(scenario)

    def test_undirected_edge_counts_as_cycle(self, make_store):
        store = make_store(2, [(0, 1, 1)], directed=False)
        assert has_cycle(store)

    def test_undirected_without_edges(self, make_store):
        store = make_store(3, [], directed=False)
        store.add_node(0)
        assert not has_cycle(store)

    def test_matches_networkx(self, make_store, rng):
        for edge_count in (5, 10, 15, 20, 30):
            store = make_store(15, random_edges(rng, 15, edge_count))
            assert has_cycle(store) == (not nx.is_directed_acyclic_graph(to_networkx(store)))
