"""Tests for depth-first and breadth-first traversal."""

import networkx as nx
import pytest

from conftest import random_edges
from grapho_algorithms.algorithms import bfs, dfs, dfs_iterative, dfs_recursive
from grapho_algorithms.core import AdjacencyList, InvalidReferenceError, NodeState, PreconditionError
from grapho_algorithms.io import to_networkx

TRAVERSALS = [dfs_iterative, dfs_recursive, bfs]


class TestScenarioOrders:
    """Visitation orders on the six-node scenario."""

    def test_bfs(self, scenario):
        assert bfs(scenario, 0) == [0, 1, 2, 3, 4, 5]

    def test_dfs_recursive(self, scenario):
        assert dfs_recursive(scenario, 0) == [0, 1, 2, 4, 3, 5]

    def test_dfs_iterative_visits_last_pushed_first(self, scenario):
        assert dfs_iterative(scenario, 0) == [0, 2, 4, 5, 3, 1]

    def test_dfs_dispatch(self, scenario):
        assert dfs(scenario, 0) == dfs_iterative(scenario, 0)
        assert dfs(scenario, 0, recursive=True) == dfs_recursive(scenario, 0)

    def test_source_may_be_a_node(self, scenario):
        assert bfs(scenario, scenario.node(4)) == [4, 3, 5]


@pytest.mark.parametrize("traverse", TRAVERSALS)
class TestVisitationState:
    """Every traversal leaves reachable nodes VISITED and the rest NOT_VISITED."""

    def test_partial_reach(self, scenario, traverse):
        order = traverse(scenario, 3)
        assert sorted(order) == [3, 5]
        for node in scenario.nodes():
            expected = NodeState.VISITED if node.id in (3, 5) else NodeState.NOT_VISITED
            assert node.state == expected

    def test_rerun_resets_previous_state(self, scenario, traverse):
        traverse(scenario, 0)
        traverse(scenario, 4)
        assert scenario.node(0).state == NodeState.NOT_VISITED

    def test_cycles_terminate(self, make_store, traverse):
        store = make_store(3, [(0, 1, 1), (1, 2, 1), (2, 0, 1), (1, 0, 1)])
        assert sorted(traverse(store, 1)) == [0, 1, 2]

    def test_undirected_reaches_both_directions(self, make_store, traverse):
        store = make_store(4, [(0, 1, 1), (2, 1, 1)], directed=False)
        assert sorted(traverse(store, 2)) == [0, 1, 2]
        assert store.node(3).state == NodeState.NOT_VISITED

    def test_each_node_once(self, make_store, rng, traverse):
        store = make_store(30, random_edges(rng, 30, 120))
        order = traverse(store, store.node_ids()[0])
        assert len(order) == len(set(order))

    def test_matches_networkx_reachability(self, make_store, rng, traverse):
        store = make_store(25, random_edges(rng, 25, 40))
        G = to_networkx(store)
        for source in store.node_ids():
            assert set(traverse(store, source)) == nx.descendants(G, source) | {source}

    def test_unknown_source(self, scenario, traverse):
        with pytest.raises(InvalidReferenceError):
            traverse(scenario, 42)


class TestDepthLimits:
    """Recursion depth handling on long chains."""

    def test_recursive_depth_limit(self, make_store):
        store = make_store(10, [(i, i + 1, 1) for i in range(9)])
        with pytest.raises(PreconditionError):
            dfs_recursive(store, 0, max_depth=5)
        assert dfs_recursive(store, 0, max_depth=9) == list(range(10))

    def test_iterative_handles_long_chains(self):
        store = AdjacencyList.from_edges(5000, [(i, i + 1, 1) for i in range(4999)])
        assert dfs_iterative(store, 0) == list(range(5000))
        assert bfs(store, 0) == list(range(5000))
