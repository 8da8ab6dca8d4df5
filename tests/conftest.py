"""Pytest configuration and shared fixtures for grapho_algorithms tests.

This module provides:
- A store factory parametrized over both graph representations
- The six-node weighted scenario used across the algorithm tests
- A deterministic numpy RNG and a random edge generator
"""

import logging
import os

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from grapho_algorithms.io.loaders import create_store

# Six nodes, directed; shortest 0 -> 5 is 0 -> 1 -> 2 -> 4 -> 3 -> 5 with length 9
SCENARIO_NODES = 6
SCENARIO_EDGES = [
    (0, 1, 2), (0, 2, 4), (1, 2, 1), (1, 3, 7),
    (2, 4, 3), (3, 5, 1), (4, 3, 2), (4, 5, 5),
]


def random_edges(rng, node_count, edge_count, low=1, high=20):
    """Draw edge_count (from, to, weight) triples with integer weights in [low, high)."""
    starts = rng.integers(0, node_count, size=edge_count)
    ends = rng.integers(0, node_count, size=edge_count)
    weights = rng.integers(low, high, size=edge_count)
    return [(int(s), int(e), int(w)) for s, e, w in zip(starts, ends, weights)]


@pytest.fixture(params=['list', 'matrix'])
def representation(request):
    """Name of the graph representation under test."""
    return request.param


@pytest.fixture
def make_store(representation):
    """Factory building a store of the current representation."""
    def _make(node_count, edges, directed=True):
        return create_store(representation, node_count, edges, directed=directed)
    return _make


@pytest.fixture
def scenario(make_store):
    """The directed six-node scenario graph."""
    return make_store(SCENARIO_NODES, SCENARIO_EDGES)


@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic numpy RNG, seeded from TEST_RNG_SEED (default: 0)."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers setup_logger attached so they never outlive captured streams."""
    yield
    logger = logging.getLogger('grapho_algorithms')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
