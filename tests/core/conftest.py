"""Shared test fixtures."""

import pytest

from digraph.core.graph import Digraph


@pytest.fixture
def empty_graph() -> Digraph:
    """Fixture providing a graph with no vertices."""
    return Digraph()


@pytest.fixture
def cycle_graph() -> Digraph:
    """Fixture providing a single directed cycle 1 -> 2 -> 3 -> 4 -> 1."""
    return Digraph.from_edges(
        [(1, "one"), (2, "two"), (3, "three"), (4, "four")],
        [(1, 2, 1.0), (2, 3, 1.0), (3, 4, 1.0), (4, 1, 1.0)],
    )


@pytest.fixture
def dag_graph() -> Digraph:
    """Fixture providing a directed acyclic graph."""
    return Digraph.from_edges(
        [(10, "a"), (20, "b"), (30, "c")],
        [(10, 20, 1.0), (20, 30, 1.0), (10, 30, 1.0)],
    )


@pytest.fixture
def weighted_graph() -> Digraph:
    """Fixture providing vertices {1, 2, 3} with a cheaper indirect route to 3."""
    return Digraph.from_edges(
        [(1, "start"), (2, "middle"), (3, "end")],
        [(1, 2, {"miles": 1}), (2, 3, {"miles": 2}), (1, 3, {"miles": 5})],
    )
