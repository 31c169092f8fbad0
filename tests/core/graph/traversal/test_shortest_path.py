"""
Tests for Dijkstra shortest path computation.
"""

import math

import pytest

from digraph.core.exceptions import UnknownVertexError
from digraph.core.graph import Digraph, ShortestPathFinder


def miles(info):
    """Weight function reading the mileage of an edge payload."""
    return info["miles"]


def test_indirect_path_is_cheaper(weighted_graph):
    """Test the cheaper two-hop route wins over the direct edge."""
    predecessors = weighted_graph.find_shortest_paths(1, miles)

    assert predecessors == {1: 1, 2: 1, 3: 2}


def test_start_maps_to_itself(cycle_graph):
    """Test the start vertex is its own predecessor."""
    predecessors = cycle_graph.find_shortest_paths(3, lambda weight: weight)

    assert predecessors[3] == 3
    assert predecessors == {1: 4, 2: 1, 3: 3, 4: 3}


def test_unreachable_vertex_maps_to_itself(weighted_graph):
    """Test vertices without a path from the start."""
    weighted_graph.add_vertex(9, "island")
    weighted_graph.add_edge(9, 1, {"miles": 1})

    predecessors = weighted_graph.find_shortest_paths(1, miles)

    assert predecessors[9] == 9
    assert set(predecessors) == {1, 2, 3, 9}


def test_unknown_start_vertex(weighted_graph):
    """Test searching from a vertex that does not exist."""
    with pytest.raises(UnknownVertexError, match="Start vertex 42"):
        weighted_graph.find_shortest_paths(42, miles)


def test_direct_path_when_cheaper(weighted_graph):
    """Test the direct edge wins once the detour becomes expensive."""
    weighted_graph.remove_edge(2, 3)
    weighted_graph.add_edge(2, 3, {"miles": 10})

    assert weighted_graph.find_shortest_paths(1, miles) == {1: 1, 2: 1, 3: 1}


def test_recomputes_after_mutation(weighted_graph):
    """Test each call reflects the graph's current edges."""
    first = weighted_graph.find_shortest_paths(1, miles)
    weighted_graph.remove_vertex(2)
    second = weighted_graph.find_shortest_paths(1, miles)

    assert first[3] == 2
    assert second == {1: 1, 3: 1}


def test_equal_cost_paths_keep_first_found():
    """Test relaxation only updates on strict improvement."""
    graph = Digraph.from_edges(
        [(1, None), (2, None), (3, None), (4, None)],
        [(1, 2, 1.0), (1, 3, 1.0), (2, 4, 1.0), (3, 4, 1.0)],
    )

    predecessors = graph.find_shortest_paths(1, float)

    # 2 settles before 3 on the tie, so 4 is first reached through 2
    assert predecessors == {1: 1, 2: 1, 3: 1, 4: 2}


def test_zero_weight_edges():
    """Test zero weights are accepted."""
    graph = Digraph.from_edges(
        [(1, None), (2, None), (3, None)],
        [(1, 2, 0), (2, 3, 0), (1, 3, 1)],
    )

    result = ShortestPathFinder(graph).solve(1, int)

    assert result.predecessors == {1: 1, 2: 1, 3: 2}
    assert result.distance_to(3) == 0.0


@pytest.mark.parametrize("weight", [-1.0, math.inf, math.nan, "3", None])
def test_invalid_weights(weighted_graph, weight):
    """Test weight functions returning unusable weights."""
    with pytest.raises(ValueError, match="Weight of edge"):
        weighted_graph.find_shortest_paths(1, lambda info: weight)


def test_solve_distances_and_paths(weighted_graph):
    """Test the full result exposes distances and reconstructed paths."""
    weighted_graph.add_vertex(9, "island")

    result = ShortestPathFinder(weighted_graph).solve(1, miles)

    assert result.start_vertex == 1
    assert result.distances == {1: 0.0, 2: 1.0, 3: 3.0, 9: math.inf}
    assert result.path_to(3) == [1, 2, 3]
    assert result.path_to(1) == [1]
    assert result.path_to(9) == []
    assert result.is_reachable(2)
    assert not result.is_reachable(9)


def test_result_unknown_vertex(weighted_graph):
    """Test result lookups for vertices outside the search."""
    result = ShortestPathFinder(weighted_graph).solve(1, miles)

    with pytest.raises(UnknownVertexError):
        result.path_to(5)
    with pytest.raises(UnknownVertexError):
        result.distance_to(5)


def test_single_vertex_graph(empty_graph):
    """Test searching a graph containing only the start vertex."""
    empty_graph.add_vertex(0, None)

    assert empty_graph.find_shortest_paths(0, miles) == {0: 0}


def test_larger_graph():
    """Test a graph where the best route passes through several vertices."""
    graph = Digraph.from_edges(
        [(v, None) for v in (1, 2, 3, 4, 5, 6)],
        [
            (1, 2, 7),
            (1, 3, 9),
            (1, 6, 14),
            (2, 3, 10),
            (2, 4, 15),
            (3, 4, 11),
            (3, 6, 2),
            (4, 5, 6),
            (6, 5, 9),
        ],
    )

    result = ShortestPathFinder(graph).solve(1, float)

    assert result.distances == {1: 0.0, 2: 7.0, 3: 9.0, 4: 20.0, 5: 20.0, 6: 11.0}
    assert result.path_to(5) == [1, 3, 6, 5]
    assert result.path_to(4) == [1, 3, 4]
