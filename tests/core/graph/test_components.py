"""Tests for strong connectivity analysis."""

import pytest

from digraph.core.graph import ConnectivityAnalysis, Digraph


def test_cycle_is_strongly_connected(cycle_graph):
    """Test a single directed cycle over all vertices."""
    assert cycle_graph.is_strongly_connected()
    assert ConnectivityAnalysis.is_strongly_connected(cycle_graph)


def test_dag_is_not_strongly_connected(dag_graph):
    """Test a directed acyclic graph with several vertices."""
    assert not dag_graph.is_strongly_connected()


def test_trivial_graphs_are_strongly_connected(empty_graph):
    """Test graphs with zero or one vertex."""
    assert empty_graph.is_strongly_connected()

    empty_graph.add_vertex(7, None)
    assert empty_graph.is_strongly_connected()


def test_root_reaches_all_but_not_reached_back():
    """Test a graph where the first vertex reaches everything but nothing returns."""
    graph = Digraph.from_edges(
        [(1, None), (2, None), (3, None)],
        [(1, 2, None), (2, 3, None), (3, 2, None)],
    )
    assert not graph.is_strongly_connected()


def test_isolated_vertex_breaks_connectivity(cycle_graph):
    """Test adding an unconnected vertex to a cycle."""
    cycle_graph.add_vertex(99, "isolated")
    assert not cycle_graph.is_strongly_connected()


def test_breaking_the_cycle(cycle_graph):
    """Test removing one edge of the cycle."""
    cycle_graph.remove_edge(4, 1)
    assert not cycle_graph.is_strongly_connected()

    cycle_graph.add_edge(4, 1, 1.0)
    assert cycle_graph.is_strongly_connected()


def test_two_cycles_joined_both_ways():
    """Test two cycles connected in both directions."""
    graph = Digraph.from_edges(
        [(v, None) for v in range(1, 7)],
        [
            (1, 2, None),
            (2, 3, None),
            (3, 1, None),
            (4, 5, None),
            (5, 6, None),
            (6, 4, None),
            (3, 4, None),
        ],
    )
    assert not graph.is_strongly_connected()

    graph.add_edge(6, 1, None)
    assert graph.is_strongly_connected()


def test_long_path_does_not_recurse():
    """Test traversal over a cycle longer than the recursion limit."""
    size = 5000
    graph = Digraph.from_edges(
        [(v, None) for v in range(size)],
        [(v, (v + 1) % size, None) for v in range(size)],
    )
    assert graph.is_strongly_connected()
    assert len(graph.strongly_connected_components()) == 1


def test_strongly_connected_components():
    """Test finding strongly connected components."""
    graph = Digraph.from_edges(
        [(1, None), (2, None), (3, None), (4, None)],
        [(1, 2, None), (2, 1, None), (2, 3, None), (3, 4, None), (4, 3, None)],
    )

    components = ConnectivityAnalysis.find_strongly_connected_components(graph)

    assert components == [{1, 2}, {3, 4}]


def test_components_of_dag(dag_graph):
    """Test every vertex of a DAG is its own component."""
    components = dag_graph.strongly_connected_components()

    assert sorted(map(sorted, components)) == [[10], [20], [30]]


def test_components_partition_vertices(cycle_graph):
    """Test each vertex appears in exactly one component."""
    cycle_graph.add_vertex(5, None)
    cycle_graph.add_edge(5, 1, 1.0)

    components = cycle_graph.strongly_connected_components()
    flattened = [vertex for component in components for vertex in component]

    assert sorted(flattened) == [1, 2, 3, 4, 5]
    assert {1, 2, 3, 4} in components
    assert {5} in components


def test_components_of_empty_graph(empty_graph):
    """Test an empty graph has no components."""
    assert empty_graph.strongly_connected_components() == []


@pytest.mark.parametrize("remove", [1, 2, 3, 4])
def test_analysis_does_not_mutate(cycle_graph, remove):
    """Test analysis leaves the graph unchanged."""
    cycle_graph.remove_vertex(remove)
    before = cycle_graph.copy()

    cycle_graph.is_strongly_connected()
    cycle_graph.strongly_connected_components()

    assert cycle_graph == before
