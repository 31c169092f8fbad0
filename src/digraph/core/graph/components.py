"""Strong connectivity analysis for directed graphs.

This module provides functionality for analyzing how the vertices of a Digraph
reach one another by following edge directions. It includes methods for:
- Testing whether the whole graph is strongly connected
- Finding strongly connected components (subgraphs where vertices are mutually
  reachable following edge direction)

All traversals are iterative, using an explicit stack or queue and a visited
set, so analysis depth is not limited by the interpreter's recursion limit.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Set, Tuple

if TYPE_CHECKING:
    from .base import Digraph

logger = logging.getLogger(__name__)


class ConnectivityAnalysis:
    """Strong connectivity analysis for directed graphs.

    The analysis methods are implemented as static methods to provide
    utility-style functionality that can be used with any Digraph instance
    without maintaining state. They only read the graph.
    """

    @staticmethod
    def _build_adjacency(graph: "Digraph[Any, Any]") -> Dict[int, List[int]]:
        """Build a vertex id to successor ids map following edge direction.

        Args:
            graph (Digraph): The graph instance to analyze.

        Returns:
            Dict[int, List[int]]: Forward adjacency map including isolated vertices.
        """
        return {
            vertex: [edge.to_vertex for edge in record.edges]
            for vertex, record in graph.adjacency.items()
        }

    @staticmethod
    def _build_reverse_adjacency(graph: "Digraph[Any, Any]") -> Dict[int, List[int]]:
        """Build adjacency map with every edge direction reversed.

        Args:
            graph (Digraph): The graph instance to analyze.

        Returns:
            Dict[int, List[int]]: Reverse adjacency map including isolated vertices.
        """
        reverse_adjacency: Dict[int, List[int]] = {vertex: [] for vertex in graph.adjacency}
        for vertex, record in graph.adjacency.items():
            for edge in record.edges:
                reverse_adjacency[edge.to_vertex].append(vertex)
        return reverse_adjacency

    @staticmethod
    def _reachable(start: int, adjacency: Dict[int, List[int]]) -> Set[int]:
        """Collect every vertex reachable from start using depth-first search.

        Args:
            start (int): Starting vertex.
            adjacency (Dict[int, List[int]]): Adjacency map to follow.

        Returns:
            Set[int]: Visited vertices, start included.
        """
        visited = {start}
        stack = [start]

        while stack:
            current = stack.pop()
            for neighbor in adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

        return visited

    @staticmethod
    def is_strongly_connected(graph: "Digraph[Any, Any]") -> bool:
        """Check whether every vertex can reach every other vertex.

        Picks one root vertex and checks that it reaches every vertex, and that
        every vertex reaches it (a traversal over the reversed graph). Both
        together imply mutual reachability of all pairs.

        Args:
            graph (Digraph): The graph instance to analyze.

        Returns:
            bool: True if the graph is strongly connected. Graphs with zero or
                one vertex are trivially strongly connected.
        """
        vertex_count = graph.vertex_count()
        if vertex_count <= 1:
            return True

        root = next(iter(graph.adjacency))
        forward = ConnectivityAnalysis._reachable(
            root, ConnectivityAnalysis._build_adjacency(graph)
        )
        if len(forward) < vertex_count:
            logger.debug("Vertex %s reaches %d of %d vertices", root, len(forward), vertex_count)
            return False

        backward = ConnectivityAnalysis._reachable(
            root, ConnectivityAnalysis._build_reverse_adjacency(graph)
        )
        if len(backward) < vertex_count:
            logger.debug(
                "Vertex %s is reached from %d of %d vertices", root, len(backward), vertex_count
            )
            return False
        return True

    @staticmethod
    def _finishing_order(adjacency: Dict[int, List[int]]) -> List[int]:
        """Order vertices by depth-first finishing time.

        Args:
            adjacency (Dict[int, List[int]]): Forward adjacency map.

        Returns:
            List[int]: Vertices in the order their depth-first visit completed.
        """
        order: List[int] = []
        visited: Set[int] = set()

        for root in adjacency:
            if root in visited:
                continue
            visited.add(root)
            stack: List[Tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]

            while stack:
                vertex, successors = stack[-1]
                for successor in successors:
                    if successor not in visited:
                        visited.add(successor)
                        stack.append((successor, iter(adjacency[successor])))
                        break
                else:
                    stack.pop()
                    order.append(vertex)

        return order

    @staticmethod
    def _find_component_bfs(
        start: int, adjacency: Dict[int, List[int]], assigned: Set[int]
    ) -> Set[int]:
        """Find all unassigned vertices reachable from start using breadth-first search.

        Args:
            start (int): Starting vertex.
            adjacency (Dict[int, List[int]]): Adjacency map.
            assigned (Set[int]): Vertices already placed in a component.

        Returns:
            Set[int]: Set of vertices in the component.
        """
        component = {start}
        queue = deque([start])
        assigned.add(start)

        while queue:
            current = queue.popleft()
            for neighbor in adjacency[current]:
                if neighbor not in assigned:
                    assigned.add(neighbor)
                    component.add(neighbor)
                    queue.append(neighbor)

        return component

    @staticmethod
    def find_strongly_connected_components(graph: "Digraph[Any, Any]") -> List[Set[int]]:
        """Find all strongly connected components in the directed graph.

        A strongly connected component (SCC) is a maximal set of vertices where
        every vertex is reachable from every other following edge direction.
        This method uses Kosaraju's algorithm: vertices are ordered by
        depth-first finishing time on the graph, then components are collected
        on the reversed graph in reverse finishing order.

        Args:
            graph (Digraph): The graph instance to analyze.

        Returns:
            List[Set[int]]: A list of sets, each containing the vertex ids of a
                distinct strongly connected component.

        Example:
            >>> graph = Digraph.from_edges(
            ...     [(1, None), (2, None), (3, None)],
            ...     [(1, 2, None), (2, 1, None), (2, 3, None)],
            ... )
            >>> ConnectivityAnalysis.find_strongly_connected_components(graph)
            [{1, 2}, {3}]

        Note:
            - Components are returned in topological order of the condensation
            - Each vertex appears in exactly one component
            - Isolated vertices form their own single-vertex components
        """
        order = ConnectivityAnalysis._finishing_order(ConnectivityAnalysis._build_adjacency(graph))
        reverse_adjacency = ConnectivityAnalysis._build_reverse_adjacency(graph)

        components: List[Set[int]] = []
        assigned: Set[int] = set()
        for vertex in reversed(order):
            if vertex not in assigned:
                components.append(
                    ConnectivityAnalysis._find_component_bfs(vertex, reverse_adjacency, assigned)
                )

        return components
