"""
Data models for shortest path results.

ShortestPathResult bundles the predecessor map and the final distances produced
by a single-source search, and reconstructs individual paths from them.

Example:
    >>> result = ShortestPathFinder(graph).solve(1, weight_func)
    >>> result.path_to(3)
    [1, 2, 3]
    >>> result.distance_to(3)
    3.0
"""

import math
from dataclasses import dataclass
from typing import Dict, List

from digraph.core.exceptions import UnknownVertexError


@dataclass
class ShortestPathResult:
    """
    Container for single-source shortest path results.

    Attributes:
        start_vertex: Vertex the search started from
        predecessors: Predecessor of every vertex on a shortest path; the start
            vertex and unreachable vertices map to themselves
        distances: Minimum total weight from the start vertex; unreachable
            vertices are at infinity
    """

    start_vertex: int
    predecessors: Dict[int, int]
    distances: Dict[int, float]

    def _require(self, vertex: int) -> None:
        if vertex not in self.predecessors:
            raise UnknownVertexError(f"Vertex {vertex} was not part of the search")

    def is_reachable(self, vertex: int) -> bool:
        """Check whether vertex can be reached from the start vertex."""
        self._require(vertex)
        return not math.isinf(self.distances[vertex])

    def distance_to(self, vertex: int) -> float:
        """Get the minimum total weight from the start vertex to vertex."""
        self._require(vertex)
        return self.distances[vertex]

    def path_to(self, vertex: int) -> List[int]:
        """
        Reconstruct the shortest path from the start vertex to vertex.

        Returns:
            List[int]: Vertex ids from start to vertex inclusive, or an empty
                list when vertex is unreachable
        """
        if not self.is_reachable(vertex):
            return []
        path = [vertex]
        current = vertex
        while current != self.start_vertex:
            current = self.predecessors[current]
            path.append(current)
        path.reverse()
        return path
