"""Dijkstra's single-source shortest path algorithm."""

import logging
from heapq import heappop, heappush
from typing import TYPE_CHECKING, Any, Dict, List, Set, Tuple

from digraph.core.exceptions import UnknownVertexError
from .path_models import ShortestPathResult
from .types import PredecessorMap, WeightFunc
from .utils import INFINITY, get_edge_weight

if TYPE_CHECKING:
    from digraph.core.graph.base import Digraph

logger = logging.getLogger(__name__)


class ShortestPathFinder:
    """
    Single-source shortest paths over a Digraph.

    The finder reads the graph's adjacency at call time and keeps no state
    between calls, so every search reflects the graph's current structure.
    Edge weights come from a caller-supplied function applied to each edge
    payload and must be non-negative.
    """

    def __init__(self, graph: "Digraph[Any, Any]"):
        """Initialize finder with graph."""
        self.graph = graph

    def solve(self, start_vertex: int, weight_func: WeightFunc) -> ShortestPathResult:
        """
        Run Dijkstra's algorithm from start_vertex.

        Vertices are settled in order of increasing tentative distance, ties
        going to the smaller vertex id. An edge relaxation only replaces a
        neighbor's distance and predecessor on strict improvement.

        Args:
            start_vertex (int): Vertex to measure paths from
            weight_func (WeightFunc): Maps an edge payload to a non-negative weight

        Returns:
            ShortestPathResult: Predecessors and distances for every vertex

        Raises:
            UnknownVertexError: If start_vertex does not exist
            ValueError: If weight_func returns an invalid weight
        """
        if not self.graph.has_vertex(start_vertex):
            raise UnknownVertexError(f"Start vertex {start_vertex} does not exist")

        adjacency = self.graph.adjacency
        distances: Dict[int, float] = {vertex: INFINITY for vertex in adjacency}
        predecessors: PredecessorMap = {vertex: vertex for vertex in adjacency}
        unvisited: Set[int] = set(adjacency)

        distances[start_vertex] = 0.0
        queue: List[Tuple[float, int]] = [(0.0, start_vertex)]

        while queue:
            distance, current = heappop(queue)
            # Stale entry: vertex already settled or a shorter distance was queued
            if current not in unvisited or distance > distances[current]:
                continue
            unvisited.discard(current)

            for edge in adjacency[current].edges:
                candidate = distance + get_edge_weight(edge, weight_func)
                if candidate < distances[edge.to_vertex]:
                    distances[edge.to_vertex] = candidate
                    predecessors[edge.to_vertex] = current
                    heappush(queue, (candidate, edge.to_vertex))

        logger.debug(
            "Shortest paths from %s reached %d of %d vertices",
            start_vertex,
            len(adjacency) - len(unvisited),
            len(adjacency),
        )
        return ShortestPathResult(
            start_vertex=start_vertex, predecessors=predecessors, distances=distances
        )

    def find_shortest_paths(self, start_vertex: int, weight_func: WeightFunc) -> PredecessorMap:
        """Compute the predecessor map of shortest paths from start_vertex."""
        return self.solve(start_vertex, weight_func).predecessors
