"""
Core directed graph container with adjacency list representation.

This module provides the Digraph class: a generic directed graph whose vertices
are named by caller-chosen integer ids and carry an opaque payload, and whose
edges carry an opaque payload of their own. Each vertex exclusively owns the
ordered list of its outgoing edges; edges reference their target purely by id.

Every public operation checks all of its preconditions before touching the
store, so a failed call never leaves the graph partially modified.
"""

import copy
import logging
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from ..exceptions import (
    DuplicateEdgeError,
    DuplicateVertexError,
    UnknownEdgeError,
    UnknownVertexError,
)
from ..models import DigraphEdge, DigraphVertex
from .components import ConnectivityAnalysis
from .traversal.shortest_path import ShortestPathFinder
from .traversal.types import WeightFunc

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")


def is_vertex_id(value: object) -> bool:
    """Check that value is an integer usable as a vertex id (bool excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


class Digraph(Generic[V, E]):
    """
    Generic directed graph implemented with adjacency lists.

    The graph maps each vertex id to a DigraphVertex record. Vertex ids are
    unique, every edge endpoint references a vertex currently in the graph,
    and at most one edge exists per ordered (from, to) pair.

    Copying (copy(), copy.copy() or copy.deepcopy()) always produces a fully
    independent graph with duplicated payloads. transfer() hands the storage
    over to a new graph and leaves this one empty.

    Example:
        >>> graph: Digraph[str, float] = Digraph()
        >>> graph.add_vertex(1, "Irvine")
        >>> graph.add_vertex(2, "Tustin")
        >>> graph.add_edge(1, 2, 7.5)
        >>> graph.edges()
        [(1, 2)]
    """

    def __init__(self) -> None:
        self._vertices: Dict[int, DigraphVertex[V, E]] = {}

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def copy(self) -> "Digraph[V, E]":
        """
        Create a deep copy of the graph.

        Returns:
            Digraph[V, E]: A graph sharing no mutable state with this one
        """
        return copy.deepcopy(self)

    def __copy__(self) -> "Digraph[V, E]":
        return self.__deepcopy__({})

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Digraph[V, E]":
        duplicate: Digraph[V, E] = type(self)()
        memo[id(self)] = duplicate
        for vertex_id, vertex in self._vertices.items():
            duplicate._vertices[vertex_id] = DigraphVertex(
                info=copy.deepcopy(vertex.info, memo),
                edges=[
                    DigraphEdge(edge.from_vertex, edge.to_vertex, copy.deepcopy(edge.info, memo))
                    for edge in vertex.edges
                ],
            )
        return duplicate

    def transfer(self) -> "Digraph[V, E]":
        """
        Move the contents of this graph into a new graph.

        The storage is handed over without being duplicated; afterwards this
        graph is empty and remains fully usable.

        Returns:
            Digraph[V, E]: A graph holding the former contents of this one
        """
        moved: Digraph[V, E] = type(self)()
        moved._vertices, self._vertices = self._vertices, {}
        return moved

    def assign(self, other: "Digraph[V, E]", move: bool = False) -> "Digraph[V, E]":
        """
        Replace the contents of this graph with those of another.

        Args:
            other (Digraph[V, E]): Graph to take contents from
            move (bool): If True, take over other's storage and leave it empty;
                otherwise store an independent deep copy of other

        Returns:
            Digraph[V, E]: This graph
        """
        if other is self:
            return self
        if move:
            self._vertices, other._vertices = other._vertices, {}
        else:
            self._vertices = other.copy()._vertices
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digraph):
            return NotImplemented
        if self._vertices.keys() != other._vertices.keys():
            return False
        for vertex_id, vertex in self._vertices.items():
            counterpart = other._vertices[vertex_id]
            if vertex.info != counterpart.info or len(vertex.edges) != len(counterpart.edges):
                return False
            for edge in vertex.edges:
                match = counterpart.find_edge(edge.to_vertex)
                if match is None or match.info != edge.info:
                    return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertex_count()}, edges={self.edge_count()})"

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def adjacency(self) -> Mapping[int, DigraphVertex[V, E]]:
        """Read-only view of the vertex id to vertex record mapping."""
        return MappingProxyType(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return self.has_vertex(vertex)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._vertices))

    def has_vertex(self, vertex: int) -> bool:
        """Check if a vertex exists in the graph."""
        return is_vertex_id(vertex) and vertex in self._vertices

    def has_edge(self, from_vertex: int, to_vertex: int) -> bool:
        """Check if an edge exists from from_vertex to to_vertex."""
        if not (self.has_vertex(from_vertex) and self.has_vertex(to_vertex)):
            return False
        return self._vertices[from_vertex].find_edge(to_vertex) is not None

    def vertices(self) -> Set[int]:
        """
        Get the ids of all vertices in the graph.

        Returns:
            Set[int]: Set of all vertex ids
        """
        return set(self._vertices)

    def edges(self, vertex: Optional[int] = None) -> List[Tuple[int, int]]:
        """
        Get (from, to) pairs for edges in the graph.

        Args:
            vertex (Optional[int]): If given, only edges outgoing from this
                vertex are returned

        Returns:
            List[Tuple[int, int]]: Edge endpoint pairs

        Raises:
            UnknownVertexError: If vertex is given and does not exist
        """
        if vertex is not None:
            return [edge.key for edge in self._require_vertex(vertex).edges]
        return [edge.key for record in self._vertices.values() for edge in record.edges]

    def neighbors(self, vertex: int, reverse: bool = False) -> Set[int]:
        """
        Get the neighbors of a vertex.

        Args:
            vertex (int): The vertex to get neighbors for
            reverse (bool): If True, get vertices with an edge into vertex
                instead of the targets of its outgoing edges

        Returns:
            Set[int]: Set of neighbor vertex ids

        Raises:
            UnknownVertexError: If the vertex does not exist
        """
        record = self._require_vertex(vertex)
        if reverse:
            return {
                source
                for source, candidate in self._vertices.items()
                if candidate.find_edge(vertex) is not None
            }
        return {edge.to_vertex for edge in record.edges}

    def vertex_info(self, vertex: int) -> V:
        """
        Get the payload stored for a vertex.

        Raises:
            UnknownVertexError: If the vertex does not exist
        """
        return self._require_vertex(vertex).info

    def edge_info(self, from_vertex: int, to_vertex: int) -> E:
        """
        Get the payload stored for an edge.

        Raises:
            UnknownVertexError: If either endpoint does not exist
            UnknownEdgeError: If the edge does not exist
        """
        return self._require_edge(from_vertex, to_vertex).info

    def vertex_count(self) -> int:
        """Get the number of vertices in the graph."""
        return len(self._vertices)

    def edge_count(self, vertex: Optional[int] = None) -> int:
        """
        Get the number of edges in the graph.

        Args:
            vertex (Optional[int]): If given, count only edges outgoing from it

        Returns:
            int: Number of edges

        Raises:
            UnknownVertexError: If vertex is given and does not exist
        """
        if vertex is not None:
            return len(self._require_vertex(vertex).edges)
        total = 0
        for record in self._vertices.values():
            total += len(record.edges)
        return total

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: int, info: V) -> None:
        """
        Add a vertex with the given id and payload.

        Args:
            vertex (int): Id of the new vertex
            info (V): Payload to store with it

        Raises:
            TypeError: If vertex is not an integer
            DuplicateVertexError: If a vertex with this id already exists
        """
        if not is_vertex_id(vertex):
            raise TypeError(f"vertex id must be an integer, got {type(vertex).__name__}")
        if vertex in self._vertices:
            raise DuplicateVertexError(f"Vertex {vertex} already exists")
        self._vertices[vertex] = DigraphVertex(info=info)
        logger.debug("Added vertex %s", vertex)

    def remove_vertex(self, vertex: int) -> None:
        """
        Remove a vertex together with all of its incoming and outgoing edges.

        Raises:
            UnknownVertexError: If the vertex does not exist
        """
        record = self._require_vertex(vertex)
        del self._vertices[vertex]

        removed = len(record.edges)
        for other in self._vertices.values():
            kept = [edge for edge in other.edges if edge.to_vertex != vertex]
            removed += len(other.edges) - len(kept)
            other.edges = kept
        logger.debug("Removed vertex %s and %d incident edge(s)", vertex, removed)

    def add_edge(self, from_vertex: int, to_vertex: int, info: E) -> None:
        """
        Add an edge from from_vertex to to_vertex carrying the given payload.

        Raises:
            UnknownVertexError: If either endpoint does not exist
            DuplicateEdgeError: If the edge already exists
        """
        source = self._require_endpoints(from_vertex, to_vertex)
        if source.find_edge(to_vertex) is not None:
            raise DuplicateEdgeError(f"Edge from {from_vertex} to {to_vertex} already exists")
        source.edges.append(DigraphEdge(from_vertex, to_vertex, info))
        logger.debug("Added edge %s -> %s", from_vertex, to_vertex)

    def remove_edge(self, from_vertex: int, to_vertex: int) -> None:
        """
        Remove the edge from from_vertex to to_vertex.

        Raises:
            UnknownVertexError: If either endpoint does not exist
            UnknownEdgeError: If the edge does not exist
        """
        source = self._require_endpoints(from_vertex, to_vertex)
        kept = [edge for edge in source.edges if edge.to_vertex != to_vertex]
        if len(kept) == len(source.edges):
            raise UnknownEdgeError(f"No edge exists from {from_vertex} to {to_vertex}")
        source.edges = kept
        logger.debug("Removed edge %s -> %s", from_vertex, to_vertex)

    def clear(self) -> None:
        """Remove all vertices and edges from the graph."""
        self._vertices = {}

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def is_strongly_connected(self) -> bool:
        """Check whether every vertex can reach every other vertex."""
        return ConnectivityAnalysis.is_strongly_connected(self)

    def strongly_connected_components(self) -> List[Set[int]]:
        """Partition the vertices into strongly connected components."""
        return ConnectivityAnalysis.find_strongly_connected_components(self)

    def find_shortest_paths(self, start_vertex: int, weight_func: WeightFunc) -> Dict[int, int]:
        """
        Compute single-source shortest paths using Dijkstra's algorithm.

        Args:
            start_vertex (int): Vertex to measure paths from
            weight_func (WeightFunc): Maps an edge payload to a non-negative weight

        Returns:
            Dict[int, int]: Predecessor of every vertex on a shortest path from
                start_vertex; the start vertex and unreachable vertices map to
                themselves

        Raises:
            UnknownVertexError: If start_vertex does not exist
            ValueError: If weight_func returns a negative or non-finite weight
        """
        return ShortestPathFinder(self).find_shortest_paths(start_vertex, weight_func)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[Tuple[int, V]],
        edges: Iterable[Tuple[int, int, E]] = (),
    ) -> "Digraph[V, E]":
        """
        Create a graph from (id, info) vertex pairs and (from, to, info) edges.

        Raises:
            DuplicateVertexError: If a vertex id repeats
            UnknownVertexError: If an edge endpoint is not among the vertices
            DuplicateEdgeError: If an ordered pair repeats
        """
        graph: Digraph[V, E] = cls()
        for vertex, info in vertices:
            graph.add_vertex(vertex, info)
        for from_vertex, to_vertex, edge_info in edges:
            graph.add_edge(from_vertex, to_vertex, edge_info)
        return graph

    # ------------------------------------------------------------------
    # Precondition helpers
    # ------------------------------------------------------------------

    def _require_vertex(self, vertex: int) -> DigraphVertex[V, E]:
        if not self.has_vertex(vertex):
            raise UnknownVertexError(f"Vertex {vertex} does not exist")
        return self._vertices[vertex]

    def _require_endpoints(self, from_vertex: int, to_vertex: int) -> DigraphVertex[V, E]:
        # Only exact int ids match; True or 1.0 never alias vertex 1
        if not self.has_vertex(from_vertex):
            raise UnknownVertexError(f"Source vertex {from_vertex} does not exist")
        if not self.has_vertex(to_vertex):
            raise UnknownVertexError(f"Target vertex {to_vertex} does not exist")
        return self._vertices[from_vertex]

    def _require_edge(self, from_vertex: int, to_vertex: int) -> DigraphEdge[E]:
        edge = self._require_endpoints(from_vertex, to_vertex).find_edge(to_vertex)
        if edge is None:
            raise UnknownEdgeError(f"No edge exists from {from_vertex} to {to_vertex}")
        return edge
