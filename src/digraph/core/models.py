"""
Vertex and edge records for the directed graph container.

A DigraphVertex owns its payload and the ordered list of its outgoing edges.
A DigraphEdge names its endpoints by vertex id only; the "to" id is a lookup
key into the graph, not a reference to another record.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

V = TypeVar("V")
E = TypeVar("E")


@dataclass
class DigraphEdge(Generic[E]):
    """
    Directed edge between two vertices.

    Attributes:
        from_vertex (int): Source vertex id
        to_vertex (int): Target vertex id
        info (E): Caller-supplied edge payload
    """

    from_vertex: int
    to_vertex: int
    info: E

    @property
    def key(self) -> Tuple[int, int]:
        """The ordered (from, to) pair identifying this edge."""
        return (self.from_vertex, self.to_vertex)


@dataclass
class DigraphVertex(Generic[V, E]):
    """
    Vertex record holding a payload and its outgoing edges.

    Attributes:
        info (V): Caller-supplied vertex payload
        edges (List[DigraphEdge[E]]): Outgoing edges in insertion order
    """

    info: V
    edges: List[DigraphEdge[E]] = field(default_factory=list)

    def find_edge(self, to_vertex: int) -> Optional[DigraphEdge[E]]:
        """Return the outgoing edge pointing at to_vertex, if any."""
        for edge in self.edges:
            if edge.to_vertex == to_vertex:
                return edge
        return None
