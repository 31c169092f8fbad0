"""Core graph functionality."""

from .enums import DigraphErrorKind
from .exceptions import (
    DigraphError,
    DuplicateEdgeError,
    DuplicateResourceError,
    DuplicateVertexError,
    ResourceNotFoundError,
    SerializationError,
    UnknownEdgeError,
    UnknownVertexError,
)
from .models import DigraphEdge, DigraphVertex
from .graph import (
    ConnectivityAnalysis,
    Digraph,
    ShortestPathFinder,
    ShortestPathResult,
    WeightFunc,
)
from .serialization import GraphSerializer

__all__ = [
    "ConnectivityAnalysis",
    "Digraph",
    "DigraphEdge",
    "DigraphError",
    "DigraphErrorKind",
    "DigraphVertex",
    "DuplicateEdgeError",
    "DuplicateResourceError",
    "DuplicateVertexError",
    "GraphSerializer",
    "ResourceNotFoundError",
    "SerializationError",
    "ShortestPathFinder",
    "ShortestPathResult",
    "UnknownEdgeError",
    "UnknownVertexError",
    "WeightFunc",
]
