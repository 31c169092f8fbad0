"""
Digraph - Generic Directed Graph Container

This package provides an in-memory directed graph with arbitrary per-vertex and
per-edge payloads. It includes:

- Vertex and edge storage with structural mutation and lookups
- A strong connectivity test and strongly connected components
- Single-source shortest paths using Dijkstra's algorithm
- Plain-data serialization validated against a JSON schema
"""

__version__ = "0.1.0"
__author__ = "Digraph Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("Digraph requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.exceptions import (
    DigraphError,
    DuplicateEdgeError,
    DuplicateVertexError,
    UnknownEdgeError,
    UnknownVertexError,
)
from .core.enums import DigraphErrorKind
from .core.graph import Digraph

__all__ = [
    "Digraph",
    "DigraphError",
    "DigraphErrorKind",
    "DuplicateEdgeError",
    "DuplicateVertexError",
    "UnknownEdgeError",
    "UnknownVertexError",
]
