"""
Custom exceptions for the directed graph container.

This module defines the single error taxonomy used by the container. Every
exception raised by a graph operation is a DigraphError carrying a
human-readable reason and a discriminable DigraphErrorKind. The concrete
subclasses additionally derive from the generic "not found" and "duplicate"
resource errors so callers can catch them by category.
"""

from typing import ClassVar, Optional

from .enums import DigraphErrorKind


class ResourceNotFoundError(LookupError):
    """
    Raised when a requested resource is not found.

    Examples:
        * Vertex lookup by non-existent id
        * Edge lookup for a missing ordered pair
    """


class DuplicateResourceError(Exception):
    """
    Raised when attempting to create a duplicate resource.

    Examples:
        * Adding a vertex whose id is already taken
        * Adding a second edge for the same ordered vertex pair
    """


class DigraphError(Exception):
    """
    Base class for precondition violations reported by a Digraph.

    The container itself only raises the concrete subclasses, each of which
    fixes its kind. A bare DigraphError has kind None unless one is passed.

    Attributes:
        reason (str): Human-readable description of the failure
        kind (Optional[DigraphErrorKind]): Discriminable error kind
    """

    default_kind: ClassVar[Optional[DigraphErrorKind]] = None

    def __init__(self, reason: str, kind: Optional[DigraphErrorKind] = None):
        super().__init__(reason)
        self.reason = reason
        self.kind = kind if kind is not None else self.default_kind

    def __str__(self) -> str:
        """Format digraph error message."""
        return f"Digraph Error: {self.reason}"


class DuplicateVertexError(DigraphError, DuplicateResourceError):
    """
    Raised when adding a vertex whose id is already present in the graph.
    """

    default_kind = DigraphErrorKind.DUPLICATE_VERTEX


class UnknownVertexError(DigraphError, ResourceNotFoundError):
    """
    Raised when an operation names a vertex id that is not in the graph.

    Examples:
        * Removing a vertex that was never added
        * Adding an edge whose source or target is missing
        * Starting a shortest path search from a missing vertex
    """

    default_kind = DigraphErrorKind.UNKNOWN_VERTEX


class DuplicateEdgeError(DigraphError, DuplicateResourceError):
    """
    Raised when adding an edge for an ordered pair that already has one.
    """

    default_kind = DigraphErrorKind.DUPLICATE_EDGE


class UnknownEdgeError(DigraphError, ResourceNotFoundError):
    """
    Raised when an operation names an edge that is not in the graph.
    """

    default_kind = DigraphErrorKind.UNKNOWN_EDGE


class SerializationError(Exception):
    """
    Raised when a serialized graph document cannot be read or written.

    Examples:
        * Malformed JSON text
        * Document not matching the graph schema
        * Payloads that cannot be represented as JSON
    """

    def __str__(self) -> str:
        """Format serialization error message."""
        return f"Serialization Error: {super().__str__()}"
