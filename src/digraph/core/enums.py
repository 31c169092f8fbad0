"""
Enumerations used by the directed graph container.

This module defines the error kinds reported by the container, so callers can
discriminate failures without depending on the exception class hierarchy.
"""

from enum import Enum


class DigraphErrorKind(Enum):
    """
    Enumeration of the precondition violations a Digraph can report.

    Every failure raised by the container is attributable to caller input and
    carries exactly one of these kinds.
    """

    DUPLICATE_VERTEX = "duplicate_vertex"  # Vertex id already present
    UNKNOWN_VERTEX = "unknown_vertex"  # Vertex id not present
    DUPLICATE_EDGE = "duplicate_edge"  # Edge already present for the ordered pair
    UNKNOWN_EDGE = "unknown_edge"  # No edge for the ordered pair
