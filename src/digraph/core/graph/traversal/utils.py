"""
Utility functions for path finding operations.
"""

import math
from typing import Any

from digraph.core.models import DigraphEdge
from .types import WeightFunc

# Distance assigned to vertices not (yet) reached by a search
INFINITY = math.inf


def get_edge_weight(edge: DigraphEdge[Any], weight_func: WeightFunc) -> float:
    """
    Get the weight of an edge by applying weight_func to its payload.

    Raises:
        ValueError: If the weight is not a number, is NaN or infinite, or is negative
    """
    weight = weight_func(edge.info)
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ValueError(
            f"Weight of edge {edge.from_vertex}->{edge.to_vertex} must be numeric, "
            f"got {type(weight).__name__}"
        )
    if math.isnan(weight) or math.isinf(weight):
        raise ValueError(f"Weight of edge {edge.from_vertex}->{edge.to_vertex} must be finite")
    if weight < 0:
        raise ValueError(
            f"Weight of edge {edge.from_vertex}->{edge.to_vertex} must be non-negative, got {weight}"
        )
    return float(weight)
