"""
Graph traversal algorithms and path finding functionality.
"""

from .path_models import ShortestPathResult
from .shortest_path import ShortestPathFinder
from .types import PredecessorMap, WeightFunc
from .utils import INFINITY, get_edge_weight

__all__ = [
    "INFINITY",
    "PredecessorMap",
    "ShortestPathFinder",
    "ShortestPathResult",
    "WeightFunc",
    "get_edge_weight",
]
