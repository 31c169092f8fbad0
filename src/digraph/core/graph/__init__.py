"""
Graph module for the digraph package.

This module provides the directed graph container together with its analysis
routines:
- Adjacency list storage with vertex and edge payloads
- Strong connectivity testing and component detection
- Single-source shortest paths with Dijkstra's algorithm
"""

from .base import Digraph
from .components import ConnectivityAnalysis
from .traversal import ShortestPathFinder, ShortestPathResult, WeightFunc

__all__ = [
    "ConnectivityAnalysis",
    "Digraph",
    "ShortestPathFinder",
    "ShortestPathResult",
    "WeightFunc",
]
