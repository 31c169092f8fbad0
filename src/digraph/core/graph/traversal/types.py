"""Type definitions for graph path finding."""

from typing import Any, Callable, Dict

# Type alias for weight functions: maps an edge payload to a non-negative weight
WeightFunc = Callable[[Any], float]

# Type alias for predecessor maps produced by shortest path searches
PredecessorMap = Dict[int, int]
