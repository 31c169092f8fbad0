"""Graph serialization and deserialization operations.

This module converts a Digraph to and from plain data:
- Dictionary form suitable for embedding in other documents
- JSON text
- Schema validation of documents before a graph is rebuilt from them

Payloads are written as-is, so only graphs whose vertex and edge payloads are
JSON-compatible can be serialized. Reading and writing files is left to the
caller.
"""

import json
import logging
from typing import Any, Dict, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import SerializationError
from .graph import Digraph
from .graph.base import is_vertex_id

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "schema_version": {"type": "string"},
        "vertices": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"id": {"type": "integer"}, "info": {}},
                "required": ["id", "info"],
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "from": {"type": "integer"},
                    "to": {"type": "integer"},
                    "info": {},
                },
                "required": ["from", "to", "info"],
            },
        },
    },
    "required": ["vertices", "edges"],
}


class GraphSerializer:
    """Handles graph serialization operations."""

    @staticmethod
    def to_dict(graph: Digraph[Any, Any]) -> Dict[str, Any]:
        """Convert graph to dictionary format.

        Args:
            graph: Graph to convert

        Returns:
            Dictionary containing serialized graph data
        """
        adjacency = graph.adjacency
        return {
            "schema_version": SCHEMA_VERSION,
            "vertices": [
                {"id": vertex, "info": record.info} for vertex, record in adjacency.items()
            ],
            "edges": [
                {"from": edge.from_vertex, "to": edge.to_vertex, "info": edge.info}
                for record in adjacency.values()
                for edge in record.edges
            ],
        }

    @staticmethod
    def to_json(graph: Digraph[Any, Any], indent: Optional[int] = None) -> str:
        """Convert graph to JSON string.

        Args:
            graph: Graph to convert
            indent: Number of spaces for pretty printing (default: None)

        Returns:
            JSON string representation of graph

        Raises:
            SerializationError: If a payload cannot be represented as JSON
        """
        try:
            return json.dumps(GraphSerializer.to_dict(graph), indent=indent)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Graph payloads are not JSON serializable: {e}") from e

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Digraph[Any, Any]:
        """Create graph from dictionary data.

        The document is validated against GRAPH_SCHEMA before any vertex is
        added. Structural problems (repeated vertex ids, edges naming missing
        vertices, repeated edges) surface as the usual DigraphError subclasses.

        Args:
            data: Dictionary containing graph data

        Returns:
            The rebuilt graph

        Raises:
            SerializationError: If the document does not match the schema
        """
        try:
            json_validate(instance=data, schema=GRAPH_SCHEMA)
        except JsonSchemaError as e:
            raise SerializationError(f"Invalid graph data format: {e.message}") from e

        version = data.get("schema_version", SCHEMA_VERSION)
        if version != SCHEMA_VERSION:
            raise SerializationError(f"Unsupported schema version: {version}")

        # JSON Schema "integer" also accepts floats such as 1.0
        for vertex in data["vertices"]:
            if not is_vertex_id(vertex["id"]):
                raise SerializationError(
                    f"Invalid graph data format: vertex id {vertex['id']!r} is not an integer"
                )
        for edge in data["edges"]:
            for endpoint in ("from", "to"):
                if not is_vertex_id(edge[endpoint]):
                    raise SerializationError(
                        f"Invalid graph data format: edge endpoint {edge[endpoint]!r} is not an integer"
                    )

        graph = Digraph.from_edges(
            ((vertex["id"], vertex["info"]) for vertex in data["vertices"]),
            ((edge["from"], edge["to"], edge["info"]) for edge in data["edges"]),
        )
        logger.debug(
            "Loaded graph with %d vertices and %d edges",
            graph.vertex_count(),
            graph.edge_count(),
        )
        return graph

    @staticmethod
    def from_json(json_str: str) -> Digraph[Any, Any]:
        """Create graph from JSON string.

        Args:
            json_str: JSON string containing graph data

        Returns:
            The rebuilt graph

        Raises:
            SerializationError: If JSON is invalid
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid JSON format: {e}") from e
        return GraphSerializer.from_dict(data)
