"""Compound-graph mapping for the asset inventory viewer."""

from assetgraph.ir import SourceNode, SourceEdge, MappingError, MappingInputError
from assetgraph.mapping.controller import GraphMapper, map_graph
from assetgraph.mapping.routing import EdgeRouting
from assetgraph.visual.visual_schema import MappedGraph
from assetgraph.api.serializers import to_elements, to_cytoscape

__all__ = [
    "SourceNode",
    "SourceEdge",
    "MappingError",
    "MappingInputError",
    "GraphMapper",
    "map_graph",
    "EdgeRouting",
    "MappedGraph",
    "to_elements",
    "to_cytoscape",
]
