# Display-side model of a mapped compound graph

from assetgraph.visual.visual_schema import Compound, DisplayNode, DisplayEdge, MappedGraph
from assetgraph.visual.node_types import determine_node_type, compound_classes, node_classes

__all__ = [
    "Compound",
    "DisplayNode",
    "DisplayEdge",
    "MappedGraph",
    "determine_node_type",
    "compound_classes",
    "node_classes",
]
