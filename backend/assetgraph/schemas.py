from pydantic import BaseModel
from typing import Optional, Dict, Any, List, Literal

from assetgraph.mapping.routing import EdgeRouting


class MapRequest(BaseModel):
    nodes: List[Dict[str, Any]] = []       # validated into SourceNode by the mapper
    edges: List[Dict[str, Any]] = []       # validated into SourceEdge by the mapper
    routing: Optional[EdgeRouting] = None  # falls back to ASSETGRAPH_EDGE_ROUTING
    format: Literal["elements", "cytoscape"] = "elements"
    system_names: Dict[str, str] = {}      # system label -> display name


class MapResponse(BaseModel):
    status: str                            # success | warning
    elements: List[Dict[str, Any]]
    warnings: List[Dict[str, Any]] = []
    diagnostics: List[Dict[str, Any]] = []
    node_mapping: Dict[str, List[str]] = {}
    edge_mapping: Dict[str, List[str]] = {}
    stats: Dict[str, int] = {}


class DiagramResponse(BaseModel):
    type: str
    source: str
