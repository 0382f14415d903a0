from typing import Any, Dict, List

from assetgraph.visual.visual_schema import Compound, DisplayEdge, DisplayNode, MappedGraph
from assetgraph.visual.node_types import compound_classes, node_classes

# Display ids become text here and nowhere earlier.


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop optional keys that carry no value."""
    return {k: v for k, v in data.items() if v is not None}


def serialize_compound(compound: Compound) -> Dict[str, Any]:
    return _compact({
        "id": str(compound.id),
        "label": compound.label,
        "parentId": str(compound.parent_id) if compound.parent_id is not None else None,
        "isCompound": True,
        "compoundKind": compound.kind.value,
        "compoundName": compound.name,
    })


def serialize_node(node: DisplayNode) -> Dict[str, Any]:
    return _compact({
        "id": str(node.id),
        "label": node.label,
        "parentId": str(node.parent_id) if node.parent_id is not None else None,
        "originalNodeId": node.original_node_id,
        "membershipKind": node.membership_kind,
        "membershipName": node.membership_name,
        "nodeType": node.node_type,
        "classification": node.classification or None,
    })


def serialize_edge(edge: DisplayEdge) -> Dict[str, Any]:
    return _compact({
        "id": str(edge.id),
        "sourceId": str(edge.source_id),
        "targetId": str(edge.target_id),
        "originalEdgeId": edge.original_edge_id,
        "label": edge.label or None,
    })


def to_elements(graph: MappedGraph) -> List[Dict[str, Any]]:
    """Flat ordered element list for the compound-graph renderer."""
    return (
        [serialize_compound(c) for c in graph.compounds]
        + [serialize_node(n) for n in graph.nodes]
        + [serialize_edge(e) for e in graph.edges]
    )


def to_cytoscape(graph: MappedGraph) -> List[Dict[str, Any]]:
    """Same elements in Cytoscape's `{group, data, classes}` shape."""
    elements: List[Dict[str, Any]] = []

    for compound in graph.compounds:
        data = serialize_compound(compound)
        if "parentId" in data:
            data["parent"] = data.pop("parentId")
        elements.append({"group": "nodes", "data": data, "classes": compound_classes(compound)})

    for node in graph.nodes:
        data = serialize_node(node)
        if "parentId" in data:
            data["parent"] = data.pop("parentId")
        elements.append({"group": "nodes", "data": data, "classes": node_classes(node)})

    for edge in graph.edges:
        data = serialize_edge(edge)
        data["source"] = data.pop("sourceId")
        data["target"] = data.pop("targetId")
        elements.append({"group": "edges", "data": data})

    return elements


def serialize_mapping(mapping: Dict[str, list]) -> Dict[str, List[str]]:
    return {original_id: [str(d) for d in display_ids] for original_id, display_ids in mapping.items()}
