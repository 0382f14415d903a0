import logging

from fastapi import APIRouter, HTTPException

from assetgraph.schemas import MapRequest, MapResponse, DiagramResponse
from assetgraph.api.serializers import to_elements, to_cytoscape, serialize_mapping
from assetgraph.ir.errors import MappingError, MappingInputError
from assetgraph.mapping.controller import GraphMapper
from assetgraph.renderer import render_mermaid, render_d2
from assetgraph.validation import raise_on_errors
from assetgraph.visual.visual_schema import MappedGraph

logger = logging.getLogger(__name__)

router = APIRouter()


def _run_mapping(request: MapRequest) -> MappedGraph:
    try:
        graph = GraphMapper(system_names=request.system_names).map(
            request.nodes,
            request.edges,
            routing=request.routing,
        )
        # Structural errors here are mapper defects, not bad input
        raise_on_errors(graph)
        return graph
    except MappingInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except MappingError as e:
        logger.error("Mapping failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/map", response_model=MapResponse)
def map_elements(request: MapRequest):
    graph = _run_mapping(request)
    elements = to_cytoscape(graph) if request.format == "cytoscape" else to_elements(graph)
    warnings = [d.to_dict() for d in graph.warnings]

    return MapResponse(
        status="warning" if warnings else "success",
        elements=elements,
        warnings=warnings,
        diagnostics=[d.to_dict() for d in graph.diagnostics],
        node_mapping=serialize_mapping(graph.node_mapping),
        edge_mapping=serialize_mapping(graph.edge_mapping),
        stats=graph.stats(),
    )


@router.post("/map/mermaid", response_model=DiagramResponse)
def map_mermaid(request: MapRequest):
    graph = _run_mapping(request)
    return DiagramResponse(type="mermaid", source=render_mermaid(graph))


@router.post("/map/d2", response_model=DiagramResponse)
def map_d2(request: MapRequest):
    graph = _run_mapping(request)
    return DiagramResponse(type="d2", source=render_d2(graph))
