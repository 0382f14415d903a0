import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from assetgraph import config
from assetgraph.ir.source import SourceNode, SourceEdge
from assetgraph.ir.errors import MappingError, MappingInputError
from assetgraph.mapping.context import MappingContext
from assetgraph.mapping.routing import EdgeRouting
from assetgraph.mapping.membership_stage import MembershipStage
from assetgraph.mapping.hierarchy_stage import HierarchyStage
from assetgraph.mapping.compound_stage import CompoundStage
from assetgraph.mapping.node_stage import NodeInstanceStage
from assetgraph.mapping.edge_stage import EdgeProjectionStage
from assetgraph.visual.visual_schema import MappedGraph

logger = logging.getLogger(__name__)

Model = TypeVar("Model", bound=BaseModel)


# ============================================================
# Input coercion
# ============================================================

def _describe(raw: Any) -> str:
    if isinstance(raw, BaseModel):
        raw = raw.model_dump()
    if isinstance(raw, Mapping):
        title = raw.get("title") or raw.get("name")
        if title:
            return f" ({title!r})"
    return ""


def _coerce(model: Type[Model], raw: Any, index: int, kind: str) -> Model:
    if isinstance(raw, model):
        return raw
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
            for err in exc.errors()
        )
        raise MappingInputError(f"{kind} #{index}{_describe(raw)} is malformed: {problems}") from exc


def coerce_source_nodes(raw_nodes: Iterable[Any]) -> List[SourceNode]:
    """Validate source nodes, failing fast on the first malformed or repeated entry."""
    nodes: List[SourceNode] = []
    first_seen: Dict[str, int] = {}

    for index, raw in enumerate(raw_nodes):
        node = _coerce(SourceNode, raw, index, "Source node")
        if node.identity in first_seen:
            raise MappingInputError(
                f"Source node #{index}{_describe(raw)} repeats identity '{node.identity}' "
                f"of source node #{first_seen[node.identity]}"
            )
        first_seen[node.identity] = index
        nodes.append(node)

    return nodes


def coerce_source_edges(raw_edges: Iterable[Any]) -> List[SourceEdge]:
    return [_coerce(SourceEdge, raw, index, "Source edge") for index, raw in enumerate(raw_edges)]


# ============================================================
# Mapper
# ============================================================

class GraphMapper:
    """
    Converts source nodes and edges into a single-parent compound graph.

    The mapper holds only options; every call builds a fresh MappingContext,
    so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        routing: Optional[EdgeRouting | str] = None,
        system_names: Optional[Dict[str, str]] = None,
        include_label_ids: Optional[bool] = None,
    ):
        self.routing = EdgeRouting.parse(routing or config.EDGE_ROUTING)
        self.system_names = dict(system_names or {})
        self.include_label_ids = config.INCLUDE_LABEL_IDS if include_label_ids is None else include_label_ids

        self.stages = [
            MembershipStage(),
            HierarchyStage(),
            CompoundStage(),
            NodeInstanceStage(),
            EdgeProjectionStage(),
        ]

    def map(
        self,
        nodes: Iterable[Any],
        edges: Optional[Iterable[Any]] = None,
        routing: Optional[EdgeRouting | str] = None,
        system_names: Optional[Dict[str, str]] = None,
    ) -> MappedGraph:
        context = MappingContext(
            nodes=coerce_source_nodes(nodes),
            edges=coerce_source_edges(edges or []),
            routing=EdgeRouting.parse(routing) if routing else self.routing,
            system_names={**self.system_names, **(system_names or {})},
            include_label_ids=self.include_label_ids,
        )
        context.reset()

        for stage in self.stages:
            result = stage.run(context)
            if not result.is_valid:
                context.diagnostics.extend(result.errors)
                raise MappingError(f"Mapping stage '{stage.name}' failed", result.errors)

        graph = context.to_graph()
        logger.info(
            "Mapped %d nodes / %d edges -> %d compounds, %d display nodes, %d display edges",
            len(context.nodes),
            len(context.edges),
            len(graph.compounds),
            len(graph.nodes),
            len(graph.edges),
        )
        return graph


def map_graph(nodes: Iterable[Any], edges: Optional[Iterable[Any]] = None, **options) -> MappedGraph:
    """One-shot convenience wrapper around GraphMapper."""
    routing = options.pop("routing", None)
    return GraphMapper(**options).map(nodes, edges, routing=routing)
