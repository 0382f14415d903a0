import logging

from assetgraph.ir.validation import ValidationResult
from assetgraph.mapping.stage import MappingStage
from assetgraph.mapping.routing import route_pairs
from assetgraph.visual.visual_schema import DisplayEdge

logger = logging.getLogger(__name__)


class EdgeProjectionStage(MappingStage):
    """Rewrite logical edges between source identities into edges between display instances."""
    name = "edge_projection"

    def run(self, context) -> ValidationResult:
        for edge in context.edges:
            sources = context.node_mapping.get(edge.from_id, [])
            targets = context.node_mapping.get(edge.to_id, [])

            if not sources or not targets:
                missing = [end for end, found in ((edge.from_id, sources), (edge.to_id, targets)) if not found]
                message = f"Edge '{edge.identity}' dropped: no display instance for {', '.join(repr(m) for m in missing)}"
                logger.warning(message)
                context.dropped_edges.append(edge.identity)
                context.add_diagnostic("warning", "DANGLING_EDGE", message, edge.identity)
                continue

            for source_id, target_id in route_pairs(context.routing, sources, targets):
                display_edge = DisplayEdge(
                    id=context.ids.generate_id("edge"),
                    source_id=source_id,
                    target_id=target_id,
                    original_edge_id=edge.identity,
                    label=edge.relationship_tag,
                )
                context.display_edges.append(display_edge)
                context.edge_mapping.setdefault(edge.identity, []).append(display_edge.id)

        logger.debug(
            "Projected %d display edges (%d dropped)",
            len(context.display_edges),
            len(context.dropped_edges),
        )
        return ValidationResult.success()
