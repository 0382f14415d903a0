import logging
from typing import Dict, List, Optional

from assetgraph.ir.source import SourceNode
from assetgraph.ir.validation import ValidationResult
from assetgraph.mapping.stage import MappingStage
from assetgraph.mapping.membership import Membership, group, system, unique_names
from assetgraph.visual.visual_schema import DisplayNode
from assetgraph.visual.node_types import determine_node_type

logger = logging.getLogger(__name__)


def effective_memberships(
    node: SourceNode,
    hierarchy: Dict[str, str],
    compound_keys,
) -> List[Membership]:
    """
    Memberships a node is displayed under, groups first then systems.

    1. Repeated names count once.
    2. A node in a group nested under system S does not also appear directly in S.
    3. Only memberships that materialized as containers remain.
    """
    systems = unique_names(node.systems)
    groups = unique_names(node.groups)

    for group_name in groups:
        parent_system = hierarchy.get(group_name)
        if parent_system is not None and parent_system in systems:
            systems.remove(parent_system)

    memberships = [group(g) for g in groups] + [system(s) for s in systems]
    return [m for m in memberships if m.key in compound_keys]


def display_label(node: SourceNode, include_id: bool = True) -> str:
    title = node.title or "Node"
    return f"{title} [{node.identity}]" if include_id else title


class NodeInstanceStage(MappingStage):
    name = "node_instances"

    def run(self, context) -> ValidationResult:
        for node in context.nodes:
            memberships = effective_memberships(node, context.hierarchy, context.compound_mapping)
            instances: List[DisplayNode] = []

            for membership in memberships:
                instances.append(self._instantiate(context, node, membership, context.compound_id_for(membership)))

            if not instances:
                instances.append(self._instantiate(context, node, None, None))

            context.display_nodes.extend(instances)
            context.node_mapping[node.identity] = [i.id for i in instances]

        logger.debug(
            "Instantiated %d display nodes for %d source nodes",
            len(context.display_nodes),
            len(context.nodes),
        )
        return ValidationResult.success()

    def _instantiate(self, context, node: SourceNode, membership: Optional[Membership], parent_id) -> DisplayNode:
        kind = membership.kind.value if membership else "standalone"
        return DisplayNode(
            id=context.ids.generate_id(f"node-{kind}"),
            label=display_label(node, context.include_label_ids),
            original_node_id=node.identity,
            membership=membership,
            parent_id=parent_id,
            node_type=determine_node_type(node.classification),
            classification=node.classification,
        )
