import logging
from typing import Dict, List

from assetgraph.ir.source import SourceNode
from assetgraph.ir.validation import ValidationResult
from assetgraph.mapping.stage import MappingStage
from assetgraph.mapping.membership import (
    Membership,
    MembershipAnalysis,
    group,
    system,
    unique_names,
)

logger = logging.getLogger(__name__)


def _index_members(index: Dict[str, List[SourceNode]], names: List[str], node: SourceNode) -> None:
    for name in names:
        index.setdefault(name, []).append(node)


def analyze_membership(nodes: List[SourceNode]) -> MembershipAnalysis:
    """
    Build system -> members and group -> members indexes in input order.

    A node that lists the same name twice is indexed once, so member counts
    are counts of distinct nodes.
    """
    analysis = MembershipAnalysis()

    for node in nodes:
        systems = unique_names(node.systems)
        groups = unique_names(node.groups)
        _index_members(analysis.systems, systems, node)
        _index_members(analysis.groups, groups, node)

        memberships: List[Membership] = [system(s) for s in systems] + [group(g) for g in groups]
        if len(memberships) > 1:
            analysis.conflicts[node.identity] = memberships

    return analysis


class MembershipStage(MappingStage):
    name = "membership"

    def run(self, context) -> ValidationResult:
        context.analysis = analyze_membership(context.nodes)

        for node in context.nodes:
            for kind, names in (("system", node.systems), ("group", node.groups)):
                repeated = sorted({n for n in names if names.count(n) > 1})
                for name in repeated:
                    context.add_diagnostic(
                        "info",
                        "DUPLICATE_MEMBERSHIP",
                        f"Node '{node.identity}' lists {kind} '{name}' more than once; counted once",
                        node.identity,
                    )

        # Multi-membership is expected; it is resolved downstream by duplication
        for node_id, memberships in context.analysis.conflicts.items():
            listed = ", ".join(m.key for m in memberships)
            context.add_diagnostic(
                "info",
                "MULTI_MEMBERSHIP",
                f"Node '{node_id}' belongs to {len(memberships)} containers: {listed}",
                node_id,
            )

        logger.debug(
            "Membership: %d systems, %d groups, %d multi-member nodes",
            len(context.analysis.systems),
            len(context.analysis.groups),
            len(context.analysis.conflicts),
        )
        return ValidationResult.success()
