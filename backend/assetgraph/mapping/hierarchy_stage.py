import logging
from collections import Counter
from typing import Dict

from assetgraph.ir.errors import Diagnostic
from assetgraph.ir.validation import ValidationResult
from assetgraph.mapping.stage import MappingStage
from assetgraph.mapping.membership import (
    MIN_COMPOUND_MEMBERS,
    MembershipAnalysis,
    system,
    unique_names,
)

logger = logging.getLogger(__name__)


def resolve_hierarchy(analysis: MembershipAnalysis, diagnostics: list | None = None) -> Dict[str, str]:
    """
    Decide which groups nest inside a system container.

    A group with enough members is nested in system S only when every member
    references S and no other system, and S is itself a container. Groups whose
    members span several systems stay top-level.

    Returns: { group_name: system_name } for nested groups only.
    """
    hierarchy: Dict[str, str] = {}

    for group_name, members in analysis.groups.items():
        if len(members) < MIN_COMPOUND_MEMBERS:
            continue

        references: Counter = Counter()
        for node in members:
            references.update(unique_names(node.systems))

        if len(references) == 1:
            system_name, referencing = next(iter(references.items()))
            if referencing == len(members) and analysis.qualifies(system(system_name)):
                hierarchy[group_name] = system_name
                logger.debug("Group '%s' is contained in system '%s'", group_name, system_name)
            else:
                logger.debug(
                    "Group '%s' stays top-level: %d/%d members in system '%s'",
                    group_name, referencing, len(members), system_name,
                )
        elif len(references) > 1:
            logger.debug("Group '%s' spans %d systems; stays independent", group_name, len(references))
            if diagnostics is not None:
                spanned = ", ".join(references)
                diagnostics.append(Diagnostic(
                    level="info",
                    code="CROSS_SYSTEM_GROUP",
                    message=f"Group '{group_name}' spans systems {spanned}; kept as an independent container",
                    object_id=group_name,
                ))

    return hierarchy


class HierarchyStage(MappingStage):
    name = "hierarchy"

    def run(self, context) -> ValidationResult:
        if context.analysis is None:
            return ValidationResult.failure([Diagnostic(
                level="error",
                code="MEMBERSHIP_NOT_ANALYZED",
                message="Hierarchy resolution needs the membership analysis",
            )])

        context.hierarchy = resolve_hierarchy(context.analysis, context.diagnostics)
        return ValidationResult.success()
