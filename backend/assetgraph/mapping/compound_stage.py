import logging

from assetgraph.ir.errors import Diagnostic
from assetgraph.ir.validation import ValidationResult
from assetgraph.mapping.stage import MappingStage
from assetgraph.mapping.membership import MembershipKind, group, system
from assetgraph.visual.visual_schema import Compound

logger = logging.getLogger(__name__)


class CompoundStage(MappingStage):
    """
    Emit one container per qualifying system, then one per qualifying group.

    Systems go first so a nested group can look up its parent's id.
    """
    name = "compounds"

    def run(self, context) -> ValidationResult:
        analysis = context.analysis
        if analysis is None:
            return ValidationResult.failure([Diagnostic(
                level="error",
                code="MEMBERSHIP_NOT_ANALYZED",
                message="Compound creation needs the membership analysis",
            )])

        # -------------------------
        # SYSTEM CONTAINERS
        # -------------------------
        for system_name, members in analysis.systems.items():
            membership = system(system_name)
            if not analysis.qualifies(membership):
                continue

            compound = Compound(
                id=context.ids.generate_id("compound-system"),
                kind=MembershipKind.SYSTEM,
                name=system_name,
                label=f"System: {context.system_names.get(system_name, system_name)}",
                member_count=len(members),
            )
            context.compounds.append(compound)
            context.compound_mapping[membership.key] = compound.id

        # -------------------------
        # GROUP CONTAINERS
        # -------------------------
        for group_name, members in analysis.groups.items():
            membership = group(group_name)
            if not analysis.qualifies(membership):
                continue

            parent_id = None
            parent_system = context.hierarchy.get(group_name)
            if parent_system is not None:
                parent_id = context.compound_id_for(system(parent_system))

            compound = Compound(
                id=context.ids.generate_id("compound-group"),
                kind=MembershipKind.GROUP,
                name=group_name,
                label=f"Group: {group_name}",
                member_count=len(members),
                parent_id=parent_id,
            )
            context.compounds.append(compound)
            context.compound_mapping[membership.key] = compound.id

        logger.debug("Created %d compounds", len(context.compounds))
        return ValidationResult.success()
