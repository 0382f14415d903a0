"""
Graph Validator - Checks the structural soundness of a mapped compound graph.

Catches issues like:
- Duplicate element IDs
- Parents that are missing or are not containers
- Containment other than group-in-system, or deeper than one level
- Edges referencing missing display nodes
- Display nodes that cannot be traced back to a source node
"""

import logging
from dataclasses import dataclass, field
from typing import List, Dict, Optional
from enum import Enum
from collections import defaultdict

from assetgraph.ir.errors import GraphValidationError
from assetgraph.mapping.membership import MembershipKind
from assetgraph.visual.visual_schema import MappedGraph

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    ERROR = "error"      # Renderer would reject or misplace elements
    WARNING = "warning"  # Graph renders but is suspicious
    INFO = "info"        # Worth knowing


@dataclass
class ValidationIssue:
    """A single validation issue found in the graph"""
    severity: ValidationSeverity
    code: str           # Machine-readable issue code
    message: str        # Human-readable description
    element_id: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "element_id": self.element_id,
            "suggestion": self.suggestion,
        }


@dataclass
class GraphValidationResult:
    """Result of graph validation"""
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.INFO)

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }

    def get_summary(self) -> str:
        status = "Valid" if self.is_valid else "Invalid"
        return (
            f"{status} | "
            f"Errors: {self.error_count}, Warnings: {self.warning_count}, Info: {self.info_count}"
        )


class GraphValidator:
    """
    Validates a MappedGraph before it is handed to the renderer.

    Usage:
        result = GraphValidator().validate(graph)
        if not result.is_valid:
            for issue in result.issues:
                logger.error("[%s] %s", issue.code, issue.message)
    """

    def __init__(self, strict_mode: bool = False):
        self.strict_mode = strict_mode

    def validate(self, graph: MappedGraph) -> GraphValidationResult:
        issues: List[ValidationIssue] = []

        issues.extend(self._check_empty_graph(graph))
        issues.extend(self._check_duplicate_ids(graph))
        issues.extend(self._check_parents(graph))
        issues.extend(self._check_nesting(graph))
        issues.extend(self._check_edge_references(graph))
        issues.extend(self._check_traceability(graph))
        issues.extend(self._check_self_loops(graph))
        issues.extend(self._check_orphaned_nodes(graph))

        has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
        has_warnings = any(i.severity == ValidationSeverity.WARNING for i in issues)

        is_valid = not has_errors
        if self.strict_mode:
            is_valid = not has_errors and not has_warnings

        result = GraphValidationResult(is_valid=is_valid, issues=issues, stats=graph.stats())
        logger.debug("Graph validation: %s", result.get_summary())
        return result

    def _check_empty_graph(self, graph: MappedGraph) -> List[ValidationIssue]:
        if graph.nodes:
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.WARNING,
            code="NO_NODES",
            message="Graph has no display nodes",
            suggestion="Check that source nodes were supplied",
        )]

    def _check_duplicate_ids(self, graph: MappedGraph) -> List[ValidationIssue]:
        issues = []
        seen: Dict[str, int] = defaultdict(int)
        for element in graph.elements():
            seen[str(element.id)] += 1
        for element_id, count in seen.items():
            if count > 1:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="DUPLICATE_ID",
                    message=f"Element ID '{element_id}' appears {count} times",
                    element_id=element_id,
                    suggestion="Mint every id from one allocator per pass",
                ))
        return issues

    def _check_parents(self, graph: MappedGraph) -> List[ValidationIssue]:
        issues = []
        compound_ids = {str(c.id) for c in graph.compounds}
        node_ids = {str(n.id) for n in graph.nodes}

        for element in [*graph.compounds, *graph.nodes]:
            if element.parent_id is None:
                continue
            parent = str(element.parent_id)
            if parent in compound_ids:
                continue
            if parent in node_ids:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="PARENT_NOT_COMPOUND",
                    message=f"Element '{element.id}' is parented to display node '{parent}'",
                    element_id=str(element.id),
                    suggestion="Only system or group compounds may contain elements",
                ))
            else:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="MISSING_PARENT",
                    message=f"Element '{element.id}' references non-existent parent '{parent}'",
                    element_id=str(element.id),
                ))
        return issues

    def _check_nesting(self, graph: MappedGraph) -> List[ValidationIssue]:
        issues = []
        for compound in graph.compounds:
            if compound.parent_id is None:
                continue
            parent = graph.compound_by_id(compound.parent_id)
            if parent is None:
                continue  # reported by _check_parents

            if compound.kind != MembershipKind.GROUP or parent.kind != MembershipKind.SYSTEM:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="INVALID_NESTING",
                    message=(
                        f"{compound.kind.value.title()} '{compound.name}' is nested in "
                        f"{parent.kind.value} '{parent.name}'; only groups nest in systems"
                    ),
                    element_id=str(compound.id),
                ))
            elif parent.parent_id is not None:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="INVALID_NESTING",
                    message=f"Group '{compound.name}' sits more than one level deep",
                    element_id=str(compound.id),
                ))
        return issues

    def _check_edge_references(self, graph: MappedGraph) -> List[ValidationIssue]:
        issues = []
        node_ids = {str(n.id) for n in graph.nodes}
        for edge in graph.edges:
            if str(edge.source_id) not in node_ids:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="MISSING_SOURCE_NODE",
                    message=f"Edge '{edge.id}' references non-existent source node '{edge.source_id}'",
                    element_id=str(edge.id),
                ))
            if str(edge.target_id) not in node_ids:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="MISSING_TARGET_NODE",
                    message=f"Edge '{edge.id}' references non-existent target node '{edge.target_id}'",
                    element_id=str(edge.id),
                ))
        return issues

    def _check_traceability(self, graph: MappedGraph) -> List[ValidationIssue]:
        issues = []
        for node in graph.nodes:
            if graph.original_node_id(node.id) != node.original_node_id:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="UNTRACEABLE_NODE",
                    message=f"Display node '{node.id}' does not map back to source node '{node.original_node_id}'",
                    element_id=str(node.id),
                ))
        return issues

    def _check_self_loops(self, graph: MappedGraph) -> List[ValidationIssue]:
        return [
            ValidationIssue(
                severity=ValidationSeverity.INFO,
                code="SELF_LOOP",
                message=f"Edge '{edge.id}' loops on display node '{edge.source_id}'",
                element_id=str(edge.id),
            )
            for edge in graph.edges
            if edge.source_id == edge.target_id
        ]

    def _check_orphaned_nodes(self, graph: MappedGraph) -> List[ValidationIssue]:
        connected = set()
        for edge in graph.edges:
            connected.add(str(edge.source_id))
            connected.add(str(edge.target_id))

        return [
            ValidationIssue(
                severity=ValidationSeverity.INFO,
                code="ORPHANED_NODE",
                message=f"Display node '{node.label}' ({node.id}) has no connections",
                element_id=str(node.id),
            )
            for node in graph.nodes
            if str(node.id) not in connected
        ]


def validate_graph(graph: MappedGraph, strict: bool = False) -> GraphValidationResult:
    """Convenience function to validate a graph."""
    return GraphValidator(strict_mode=strict).validate(graph)


def raise_on_errors(graph: MappedGraph) -> None:
    """Validate graph and raise if errors found."""
    result = validate_graph(graph)
    if not result.is_valid:
        error_messages = [
            f"[{i.code}] {i.message}"
            for i in result.issues
            if i.severity == ValidationSeverity.ERROR
        ]
        raise GraphValidationError(
            f"Graph validation failed with {result.error_count} errors:\n" +
            "\n".join(error_messages)
        )
