"""
Validation module for mapped compound graphs.
"""

from assetgraph.validation.graph_validator import (
    GraphValidator,
    GraphValidationResult,
    ValidationIssue,
    ValidationSeverity,
    validate_graph,
    raise_on_errors,
)

__all__ = [
    "GraphValidator",
    "GraphValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "validate_graph",
    "raise_on_errors",
]
