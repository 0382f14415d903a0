from assetgraph.ir.source import SourceNode, SourceEdge
from assetgraph.ir.errors import (
    Diagnostic,
    MappingError,
    MappingInputError,
    GraphValidationError,
)
from assetgraph.ir.validation import ValidationResult

__all__ = [
    "SourceNode",
    "SourceEdge",
    "Diagnostic",
    "MappingError",
    "MappingInputError",
    "GraphValidationError",
    "ValidationResult",
]
