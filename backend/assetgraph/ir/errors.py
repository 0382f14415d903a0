from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Diagnostic:
    level: str          # info | warning | error
    code: str
    message: str
    object_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "code": self.code,
            "message": self.message,
            "object_id": self.object_id,
        }


class MappingError(Exception):
    """A mapping pass could not complete."""

    def __init__(self, message: str, diagnostics: Optional[List[Diagnostic]] = None):
        super().__init__(message)
        self.diagnostics = diagnostics or []


class MappingInputError(MappingError):
    """Source nodes or edges are malformed."""


class GraphValidationError(MappingError):
    """A mapped graph failed structural validation."""
