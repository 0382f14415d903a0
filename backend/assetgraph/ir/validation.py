from dataclasses import dataclass
from typing import List
from .errors import Diagnostic


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[Diagnostic]

    @classmethod
    def success(cls):
        return cls(is_valid=True, errors=[])

    @classmethod
    def failure(cls, errors: List[Diagnostic]):
        return cls(is_valid=False, errors=errors)
