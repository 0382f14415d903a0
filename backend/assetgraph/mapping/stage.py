from abc import ABC, abstractmethod
from assetgraph.mapping.context import MappingContext
from assetgraph.ir.validation import ValidationResult


class MappingStage(ABC):
    """One step of a mapping pass. The controller runs stages in a fixed order."""
    name: str

    @abstractmethod
    def run(self, context: MappingContext) -> ValidationResult:
        """
        Fill in this stage's part of the display graph on `context`.

        Earlier stages' results (membership analysis, hierarchy, compound ids,
        display ids) are read from the context, never recomputed. Returning a
        failure stops the pass.
        """
