from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayId:
    """
    Opaque identifier of a display element.

    Only the serialization boundary turns it into text; inside the mapper it is
    compared and hashed as a value.
    """
    prefix: str
    sequence: int

    def __str__(self) -> str:
        return f"{self.prefix}-{self.sequence}"


class IdentifierAllocator:
    """Mints collision-free display ids for a single mapping pass."""

    def __init__(self):
        self._counter = 0

    def generate_id(self, prefix: str = "element") -> DisplayId:
        self._counter += 1
        return DisplayId(prefix=prefix, sequence=self._counter)

    def reset(self) -> None:
        self._counter = 0

    @property
    def issued(self) -> int:
        return self._counter
