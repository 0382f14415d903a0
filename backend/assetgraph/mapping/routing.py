from enum import Enum
from typing import Callable, Dict, List, Tuple

from assetgraph.ir.errors import MappingError
from assetgraph.mapping.identifiers import DisplayId

Pair = Tuple[DisplayId, DisplayId]


class EdgeRouting(str, Enum):
    FIRST_INSTANCE = "first_instance"   # one display edge between the first copies
    ALL_PAIRS = "all_pairs"             # every source copy to every target copy

    @classmethod
    def parse(cls, value) -> "EdgeRouting":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(r.value for r in cls)
            raise MappingError(f"Unknown edge routing '{value}' (expected one of: {choices})")


def _first_instance(sources: List[DisplayId], targets: List[DisplayId]) -> List[Pair]:
    return [(sources[0], targets[0])]


def _all_pairs(sources: List[DisplayId], targets: List[DisplayId]) -> List[Pair]:
    return [(src, tgt) for src in sources for tgt in targets]


ROUTING_STRATEGIES: Dict[EdgeRouting, Callable[[List[DisplayId], List[DisplayId]], List[Pair]]] = {
    EdgeRouting.FIRST_INSTANCE: _first_instance,
    EdgeRouting.ALL_PAIRS: _all_pairs,
}


def route_pairs(routing: EdgeRouting, sources: List[DisplayId], targets: List[DisplayId]) -> List[Pair]:
    """Choose which display instances a logical edge connects. Both lists must be non-empty."""
    return ROUTING_STRATEGIES[routing](sources, targets)
