import re
from typing import Dict, List, Optional

from assetgraph.visual.visual_schema import MappedGraph


class IdMapper:
    """Maps opaque display ids to short renderer-safe sequential IDs."""

    def __init__(self, prefix: str = "nd"):
        self._prefix = prefix
        self._counter = 0
        self._map: dict[str, str] = {}

    def get(self, raw_id) -> str:
        key = str(raw_id)
        if key not in self._map:
            self._counter += 1
            self._map[key] = f"{self._prefix}{self._counter}"
        return self._map[key]


def sanitize_label(label: str) -> str:
    label = re.sub(r'["|#;]', "'", label or "")
    return re.sub(r"\s+", " ", label).strip()


def children_by_parent(graph: MappedGraph) -> Dict[Optional[str], List]:
    """Compounds and display nodes grouped under their parent id (None = top level), compounds first."""
    children: Dict[Optional[str], List] = {}
    for element in [*graph.compounds, *graph.nodes]:
        key = str(element.parent_id) if element.parent_id is not None else None
        children.setdefault(key, []).append(element)
    return children
