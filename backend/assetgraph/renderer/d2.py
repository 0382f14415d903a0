"""
D2 Diagram Renderer

Compounds render as nested D2 containers; edges address nodes by their full
container path (e.g. `c1.c2.n3`), which D2 requires for nested shapes.

Docs: https://d2lang.com/
"""

from typing import Dict, List

from assetgraph.renderer.common import IdMapper, children_by_parent, sanitize_label
from assetgraph.visual.visual_schema import Compound, MappedGraph


def render_d2(graph: MappedGraph, direction: str = "down") -> str:
    ids = IdMapper()
    lines: List[str] = [f"direction: {direction}", ""]
    children = children_by_parent(graph)
    paths: Dict[str, str] = {}

    def emit(parent_key, parent_path: str, depth: int) -> None:
        indent = "  " * depth
        for element in children.get(parent_key, []):
            short_id = ids.get(element.id)
            path = f"{parent_path}.{short_id}" if parent_path else short_id
            paths[str(element.id)] = path
            label = sanitize_label(element.label)
            if isinstance(element, Compound):
                lines.append(f'{indent}{short_id}: "{label}" {{')
                emit(str(element.id), path, depth + 1)
                lines.append(f"{indent}}}")
            else:
                lines.append(f'{indent}{short_id}: "{label}"')

    emit(None, "", 0)
    lines.append("")

    for edge in graph.edges:
        source = paths[str(edge.source_id)]
        target = paths[str(edge.target_id)]
        label = sanitize_label(edge.label)
        if label:
            lines.append(f'{source} -> {target}: "{label}"')
        else:
            lines.append(f"{source} -> {target}")

    return "\n".join(lines)
