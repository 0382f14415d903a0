from assetgraph.renderer.common import IdMapper, children_by_parent, sanitize_label
from assetgraph.visual.visual_schema import Compound, MappedGraph


def render_mermaid(graph: MappedGraph, direction: str = "TD") -> str:
    """
    Converts a MappedGraph → Mermaid flowchart.
    Each compound becomes a subgraph; containment follows parent ids.
    """
    ids = IdMapper()
    lines = [f"flowchart {direction}"]
    children = children_by_parent(graph)

    def emit(parent_key, depth: int) -> None:
        indent = "  " * depth
        for element in children.get(parent_key, []):
            element_id = ids.get(element.id)
            label = sanitize_label(element.label)
            if isinstance(element, Compound):
                lines.append(f'{indent}subgraph {element_id}["{label}"]')
                emit(str(element.id), depth + 1)
                lines.append(f"{indent}end")
            else:
                lines.append(f'{indent}{element_id}["{label}"]')

    emit(None, 1)

    # -------------------------
    # Edges (with labels)
    # -------------------------
    for edge in graph.edges:
        src = ids.get(edge.source_id)
        tgt = ids.get(edge.target_id)
        label = sanitize_label(edge.label)
        if label:
            lines.append(f"  {src} -->|{label}| {tgt}")
        else:
            lines.append(f"  {src} --> {tgt}")

    return "\n".join(lines)
