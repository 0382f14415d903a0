from typing import Dict, List, Optional, Tuple, Union
from dataclasses import dataclass, field

from assetgraph.ir.errors import Diagnostic
from assetgraph.mapping.identifiers import DisplayId
from assetgraph.mapping.membership import Membership, MembershipKind

AnyId = Union[DisplayId, str]


@dataclass
class Compound:
    id: DisplayId
    kind: MembershipKind                    # system | group
    name: str                               # raw system label / group name
    label: str
    member_count: int                       # distinct source nodes referencing it
    parent_id: Optional[DisplayId] = None   # only a group nested in a system has one


@dataclass
class DisplayNode:
    id: DisplayId
    label: str
    original_node_id: str
    membership: Optional[Membership] = None  # None for a standalone instance
    parent_id: Optional[DisplayId] = None
    node_type: str = "default"
    classification: str = ""

    @property
    def membership_kind(self) -> str:
        return self.membership.kind.value if self.membership else "standalone"

    @property
    def membership_name(self) -> Optional[str]:
        return self.membership.name if self.membership else None


@dataclass
class DisplayEdge:
    id: DisplayId
    source_id: DisplayId
    target_id: DisplayId
    original_edge_id: str
    label: str = ""


@dataclass
class MappedGraph:
    compounds: List[Compound] = field(default_factory=list)
    nodes: List[DisplayNode] = field(default_factory=list)
    edges: List[DisplayEdge] = field(default_factory=list)
    node_mapping: Dict[str, List[DisplayId]] = field(default_factory=dict)
    edge_mapping: Dict[str, List[DisplayId]] = field(default_factory=dict)
    dropped_edges: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    # ---------- lookups ----------

    def elements(self) -> list:
        """Render order: system compounds, group compounds, display nodes, display edges."""
        return [*self.compounds, *self.nodes, *self.edges]

    def original_node_id(self, display_id: AnyId) -> Optional[str]:
        key = str(display_id)
        for original_id, display_ids in self.node_mapping.items():
            if any(str(d) == key for d in display_ids):
                return original_id
        return None

    def original_edge_id(self, display_id: AnyId) -> Optional[str]:
        key = str(display_id)
        for original_id, display_ids in self.edge_mapping.items():
            if any(str(d) == key for d in display_ids):
                return original_id
        return None

    def instances_of(self, original_id: str) -> List[DisplayNode]:
        wanted = set(self.node_mapping.get(original_id, []))
        return [n for n in self.nodes if n.id in wanted]

    def compound(self, kind: MembershipKind, name: str) -> Optional[Compound]:
        for c in self.compounds:
            if c.kind == kind and c.name == name:
                return c
        return None

    def compound_by_id(self, compound_id: Optional[AnyId]) -> Optional[Compound]:
        if compound_id is None:
            return None
        key = str(compound_id)
        return next((c for c in self.compounds if str(c.id) == key), None)

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.level == "warning"]

    # ---------- id-free views ----------

    def structure(self) -> Dict[str, List[Tuple]]:
        """
        Describe the graph without display ids. Two passes over the same input
        yield equal structures even though their ids differ.
        """
        def parent_ref(parent_id: Optional[DisplayId]):
            parent = self.compound_by_id(parent_id)
            return (parent.kind.value, parent.name) if parent else None

        by_id = {n.id: n.original_node_id for n in self.nodes}
        return {
            "compounds": [(c.kind.value, c.name, parent_ref(c.parent_id)) for c in self.compounds],
            "nodes": [
                (n.original_node_id, n.membership_kind, n.membership_name, parent_ref(n.parent_id))
                for n in self.nodes
            ],
            "edges": [
                (e.original_edge_id, by_id[e.source_id], by_id[e.target_id])
                for e in self.edges
            ],
        }

    def stats(self) -> Dict[str, int]:
        return {
            "compounds": len(self.compounds),
            "system_compounds": sum(1 for c in self.compounds if c.kind == MembershipKind.SYSTEM),
            "group_compounds": sum(1 for c in self.compounds if c.kind == MembershipKind.GROUP),
            "nested_groups": sum(1 for c in self.compounds if c.parent_id is not None),
            "display_nodes": len(self.nodes),
            "standalone_nodes": sum(1 for n in self.nodes if n.membership is None),
            "display_edges": len(self.edges),
            "dropped_edges": len(self.dropped_edges),
        }
