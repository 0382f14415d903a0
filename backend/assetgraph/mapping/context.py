from dataclasses import dataclass, field
from typing import Dict, List, Optional

from assetgraph.ir.source import SourceNode, SourceEdge
from assetgraph.ir.errors import Diagnostic
from assetgraph.mapping.identifiers import DisplayId, IdentifierAllocator
from assetgraph.mapping.membership import Membership, MembershipAnalysis
from assetgraph.mapping.routing import EdgeRouting
from assetgraph.visual.visual_schema import Compound, DisplayNode, DisplayEdge, MappedGraph


@dataclass
class MappingContext:
    # Raw input (read-only)
    nodes: List[SourceNode]
    edges: List[SourceEdge] = field(default_factory=list)

    # Per-call options
    routing: EdgeRouting = EdgeRouting.FIRST_INSTANCE
    system_names: Dict[str, str] = field(default_factory=dict)
    include_label_ids: bool = True

    ids: IdentifierAllocator = field(default_factory=IdentifierAllocator)

    # Membership + hierarchy
    analysis: Optional[MembershipAnalysis] = None
    hierarchy: Dict[str, str] = field(default_factory=dict)   # group name -> containing system name

    # Display graph under construction
    compound_mapping: Dict[str, DisplayId] = field(default_factory=dict)  # membership key -> compound id
    compounds: List[Compound] = field(default_factory=list)
    display_nodes: List[DisplayNode] = field(default_factory=list)
    display_edges: List[DisplayEdge] = field(default_factory=list)

    # Reverse mappings
    node_mapping: Dict[str, List[DisplayId]] = field(default_factory=dict)
    edge_mapping: Dict[str, List[DisplayId]] = field(default_factory=dict)
    dropped_edges: List[str] = field(default_factory=list)

    diagnostics: List[Diagnostic] = field(default_factory=list)

    def add_diagnostic(self, level: str, code: str, message: str, object_id: Optional[str] = None):
        self.diagnostics.append(Diagnostic(level=level, code=code, message=message, object_id=object_id))

    def compound_id_for(self, membership: Membership) -> Optional[DisplayId]:
        return self.compound_mapping.get(membership.key)

    def reset(self) -> None:
        """Drop everything derived from a previous pass; inputs and options stay."""
        self.ids.reset()
        self.analysis = None
        self.hierarchy = {}
        self.compound_mapping = {}
        self.compounds = []
        self.display_nodes = []
        self.display_edges = []
        self.node_mapping = {}
        self.edge_mapping = {}
        self.dropped_edges = []
        self.diagnostics = []

    def to_graph(self) -> MappedGraph:
        return MappedGraph(
            compounds=list(self.compounds),
            nodes=list(self.display_nodes),
            edges=list(self.display_edges),
            node_mapping={k: list(v) for k, v in self.node_mapping.items()},
            edge_mapping={k: list(v) for k, v in self.edge_mapping.items()},
            dropped_edges=list(self.dropped_edges),
            diagnostics=list(self.diagnostics),
        )
