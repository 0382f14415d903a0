from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from assetgraph.ir.source import SourceNode

# Systems and groups below this many distinct members never become containers
MIN_COMPOUND_MEMBERS = 2


class MembershipKind(str, Enum):
    SYSTEM = "system"
    GROUP = "group"


@dataclass(frozen=True)
class Membership:
    kind: MembershipKind
    name: str

    @property
    def key(self) -> str:
        return f"{self.kind.value}:{self.name}"

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "name": self.name}


def system(name: str) -> Membership:
    return Membership(MembershipKind.SYSTEM, name)


def group(name: str) -> Membership:
    return Membership(MembershipKind.GROUP, name)


def unique_names(names: List[str]) -> List[str]:
    """Order-preserving set semantics over a membership list."""
    return list(dict.fromkeys(names))


@dataclass
class MembershipAnalysis:
    systems: Dict[str, List[SourceNode]] = field(default_factory=dict)
    groups: Dict[str, List[SourceNode]] = field(default_factory=dict)
    # node identity -> every membership it holds, only when it holds more than one
    conflicts: Dict[str, List[Membership]] = field(default_factory=dict)

    def members_of(self, membership: Membership) -> List[SourceNode]:
        index = self.systems if membership.kind == MembershipKind.SYSTEM else self.groups
        return index.get(membership.name, [])

    def qualifies(self, membership: Membership) -> bool:
        return len(self.members_of(membership)) >= MIN_COMPOUND_MEMBERS
