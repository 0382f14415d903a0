from assetgraph.visual.visual_schema import Compound, DisplayNode

# First match wins; keywords are matched as substrings of the lowercased classification
NODE_TYPE_KEYWORDS = [
    ("server", ("server",)),
    ("database", ("database", "db")),
    ("application", ("application", "app")),
    ("network", ("network", "switch", "router")),
]


def determine_node_type(classification: str) -> str:
    """
    Map an asset classification tag onto the coarse node type the renderer keys on.
    Unknown or empty classifications fall back to 'default'.
    """
    text = (classification or "").lower()
    for node_type, keywords in NODE_TYPE_KEYWORDS:
        if any(k in text for k in keywords):
            return node_type
    return "default"


def compound_classes(compound: Compound) -> str:
    return f"compound-node {compound.kind.value}-compound"


def node_classes(node: DisplayNode) -> str:
    return " ".join([
        "display-node",
        f"node-{node.node_type}",
        f"member-{node.membership_kind}",
    ])
