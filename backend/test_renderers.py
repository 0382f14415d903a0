"""Test script for serializers and text renderers"""

from assetgraph import map_graph, to_elements, to_cytoscape
from assetgraph.api.serializers import serialize_mapping
from assetgraph.renderer import render_mermaid, render_d2
from assetgraph.renderer.common import IdMapper, sanitize_label


def scenario():
    nodes = [
        {"identity": "A", "title": "Alpha", "systems": ["Prod"], "groups": ["Web"], "classification": "Web Server"},
        {"identity": "B", "title": "Beta", "systems": ["Prod"], "groups": ["Web"]},
        {"identity": "C", "title": "Gamma", "systems": ["Prod"]},
    ]
    edges = [
        {"identity": "e1", "from_id": "A", "to_id": "C", "relationship_tag": "DEPENDS_ON"},
        {"identity": "e2", "from_id": "B", "to_id": "C", "relationship_tag": "DEPENDS_ON"},
    ]
    return map_graph(nodes, edges)


# -------------------------
# Element serialization
# -------------------------

def test_to_elements_shape():
    elements = to_elements(scenario())
    assert len(elements) == 7

    prod, web, alpha, beta, gamma, e1, e2 = elements
    assert prod == {
        "id": "compound-system-1",
        "label": "System: Prod",
        "isCompound": True,
        "compoundKind": "system",
        "compoundName": "Prod",
    }
    assert web["parentId"] == "compound-system-1"
    assert alpha == {
        "id": "node-group-3",
        "label": "Alpha [A]",
        "parentId": "compound-group-2",
        "originalNodeId": "A",
        "membershipKind": "group",
        "membershipName": "Web",
        "nodeType": "server",
        "classification": "Web Server",
    }
    assert "classification" not in beta
    assert gamma["parentId"] == "compound-system-1"
    assert e1 == {
        "id": "edge-6",
        "sourceId": "node-group-3",
        "targetId": "node-system-5",
        "originalEdgeId": "e1",
        "label": "DEPENDS_ON",
    }
    assert e2["sourceId"] == "node-group-4"


def test_standalone_node_has_no_parent_key():
    (element,) = to_elements(map_graph([{"identity": "solo"}]))
    assert "parentId" not in element
    assert "membershipName" not in element
    assert element["membershipKind"] == "standalone"


def test_to_cytoscape_shape():
    elements = to_cytoscape(scenario())
    prod, web, alpha = elements[:3]
    edge = elements[5]

    assert prod["group"] == "nodes"
    assert prod["classes"] == "compound-node system-compound"
    assert "parent" not in prod["data"]
    assert web["data"]["parent"] == "compound-system-1"
    assert web["classes"] == "compound-node group-compound"
    assert alpha["data"]["parent"] == "compound-group-2"
    assert "parentId" not in alpha["data"]
    assert alpha["classes"] == "display-node node-server member-group"

    assert edge["group"] == "edges"
    assert edge["data"]["source"] == "node-group-3"
    assert edge["data"]["target"] == "node-system-5"
    assert "classes" not in edge


def test_serialize_mapping_stringifies_ids():
    graph = scenario()
    assert serialize_mapping(graph.node_mapping) == {
        "A": ["node-group-3"],
        "B": ["node-group-4"],
        "C": ["node-system-5"],
    }
    assert serialize_mapping(graph.edge_mapping) == {"e1": ["edge-6"], "e2": ["edge-7"]}


# -------------------------
# Text renderers
# -------------------------

def test_render_mermaid():
    expected = "\n".join([
        "flowchart TD",
        '  subgraph nd1["System: Prod"]',
        '    subgraph nd2["Group: Web"]',
        '      nd3["Alpha [A]"]',
        '      nd4["Beta [B]"]',
        "    end",
        '    nd5["Gamma [C]"]',
        "  end",
        "  nd3 -->|DEPENDS_ON| nd5",
        "  nd4 -->|DEPENDS_ON| nd5",
    ])
    assert render_mermaid(scenario()) == expected


def test_render_mermaid_unlabelled_edge():
    graph = map_graph([{"identity": "a"}, {"identity": "b"}], [{"identity": "e", "from_id": "a", "to_id": "b"}])
    assert render_mermaid(graph, direction="LR").splitlines() == [
        "flowchart LR",
        '  nd1["Node [a]"]',
        '  nd2["Node [b]"]',
        "  nd1 --> nd2",
    ]


def test_render_d2():
    expected = "\n".join([
        "direction: down",
        "",
        'nd1: "System: Prod" {',
        '  nd2: "Group: Web" {',
        '    nd3: "Alpha [A]"',
        '    nd4: "Beta [B]"',
        "  }",
        '  nd5: "Gamma [C]"',
        "}",
        "",
        'nd1.nd2.nd3 -> nd1.nd5: "DEPENDS_ON"',
        'nd1.nd2.nd4 -> nd1.nd5: "DEPENDS_ON"',
    ])
    assert render_d2(scenario()) == expected


def test_sanitize_label():
    assert sanitize_label('Rack "A" | #3;') == "Rack 'A' ' '3'"
    assert sanitize_label("  spaced \n out ") == "spaced out"
    assert sanitize_label(None) == ""


def test_id_mapper_is_stable():
    ids = IdMapper(prefix="c")
    assert ids.get("compound-system-1") == "c1"
    assert ids.get("node-group-2") == "c2"
    assert ids.get("compound-system-1") == "c1"
