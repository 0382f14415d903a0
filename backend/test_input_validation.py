"""Test script for source record coercion and input errors"""

import pytest

from assetgraph import GraphMapper, MappingError, MappingInputError, map_graph
from assetgraph.ir.source import SourceNode, SourceEdge
from assetgraph.mapping.routing import EdgeRouting


def test_missing_identity_names_the_record():
    with pytest.raises(MappingInputError) as excinfo:
        map_graph([{"identity": "a"}, {"title": "No Id Server"}])

    message = str(excinfo.value)
    assert "Source node #1" in message
    assert "No Id Server" in message
    assert "identity" in message


def test_blank_identity_rejected():
    with pytest.raises(MappingInputError) as excinfo:
        map_graph([{"identity": "   ", "title": "Blank"}])
    assert "must not be blank" in str(excinfo.value)


def test_duplicate_identity_rejected():
    with pytest.raises(MappingInputError) as excinfo:
        map_graph([{"identity": "a"}, {"identity": "b"}, {"identity": "a", "title": "Again"}])

    message = str(excinfo.value)
    assert "#2" in message
    assert "'a'" in message
    assert "#0" in message


def test_input_error_is_a_mapping_error():
    with pytest.raises(MappingError):
        map_graph([{}])


def test_node_aliases():
    node = SourceNode.model_validate({
        "nodeId": 42,
        "name": "DB Host",
        "assetClass": "Database Server",
        "systems": ["Prod"],
        "groups": None,
    })
    assert node.identity == "42"
    assert node.title == "DB Host"
    assert node.classification == "Database Server"
    assert node.systems == ["Prod"]
    assert node.groups == []


def test_temp_uid_alias():
    node = SourceNode.model_validate({"tempUID": "tmp-7"})
    assert node.identity == "tmp-7"
    assert node.title == ""


def test_edge_aliases():
    edge = SourceEdge.model_validate({
        "relationshipId": 9,
        "fromId": "a",
        "toId": "b",
        "relationshipType": "HOSTS",
    })
    assert edge.identity == "9"
    assert (edge.from_id, edge.to_id) == ("a", "b")
    assert edge.relationship_tag == "HOSTS"

    graph_style = SourceEdge.model_validate({"id": "e", "source": "a", "target": "b", "type": None})
    assert (graph_style.from_id, graph_style.to_id) == ("a", "b")
    assert graph_style.relationship_tag == ""


def test_malformed_edge_names_the_record():
    with pytest.raises(MappingInputError) as excinfo:
        map_graph([{"identity": "a"}], [{"identity": "e1", "fromId": "a"}])

    message = str(excinfo.value)
    assert "Source edge #0" in message
    assert "to_id" in message


def test_source_records_accepted_as_models():
    nodes = [SourceNode(identity="a"), SourceNode(identity="b")]
    edges = [SourceEdge(identity="e", from_id="a", to_id="b")]
    graph = map_graph(nodes, edges)
    assert len(graph.nodes) == 2
    assert len(graph.edges) == 1


def test_source_records_are_frozen():
    node = SourceNode(identity="a", systems=["Prod"])
    with pytest.raises(Exception):
        node.identity = "b"


def test_routing_parse():
    assert EdgeRouting.parse("ALL_PAIRS") is EdgeRouting.ALL_PAIRS
    assert EdgeRouting.parse(" first_instance ") is EdgeRouting.FIRST_INSTANCE
    assert EdgeRouting.parse(EdgeRouting.ALL_PAIRS) is EdgeRouting.ALL_PAIRS


def test_unknown_routing_rejected():
    with pytest.raises(MappingError) as excinfo:
        GraphMapper(routing="shortest")
    assert "first_instance" in str(excinfo.value)

    with pytest.raises(MappingError):
        GraphMapper().map([{"identity": "a"}], routing="everything")


def test_empty_title_falls_back_to_name():
    node = SourceNode.model_validate({"identity": "A", "title": None, "name": "Alpha"})
    assert node.title == "Alpha"
    assert SourceNode.model_validate({"identity": "A", "title": "", "name": "Alpha"}).title == "Alpha"
    assert SourceNode.model_validate({"identity": "A", "title": "Primary", "name": "Alpha"}).title == "Primary"

    (instance,) = map_graph([{"identity": "A", "title": None, "name": "Alpha"}]).nodes
    assert instance.label == "Alpha [A]"
