from dataclasses import FrozenInstanceError, is_dataclass, replace

import pytest

from dotgraph.model import Edge, Graph, GraphProperties, Node
from dotgraph.shapes import DEFAULT_SHAPE, NodeShape


def test_node_starts_without_label_and_with_default_shape():
    node = Node("a")

    assert node.id == "a"
    assert node.label is None
    assert node.shape is DEFAULT_SHAPE


def test_node_id_is_read_only():
    node = Node("a")

    with pytest.raises(AttributeError):
        node.id = "b"


def test_builder_methods_chain_from_constructor():
    node = Node("a").with_label("Alpha").with_shape(NodeShape.BOX)

    assert node == Node("a").with_shape(NodeShape.BOX).with_label("Alpha")
    assert node.label == "Alpha"
    assert node.shape is NodeShape.BOX


def test_builder_methods_leave_receiver_untouched():
    base = Node("a")

    labelled = base.with_label("Alpha")

    assert base.label is None
    assert labelled is not base


def test_set_label_edits_in_place_and_returns_self():
    node = Node("a").with_label("old")

    result = node.set_label("new")

    assert result is node
    assert node.label == "new"
    assert node.set_label("x").set_label("y").label == "y"


def test_edge_stores_ids_and_is_frozen():
    edge = Edge("a", "b")

    assert edge.from_node_id == "a"
    assert edge.to_node_id == "b"
    with pytest.raises(FrozenInstanceError):
        edge.to_node_id = "c"


def test_new_graph_is_empty_and_undirected():
    graph = Graph("foo")

    assert graph.name == "foo"
    assert graph.properties == GraphProperties(is_directed=False)
    assert graph.nodes == ()
    assert graph.edges == ()


def test_add_node_and_edge_keep_insertion_order_and_duplicates():
    graph = Graph("g")
    graph.add_node(Node("c"))
    graph.add_node(Node("a"))
    graph.add_node(Node("a").with_label("again"))
    graph.add_edge(Edge("a", "c"))
    graph.add_edge(Edge("c", "missing"))

    assert [node.id for node in graph.nodes] == ["c", "a", "a"]
    assert graph.edges == (Edge("a", "c"), Edge("c", "missing"))


def test_edit_properties_commits_on_exit():
    graph = Graph("g")

    with graph.edit_properties() as props:
        props.is_directed = True

    assert graph.properties.is_directed is True


def test_edit_properties_discards_changes_when_block_raises():
    graph = Graph("g")

    with pytest.raises(RuntimeError):
        with graph.edit_properties() as props:
            props.is_directed = True
            raise RuntimeError("abort")

    assert graph.properties.is_directed is False


def test_retained_properties_do_not_leak_into_graph():
    graph = Graph("g")
    with graph.edit_properties() as props:
        pass

    props.is_directed = True
    snapshot = graph.properties
    snapshot.is_directed = True

    assert graph.properties.is_directed is False


def test_repr_shows_whole_model():
    graph = Graph("g")
    graph.add_node(Node("a").with_label("A"))
    graph.add_edge(Edge("a", "b"))

    text = repr(graph)

    assert "Graph(name='g'" in text
    assert "is_directed=False" in text
    assert "Node(id='a', label='A'" in text
    assert "Edge(from_node_id='a', to_node_id='b')" in text


def test_nodes_are_value_dataclasses():
    node = Node("a", label="Alpha", shape=NodeShape.BOX)

    assert is_dataclass(node)
    assert node == Node("a").with_label("Alpha").with_shape(NodeShape.BOX)
    assert node != Node("b", label="Alpha", shape=NodeShape.BOX)
    assert replace(node, label="Beta").label == "Beta"
    assert repr(Node("a")).startswith("Node(id='a', label=None, shape=")
