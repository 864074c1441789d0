"""Tests for MemoryStorage backend."""

import pytest

from node_graph.core.models import Node, NodeId, String
from node_graph.storage.memory import MemoryStorage


class TestSaveAndGetNode:
    def test_save_and_retrieve(self):
        s = MemoryStorage()
        node = Node.string(1, "deploy", tags={"ops"})
        s.save_node(node)
        assert s.get_node(NodeId(1)) == node

    def test_get_missing_returns_none(self):
        s = MemoryStorage()
        assert s.get_node(NodeId(99)) is None

    def test_overwrite_existing(self):
        s = MemoryStorage()
        s.save_node(Node.string(1, "old", tags={"a"}))
        s.save_node(Node.string(1, "new"))
        node = s.get_node(NodeId(1))
        assert node is not None
        assert node.content == String("new")
        assert node.tags == set()
        assert len(s) == 1


class TestCopySemantics:
    def test_save_stores_copy(self):
        s = MemoryStorage()
        node = Node.string(1, "x", tags={"a"})
        s.save_node(node)
        node.tags.add("b")
        assert s.get_node(NodeId(1)).tags == {"a"}

    def test_get_returns_copy(self):
        s = MemoryStorage()
        s.save_node(Node.string(1, "x", tags={"a"}))
        fetched = s.get_node(NodeId(1))
        fetched.tags.add("b")
        assert fetched is not s.get_node(NodeId(1))
        assert s.get_node(NodeId(1)).tags == {"a"}


class TestAllNodes:
    def test_ordered_by_id(self):
        s = MemoryStorage()
        for i in (3, 0, 2):
            s.save_node(Node.string(i, str(i)))
        assert [int(n.id) for n in s.all_nodes()] == [0, 2, 3]

    def test_empty(self):
        s = MemoryStorage()
        assert s.all_nodes() == []
        assert len(s) == 0


class TestNormalization:
    def test_reassigned_id_keyed_as_node_id(self):
        s = MemoryStorage()
        node = Node.string(1, "x")
        node.id = 4
        s.save_node(node)
        assert s.has_node(NodeId(4))
        assert s.get_node(NodeId(4)).id == NodeId(4)

    def test_reassigned_non_string_tag_rejected(self):
        s = MemoryStorage()
        node = Node.string(1, "x")
        node.tags = {2}
        with pytest.raises(ValueError, match="tags must be strings"):
            s.save_node(node)
        assert not s.has_node(NodeId(1))


class TestHasNode:
    def test_present_and_absent(self):
        s = MemoryStorage()
        s.save_node(Node.string(1, "x"))
        assert s.has_node(NodeId(1))
        assert not s.has_node(NodeId(2))
