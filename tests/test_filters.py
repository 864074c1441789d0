"""Tests for the canonical tag filters."""

from node_graph.core.filters import accept_all, match_tag


class TestAcceptAll:
    def test_empty_tags(self):
        assert accept_all()(frozenset()) is True

    def test_any_tags(self):
        assert accept_all()(frozenset({"a", "b"})) is True


class TestMatchTag:
    def test_member(self):
        assert match_tag("tag2")(frozenset({"tag1", "tag2"})) is True

    def test_non_member(self):
        assert match_tag("tag2")(frozenset({"tag1"})) is False

    def test_empty_tags(self):
        assert match_tag("tag1")(frozenset()) is False

    def test_exact_match_only(self):
        assert match_tag("tag")(frozenset({"tag1", "Tag"})) is False
