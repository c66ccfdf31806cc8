"""Tests for the tag registry."""
import pytest

from converters import BlockKind, TagRegistry, get_tag_registry


class TestTagRegistry:
    """Test TagRegistry."""

    @pytest.fixture
    def registry(self):
        return TagRegistry()

    @pytest.mark.parametrize(
        "kind, tag",
        [
            (BlockKind.PARAGRAPH, "p"),
            (BlockKind.HEADER1, "h1"),
            (BlockKind.HEADER3, "h3"),
            (BlockKind.HEADER6, "h6"),
            (BlockKind.BULLET, "li"),
            (BlockKind.HORIZONTAL_RULE, "hr"),
        ],
    )
    def test_tags_for_known_kinds(self, registry, kind, tag):
        assert registry.opening_tag(kind) == f"<{tag}>"
        assert registry.closing_tag(kind) == f"</{tag}>"

    def test_every_kind_has_an_entry(self, registry):
        for kind in BlockKind:
            assert registry.tag_name(kind)

    def test_unknown_kind_defaults_to_paragraph(self, registry):
        assert registry.opening_tag("not-a-kind") == "<p>"
        assert registry.closing_tag(None) == "</p>"
        assert registry.tag_name(["unhashable"]) == "p"

    def test_partial_table_falls_back_to_paragraph(self):
        registry = TagRegistry({BlockKind.HEADER1: "h1"})
        assert registry.opening_tag(BlockKind.HEADER1) == "<h1>"
        assert registry.opening_tag(BlockKind.BULLET) == "<p>"

    def test_shared_registry_is_cached(self):
        assert get_tag_registry() is get_tag_registry()
