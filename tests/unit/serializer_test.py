"""Unit tests for semantic tree serialization."""

from __future__ import annotations

from design_tree.core.serializer import XML_DECLARATION, render_document, serialize
from design_tree.models import SemanticNode


class TestSemanticNode:
    def test_bare_text(self) -> None:
        node = SemanticNode(text="hello")
        assert node.is_text is True
        assert node.self_closing is False

    def test_self_closing(self) -> None:
        assert SemanticNode(tag="Box").self_closing is True
        assert SemanticNode(tag="Box", text="").self_closing is False
        assert SemanticNode(tag="Box", children=(SemanticNode(text="x"),)).self_closing is False


class TestSerialize:
    def test_bare_text_is_escaped_and_indented(self) -> None:
        assert serialize(SemanticNode(text="Tom & Jerry"), depth=2) == "    Tom &amp; Jerry"

    def test_self_closing_tag_with_attributes(self) -> None:
        node = SemanticNode(tag="Toggle", attributes=(("type", "instance"), ("State", 'On "now"')))
        assert serialize(node) == '<Toggle type="instance" State="On &quot;now&quot;" />'

    def test_inline_text(self) -> None:
        assert serialize(SemanticNode(tag="Title", text="<b>"), depth=1) == "  <Title>&lt;b&gt;</Title>"

    def test_nested_block_indentation(self) -> None:
        node = SemanticNode(
            tag="List",
            children=(
                SemanticNode(tag="Item", text="One"),
                SemanticNode(tag="Group", children=(SemanticNode(text="Two"), SemanticNode(tag="Icon"))),
            ),
        )
        assert serialize(node, depth=1) == (
            "  <List>\n"
            "    <Item>One</Item>\n"
            "    <Group>\n"
            "      Two\n"
            "      <Icon />\n"
            "    </Group>\n"
            "  </List>"
        )


class TestRenderDocument:
    def test_document_layout(self) -> None:
        screen = SemanticNode(
            tag="Screen",
            attributes=(("name", "Home"), ("type", "FRAME")),
            children=(SemanticNode(tag="Header"),),
        )
        assert render_document("Home", screen).splitlines() == [
            XML_DECLARATION,
            "<!-- Semantic structure for screen: Home -->",
            '<Screen name="Home" type="FRAME">',
            "  <Header />",
            "</Screen>",
        ]

    def test_empty_screen_keeps_block_form(self) -> None:
        screen = SemanticNode(tag="Screen", attributes=(("name", "Empty"), ("type", "FRAME")))
        assert render_document("Empty", screen).splitlines()[2:] == [
            '<Screen name="Empty" type="FRAME">',
            "",
            "</Screen>",
        ]
