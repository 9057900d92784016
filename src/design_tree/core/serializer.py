from design_tree.core.names import escape_xml
from design_tree.models import SemanticNode

_INDENT = "  "

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _open_tag(node: SemanticNode) -> str:
    attrs = "".join(f' {name}="{escape_xml(value)}"' for name, value in node.attributes)
    return f"{node.tag}{attrs}"


def serialize(node: SemanticNode, depth: int = 0) -> str:
    """Render a semantic node as text, indenting two spaces per level."""
    indent = _INDENT * depth

    if node.is_text:
        return f"{indent}{escape_xml(node.text or '')}"

    if node.self_closing:
        return f"{indent}<{_open_tag(node)} />"

    if node.text is not None:
        return f"{indent}<{_open_tag(node)}>{escape_xml(node.text)}</{node.tag}>"

    body = "\n".join(serialize(child, depth + 1) for child in node.children)
    return f"{indent}<{_open_tag(node)}>\n{body}\n{indent}</{node.tag}>"


def render_document(screen_name: str, screen: SemanticNode) -> str:
    """Wrap a rendered ``<Screen>`` element with the XML declaration and a naming comment.

    The root element always spans multiple lines, even when no child survived.
    """
    body = "\n".join(serialize(child, 1) for child in screen.children)
    return "\n".join(
        [
            XML_DECLARATION,
            f"<!-- Semantic structure for screen: {screen_name} -->",
            f"<{_open_tag(screen)}>",
            body,
            f"</{screen.tag}>",
        ]
    )
