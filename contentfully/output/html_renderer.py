"""Rich text → HTML rendering.

Renders a raw rich text document to an HTML string. Block nodes map to tags
through ``BLOCK_TAGS``, marks through ``MARK_TAGS``; embedded entries and
assets render as empty strings unless a custom node renderer is supplied.
"""

from html import escape
from typing import Any, Callable

from contentfully.domain.constants import (
    BLOCK_TAGS,
    MARK_TAGS,
    NODE_ASSET_HYPERLINK,
    NODE_DOCUMENT,
    NODE_EMBEDDED_ASSET_BLOCK,
    NODE_EMBEDDED_ENTRY_BLOCK,
    NODE_EMBEDDED_ENTRY_INLINE,
    NODE_ENTRY_HYPERLINK,
    NODE_HYPERLINK,
    NODE_TEXT,
    VOID_TAGS,
)

# (node, render_children) → html
NodeRenderer = Callable[[dict[str, Any], Callable[[], str]], str]

_EMBEDDED_NODES = {
    NODE_EMBEDDED_ENTRY_BLOCK,
    NODE_EMBEDDED_ENTRY_INLINE,
    NODE_EMBEDDED_ASSET_BLOCK,
}


class HTMLRenderer:
    """Renders rich text documents to HTML.

    Args:
        node_renderers: Optional overrides keyed by node type.
    """

    def __init__(self, node_renderers: dict[str, NodeRenderer] | None = None) -> None:
        self._overrides = dict(node_renderers or {})

    def render(self, document: dict[str, Any]) -> str:
        if not isinstance(document, dict):
            return ''
        if document.get('nodeType') == NODE_DOCUMENT:
            return self._render_nodes(document.get('content') or [])
        return self._render_node(document)

    def _render_nodes(self, nodes: list[dict[str, Any]]) -> str:
        return ''.join(self._render_node(node) for node in nodes)

    def _render_node(self, node: dict[str, Any]) -> str:
        node_type = node.get('nodeType', '')

        def children() -> str:
            return self._render_nodes(node.get('content') or [])

        override = self._overrides.get(node_type)
        if override:
            return override(node, children)

        if node_type == NODE_TEXT:
            return self._render_text(node)
        if node_type in VOID_TAGS:
            return f"<{VOID_TAGS[node_type]}/>"
        if node_type in BLOCK_TAGS:
            tag = BLOCK_TAGS[node_type]
            return f"<{tag}>{children()}</{tag}>"
        if node_type == NODE_HYPERLINK:
            uri = escape((node.get('data') or {}).get('uri', ''), quote=True)
            return f'<a href="{uri}">{children()}</a>'
        if node_type in (NODE_ENTRY_HYPERLINK, NODE_ASSET_HYPERLINK):
            return children()
        if node_type in _EMBEDDED_NODES:
            return ''
        return children()

    @staticmethod
    def _render_text(node: dict[str, Any]) -> str:
        html = escape(node.get('value', ''), quote=False).replace('\n', '<br/>')
        for mark in node.get('marks') or []:
            mark_type = mark.get('type') if isinstance(mark, dict) else mark
            tag = MARK_TAGS.get(mark_type)
            if tag:
                html = f"<{tag}>{html}</{tag}>"
        return html


def render_document(document: dict[str, Any], node_renderers: dict[str, NodeRenderer] | None = None) -> str:
    """Render a rich text document to HTML with optional node overrides."""
    return HTMLRenderer(node_renderers).render(document)
