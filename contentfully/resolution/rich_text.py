"""Rich text embedding.

Walks a rich text document and replaces embedded entry/asset link targets
with the resolved objects from the link table, keeping the
``{nodeType, value, marks, data, content}`` node shape.
"""

from typing import Any, Callable

from contentfully.domain.constants import NODE_DOCUMENT
from contentfully.domain.models import UNDEFINED
from contentfully.resolution.link_table import is_link

Dereference = Callable[[dict[str, Any], str | None], Any]


def is_rich_text_document(value: Any) -> bool:
    return isinstance(value, dict) and value.get('nodeType') == NODE_DOCUMENT


class RichTextEmbedder:
    """Resolves links embedded in rich text documents.

    Args:
        dereference: Callable resolving a link (and optional locale) to the
            shared model or media, or UNDEFINED when the target is missing.
    """

    def __init__(self, dereference: Dereference) -> None:
        self._dereference = dereference

    def parse_document(self, document: dict[str, Any], locale: str | None = None) -> Any:
        """Parse a document into its resolved top-level node list.

        Returns:
            List of resolved nodes, or UNDEFINED when the document has no content.
        """
        content = document.get('content')
        if not isinstance(content, list) or not content:
            return UNDEFINED
        return self.parse_content(content, locale)

    def parse_content(self, nodes: list[dict[str, Any]], locale: str | None = None) -> list[dict[str, Any]]:
        """Resolve a list of rich text nodes, children first."""
        return [self._parse_node(node, locale) for node in nodes]

    def _parse_node(self, node: dict[str, Any], locale: str | None) -> dict[str, Any]:
        content = node.get('content')
        if isinstance(content, list) and content:
            content = self.parse_content(content, locale)

        parsed: dict[str, Any] = {'nodeType': node.get('nodeType')}

        if 'value' in node:
            parsed['value'] = node['value']
            parsed['marks'] = [
                mark.get('type') if isinstance(mark, dict) else mark
                for mark in node.get('marks') or []
            ]

        if 'data' in node:
            data = node['data'] or {}
            target = data.get('target')
            if is_link(target):
                resolved = self._dereference(target, locale)
                if resolved is not UNDEFINED:
                    parsed['data'] = resolved
            elif 'uri' in data:
                parsed['data'] = {'uri': data['uri']}
            else:
                parsed['data'] = data

        if content is not None:
            parsed['content'] = content

        return parsed
