"""Shared constants for query building, link resolution and rich text.

Centralizes the wire-format keys and defaults used across the transport,
resolution and output modules.
"""

# ── Query Defaults ───────────────────────────────────────────────────────

DEFAULT_QUERY: dict[str, int] = {
    'include': 10,
    'limit': 1000,
}

QUERY_SELECT_ID = 'sys.id'
QUERY_SELECT_TYPE = 'sys.contentType'
QUERY_SELECT_REVISION = 'sys.revision'
QUERY_SELECT_CREATED_AT = 'sys.createdAt'
QUERY_SELECT_UPDATED_AT = 'sys.updatedAt'
QUERY_SELECT_FIELDS = 'fields'

REQUIRED_QUERY_SELECT: tuple[str, ...] = (
    QUERY_SELECT_ID,
    QUERY_SELECT_TYPE,
    QUERY_SELECT_REVISION,
    QUERY_SELECT_CREATED_AT,
    QUERY_SELECT_UPDATED_AT,
)

# Legacy "all locales" wildcard for the locale query parameter
ALL_LOCALES = '*'

# ── Link Markers ─────────────────────────────────────────────────────────

LINK_TYPE = 'Link'
LINK_TYPE_ENTRY = 'Entry'
LINK_TYPE_ASSET = 'Asset'

# ── Rich Text Node Types ─────────────────────────────────────────────────

NODE_DOCUMENT = 'document'
NODE_TEXT = 'text'
NODE_PARAGRAPH = 'paragraph'
NODE_HYPERLINK = 'hyperlink'
NODE_ENTRY_HYPERLINK = 'entry-hyperlink'
NODE_ASSET_HYPERLINK = 'asset-hyperlink'
NODE_EMBEDDED_ENTRY_BLOCK = 'embedded-entry-block'
NODE_EMBEDDED_ENTRY_INLINE = 'embedded-entry-inline'
NODE_EMBEDDED_ASSET_BLOCK = 'embedded-asset-block'

# Block node type → HTML tag
BLOCK_TAGS: dict[str, str] = {
    'paragraph': 'p',
    'heading-1': 'h1',
    'heading-2': 'h2',
    'heading-3': 'h3',
    'heading-4': 'h4',
    'heading-5': 'h5',
    'heading-6': 'h6',
    'unordered-list': 'ul',
    'ordered-list': 'ol',
    'list-item': 'li',
    'blockquote': 'blockquote',
    'table': 'table',
    'table-row': 'tr',
    'table-cell': 'td',
    'table-header-cell': 'th',
}

# Void block node type → HTML tag
VOID_TAGS: dict[str, str] = {
    'hr': 'hr',
}

# Text mark → HTML tag
MARK_TAGS: dict[str, str] = {
    'bold': 'b',
    'italic': 'i',
    'underline': 'u',
    'code': 'code',
    'superscript': 'sup',
    'subscript': 'sub',
    'strikethrough': 's',
}

# ── Reserved Model Keys ──────────────────────────────────────────────────

MODEL_ID = '_id'
MODEL_METADATA = '_metadata'
