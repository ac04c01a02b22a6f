"""Link resolution: link tables, entry resolution, rich text and locale flattening."""

from contentfully.resolution.entry_resolver import EntryResolver, to_epoch_millis
from contentfully.resolution.link_table import (
    LinkSlot,
    LinkState,
    LinkTable,
    build_links,
    is_link,
    split_asset_by_locale,
    to_media,
)
from contentfully.resolution.locale_flattener import flatten_locales, get_locale_value
from contentfully.resolution.rich_text import RichTextEmbedder, is_rich_text_document

__all__ = [
    'EntryResolver', 'LinkSlot', 'LinkState', 'LinkTable', 'RichTextEmbedder',
    'build_links', 'flatten_locales', 'get_locale_value', 'is_link',
    'is_rich_text_document', 'split_asset_by_locale', 'to_epoch_millis', 'to_media',
]
