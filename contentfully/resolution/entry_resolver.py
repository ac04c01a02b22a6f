"""Entry resolution.

Turns deferred raw entries in a link table into models, replacing link
pointers with the shared model or media they point at. Every identifier
resolves to exactly one object per query; an entry that is reached again
while its own fields are still being resolved hands back its partially
filled model, so reference cycles terminate.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from contentfully.domain.constants import LINK_TYPE_ASSET, MODEL_ID, MODEL_METADATA
from contentfully.domain.models import UNDEFINED, Model
from contentfully.output.html_renderer import HTMLRenderer
from contentfully.resolution.link_table import LinkSlot, LinkState, LinkTable, is_link
from contentfully.resolution.rich_text import RichTextEmbedder, is_rich_text_document

logger = logging.getLogger(__name__)


def to_epoch_millis(timestamp: str | None) -> int | None:
    """Convert an ISO-8601 timestamp to epoch milliseconds."""
    if not timestamp:
        return None
    parsed = datetime.fromisoformat(timestamp.replace('Z', '+00:00'))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return round(parsed.timestamp() * 1000)


class EntryResolver:
    """Resolves raw entries against a link table.

    Args:
        links: Link table for the current query (mutated as entries resolve).
        multi_locale: Whether entry fields are locale maps.
        experimental: Bind metadata as a nested ``_metadata`` object with
            epoch-millisecond timestamps instead of the legacy ``_type`` keys.
        render_rich_text: Render rich text fields to HTML strings instead of
            embedding resolved links in the node tree.
        renderer: HTML renderer used when ``render_rich_text`` is set.
    """

    def __init__(
        self,
        links: LinkTable,
        multi_locale: bool = False,
        experimental: bool = False,
        render_rich_text: bool = False,
        renderer: HTMLRenderer | None = None,
    ) -> None:
        self._links = links
        self.multi_locale = multi_locale
        self.experimental = experimental
        self.render_rich_text = render_rich_text
        self._renderer = renderer or HTMLRenderer()
        self._rich_text = RichTextEmbedder(self.dereference_link)

    def resolve_entries(self, entries: list[dict[str, Any]]) -> list[Model]:
        """Resolve top-level entries, reusing already resolved models."""
        models = []
        for entry in entries:
            entry_id = entry['sys']['id']
            slot = self._links.get(entry_id)
            if slot is None:
                self._links.defer(entry)
                slot = self._links.get(entry_id)
            models.append(self._resolve_slot(slot))
        return models

    def dereference_link(self, reference: dict[str, Any], locale: str | None = None) -> Any:
        """Resolve a link (or a locale map holding one) to its shared object.

        Args:
            reference: A link, or a locale map whose ``locale`` value is a link.
            locale: Locale key to read the link from, if any.

        Returns:
            The model or media for the link target, or UNDEFINED when the
            target is not in the link table.
        """
        sys = reference.get('sys')
        if locale and isinstance(reference.get(locale), dict):
            sys = reference[locale].get('sys')

        slot = self._links.get((sys or {}).get('id'))
        if slot is None:
            logger.debug("Dangling link %s dropped", (sys or {}).get('id'))
            return UNDEFINED
        return self._resolve_slot(slot)

    def parse_value(self, value: Any, locale: str | None = None) -> Any:
        """Parse a single field value (rich text, link or plain value)."""
        if is_rich_text_document(value):
            if self.render_rich_text:
                if not value.get('content'):
                    return UNDEFINED
                return self._renderer.render(value)
            return self._rich_text.parse_document(value, locale)

        if not is_link(value):
            return value

        return self.dereference_link(value, locale)

    def parse_value_by_locale(self, locale_map: dict[str, Any]) -> Any:
        """Parse a ``{locale: value}`` field.

        An asset link replaces the whole result with the asset's own
        per-locale media map, since assets are already split by locale.
        """
        values: dict[str, Any] = {}
        for locale, value in locale_map.items():
            if isinstance(value, list):
                values[locale] = self._parse_list(value, locale)
            elif is_link(value) and value['sys'].get('linkType') == LINK_TYPE_ASSET:
                return self.dereference_link(locale_map, locale)
            else:
                parsed = self.parse_value(value, locale)
                if parsed is not UNDEFINED:
                    values[locale] = parsed
        return values

    # ── Private Methods ──────────────────────────────────────────────────

    def _resolve_slot(self, slot: LinkSlot) -> Any:
        if slot.state is not LinkState.DEFERRED:
            return slot.value

        entry = slot.raw or {}
        model = slot.value
        slot.state = LinkState.IN_PROGRESS

        self._bind_metadata(entry, model)
        for key, value in (entry.get('fields') or {}).items():
            parsed = self._parse_field(value)
            if parsed is not UNDEFINED:
                model[key] = parsed

        slot.state = LinkState.RESOLVED
        slot.raw = None
        return model

    def _parse_field(self, value: Any) -> Any:
        if self.multi_locale:
            if not isinstance(value, dict) or is_link(value) or is_rich_text_document(value):
                return self.parse_value(value)
            parsed = self.parse_value_by_locale(value)
            if parsed is UNDEFINED or not parsed:
                return UNDEFINED
            return parsed

        if isinstance(value, list):
            return self._parse_list(value)

        return self.parse_value(value)

    def _parse_list(self, items: list[Any], locale: str | None = None) -> list[Any]:
        parsed = (self.parse_value(item, locale) for item in items)
        return [item for item in parsed if item is not UNDEFINED]

    def _bind_metadata(self, entry: dict[str, Any], model: Model) -> None:
        sys = entry.get('sys') or {}
        content_type = ((sys.get('contentType') or {}).get('sys') or {}).get('id')
        model[MODEL_ID] = sys.get('id')

        if self.experimental:
            model[MODEL_METADATA] = {
                'type': content_type,
                'revision': sys.get('revision'),
                'createdAt': to_epoch_millis(sys.get('createdAt')),
                'updatedAt': to_epoch_millis(sys.get('updatedAt')),
            }
        else:
            model['_type'] = content_type
            model['_revision'] = sys.get('revision')
            model['_createdAt'] = sys.get('createdAt')
            model['_updatedAt'] = sys.get('updatedAt')
