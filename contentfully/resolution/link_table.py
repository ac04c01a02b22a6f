"""Link table construction.

Scans a raw delivery payload and maps every asset and entry identifier to a
single slot. Assets are projected to media immediately; entries are held
deferred until the entry resolver dereferences them.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from contentfully.domain.constants import LINK_TYPE, MODEL_ID
from contentfully.domain.models import Media, MediaTransform

logger = logging.getLogger(__name__)


class LinkState(Enum):
    """Resolution state of a link table slot."""
    DEFERRED = "DEFERRED"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


@dataclass
class LinkSlot:
    """The single owner of one identifier's output object.

    ``value`` is created once and handed out to every reference, so a model
    that is still being filled in is already the final instance.
    """

    value: dict[str, Any]
    state: LinkState
    raw: dict[str, Any] | None = None

    @classmethod
    def deferred(cls, entry: dict[str, Any]) -> 'LinkSlot':
        return cls(value={}, state=LinkState.DEFERRED, raw=entry)

    @classmethod
    def resolved(cls, value: dict[str, Any]) -> 'LinkSlot':
        return cls(value=value, state=LinkState.RESOLVED)


@dataclass
class LinkTable:
    """Identifier → LinkSlot mapping for a single query."""

    slots: dict[str, LinkSlot] = field(default_factory=dict)

    def __contains__(self, link_id: str) -> bool:
        return link_id in self.slots

    def __len__(self) -> int:
        return len(self.slots)

    def get(self, link_id: str) -> LinkSlot | None:
        return self.slots.get(link_id)

    def defer(self, entry: dict[str, Any]) -> None:
        self.slots[entry['sys']['id']] = LinkSlot.deferred(entry)

    def resolve_to(self, link_id: str, value: dict[str, Any]) -> None:
        self.slots[link_id] = LinkSlot.resolved(value)


def split_asset_by_locale(asset: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Re-key a multi-locale asset as ``{locale: {sys, fields}}``."""
    locales: dict[str, dict[str, Any]] = {}
    for key, field_value in (asset.get('fields') or {}).items():
        if not isinstance(field_value, dict):
            continue
        for locale, value in field_value.items():
            entry = locales.setdefault(locale, {'sys': asset['sys'], 'fields': {}})
            entry['fields'][key] = value
    return locales


def to_media(
    sys: dict[str, Any],
    fields: dict[str, Any],
    media_transform: MediaTransform | None = None,
) -> Media:
    """Project an asset's fields into the media shape.

    Missing file data yields ``None`` url/contentType/size and zero
    dimensions. A failing ``media_transform`` is logged and the untransformed
    media is returned.
    """
    file = fields.get('file') or {}
    details = file.get('details') or {}
    image = details.get('image') or {}

    media: Media = {
        MODEL_ID: sys.get('id'),
        'url': file.get('url'),
        'title': fields.get('title'),
        'description': fields.get('description'),
        'contentType': file.get('contentType'),
        'dimensions': {
            'width': image.get('width', 0),
            'height': image.get('height', 0),
        },
        'size': details.get('size'),
        'version': sys.get('revision'),
    }

    if media_transform is None:
        return media

    try:
        transformed = media_transform(media)
    except Exception:
        logger.exception("Media transform failed for asset %s", sys.get('id'))
        return media
    return media if transformed is None else transformed


def build_links(
    payload: dict[str, Any],
    multi_locale: bool,
    media_transform: MediaTransform | None = None,
) -> LinkTable:
    """Build the link table for a raw payload.

    Args:
        payload: Raw delivery payload with ``items`` and ``includes``.
        multi_locale: Whether fields are locale maps (``locale=*`` queries).
        media_transform: Optional hook applied to each media projection.

    Returns:
        LinkTable holding resolved media and deferred entries. Items and
        included entries share the table.
    """
    links = LinkTable()
    includes = payload.get('includes') or {}

    for asset in includes.get('Asset') or []:
        sys = asset['sys']
        if multi_locale:
            media: dict[str, Any] = {}
            for locale, entry in split_asset_by_locale(asset).items():
                if not entry['fields'].get('file'):
                    continue
                localized = to_media(sys, entry['fields'], media_transform)
                localized.pop(MODEL_ID, None)
                media[locale] = localized
        else:
            media = to_media(sys, asset.get('fields') or {}, media_transform)
        links.resolve_to(sys['id'], media)

    for entry in includes.get('Entry') or []:
        links.defer(entry)

    for entry in payload.get('items') or []:
        links.defer(entry)

    logger.debug(
        "Link table built: %d slots (%d assets)",
        len(links), len(includes.get('Asset') or []),
    )
    return links


def is_link(value: Any) -> bool:
    """Whether ``value`` is a ``{sys: {type: Link}}`` pointer."""
    if not isinstance(value, dict):
        return False
    sys = value.get('sys')
    return isinstance(sys, dict) and sys.get('type') == LINK_TYPE
