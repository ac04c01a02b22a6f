"""Contentfully facade.

Fetches raw payloads through a transport client and turns them into
resolved model graphs:

  payload → link table → entry resolver → (locale flattener) → QueryResult
"""

import logging
import warnings
from typing import Any

from contentfully.domain.constants import ALL_LOCALES
from contentfully.domain.models import ContentfullyOptions, Locale, Model, QueryOptions, QueryResult
from contentfully.query import create_query
from contentfully.resolution.entry_resolver import EntryResolver
from contentfully.resolution.link_table import LinkTable, build_links
from contentfully.resolution.locale_flattener import flatten_locales
from contentfully.transport.base import ContentClient
from contentfully.transport.errors import NotFoundError

logger = logging.getLogger(__name__)


class Contentfully:
    """Resolves delivery API payloads into linked models.

    Args:
        client: Transport used to fetch payloads and locales.
        options: Construction-time options (metadata format).
    """

    def __init__(self, client: ContentClient, options: ContentfullyOptions | None = None) -> None:
        self.client = client
        self.options = options or ContentfullyOptions()

    def get_entry(self, entry_id: str, options: QueryOptions | str | None = None) -> Model | dict[str, Model]:
        """Fetch and resolve a single entry.

        Args:
            entry_id: Entry identifier.
            options: Query options. A plain string is the deprecated locale
                form (``'*'`` for all locales).

        Returns:
            The resolved model, or ``{locale: model}`` when all locales were
            requested and flattened.

        Raises:
            NotFoundError: If no entry has the identifier.
        """
        if isinstance(options, str):
            warnings.warn(
                "Passing a locale string to get_entry is deprecated; "
                "use QueryOptions(locale=...) or QueryOptions(all_locales=True)",
                DeprecationWarning,
                stacklevel=2,
            )
            if options == ALL_LOCALES:
                options = QueryOptions(all_locales=True)
            else:
                options = QueryOptions(locale=options)

        result = self._query('/entries', {'sys.id': entry_id, 'limit': 1}, options or QueryOptions())

        if isinstance(result.items, dict):
            found = {code: models[0] for code, models in result.items.items() if models}
        else:
            found = result.items[0] if result.items else None

        if not found:
            raise NotFoundError(f"Entry not found: {entry_id}")
        return found

    def get_entries(self, query: dict[str, Any] | None = None, options: QueryOptions | None = None) -> QueryResult:
        """Fetch and resolve a collection of entries.

        Args:
            query: Delivery API query parameters (merged over the defaults).
            options: Query options.
        """
        return self._query('/entries', query or {}, options or QueryOptions())

    # Legacy names
    get_model = get_entry
    get_models = get_entries

    # ── Private Methods ──────────────────────────────────────────────────

    def _query(self, path: str, query: dict[str, Any], options: QueryOptions) -> QueryResult:
        query, multi_locale = self._apply_locale(dict(query), options)
        payload = self.client.query(path, create_query(query))

        resolver_options = {
            'multi_locale': multi_locale,
            'experimental': self.options.experimental,
            'render_rich_text': options.render_rich_text,
        }

        # single entry payload (no collection envelope)
        if 'items' not in payload:
            resolver = EntryResolver(LinkTable(), **resolver_options)
            model = resolver.resolve_entries([payload])[0]
            return QueryResult(items=[model], skip=0, limit=1, total=1)

        links = build_links(payload, multi_locale, options.media_transform)
        resolver = EntryResolver(links, **resolver_options)
        items: Any = resolver.resolve_entries(payload['items'])
        logger.debug("Resolved %d items from %s", len(items), path)

        if multi_locale and options.flatten:
            locales = [Locale.from_dict(data) for data in self.client.get_locales().get('items') or []]
            items = flatten_locales(locales, items)

        return QueryResult(
            items=items,
            skip=payload.get('skip', 0),
            limit=payload.get('limit', 0),
            total=payload.get('total', 0),
        )

    @staticmethod
    def _apply_locale(query: dict[str, Any], options: QueryOptions) -> tuple[dict[str, Any], bool]:
        if options.all_locales:
            query['locale'] = ALL_LOCALES
            return query, True

        if query.get('locale') == ALL_LOCALES:
            warnings.warn(
                "locale='*' is deprecated; use QueryOptions(all_locales=True)",
                DeprecationWarning,
                stacklevel=4,
            )
            return query, True

        if options.locale:
            query['locale'] = options.locale
        return query, False
