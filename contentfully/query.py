"""Query parameter normalization.

Merges caller parameters over ``DEFAULT_QUERY`` and normalizes ``select`` so
the metadata fields needed for model binding are always requested.
"""

import logging
from typing import Any

from contentfully.domain.constants import DEFAULT_QUERY, QUERY_SELECT_FIELDS, REQUIRED_QUERY_SELECT

logger = logging.getLogger(__name__)


def normalize_select(select: Any) -> str:
    """Normalize a select value into a comma-joined field list.

    Accepts a comma-separated string or a list of fields. Whitespace is
    stripped, duplicates removed, and the required ``sys.*`` selectors are
    listed first. Invalid values are logged and replaced by the default.
    """
    if not select:
        return ','.join([*REQUIRED_QUERY_SELECT, QUERY_SELECT_FIELDS])

    if isinstance(select, str):
        values = select.split(',')
    elif isinstance(select, (list, tuple)):
        values = [str(v) for v in select]
    else:
        logger.warning("Invalid query select value ignored: %r", select)
        return ','.join([*REQUIRED_QUERY_SELECT, QUERY_SELECT_FIELDS])

    merged = list(REQUIRED_QUERY_SELECT)
    for value in values:
        value = value.strip()
        if value and value not in merged:
            merged.append(value)
    return ','.join(merged)


def create_query(query: dict[str, Any] | None = None) -> dict[str, Any]:
    """Create a normalized copy of ``query`` merged over the defaults."""
    query = dict(query or {})
    return {**DEFAULT_QUERY, **query, 'select': normalize_select(query.get('select'))}
