"""Domain types and constants."""

from contentfully.domain.models import (
    DEFAULT_FALLBACK,
    UNDEFINED,
    ContentfullyOptions,
    Locale,
    Media,
    MediaTransform,
    Model,
    QueryOptions,
    QueryResult,
)

__all__ = [
    'DEFAULT_FALLBACK',
    'UNDEFINED',
    'ContentfullyOptions',
    'Locale',
    'Media',
    'MediaTransform',
    'Model',
    'QueryOptions',
    'QueryResult',
]
