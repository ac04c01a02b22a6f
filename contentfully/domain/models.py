"""Shared data models used across the client, resolution and output modules."""

from dataclasses import dataclass, field
from typing import Any, Callable

Media = dict[str, Any]
Model = dict[str, Any]
MediaTransform = Callable[[Media], Media | None]


class _Sentinel:
    """Falsy named marker, distinct from ``None``."""

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> '_Sentinel':
        return self

    def __deepcopy__(self, memo: dict) -> '_Sentinel':
        return self


# Absent fallbackCode: fall back to the default locale
DEFAULT_FALLBACK = _Sentinel('DEFAULT_FALLBACK')

# A value that could not be parsed (dangling link, empty rich text); the
# containing field or list element is dropped rather than set to None
UNDEFINED = _Sentinel('UNDEFINED')


@dataclass
class Locale:
    """A locale definition from the /locales endpoint.

    ``fallback_code`` is ``None`` when the locale explicitly has no fallback,
    and ``DEFAULT_FALLBACK`` when it falls back to the default locale.
    """

    name: str
    code: str
    default: bool = False
    fallback_code: Any = DEFAULT_FALLBACK

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Locale':
        return cls(
            name=data.get('name', data['code']),
            code=data['code'],
            default=bool(data.get('default')),
            fallback_code=data.get('fallbackCode', DEFAULT_FALLBACK),
        )


@dataclass
class ContentfullyOptions:
    """Construction-time options for the Contentfully facade."""

    experimental: bool = False


@dataclass
class QueryOptions:
    """Per-query options for get_entry / get_entries."""

    media_transform: MediaTransform | None = None
    flatten: bool = True
    all_locales: bool = False
    locale: str | None = None
    render_rich_text: bool = False


@dataclass
class QueryResult:
    """Result of a collection query.

    ``items`` is a list of models, or a ``{locale_code: [models]}`` mapping
    when locale flattening was applied.
    """

    items: list[Model] | dict[str, list[Model]] = field(default_factory=list)
    skip: int = 0
    limit: int = 0
    total: int = 0
