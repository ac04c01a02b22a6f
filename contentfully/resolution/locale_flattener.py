"""Locale flattening.

Splits a multi-locale model graph into one graph per locale with a
breadth-first walk, resolving every ``{locale: value}`` map through the
locale fallback chain.

Shared models are not deduplicated: a model reached through two paths is
cloned twice in the flattened output. A model that reappears on its own
ancestor path is emitted as an ``{"_id": ...}`` stub so cyclic graphs
terminate.
"""

from collections import deque
from typing import Any, Iterable

from contentfully.domain.constants import MODEL_ID
from contentfully.domain.models import DEFAULT_FALLBACK, Locale, Model


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, tuple, dict)) and not value)


def _is_primitive(value: Any) -> bool:
    return not isinstance(value, (dict, list, tuple))


def get_locale_value(
    default_locale: Locale | None,
    locale_by_code: dict[str, Locale],
    locale: Locale | None,
    value: Any,
) -> Any:
    """Resolve ``value`` for ``locale`` by walking the fallback chain.

    Args:
        default_locale: The space's default locale, if any.
        locale_by_code: Locale code → Locale lookup.
        locale: Locale to start from.
        value: A ``{locale_code: value}`` map (any other value is returned as is).

    Returns:
        The value for the first locale in the chain that has one. The raw
        ``value`` is returned when a locale has ``fallback_code=None``, when
        the default locale is reached, or when the chain breaks.
    """
    if not isinstance(value, dict):
        return value

    current = locale
    seen: set[str] = set()
    while current is not None and current.code not in seen:
        if current.code in value:
            return value[current.code]
        if current.fallback_code is None:
            return value
        if current is default_locale:
            return value
        seen.add(current.code)
        if current.fallback_code is DEFAULT_FALLBACK:
            current = default_locale
        else:
            current = locale_by_code.get(current.fallback_code)
    return value


def flatten_locales(locales: Iterable[Locale], items: list[Model]) -> dict[str, list[Model]]:
    """Produce one flattened clone of every item per locale.

    Args:
        locales: Locales defined for the space.
        items: Top-level multi-locale models.

    Returns:
        Locale code → list of flattened models (in item order).
    """
    locales = list(locales)
    locale_by_code = {locale.code: locale for locale in locales}
    default_locale = next((locale for locale in locales if locale.default), None)

    flattened: dict[str, list[Model]] = {}
    for locale in locales:
        flattened[locale.code] = [
            _flatten_item(item, locale, default_locale, locale_by_code)
            for item in items
        ]
    return flattened


def _flatten_item(
    item: Model,
    locale: Locale,
    default_locale: Locale | None,
    locale_by_code: dict[str, Locale],
) -> Model:
    root: Model = {}
    # (output, source, depth, ancestor model ids)
    queue: deque[tuple[dict[str, Any], dict[str, Any], int, frozenset[int]]] = deque()
    queue.append((root, item, 0, frozenset({id(item)})))

    while queue:
        context, source, depth, ancestors = queue.popleft()

        for key, raw in source.items():
            if _is_empty(raw):
                continue
            value = get_locale_value(default_locale, locale_by_code, locale, raw)

            if _is_primitive(value):
                context[key] = value
                continue

            if isinstance(value, dict):
                if not value.get(MODEL_ID):
                    # not a model, likely raw JSON
                    context[key] = value
                    continue
                context[key] = _enqueue(queue, value, depth, ancestors)
                continue

            elements: list[Any] = []
            for element in value:
                if _is_primitive(element) or isinstance(element, (list, tuple)):
                    elements.append(element)
                else:
                    elements.append(_enqueue(queue, element, depth, ancestors))
            context[key] = elements

    return root


def _enqueue(queue: deque, value: dict[str, Any], depth: int, ancestors: frozenset[int]) -> dict[str, Any]:
    if id(value) in ancestors:
        return {MODEL_ID: value.get(MODEL_ID)}
    nested: dict[str, Any] = {}
    queue.append((nested, value, depth + 1, ancestors | {id(value)}))
    return nested
