"""Content Management API transport.

Serves the same read-only paths as the delivery client through the
``contentful_management`` SDK, re-shaping the SDK's resource objects into
raw delivery-style payloads. Management API entries always carry every
locale, so queries through this transport should request all locales.
"""

import logging
from typing import Any

import contentful_management

from contentfully.config import DEFAULT_ENVIRONMENT
from contentfully.transport.base import ContentClient
from contentfully.transport.errors import InvalidRequestError

logger = logging.getLogger(__name__)

# Delivery-only query parameters the management API rejects
_DELIVERY_ONLY_PARAMS = {'include', 'locale'}


def _raw(resource: Any) -> dict[str, Any]:
    return getattr(resource, 'raw', resource)


def _collection(resources: Any) -> dict[str, Any]:
    items = [_raw(resource) for resource in resources]
    return {
        'items': items,
        'total': getattr(resources, 'total', len(items)),
        'skip': getattr(resources, 'skip', 0),
        'limit': getattr(resources, 'limit', len(items)),
    }


class CMAClient(ContentClient):
    """Read-only transport over a ``contentful_management.Client``.

    Args:
        client: Management SDK client.
        space_id: Space identifier.
        environment_id: Environment identifier.
    """

    def __init__(self, client: Any, space_id: str, environment_id: str = DEFAULT_ENVIRONMENT) -> None:
        self.client = client
        self.space_id = space_id
        self.environment_id = environment_id or DEFAULT_ENVIRONMENT

    @classmethod
    def from_token(cls, access_token: str, space_id: str,
                   environment_id: str = DEFAULT_ENVIRONMENT) -> 'CMAClient':
        return cls(contentful_management.Client(access_token), space_id, environment_id)

    def query(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        parts = [part for part in (path or '').split('/') if part]
        logger.debug("CMA %s params=%s", '/'.join(parts), params)

        if parts == ['entries']:
            return self._entries(params)
        if len(parts) == 2 and parts[0] == 'entries':
            return _raw(self.client.entries(self.space_id, self.environment_id).find(parts[1]))
        if parts == ['locales']:
            return _collection(self.client.locales(self.space_id, self.environment_id).all())
        if parts == ['content_types']:
            return _collection(self.client.content_types(self.space_id, self.environment_id).all())

        raise InvalidRequestError(f"Unsupported management API path: {path}")

    def _entries(self, params: dict[str, Any] | None) -> dict[str, Any]:
        query = {k: v for k, v in (params or {}).items() if k not in _DELIVERY_ONLY_PARAMS}
        return _collection(self.client.entries(self.space_id, self.environment_id).all(query))
