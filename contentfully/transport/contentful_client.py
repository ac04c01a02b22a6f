"""HTTP client for the Contentful delivery and preview APIs.

Issues authenticated GET requests with ``requests``, converts error bodies
into typed errors and retries rate-limited requests with Tenacity, driven by a
``RateLimitStrategy``.
"""

import json
import logging
import time
from typing import Any, Callable

import requests

from contentfully.config import ClientSettings
from contentfully.transport.backoff import RateLimitStrategy, create_rate_limit_retrying
from contentfully.transport.base import ContentClient
from contentfully.transport.errors import (
    AuthenticationError,
    AuthorizationError,
    ContentfulError,
    InvalidLocaleError,
    InvalidRequestError,
    NotFoundError,
    RateLimitError,
    ServerError,
)

logger = logging.getLogger(__name__)

RATE_LIMIT_RESET_HEADER = 'X-Contentful-RateLimit-Reset'

_INVALID_REQUEST_IDS = {'BadRequest', 'InvalidEntry', 'InvalidQuery', 'UnknownField'}


class ContentfulClient(ContentClient):
    """Delivery API client.

    Args:
        settings: Connection settings.
        rate_limit_strategy: Decides retries for rate-limited requests.
            Without one, RateLimitError is raised immediately.
        session: ``requests.Session`` to use (one is created if omitted).
        sleep: Blocking sleep used between retries.
    """

    def __init__(
        self,
        settings: ClientSettings,
        rate_limit_strategy: RateLimitStrategy | None = None,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings
        self.rate_limit_strategy = rate_limit_strategy
        self._session = session or requests.Session()
        self._sleep = sleep
        self._space_uri = settings.space_uri
        logger.debug("Contentful endpoint set to %s", self._space_uri)

    def query(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        url = self._build_url(path)
        headers = {
            'Authorization': f"Bearer {self.settings.access_token}",
            **self.settings.headers,
        }

        if self.rate_limit_strategy is None:
            return self._get(url, params, headers)

        retrying = create_rate_limit_retrying(self.rate_limit_strategy, RateLimitError, sleep=self._sleep)
        return retrying(self._get, url, params, headers)

    def close(self) -> None:
        self._session.close()

    # ── Private Methods ──────────────────────────────────────────────────

    def _get(self, url: str, params: dict[str, Any] | None, headers: dict[str, str]) -> dict[str, Any]:
        logger.debug("GET %s params=%s", url, params)
        response = self._session.get(
            url,
            params=params,
            headers=headers,
            timeout=self.settings.timeout,
        )
        if not response.ok:
            raise self.parse_error(response.text, response.headers)
        return response.json()

    def _build_url(self, path: str) -> str:
        url = self._space_uri
        if path:
            if not path.startswith('/'):
                url += '/'
            url += path
        return url

    @staticmethod
    def parse_error(body: str, headers: Any) -> ContentfulError:
        """Convert an error response body into a typed error.

        Args:
            body: Raw response text.
            headers: Response headers (mapping with ``get``).

        Returns:
            The error to raise. Unparseable bodies become ServerError.
        """
        try:
            error = json.loads(body)
        except ValueError:
            return ServerError(body)

        if not isinstance(error, dict) or (error.get('sys') or {}).get('type') != 'Error':
            return ServerError('Unexpected server error.')

        error_id = error['sys'].get('id')
        message = error.get('message') or ''

        if error_id == 'AccessTokenInvalid':
            return AuthenticationError(message)
        if error_id == 'AccessDenied':
            return AuthorizationError(message)
        if error_id in _INVALID_REQUEST_IDS:
            if 'Unknown locale' in message:
                return InvalidLocaleError(message)
            return InvalidRequestError(message)
        if error_id == 'NotFound':
            return NotFoundError(message)
        if error_id == 'RateLimitExceeded':
            try:
                wait_time = float(int(headers.get(RATE_LIMIT_RESET_HEADER) or 1))
            except (TypeError, ValueError):
                wait_time = 1.0
            return RateLimitError(message, wait_time)
        return ServerError(message)
