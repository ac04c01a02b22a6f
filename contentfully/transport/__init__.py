"""Transport layer: HTTP client, typed errors and rate-limit strategies."""

from contentfully.transport.backoff import (
    ExponentialBackoffHandler,
    FixedDelayStrategy,
    RateLimitStrategy,
    RetryDecision,
)
from contentfully.transport.base import ContentClient
from contentfully.transport.cma_client import CMAClient
from contentfully.transport.contentful_client import ContentfulClient
from contentfully.transport.errors import (
    AuthenticationError,
    AuthorizationError,
    ContentfulError,
    ErrorKind,
    InvalidLocaleError,
    InvalidRequestError,
    NotFoundError,
    RateLimitError,
    ServerError,
)

__all__ = [
    'AuthenticationError', 'AuthorizationError', 'CMAClient', 'ContentClient',
    'ContentfulClient', 'ContentfulError', 'ErrorKind',
    'ExponentialBackoffHandler', 'FixedDelayStrategy',
    'InvalidLocaleError', 'InvalidRequestError', 'NotFoundError',
    'RateLimitError', 'RateLimitStrategy', 'RetryDecision', 'ServerError',
]
