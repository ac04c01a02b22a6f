"""Contentful delivery API client that resolves linked entries into model graphs."""

from contentfully.client import Contentfully
from contentfully.config import ClientSettings
from contentfully.domain.models import ContentfullyOptions, Locale, QueryOptions, QueryResult
from contentfully.transport.backoff import ExponentialBackoffHandler, RateLimitStrategy, RetryDecision
from contentfully.transport.contentful_client import ContentfulClient
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

__all__ = [
    'AuthenticationError', 'AuthorizationError', 'ClientSettings',
    'ContentfulClient', 'ContentfulError', 'Contentfully', 'ContentfullyOptions',
    'ExponentialBackoffHandler', 'InvalidLocaleError', 'InvalidRequestError',
    'Locale', 'NotFoundError', 'QueryOptions', 'QueryResult', 'RateLimitError',
    'RateLimitStrategy', 'RetryDecision', 'ServerError',
]
