"""Typed errors raised by the transport client.

Every error carries an ``ErrorKind`` so callers can branch on a single
attribute instead of the class hierarchy when that reads better.
"""

from enum import Enum


class ErrorKind(Enum):
    """Error kinds surfaced by the delivery API."""
    AUTHENTICATION = "AUTHENTICATION"
    AUTHORIZATION = "AUTHORIZATION"
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_LOCALE = "INVALID_LOCALE"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMIT = "RATE_LIMIT"
    SERVER = "SERVER"


class ContentfulError(Exception):
    """Base error for failed delivery API requests."""

    kind: ErrorKind = ErrorKind.SERVER

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthenticationError(ContentfulError):
    """The access token is invalid."""
    kind = ErrorKind.AUTHENTICATION


class AuthorizationError(ContentfulError):
    """The access token may not read the requested resource."""
    kind = ErrorKind.AUTHORIZATION


class InvalidRequestError(ContentfulError):
    """The query is malformed."""
    kind = ErrorKind.INVALID_REQUEST


class InvalidLocaleError(InvalidRequestError):
    """The query names a locale the space does not define."""
    kind = ErrorKind.INVALID_LOCALE


class NotFoundError(ContentfulError):
    """The requested resource does not exist."""
    kind = ErrorKind.NOT_FOUND


class RateLimitError(ContentfulError):
    """The request was rate limited.

    Args:
        message: Error message from the API.
        wait_time: Seconds the API suggests waiting before retrying.
    """
    kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: str, wait_time: float) -> None:
        super().__init__(message)
        self.wait_time = wait_time


class ServerError(ContentfulError):
    """Unexpected error, or an error body that could not be parsed."""
    kind = ErrorKind.SERVER
