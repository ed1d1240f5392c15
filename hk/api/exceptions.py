"""Exception classes for the platform API."""

from hk._impl.api.exceptions import APIError
from hk._impl.api.exceptions import AuthenticationError
from hk._impl.api.exceptions import HkError
from hk._impl.api.exceptions import MissingAppError
from hk._impl.api.exceptions import RateLimitError
from hk._impl.api.exceptions import ResourceNotFoundError

__all__ = [
    "APIError",
    "AuthenticationError",
    "HkError",
    "MissingAppError",
    "RateLimitError",
    "ResourceNotFoundError",
]
