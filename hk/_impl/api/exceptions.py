"""Custom exceptions for the platform API."""

from typing import Any
from typing import Dict
from typing import Optional

import httpx


class HkError(Exception):
    """Base class for all hk exceptions."""

    pass


class APIError(HkError):
    """Raised when an API error occurs."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response: Optional[httpx.Response] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.response = response
        self.details = details or {}
        super().__init__(f"HTTP {status_code}: {message}")


class ResourceNotFoundError(APIError):
    """Raised when a resource is not found."""

    def __init__(self, message: str = "Not found", response: Optional[httpx.Response] = None):
        super().__init__(404, message, response)


class AuthenticationError(APIError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed", response: Optional[httpx.Response] = None):
        super().__init__(401, message, response)


class RateLimitError(APIError):
    """Raised when rate limit is exceeded."""

    def __init__(self, message: str = "Rate limit exceeded", response: Optional[httpx.Response] = None):
        super().__init__(429, message, response)


class MissingAppError(HkError):
    """Raised when a listing needs an app and none was given."""

    def __init__(self, message: str = "must specify app"):
        super().__init__(message)


def parse_error_response(response: httpx.Response) -> APIError:
    """
    Build the exception matching an error response.

    The platform reports errors as {"id": "not_found", "message": "Couldn't find that app."}.
    """
    details: Dict[str, Any] = {}
    message = response.reason_phrase or "Unknown error"
    try:
        body = response.json()
        if isinstance(body, dict):
            details = body
            message = body.get("message") or message
    except ValueError:
        if response.text:
            message = response.text

    if response.status_code == 401:
        return AuthenticationError(message, response)
    if response.status_code == 404:
        return ResourceNotFoundError(message, response)
    if response.status_code == 429:
        return RateLimitError(message, response)
    return APIError(response.status_code, message, response, details)
