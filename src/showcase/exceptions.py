"""
Custom exceptions used across Showcase.
"""

from typing import Optional


class ShowcaseError(Exception):
    """Base class for every error raised by Showcase helpers."""

    pass


class InvalidEmailError(ShowcaseError, ValueError):
    """Raised when an email address fails the shape check."""

    def __init__(self, email: object):
        self.email = email
        super().__init__(f"Invalid Email Address: {email!r}")


class NegativeInputError(ShowcaseError, ValueError):
    """Raised by factorial when the input is below zero."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Negative numbers not allowed: {value}")


class FetchError(ShowcaseError):
    """Base class for failures of the JSON fetch helper.

    Attributes:
        url: The URL that was being fetched.
    """

    def __init__(self, message: str, url: str):
        self.url = url
        super().__init__(message)


class NetworkError(FetchError):
    """Raised when the request could not complete at the transport level.

    The underlying httpx exception is available as ``__cause__``.
    """

    pass


class HttpStatusError(FetchError):
    """Raised when the server answered with a non-2xx status."""

    def __init__(self, url: str, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        detail = f"{status_code} {reason}".strip() if reason else str(status_code)
        super().__init__(f"Network response was not ok: {detail}", url)


class DecodeError(FetchError):
    """Raised when the response body is not valid JSON."""

    pass
