"""Error kinds raised by the Airly client.

Every failure surfaces as one of four subclasses of :class:`AirlyError`, so
callers can branch on the category without inspecting messages.
"""

from __future__ import annotations

from typing import Optional


class AirlyError(Exception):
    """Base class for all client failures."""


class ConfigurationError(AirlyError):
    """The client cannot be built from the supplied configuration (e.g. bad API key)."""


class InvalidParameterError(AirlyError, ValueError):
    """A request parameter was rejected before any network call was made."""


class TransportError(AirlyError):
    """The HTTP request failed: connection problem, timeout or non-2xx status."""

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DeserializationError(AirlyError):
    """The response body is not JSON or does not match the expected schema."""

    def __init__(self, message: str, *, url: Optional[str] = None, body: Optional[str] = None):
        super().__init__(message)
        self.url = url
        self.body = body
