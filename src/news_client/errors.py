"""Errors raised by :class:`news_client.services.api_manager.APIManager`.

Transport failures (DNS, connection reset, timeouts) are not wrapped; they
surface as the ``httpx.TransportError`` subclass raised by httpx.
"""

from __future__ import annotations

from typing import Any


class APIError(Exception):
    """Base class for every failure produced by the request client."""


class InvalidURLError(APIError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


class UnsupportedMethodError(APIError):
    def __init__(self, method: object) -> None:
        super().__init__(f"Unsupported HTTP method: {method}")
        self.method = method


class SerializationError(APIError):
    """The request body could not be encoded as JSON."""


class InvalidResponseError(APIError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected HTTP status {status_code}")
        self.status_code = status_code


class DecodingError(APIError):
    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
