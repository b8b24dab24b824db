from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Protocol, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from news_client.config import BaseURL
from news_client.errors import (
    DecodingError,
    InvalidResponseError,
    InvalidURLError,
    SerializationError,
    UnsupportedMethodError,
)
from news_client.types.http import SUPPORTED_METHODS, HTTPMethod, JSONBody, QueryParams

from .base import ServiceClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_HEADERS = {"Content-Type": "application/json"}


class APIManagerProtocol(Protocol):
    async def call_api(
        self,
        endpoint: str,
        method: HTTPMethod | str,
        response_type: type[T],
        params: QueryParams | None = None,
        body: JSONBody | None = None,
    ) -> T: ...


@lru_cache(maxsize=128)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _type_name(response_type: Any) -> str:
    if isinstance(response_type, type):
        return response_type.__qualname__
    return repr(response_type)


def resolve_method(method: HTTPMethod | str) -> HTTPMethod:
    if not isinstance(method, HTTPMethod):
        try:
            method = HTTPMethod(method.upper())
        except (AttributeError, ValueError) as exc:
            raise UnsupportedMethodError(method) from exc

    if method not in SUPPORTED_METHODS:
        raise UnsupportedMethodError(method.value)

    return method


def build_url(base_url: str, endpoint: str, params: QueryParams | None = None) -> httpx.URL:
    """Join ``base_url`` and ``endpoint`` verbatim and attach ``params`` as the query.

    Query values are stringified by httpx: booleans become ``true``/``false``
    and ``None`` becomes an empty value. When ``params`` is given it replaces
    any query already present in ``endpoint``.
    """

    raw_url = f"{base_url}{endpoint}"
    try:
        url = httpx.URL(raw_url)
        if params is not None:
            url = url.copy_with(params=dict(params))
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURLError(raw_url) from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURLError(raw_url)

    return url


def serialize_body(body: JSONBody) -> bytes:
    if not isinstance(body, Mapping):
        raise SerializationError(f"Request body must be a JSON object, got {type(body).__name__}")

    try:
        return json.dumps(dict(body), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Request body is not JSON serializable: {exc}") from exc


def decode_response(response: httpx.Response, response_type: type[T]) -> T:
    if not 200 <= response.status_code <= 299:
        logger.warning(
            "%s %s returned status %s",
            response.request.method,
            response.request.url,
            response.status_code,
        )
        raise InvalidResponseError(response.status_code)

    try:
        return _adapter_for(response_type).validate_json(response.content, strict=True)
    except ValidationError as exc:
        raise DecodingError(
            f"Could not decode response into {_type_name(response_type)}: "
            f"{exc.error_count()} validation error(s)",
            errors=exc.errors(include_url=False),
        ) from exc


class APIManager(ServiceClient):
    """Calls the news API with GET and the JSON placeholder API with POST.

    The POST base URL differs from the GET one. That routing is kept as
    observed; do not point POST at the news API without product sign-off.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        news_base_url: str | None = None,
        placeholder_base_url: str | None = None,
    ) -> None:
        super().__init__(http_client)
        self.news_base_url = news_base_url if news_base_url is not None else BaseURL.NEWS_V2.url
        self.placeholder_base_url = (
            placeholder_base_url
            if placeholder_base_url is not None
            else BaseURL.JSON_PLACEHOLDER.url
        )

    async def call_api(
        self,
        endpoint: str,
        method: HTTPMethod | str,
        response_type: type[T],
        params: QueryParams | None = None,
        body: JSONBody | None = None,
    ) -> T:
        resolved = resolve_method(method)

        if resolved is HTTPMethod.GET:
            return await self._perform_get_request(endpoint, response_type, params)
        return await self._perform_post_request(endpoint, response_type, body)

    async def _perform_get_request(
        self,
        endpoint: str,
        response_type: type[T],
        params: QueryParams | None,
    ) -> T:
        url = build_url(self.news_base_url, endpoint, params)

        logger.debug("GET %s", url)
        response = await self._client.get(url)
        return decode_response(response, response_type)

    async def _perform_post_request(
        self,
        endpoint: str,
        response_type: type[T],
        body: JSONBody | None,
    ) -> T:
        url = build_url(self.placeholder_base_url, endpoint)
        content = serialize_body(body) if body is not None else None

        logger.debug("POST %s (%d byte body)", url, len(content or b""))
        response = await self._client.post(url, content=content, headers=JSON_HEADERS)
        return decode_response(response, response_type)
