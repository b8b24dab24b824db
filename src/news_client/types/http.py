from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

# ==== Methods ====


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    # Reserved, rejected by APIManager until they are routed somewhere.
    PUT = "PUT"
    DELETE = "DELETE"


SUPPORTED_METHODS: frozenset[HTTPMethod] = frozenset({HTTPMethod.GET, HTTPMethod.POST})


# ==== JSON Values ====

JSONScalar = str | int | float | bool | None

JSONValue = JSONScalar | dict[str, "JSONValue"] | list["JSONValue"]

QueryValue = JSONScalar

QueryParams = Mapping[str, QueryValue]

JSONBody = Mapping[str, JSONValue]
