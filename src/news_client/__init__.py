from __future__ import annotations

import logging

from news_client.config import BaseURL, Settings, get_settings
from news_client.errors import (
    APIError,
    DecodingError,
    InvalidResponseError,
    InvalidURLError,
    SerializationError,
    UnsupportedMethodError,
)
from news_client.services.api_manager import APIManager, APIManagerProtocol
from news_client.types.http import HTTPMethod

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "APIManager",
    "APIManagerProtocol",
    "BaseURL",
    "DecodingError",
    "HTTPMethod",
    "InvalidResponseError",
    "InvalidURLError",
    "SerializationError",
    "Settings",
    "UnsupportedMethodError",
    "__version__",
    "get_settings",
]
