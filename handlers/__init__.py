"""Input and transport handling for the translate plugin.

This package provides the launcher query parser and the asynchronous HTTP client
used by translation engines.
"""

from handlers.async_comm import AsyncCommDecodeError, AsyncCommError, AsyncCommTimeoutError, AsyncHttp
from handlers.query_parser import ParsedQuery, QueryParser

__all__: list[str] = [
    "AsyncCommDecodeError",
    "AsyncCommError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
    "ParsedQuery",
    "QueryParser",
]
