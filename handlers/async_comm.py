"""Asynchronous HTTP utilities.

``AsyncHttp`` wraps one shared ``aiohttp.ClientSession``. The session is created on first use
inside the running event loop and may be used by many concurrent tasks at once.
Transport failures are raised as ``AsyncCommError`` subclasses.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final, Literal, Self

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aiohttp.client import ClientResponse


__all__: list[str] = ["AsyncCommDecodeError", "AsyncCommError", "AsyncCommTimeoutError", "AsyncHttp"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["GET", "POST"]

CONNECT_TIMEOUT: Final[float] = 1.0


class AsyncCommError(Exception):
    """A request could not be completed.

    Attributes:
        status (int | None): HTTP status when the server answered with an error status.
    """

    def __init__(self, *args: object, status: int | None = None) -> None:
        super().__init__(*args)
        self.status: int | None = status


class AsyncCommTimeoutError(AsyncCommError):
    """The server did not answer within the timeout."""


class AsyncCommDecodeError(AsyncCommError):
    """The response body could not be decoded for its content type."""


def _decode_json(raw: bytes) -> Any:
    return json.loads(raw.decode("utf-8"))


class AsyncHttp:
    """Asynchronous HTTP client with content-type based response decoding.

    Default handlers:
        - "text/plain", "text/html": UTF-8 text.
        - "application/json", "text/javascript": parsed JSON.
    """

    def __init__(self, *, proxy: str | None = None) -> None:
        logger.info("%s initializing", self.__class__.__name__)
        self.__session: ClientSession | None = None
        self.proxy: str | None = proxy or None
        self.content_handlers: dict[str, Callable[[bytes], Any]] = {}

        self.add_handler("text/plain", lambda x: x.decode("utf-8"))
        self.add_handler("text/html", lambda x: x.decode("utf-8"))
        self.add_handler("application/json", _decode_json)
        self.add_handler("text/javascript", _decode_json)

    async def __aenter__(self) -> Self:
        self.initialize_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    def initialize_session(self) -> None:
        """Create the aiohttp session if none is open. Must be called inside the event loop."""
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession(raise_for_status=True)
            logger.debug("%s session initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        self.initialize_session()
        if self.__session is None:
            msg = "Session could not be initialized"
            raise RuntimeError(msg)
        return self.__session

    @property
    def is_open(self) -> bool:
        return self.__session is not None and not self.__session.closed

    async def close(self) -> None:
        if self.__session and not self.__session.closed:
            await self.__session.close()
            logger.info("%s session closed", self.__class__.__name__)
        self.__session = None

    async def get(self, *, url: str, params: dict[str, str] | None = None, total_timeout: float = 10.0) -> Any:
        """Perform a GET request and return the decoded body.

        Args:
            url (str): Request URL.
            params (dict[str, str] | None): Query parameters, URL-encoded by aiohttp.
            total_timeout (float): Total timeout in seconds. Zero or negative disables the timeout.

        Returns:
            Any: Decoded body, None for an empty body.

        Raises:
            AsyncCommTimeoutError: If the server did not answer in time.
            AsyncCommDecodeError: If the body does not decode for its content type.
            AsyncCommError: For connection failures and error statuses.
        """
        return await self._request("GET", url=url, params=params, total_timeout=total_timeout)

    async def decode_response(self, resp: ClientResponse) -> Any:
        """Decode the body with the handler registered for its Content-Type.

        Raises:
            AsyncCommDecodeError: If no handler is registered or the handler fails.
        """
        content_type: str = resp.headers.get("Content-Type", "").split(";")[0].strip()
        logger.debug("'Content-Type': '%s'", content_type)

        raw: bytes = await resp.read()
        if not raw:
            logger.debug("Received empty response")
            return None

        handler: Callable[[bytes], Any] | None = self.content_handlers.get(content_type)
        if handler is None:
            msg: str = f"Unknown Content-Type '{content_type}'"
            raise AsyncCommDecodeError(msg)
        # RecursionError: JSON nested deeper than the interpreter can parse
        try:
            return handler(raw)
        except (UnicodeDecodeError, ValueError, RecursionError) as err:
            msg = f"Failed to decode '{content_type}' body: {err}"
            raise AsyncCommDecodeError(msg) from err

    def add_handler(self, content_type: str, handler: Callable[[bytes], Any]) -> None:
        if self.content_handlers.get(content_type):
            logger.warning("Handler for content type '%s' already exists, replacing it", content_type)
        self.content_handlers[content_type] = handler

    @staticmethod
    def _build_timeout(total_timeout: float) -> aiohttp.ClientTimeout:
        if total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if total_timeout < CONNECT_TIMEOUT:
            return aiohttp.ClientTimeout(total=total_timeout)
        # fail fast on unreachable hosts while keeping the configured total
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total_timeout)

    async def _request(self, method: HTTPMethod, *, url: str, total_timeout: float, **kwargs: Any) -> Any:
        logger.debug("[%s] url=%s timeout=%s kwargs=%s", method, url, total_timeout, kwargs)
        try:
            async with self.session.request(
                method=method,
                url=url,
                timeout=self._build_timeout(total_timeout),
                proxy=self.proxy,
                **kwargs,
            ) as resp:
                return await self.decode_response(resp)
        except TimeoutError as err:
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except aiohttp.ClientResponseError as err:
            msg = f"Error response from the server: {err.status} {err.message}"
            raise AsyncCommError(msg, status=err.status) from err
        except ConnectionResetError as err:
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientError as err:
            msg = f"The request could not be completed: {err}"
            raise AsyncCommError(msg) from err
