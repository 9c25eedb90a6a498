"""Google Translate engine using the keyless ``translate_a/single`` endpoint.

The endpoint answers with a JSON array; the parts used by the decoder are::

    [[["<translated>", "<original>", ...], ...], null, "<detected source>", ...]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import (
    ResponseFormatError,
    TransInterface,
    TranslateExceptionError,
    TranslationRateLimitError,
    TranslationRequestError,
)
from handlers.async_comm import AsyncCommDecodeError, AsyncCommError, AsyncHttp
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config

__all__: list[str] = ["GoogleTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

SERVICE_URL: Final[str] = "https://translate.googleapis.com/translate_a/single"
MAX_TEXT_LENGTH: Final[int] = 5000
HTTP_TOO_MANY_REQUESTS: Final[int] = 429


class GoogleTranslation(TransInterface):
    def __init__(self) -> None:
        self.__http: AsyncHttp | None = None
        self.timeout: float = 10.0

    @property
    def _http(self) -> AsyncHttp:
        if self.__http is None:
            msg = "The google engine is not initialised"
            raise TranslateExceptionError(msg)
        return self.__http

    @staticmethod
    def fetch_engine_name() -> str:
        return "google"

    def initialize(self, config: Config) -> None:
        logger.debug("'%s' Initialization start", self.__class__.__name__)
        self.timeout = config.NETWORK.TIMEOUT
        self.__http = AsyncHttp(proxy=config.NETWORK.PROXY)

    @staticmethod
    def build_params(content: str, tgt_lang: str, src_lang: str) -> dict[str, str]:
        return {"client": "gtx", "sl": src_lang, "tl": tgt_lang, "dt": "t", "q": content}

    async def fetch(self, content: str, tgt_lang: str, src_lang: str) -> Any:
        if len(content) >= MAX_TEXT_LENGTH:
            msg: str = f"Can only translate less than {MAX_TEXT_LENGTH} characters"
            raise TranslationRequestError(msg)

        logger.debug("'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", content, src_lang, tgt_lang)
        try:
            body: Any = await self._http.get(
                url=SERVICE_URL,
                params=self.build_params(content, tgt_lang, src_lang),
                total_timeout=self.timeout,
            )
        except AsyncCommDecodeError as err:
            raise ResponseFormatError(err) from err
        except AsyncCommError as err:
            if err.status == HTTP_TOO_MANY_REQUESTS:
                raise TranslationRateLimitError(err) from err
            raise TranslationRequestError(err) from err

        logger.info("translation received (%s > %s)", src_lang, tgt_lang)
        return body

    async def close(self) -> None:
        if self.__http is not None:
            await self.__http.close()
        logger.info("'%s' process termination", self.__class__.__name__)
