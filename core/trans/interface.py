"""Abstract base class for translation engines and the translation exception hierarchy.

An engine is the network collaborator of the pipeline: given a source code (or ``auto``),
a destination code and text, it returns the raw response body or raises one of the
exceptions below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config

__all__: list[str] = [
    "ResponseFormatError",
    "TransInterface",
    "TranslateExceptionError",
    "TranslationRateLimitError",
    "TranslationRequestError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""


class TranslationRequestError(TranslateExceptionError):
    """The request did not reach a successful response (network error, timeout, error status)."""


class TranslationRateLimitError(TranslationRequestError):
    """The translation request was rate-limited by the service."""


class ResponseFormatError(TranslateExceptionError):
    """The response body does not have the expected shape.

    The service is not versioned; if this happens on every request the format has likely changed.
    """


class TransInterface(ABC):
    """Abstract base class for translation engines.

    Subclasses register themselves under the name returned by ``fetch_engine_name``.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): Engine classes keyed by name.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        name: str = cls.fetch_engine_name()
        if not isinstance(name, str) or name == "":
            return  # unnamed engines (test doubles) are not registered

        if name in cls.registered:
            msg: str = f"A translation engine with the name '{name}' is already registered."
            raise ValueError(msg)

        cls.registered[name] = cls
        logger.debug("Translation engine registered: '%s'", name)

    @staticmethod
    @abstractmethod
    def fetch_engine_name() -> str:
        """Name the engine is registered under.

        Called from ``__init_subclass__``, so it must work at class definition time.
        """
        raise NotImplementedError

    @abstractmethod
    def initialize(self, config: Config) -> None:
        """Configure the engine (timeout, proxy, ...) from the loaded configuration."""
        raise NotImplementedError

    @abstractmethod
    async def fetch(self, content: str, tgt_lang: str, src_lang: str) -> Any:
        """Request a translation and return the raw, parsed response body.

        Args:
            content (str): Text to be translated.
            tgt_lang (str): Destination language code.
            src_lang (str): Source language code, or ``auto`` for detection by the service.

        Returns:
            Any: The parsed response body, not yet validated.

        Raises:
            TranslationRateLimitError: If the service rejected the request as rate-limited.
            TranslationRequestError: If the request failed for any other reason.
            ResponseFormatError: If the body could not be parsed at all.
        """
        raise NotImplementedError

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
        raise NotImplementedError
