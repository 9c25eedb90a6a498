"""Translation dispatch and response handling.

This package provides the engine interface and its implementations, the concurrent
fetcher, the response decoder and the result assembler.
"""

from core.trans.assembler import ResultAssembler
from core.trans.decoder import ResponseDecoder
from core.trans.fetcher import TranslationFetcher
from core.trans.interface import (
    ResponseFormatError,
    TransInterface,
    TranslateExceptionError,
    TranslationRateLimitError,
    TranslationRequestError,
)

__all__: list[str] = [
    "ResponseDecoder",
    "ResponseFormatError",
    "ResultAssembler",
    "TransInterface",
    "TranslateExceptionError",
    "TranslationFetcher",
    "TranslationRateLimitError",
    "TranslationRequestError",
]
