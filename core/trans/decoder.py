"""Decoding of raw translation response bodies.

The body comes from an external, unversioned service, so every field is checked
explicitly. A missing or malformed translation is a ``ResponseFormatError``; a missing or
malformed detected language only switches to a fallback code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import ResponseFormatError
from models.language_models import AUTO_LANGUAGE_CODE
from models.translation_models import DecodedTranslation
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

__all__: list[str] = ["ResponseDecoder"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

SEGMENTS_INDEX: Final[int] = 0
DETECTED_LANG_INDEX: Final[int] = 2


class ResponseDecoder:
    """Turns a parsed response body into a DecodedTranslation.

    Args:
        detection_fallback (str): Code reported when an auto-detect request comes back without
            a detected language.
    """

    def __init__(self, detection_fallback: str = AUTO_LANGUAGE_CODE) -> None:
        self.detection_fallback: str = detection_fallback

    def decode(self, body: Any, src_lang: str) -> DecodedTranslation:
        """Decode ``body`` of a request that was sent with source ``src_lang``.

        Raises:
            ResponseFormatError: If the translated segments cannot be extracted.
        """
        text: str = self.extract_text(body)
        detected: str | None = self.extract_detected_language(body)
        if detected is not None:
            return DecodedTranslation(text, detected)

        fallback: str = self.detection_fallback if src_lang == AUTO_LANGUAGE_CODE else src_lang
        logger.debug("No detected language in response, using '%s'", fallback)
        return DecodedTranslation(text, fallback, detected=False)

    @staticmethod
    def extract_text(body: Any) -> str:
        """Join the first element of every segment with single spaces.

        Fragments are kept as sent, so line breaks and spacing inside them survive.

        Raises:
            ResponseFormatError: If ``body[0]`` is not a list of lists starting with a string.
        """
        if not isinstance(body, list) or len(body) <= SEGMENTS_INDEX:
            msg = "response is not a non-empty array"
            raise ResponseFormatError(msg)

        segments: Any = body[SEGMENTS_INDEX]
        if not isinstance(segments, list) or not segments:
            msg = "response has no translation segments"
            raise ResponseFormatError(msg)

        fragments: list[str] = []
        for index, segment in enumerate(segments):
            if not isinstance(segment, list) or not segment or not isinstance(segment[0], str):
                msg: str = f"invalid translation segment at index {index}"
                raise ResponseFormatError(msg)
            fragments.append(segment[0])
        return " ".join(fragments)

    @staticmethod
    def extract_detected_language(body: Any) -> str | None:
        """Return ``body[2]`` when it is a non-empty string, otherwise None."""
        if not isinstance(body, list) or len(body) <= DETECTED_LANG_INDEX:
            return None
        detected: Any = body[DETECTED_LANG_INDEX]
        if isinstance(detected, str) and detected.strip():
            return detected.strip()
        return None
