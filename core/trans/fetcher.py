"""Concurrent dispatch of one translation request per pairing."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from core.trans.interface import TranslateExceptionError, TranslationRateLimitError
from models.translation_models import FetchOutcome
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.trans.interface import TransInterface
    from models.language_models import Pairing

__all__: list[str] = ["TranslationFetcher"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslationFetcher:
    """Fans requests out to the engine and waits for all of them.

    Each request succeeds or fails on its own; a failure is recorded in its FetchOutcome
    and never cancels or delays the others. Outcomes are returned in pairing order,
    whatever order the responses arrive in.
    """

    def __init__(self, engine: TransInterface) -> None:
        self.engine: TransInterface = engine

    async def fetch_all(self, pairings: Sequence[Pairing], text: str) -> list[FetchOutcome]:
        if not pairings:
            return []
        logger.debug("Dispatching %d translation requests", len(pairings))
        # gather keeps argument order in its result list
        return list(await asyncio.gather(*(self._fetch_one(pairing, text) for pairing in pairings)))

    async def _fetch_one(self, pairing: Pairing, text: str) -> FetchOutcome:
        try:
            body: Any = await self.engine.fetch(text, pairing.destination.code, pairing.source_code)
        except TranslationRateLimitError as err:
            logger.warning("Rate limited while translating '%s': %s", pairing.label, err)
            return FetchOutcome(pairing, error=err)
        except TranslateExceptionError as err:
            logger.warning("Translation request failed for '%s': %s", pairing.label, err)
            return FetchOutcome(pairing, error=err)
        except asyncio.CancelledError:
            raise
        except Exception as err:  # noqa: BLE001 - isolate request failures
            logger.error("Unexpected error while translating '%s': %r", pairing.label, err)
            return FetchOutcome(pairing, error=err)
        return FetchOutcome(pairing, body=body)
