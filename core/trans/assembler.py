"""Assembly of decoded outcomes into the final, rank-ordered result list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.trans.interface import ResponseFormatError
from models.translation_models import TranslationResult
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.lang.table import LanguageTable
    from core.trans.decoder import ResponseDecoder
    from models.translation_models import DecodedTranslation, FetchOutcome

__all__: list[str] = ["ResultAssembler"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ResultAssembler:
    def __init__(self, table: LanguageTable, decoder: ResponseDecoder) -> None:
        self.table: LanguageTable = table
        self.decoder: ResponseDecoder = decoder

    def assemble(self, outcomes: Sequence[FetchOutcome]) -> list[TranslationResult]:
        """Build one TranslationResult per successful, decodable outcome.

        Failed and undecodable outcomes are skipped, so the result keeps the order of
        ``outcomes`` and is never longer than it.
        """
        results: list[TranslationResult] = []
        for outcome in outcomes:
            if not outcome.succeeded:
                continue
            try:
                decoded: DecodedTranslation = self.decoder.decode(outcome.body, outcome.pairing.source_code)
            except ResponseFormatError as err:
                logger.error("Malformed response for '%s': %s", outcome.label, err)
                continue
            results.append(TranslationResult(title=decoded.text, description=self.describe(outcome, decoded)))

        logger.debug("%d of %d outcomes assembled", len(results), len(outcomes))
        return results

    def describe(self, outcome: FetchOutcome, decoded: DecodedTranslation) -> str:
        """Describe the translation direction, e.g. ``English → Ukrainian``.

        The source side is the language the service detected, so an auto-detect pairing is
        reported as ``English → Ukrainian (detected)``.
        """
        source_name: str = self.table.display_name(decoded.detected_source_lang)
        description: str = f"{source_name} → {outcome.pairing.destination.display_name}"
        if outcome.pairing.source is None and decoded.detected:
            description += " (detected)"
        return description
