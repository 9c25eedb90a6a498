"""Query resolution pipeline.

parse -> resolve languages -> rank pairings -> fetch concurrently -> decode -> assemble.
Only the fetch step suspends; everything else runs synchronously on the event loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.lang.ranking import build_pairings
from core.lang.resolver import LanguageResolver
from core.trans.assembler import ResultAssembler
from core.trans.decoder import ResponseDecoder
from core.trans.fetcher import TranslationFetcher
from handlers.query_parser import QueryParser
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.shared_data import SharedData
    from handlers.query_parser import ParsedQuery
    from models.language_models import Pairing, ScoredCandidate
    from models.translation_models import FetchOutcome, TranslationResult

__all__: list[str] = ["TranslatePipeline"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslatePipeline:
    """Turns a raw launcher query into an ordered list of translations.

    The pipeline keeps no state between queries. A query that is abandoned by the caller
    simply has its result discarded.
    """

    def __init__(self, shared: SharedData) -> None:
        self.shared: SharedData = shared
        translate = shared.config.TRANSLATE
        self.max_entries: int = translate.MAX_ENTRIES
        self.parser = QueryParser(translate.PREFIX, translate.LANGUAGE_DELIMITER)
        self.resolver = LanguageResolver(shared.table)
        self.fetcher = TranslationFetcher(shared.engine)
        self.assembler = ResultAssembler(shared.table, ResponseDecoder(translate.DETECTION_FALLBACK))

    def plan(self, query: str) -> tuple[list[Pairing], str]:
        """Parse ``query`` and rank the pairings to dispatch.

        Returns:
            tuple[list[Pairing], str]: Ranked pairings (empty when nothing should be sent) and the text.
        """
        parsed: ParsedQuery | None = self.parser.parse(query)
        if parsed is None:
            return [], ""

        destinations: list[ScoredCandidate] = self.resolver.resolve(parsed.destination_token)
        if not destinations:
            logger.debug("Destination '%s' matched no language", parsed.destination_token)
            return [], parsed.text

        # an empty source token ("" in ">uk text") means auto-detection
        sources: list[ScoredCandidate] | None = None
        if parsed.source_token is not None and parsed.source_token.strip():
            sources = self.resolver.resolve(parsed.source_token)

        return build_pairings(destinations, sources, self.max_entries), parsed.text

    async def resolve(self, query: str) -> list[TranslationResult]:
        """Translate ``query`` and return the results in rank order."""
        pairings, text = self.plan(query)
        if not pairings:
            return []

        outcomes: list[FetchOutcome] = await self.fetcher.fetch_all(pairings, text)
        results: list[TranslationResult] = self.assembler.assemble(outcomes)
        logger.info("'%s': %d of %d translations succeeded", query, len(results), len(pairings))
        return results
