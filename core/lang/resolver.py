"""Fuzzy resolution of free-text language tokens against the language table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from rapidfuzz import fuzz, utils

from models.language_models import ScoredCandidate
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.lang.table import LanguageTable
    from models.language_models import LanguageEntry

__all__: list[str] = ["LanguageResolver", "match_score"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

# WRatio scores below this are treated as "no match"
MATCH_SCORE_CUTOFF: Final[float] = 75.0
EXACT_CODE_SCORE: Final[int] = 100


def match_score(token: str, candidate: str, *, cutoff: float = MATCH_SCORE_CUTOFF) -> int | None:
    """Score ``token`` against ``candidate``.

    Case-insensitive and free of any state, so the same pair always yields the same score.
    A whole-string match scores 100; partial matches are scaled down by the length difference.

    Args:
        token (str): Text typed by the user.
        candidate (str): Language code or display name.
        cutoff (float): Minimum score that still counts as a match.

    Returns:
        int | None: Score in the range ``cutoff``..100, or None when the strings do not match.
    """
    score: float = fuzz.WRatio(token, candidate, processor=utils.default_process, score_cutoff=cutoff)
    if not score:
        return None
    return round(score)


class LanguageResolver:
    """Resolves a token to every language table entry it plausibly names."""

    def __init__(self, table: LanguageTable, *, cutoff: float = MATCH_SCORE_CUTOFF) -> None:
        self.table: LanguageTable = table
        self.cutoff: float = cutoff

    def resolve(self, token: str) -> list[ScoredCandidate]:
        """Return the matching candidates in table order.

        An empty token matches nothing; callers decide what an absent language means.
        A token that is exactly a table code resolves to that entry alone.
        """
        token = token.strip()
        if not token:
            return []

        exact: LanguageEntry | None = self.table.get(token)
        if exact is not None:
            logger.debug("'%s' is an exact language code", token)
            return [ScoredCandidate(exact.code, exact.display_name, EXACT_CODE_SCORE)]

        candidates: list[ScoredCandidate] = []
        for entry in self.table:
            score: int | None = self._score_entry(token, entry)
            if score is not None:
                candidates.append(ScoredCandidate(entry.code, entry.display_name, score))

        logger.debug("'%s' resolved to %s", token, [(c.code, c.score) for c in candidates])
        return candidates

    def _score_entry(self, token: str, entry: LanguageEntry) -> int | None:
        scores: list[int] = [
            score
            for score in (
                match_score(token, entry.code, cutoff=self.cutoff),
                match_score(token, entry.display_name, cutoff=self.cutoff),
            )
            if score is not None
        ]
        return max(scores, default=None)
