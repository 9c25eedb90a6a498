"""Pairing of resolved source/destination candidates and their ranking."""

from __future__ import annotations

from typing import TYPE_CHECKING

from models.language_models import Pairing
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from models.language_models import ScoredCandidate

__all__: list[str] = ["build_pairings"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


def build_pairings(
    destinations: Sequence[ScoredCandidate],
    sources: Sequence[ScoredCandidate] | None,
    max_entries: int,
) -> list[Pairing]:
    """Combine candidates into ranked pairings, best first.

    With ``sources`` set, every source is paired with every destination (source-major, in
    candidate order) and the scores are summed. With ``sources`` None every destination is
    paired with auto-detection. Equal scores keep generation order (``sorted`` is stable).
    The list is cut to ``max_entries`` here so the fan-out never exceeds it.

    Args:
        destinations (Sequence[ScoredCandidate]): Resolved destination candidates.
        sources (Sequence[ScoredCandidate] | None): Resolved source candidates, None for auto-detection.
        max_entries (int): Upper bound on the returned pairings.

    Returns:
        list[Pairing]: At most ``max_entries`` pairings ordered by combined score, descending.
    """
    if not destinations or max_entries < 1:
        return []

    pairings: list[Pairing]
    if sources is None:
        pairings = [Pairing(None, dst, dst.score) for dst in destinations]
    else:
        pairings = [Pairing(src, dst, src.score + dst.score) for src in sources for dst in destinations]

    ranked: list[Pairing] = sorted(pairings, key=lambda p: p.combined_score, reverse=True)[:max_entries]
    logger.debug(
        "%d pairings generated, %d kept: %s",
        len(pairings),
        len(ranked),
        [(p.source_code, p.destination.code, p.combined_score) for p in ranked],
    )
    return ranked
