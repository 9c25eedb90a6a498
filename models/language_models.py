"""Language table and ranking models.

Defines LanguageEntry, ScoredCandidate and Pairing. All of them are immutable;
pairings are rebuilt for every query.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__: list[str] = ["AUTO_LANGUAGE_CODE", "LanguageEntry", "Pairing", "ScoredCandidate"]

AUTO_LANGUAGE_CODE: str = "auto"


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    """One row of the language table.

    Attributes:
        code (str): Language code understood by the translation service (e.g. "uk", "zh-cn").
        display_name (str): Human readable name (e.g. "Ukrainian").
    """

    code: str
    display_name: str


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    """A language table entry that matched a user token.

    Attributes:
        code (str): Language code.
        display_name (str): Human readable name.
        score (int): Best fuzzy score of the token against the code or the display name.
    """

    code: str
    display_name: str
    score: int


@dataclass(frozen=True, slots=True)
class Pairing:
    """One source/destination combination considered for translation.

    Attributes:
        source (ScoredCandidate | None): Explicit source language, or None for auto-detection.
        destination (ScoredCandidate): Destination language.
        combined_score (int): Rank score of the combination.
    """

    source: ScoredCandidate | None
    destination: ScoredCandidate
    combined_score: int

    @property
    def source_code(self) -> str:
        """Source code to send to the service (``auto`` when detection is requested)."""
        return self.source.code if self.source is not None else AUTO_LANGUAGE_CODE

    @property
    def label(self) -> str:
        source_name: str = self.source.display_name if self.source is not None else "Auto-detect"
        return f"{source_name} → {self.destination.display_name}"
