"""Language table, fuzzy resolution and pairing.

Everything in this package is synchronous and free of shared mutable state.
"""

from core.lang.ranking import build_pairings
from core.lang.resolver import LanguageResolver, match_score
from core.lang.table import LANGUAGES, LanguageTable, UnknownLanguageCodeError

__all__: list[str] = [
    "LANGUAGES",
    "LanguageResolver",
    "LanguageTable",
    "UnknownLanguageCodeError",
    "build_pairings",
    "match_score",
]
