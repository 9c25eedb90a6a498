"""Data models for the translate plugin.

This package contains dataclass definitions for configuration, the language table,
translation outcomes and results, and the regular expressions used by the query parser.
"""

from __future__ import annotations

from models.config_models import Config
from models.language_models import AUTO_LANGUAGE_CODE, LanguageEntry, Pairing, ScoredCandidate
from models.re_models import QUERY_SPLIT_PATTERN
from models.translation_models import DecodedTranslation, FetchOutcome, TranslationResult

__all__: list[str] = [
    "AUTO_LANGUAGE_CODE",
    "QUERY_SPLIT_PATTERN",
    "Config",
    "DecodedTranslation",
    "FetchOutcome",
    "LanguageEntry",
    "Pairing",
    "ScoredCandidate",
    "TranslationResult",
]
