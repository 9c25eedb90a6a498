"""Models for translation-related data.

Defines the per-request outcome, the decoded response and the final result handed to the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dataclasses_json import DataClassJsonMixin, dataclass_json

if TYPE_CHECKING:
    from models.language_models import Pairing

__all__: list[str] = ["DecodedTranslation", "FetchOutcome", "TranslationResult"]


@dataclass
class FetchOutcome:
    """Terminal state of one dispatched request.

    Exactly one of ``body`` and ``error`` is meaningful: ``error`` is set when the request failed.

    Attributes:
        pairing (Pairing): Pairing the request was built from.
        body (Any): Parsed response body.
        error (Exception | None): Failure raised by the network engine.
    """

    pairing: Pairing
    body: Any = None
    error: Exception | None = None

    @property
    def label(self) -> str:
        return self.pairing.label

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DecodedTranslation:
    """Translated text and the source language the service reports.

    Attributes:
        text (str): Translated segments joined by single spaces.
        detected_source_lang (str): Detected source code, or the fallback when detection was unavailable.
        detected (bool): False when ``detected_source_lang`` is a fallback value.
    """

    text: str
    detected_source_lang: str
    detected: bool = True


@dataclass_json
@dataclass(frozen=True)
class TranslationResult(DataClassJsonMixin):
    """A single entry shown to the user.

    Attributes:
        title (str): Translated text.
        description (str): Detected source language and destination label.
    """

    title: str
    description: str

    def __str__(self) -> str:
        return self.title
