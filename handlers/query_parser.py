"""Parsing of raw launcher input into language tokens and text.

Query format (prefix and delimiter are configurable)::

    <prefix><src><delim><dst> <text>
    <prefix><dst> <text>
"""

from __future__ import annotations

from dataclasses import dataclass
from re import Match
from typing import TYPE_CHECKING

from models.re_models import QUERY_SPLIT_PATTERN
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

__all__: list[str] = ["ParsedQuery", "QueryParser"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass(frozen=True)
class ParsedQuery:
    """Query split into its parts.

    Attributes:
        source_token (str | None): Source language token, None when no delimiter was given.
        destination_token (str): Destination language token.
        text (str): Text to translate, stripped.
    """

    source_token: str | None
    destination_token: str
    text: str


class QueryParser:
    def __init__(self, prefix: str, delimiter: str) -> None:
        if not delimiter:
            msg = "Language delimiter must not be empty"
            raise ValueError(msg)
        self.prefix: str = prefix
        self.delimiter: str = delimiter

    def parse(self, raw: str) -> ParsedQuery | None:
        """Split ``raw`` into language tokens and text.

        Returns:
            ParsedQuery | None: None when the input is not a translation query.
        """
        if not raw.startswith(self.prefix):
            return None

        body: str = raw[len(self.prefix) :]
        match: Match[str] | None = QUERY_SPLIT_PATTERN.match(body)
        if match is None:
            logger.debug("No text after the language specification: '%s'", body)
            return None

        text: str = match.group("text").strip()
        if not text:
            return None

        spec: str = match.group("spec")
        source_token, found, destination_token = spec.partition(self.delimiter)
        if not found:
            return ParsedQuery(None, spec, text)
        return ParsedQuery(source_token, destination_token, text)
