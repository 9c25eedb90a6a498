"""Regular expressions for query parsing."""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

__all__: list[str] = ["QUERY_SPLIT_PATTERN"]

# Splits the query (prefix already removed) at the first whitespace character.
# Example: "en>uk Hello world" -> spec="en>uk", text="Hello world"
QUERY_SPLIT_PATTERN: Final[Pattern[str]] = re.compile(r"(?P<spec>\S*)\s(?P<text>.*)", re.DOTALL)
