"""Configuration data models for the translate plugin.

Each dataclass mirrors one section of ``translate.ini``. Defaults are the documented
fallback used when the file is missing or unreadable.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = ["Config"]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""


@dataclass
class Translate:
    PREFIX: str = ""
    LANGUAGE_DELIMITER: str = ">"
    MAX_ENTRIES: int = 3
    LANGUAGES: list[str] = field(default_factory=list)
    DETECTION_FALLBACK: str = "auto"
    ENGINE: str = "google"


@dataclass
class Network:
    TIMEOUT: float = 10.0
    PROXY: str = ""


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATE: Translate = field(default_factory=Translate)
    NETWORK: Network = field(default_factory=Network)
