"""Static language table.

Codes are the ones accepted by the Google translation endpoints. Table order is the
candidate generation order, so it decides ties during ranking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from models.language_models import AUTO_LANGUAGE_CODE, LanguageEntry
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Iterator

__all__: list[str] = ["LANGUAGES", "LanguageTable", "UnknownLanguageCodeError"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

AUTO_DETECT_DISPLAY_NAME: Final[str] = "Auto-detect"

LANGUAGES: Final[dict[str, str]] = {
    "af": "Afrikaans",
    "sq": "Albanian",
    "am": "Amharic",
    "ar": "Arabic",
    "hy": "Armenian",
    "az": "Azerbaijani",
    "eu": "Basque",
    "be": "Belarusian",
    "bn": "Bengali",
    "bs": "Bosnian",
    "bg": "Bulgarian",
    "ca": "Catalan",
    "ceb": "Cebuano",
    "ny": "Chichewa",
    "zh-cn": "Chinese (Simplified)",
    "zh-tw": "Chinese (Traditional)",
    "co": "Corsican",
    "hr": "Croatian",
    "cs": "Czech",
    "da": "Danish",
    "nl": "Dutch",
    "en": "English",
    "eo": "Esperanto",
    "et": "Estonian",
    "tl": "Filipino",
    "fi": "Finnish",
    "fr": "French",
    "fy": "Frisian",
    "gl": "Galician",
    "ka": "Georgian",
    "de": "German",
    "el": "Greek",
    "gu": "Gujarati",
    "ht": "Haitian Creole",
    "ha": "Hausa",
    "haw": "Hawaiian",
    "he": "Hebrew",
    "hi": "Hindi",
    "hmn": "Hmong",
    "hu": "Hungarian",
    "is": "Icelandic",
    "ig": "Igbo",
    "id": "Indonesian",
    "ga": "Irish",
    "it": "Italian",
    "ja": "Japanese",
    "jw": "Javanese",
    "kn": "Kannada",
    "kk": "Kazakh",
    "km": "Khmer",
    "ko": "Korean",
    "ku": "Kurdish (Kurmanji)",
    "ky": "Kyrgyz",
    "lo": "Lao",
    "la": "Latin",
    "lv": "Latvian",
    "lt": "Lithuanian",
    "lb": "Luxembourgish",
    "mk": "Macedonian",
    "mg": "Malagasy",
    "ms": "Malay",
    "ml": "Malayalam",
    "mt": "Maltese",
    "mi": "Maori",
    "mr": "Marathi",
    "mn": "Mongolian",
    "my": "Myanmar (Burmese)",
    "ne": "Nepali",
    "no": "Norwegian",
    "or": "Odia",
    "ps": "Pashto",
    "fa": "Persian",
    "pl": "Polish",
    "pt": "Portuguese",
    "pa": "Punjabi",
    "ro": "Romanian",
    "ru": "Russian",
    "sm": "Samoan",
    "gd": "Scots Gaelic",
    "sr": "Serbian",
    "st": "Sesotho",
    "sn": "Shona",
    "sd": "Sindhi",
    "si": "Sinhala",
    "sk": "Slovak",
    "sl": "Slovenian",
    "so": "Somali",
    "es": "Spanish",
    "su": "Sundanese",
    "sw": "Swahili",
    "sv": "Swedish",
    "tg": "Tajik",
    "ta": "Tamil",
    "te": "Telugu",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "ur": "Urdu",
    "ug": "Uyghur",
    "uz": "Uzbek",
    "vi": "Vietnamese",
    "cy": "Welsh",
    "xh": "Xhosa",
    "yi": "Yiddish",
    "yo": "Yoruba",
    "zu": "Zulu",
}


class UnknownLanguageCodeError(ValueError):
    """A language code that is not part of the table was requested."""


class LanguageTable:
    """Read-only, ordered collection of LanguageEntry.

    Shared by every query without locking; nothing mutates it after construction.
    """

    def __init__(self, entries: Iterable[LanguageEntry]) -> None:
        self._entries: tuple[LanguageEntry, ...] = tuple(entries)
        self._by_code: dict[str, LanguageEntry] = {}
        for entry in self._entries:
            if entry.code in self._by_code:
                msg: str = f"Duplicate language code in table: '{entry.code}'"
                raise ValueError(msg)
            self._by_code[entry.code] = entry

    @classmethod
    def default(cls) -> LanguageTable:
        return cls(LanguageEntry(code, name) for code, name in LANGUAGES.items())

    @classmethod
    def subset(cls, codes: Iterable[str]) -> LanguageTable:
        """Build a table restricted to ``codes``, keeping the order of the full table.

        An empty selection yields the full table.

        Raises:
            UnknownLanguageCodeError: If a code is not in the full table.
        """
        wanted: set[str] = {code.lower() for code in codes}
        if not wanted:
            return cls.default()

        unknown: list[str] = sorted(wanted.difference(LANGUAGES))
        if unknown:
            msg: str = f"Unknown language codes: {unknown}"
            raise UnknownLanguageCodeError(msg)

        logger.debug("Language table restricted to %s", sorted(wanted))
        return cls(LanguageEntry(code, name) for code, name in LANGUAGES.items() if code in wanted)

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.lower() in self._by_code

    def get(self, code: str) -> LanguageEntry | None:
        return self._by_code.get(code.lower())

    def display_name(self, code: str) -> str:
        """Return the display name for ``code``, or the code itself when unknown."""
        if code.lower() == AUTO_LANGUAGE_CODE:
            return AUTO_DETECT_DISPLAY_NAME
        entry: LanguageEntry | None = self._by_code.get(code.lower())
        return entry.display_name if entry is not None else code
