"""Shared, read-only resources used by every query.

``SharedData`` is built once at startup and passed by reference into each pipeline run.
Nothing in it is mutated per query; the engine's HTTP session is the only mutable part and
is safe for concurrent use by tasks on the same event loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.lang.table import LanguageTable
from core.trans.engines import GoogleTranslation
from core.trans.interface import TransInterface
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config

__all__: list[str] = ["SharedData"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass(frozen=True)
class SharedData:
    config: Config
    table: LanguageTable
    engine: TransInterface

    @classmethod
    def create(cls, config: Config, engine: TransInterface | None = None) -> SharedData:
        """Build the language table and the configured engine.

        An unknown ``TRANSLATE.ENGINE`` falls back to the Google engine with a warning.

        Raises:
            UnknownLanguageCodeError: If ``TRANSLATE.LANGUAGES`` names a code outside the table.
        """
        table: LanguageTable = LanguageTable.subset(config.TRANSLATE.LANGUAGES)
        if engine is None:
            engine_cls: type[TransInterface] | None = TransInterface.registered.get(config.TRANSLATE.ENGINE)
            if engine_cls is None:
                logger.warning(
                    "Translation engine '%s' is not registered, using '%s'",
                    config.TRANSLATE.ENGINE,
                    GoogleTranslation.fetch_engine_name(),
                )
                engine_cls = GoogleTranslation
            engine = engine_cls()
            engine.initialize(config)
        logger.info("Shared data ready: %d languages, engine '%s'", len(table), engine.fetch_engine_name())
        return cls(config=config, table=table, engine=engine)
